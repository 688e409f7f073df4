"""Waypoint — focus propagation for trees of nested navigators.

Decides, as the active route changes anywhere in the tree, which route is
focused and which was just blurred, and announces it with
``willFocus → didFocus`` and ``willBlur → didBlur``.

Basic usage::

    from waypoint import NavigationAction, NavigationTree, state_from_dict

    tree = NavigationTree(state_from_dict({"index": 0, "routes": [{"key": "home"}]}))
    tree.root.events.create("home").add_listener("didFocus", print)
    tree.start()

Single navigator, own output port::

    from waypoint import CallbackSink, FocusTracker

    with FocusTracker(navigation, CallbackSink(on_event)):
        ...
"""

__version__ = "0.1.0-dev"
__all__ = [
    "CallbackSink",
    "ConfigurationError",
    "EmitterSink",
    "EnrichedPayload",
    "EventRegistry",
    "EventType",
    "FocusConfig",
    "FocusTracker",
    "InvalidStateError",
    "Navigation",
    "NavigationAction",
    "NavigationState",
    "NavigationTree",
    "Route",
    "TransitionPayload",
    "WaypointError",
    "state_from_dict",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "CallbackSink": "waypoint.focus.sinks",
    "ConfigurationError": "waypoint.errors",
    "EmitterSink": "waypoint.focus.sinks",
    "EnrichedPayload": "waypoint.events.payload",
    "EventRegistry": "waypoint.events.registry",
    "EventType": "waypoint.events.types",
    "FocusConfig": "waypoint.config",
    "FocusTracker": "waypoint.focus.tracker",
    "InvalidStateError": "waypoint.errors",
    "Navigation": "waypoint.navigation",
    "NavigationAction": "waypoint.state",
    "NavigationState": "waypoint.state",
    "NavigationTree": "waypoint.tree",
    "Route": "waypoint.state",
    "TransitionPayload": "waypoint.events.payload",
    "WaypointError": "waypoint.errors",
    "state_from_dict": "waypoint.state",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import waypoint`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
