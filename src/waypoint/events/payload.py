"""Transition payloads passed along with lifecycle events.

A ``TransitionPayload`` describes one state change at one navigator level.
Before handing it to children, a tracker narrows it to the child routes
involved and rewrites ``context`` into a causal trace::

    "<current route key>:<action type>_<parent context or 'Root'>"

so a nested ``didFocus`` carries e.g. ``"inbox:Navigate_tabs:Navigate_Root"``.
"""

from dataclasses import dataclass

from waypoint.state import NavigationAction, NavigationState, Route


@dataclass(frozen=True, slots=True)
class TransitionPayload:
    """One state change observed at one navigator level."""

    type: str
    action: NavigationAction
    state: Route
    last_state: Route | None = None
    context: str | None = None

    @property
    def navigator_state(self) -> NavigationState | None:
        """``state`` when it is a navigator, else ``None``."""
        return self.state if isinstance(self.state, NavigationState) else None

    @property
    def last_navigator_state(self) -> NavigationState | None:
        """``last_state`` when it is a navigator, else ``None``."""
        if isinstance(self.last_state, NavigationState):
            return self.last_state
        return None


@dataclass(frozen=True, slots=True)
class EnrichedPayload(TransitionPayload):
    """A payload scoped to one child route, with a rewritten ``context``.

    ``state`` is the child route the event targets and ``last_state`` the
    child route that was active before (or ``None``).
    """


def build_context(route_key: str, action_type: str, parent_context: str | None, root: str = "Root") -> str:
    """Build the causal trace string for a child emission."""
    return f"{route_key}:{action_type}_{parent_context or root}"


def enrich(
    payload: TransitionPayload,
    current: Route,
    previous: Route | None,
    *,
    root_context: str = "Root",
) -> EnrichedPayload:
    """Narrow ``payload`` to the ``current``/``previous`` child routes."""
    return EnrichedPayload(
        type=payload.type,
        action=payload.action,
        state=current,
        last_state=previous,
        context=build_context(current.key, payload.action.type, payload.context, root_context),
    )
