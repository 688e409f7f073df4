"""Navigation state model — Route, NavigationState, NavigationAction.

Frozen dataclasses describing one committed snapshot of the navigation
tree. A ``NavigationState`` is itself a ``Route``, so navigators nest by
placing a ``NavigationState`` in a parent's ``routes``::

    state = NavigationState(
        key="root",
        index=0,
        routes=(
            NavigationState(key="tabs", index=1, routes=(Route("feed"), Route("inbox"))),
            Route("settings"),
        ),
    )
    state.active_route.key  # "tabs"

Construction validates the structural contract (non-empty routes, index
in bounds, unique sibling keys). Producing new states from actions is the
job of a reducer outside this package.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from waypoint.errors import InvalidStateError

ROOT_KEY = "root"


def _check_key(key: object) -> None:
    if not isinstance(key, str) or not key:
        msg = f"Route key must be a non-empty string, got {key!r}"
        raise InvalidStateError(msg)


@dataclass(frozen=True, slots=True)
class Route:
    """One screen instance, identified by a key stable across re-renders."""

    key: str
    name: str | None = None
    params: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _check_key(self.key)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"key": self.key}
        if self.name is not None:
            data["routeName"] = self.name
        if self.params:
            data["params"] = dict(self.params)
        return data


@dataclass(frozen=True, slots=True)
class NavigationState(Route):
    """A navigator: an ordered set of child routes and which one is active.

    ``is_transitioning`` is ``None`` for navigators without an animated
    transition concept. A bool means an animated transition is in flight
    (``True``) or settled (``False``).
    """

    routes: tuple[Route, ...] = ()
    index: int = 0
    is_transitioning: bool | None = None

    def __post_init__(self) -> None:
        _check_key(self.key)
        # Accept any sequence at construction; store a tuple
        object.__setattr__(self, "routes", tuple(self.routes))

        if not self.routes:
            msg = f"Navigator {self.key!r} has no routes."
            raise InvalidStateError(msg)
        if isinstance(self.index, bool) or not isinstance(self.index, int):
            msg = f"Navigator {self.key!r} index must be an int, got {self.index!r}"
            raise InvalidStateError(msg)
        if not 0 <= self.index < len(self.routes):
            msg = (
                f"Navigator {self.key!r} index {self.index} is out of bounds "
                f"for {len(self.routes)} route(s)."
            )
            raise InvalidStateError(msg)
        if self.is_transitioning is not None and not isinstance(self.is_transitioning, bool):
            msg = (
                f"Navigator {self.key!r} is_transitioning must be a bool or None, "
                f"got {self.is_transitioning!r}"
            )
            raise InvalidStateError(msg)

        seen: set[str] = set()
        for route in self.routes:
            if not isinstance(route, Route):
                msg = f"Navigator {self.key!r} contains a non-route entry: {route!r}"
                raise InvalidStateError(msg)
            if route.key in seen:
                msg = f"Navigator {self.key!r} has duplicate route key {route.key!r}"
                raise InvalidStateError(msg)
            seen.add(route.key)

    @property
    def active_route(self) -> Route:
        """The currently active child, ``routes[index]``."""
        return self.routes[self.index]

    @property
    def is_animated(self) -> bool:
        """True when this navigator signals transition completion separately."""
        return isinstance(self.is_transitioning, bool)

    def get_route(self, key: str) -> Route | None:
        """Look up a direct child by key. Returns ``None`` if not found."""
        for route in self.routes:
            if route.key == key:
                return route
        return None

    def to_dict(self) -> dict[str, Any]:
        data = Route.to_dict(self)
        data["index"] = self.index
        data["routes"] = [route.to_dict() for route in self.routes]
        if self.is_transitioning is not None:
            data["isTransitioning"] = self.is_transitioning
        return data


@dataclass(frozen=True, slots=True)
class NavigationAction:
    """The action that caused a state change. Only ``type`` is interpreted."""

    type: str
    params: Mapping[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, **self.params}


# -- Parsing ---------------------------------------------------------------


def route_from_dict(data: Mapping[str, Any], *, default_key: str | None = None) -> Route:
    """Build a ``Route`` (or ``NavigationState`` when ``routes`` is present).

    Accepts both ``isTransitioning`` and ``is_transitioning`` and both
    ``routeName`` and ``name``.
    """
    if not isinstance(data, Mapping):
        msg = f"Expected a mapping for a route, got {type(data).__name__}"
        raise InvalidStateError(msg)

    key = data.get("key", default_key)
    name = data.get("routeName", data.get("name"))
    params = data.get("params") or {}

    if "routes" not in data:
        return Route(key=key, name=name, params=params)

    raw_routes = data["routes"]
    if not isinstance(raw_routes, list | tuple):
        msg = f"Navigator {key!r} routes must be a list, got {type(raw_routes).__name__}"
        raise InvalidStateError(msg)

    if "isTransitioning" in data:
        transitioning = data["isTransitioning"]
    else:
        transitioning = data.get("is_transitioning")

    return NavigationState(
        key=key,
        name=name,
        params=params,
        routes=tuple(route_from_dict(r) for r in raw_routes),
        index=data.get("index", 0),
        is_transitioning=transitioning,
    )


def state_from_dict(data: Mapping[str, Any], *, default_key: str = ROOT_KEY) -> NavigationState:
    """Build a root ``NavigationState``. Raises if ``data`` is a leaf route."""
    route = route_from_dict(data, default_key=default_key)
    if not isinstance(route, NavigationState):
        msg = f"Route {route.key!r} is not a navigator (no 'routes')."
        raise InvalidStateError(msg)
    return route


def action_from_dict(data: Mapping[str, Any]) -> NavigationAction:
    """Build a ``NavigationAction`` from ``{"type": ..., **params}``."""
    if not isinstance(data, Mapping) or not isinstance(data.get("type"), str):
        msg = f"An action needs a string 'type', got {data!r}"
        raise InvalidStateError(msg)
    params = {k: v for k, v in data.items() if k != "type"}
    return NavigationAction(type=data["type"], params=params)
