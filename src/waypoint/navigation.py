"""Navigation objects — the upstream collaborator of ``FocusTracker``.

A tracker only needs the ``NavigationObject`` shape below. ``Navigation``
is the in-memory implementation used by ``NavigationTree``:

- The root owns the committed state and emits ``action`` on its own
  channel after each commit.
- A child (``parent.child("tabs")``) reads its state out of the parent's
  latest state and subscribes through the parent's ``EventRegistry``,
  scoped to its own route key. Whatever the parent's tracker emits for
  ``"tabs"`` lands on the child's listeners.
"""

from __future__ import annotations

from typing import Protocol

from waypoint._internal.types import Listener
from waypoint.errors import InvalidStateError
from waypoint.events.payload import TransitionPayload
from waypoint.events.registry import EventRegistry, Subscription, TargetSubscriber
from waypoint.events.types import EventType
from waypoint.state import NavigationAction, NavigationState


class NavigationObject(Protocol):
    """What a ``FocusTracker`` requires from its navigator.

    ``add_listener`` and ``remove_listener`` are optional: a tracker over an
    object without them simply never subscribes.
    """

    @property
    def state(self) -> NavigationState: ...

    def is_focused(self) -> bool: ...

    def dangerously_get_parent(self) -> NavigationObject | None: ...


class Navigation:
    """One navigator level of an in-memory navigation tree."""

    __slots__ = ("_channel", "_children", "_parent", "_source", "_state", "events", "key")

    def __init__(
        self,
        key: str,
        *,
        state: NavigationState | None = None,
        parent: Navigation | None = None,
    ) -> None:
        if (state is None) == (parent is None):
            msg = "A Navigation needs exactly one of a root state or a parent."
            raise ValueError(msg)

        self.key = key
        self._parent = parent
        self._state = state
        self._children: dict[str, Navigation] = {}
        # Events this navigator broadcasts to its children
        self.events = EventRegistry()

        # The root is its own event source; children hear from the parent
        self._source = EventRegistry() if parent is None else parent.events
        self._channel: TargetSubscriber = self._source.create(key)

    @classmethod
    def root(cls, state: NavigationState) -> Navigation:
        """Create the root navigation holding ``state``."""
        return cls(state.key, state=state)

    # -- NavigationObject --

    @property
    def state(self) -> NavigationState:
        """Latest committed state of this navigator."""
        if self._parent is None:
            assert self._state is not None
            return self._state

        route = self._parent.state.get_route(self.key)
        if route is None:
            msg = f"Route {self.key!r} is no longer in navigator {self._parent.key!r}."
            raise InvalidStateError(msg)
        if not isinstance(route, NavigationState):
            msg = f"Route {self.key!r} is not a navigator."
            raise InvalidStateError(msg)
        return route

    def is_focused(self) -> bool:
        if self._parent is None:
            return True
        return self._parent.is_focused() and self._parent.state.active_route.key == self.key

    def dangerously_get_parent(self) -> Navigation | None:
        return self._parent

    def add_listener(self, event_type: str, callback: Listener) -> Subscription:
        return self._channel.add_listener(event_type, callback)

    def remove_listener(self, event_type: str, callback: Listener) -> None:
        self._channel.remove_listener(event_type, callback)

    # -- Tree --

    @property
    def is_root(self) -> bool:
        return self._parent is None

    def child(self, key: str) -> Navigation:
        """Navigation object for the nested navigator at route ``key``.

        Cached per key so listeners and trackers share one object.
        """
        nav = self._children.get(key)
        if nav is None:
            nav = Navigation(key, parent=self)
            self._children[key] = nav
        return nav

    def forget_child(self, key: str) -> None:
        """Drop the cached child navigation for ``key``, if any."""
        self._children.pop(key, None)

    def commit(self, state: NavigationState) -> NavigationState | None:
        """Replace the root state. Returns the previous state."""
        if self._parent is not None:
            msg = "Only the root navigation holds state; children read it from their parent."
            raise RuntimeError(msg)
        if not isinstance(state, NavigationState):
            msg = f"Cannot commit {state!r}: not a navigator state."
            raise InvalidStateError(msg)
        previous, self._state = self._state, state
        return previous

    def emit_action(
        self,
        action: NavigationAction,
        last_state: NavigationState | None,
        *,
        context: str | None = None,
    ) -> TransitionPayload:
        """Notify ``action`` listeners of the root about the committed state."""
        if self._parent is not None:
            msg = "Only the root navigation emits actions; children receive them from their parent."
            raise RuntimeError(msg)
        payload = TransitionPayload(
            type=EventType.ACTION.value,
            action=action,
            state=self.state,
            last_state=last_state,
            context=context,
        )
        self._source.emit(EventType.ACTION, target=self.key, data=payload)
        return payload

    def __repr__(self) -> str:
        return f"<Navigation {self.key!r}>"
