"""Focus tracker — decides which child route of one navigator is focused.

One ``FocusTracker`` lives beside each navigator. It listens on its own
navigation object for three events:

- ``action``: the navigator's state changed. Compare the active child
  before and after and move focus if it changed.
- ``willFocus``: the parent is bringing this navigator on screen. Focus
  whichever child is active right now.
- ``willBlur``: the parent is taking this navigator off screen. Blur the
  active child and forget it.

Focus only flows downward while the navigator itself is focused, so a
backgrounded branch of the tree never notifies its descendants.

Timing::

    non-animated navigator   willFocus(B) didFocus(B) willBlur(A) didBlur(A)
    animated, in flight      willFocus(B)             willBlur(A)
    animated, settled                     didBlur(A)  didFocus(B)

A root navigator (no parent) focuses its initial route on its first
``action``; a nested navigator stays silent until its parent's
``willFocus`` arrives, keeping timing in step with the ancestor chain.

Usage::

    with FocusTracker(navigation, EmitterSink(registry)):
        ...  # subscriptions are released on every exit path
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from waypoint.config import FocusConfig
from waypoint.errors import InvalidStateError
from waypoint.events.payload import EnrichedPayload, TransitionPayload, build_context, enrich
from waypoint.events.types import EventType
from waypoint.state import NavigationState, Route

if TYPE_CHECKING:
    from collections.abc import Callable

    from waypoint.focus.sinks import EventSink
    from waypoint.navigation import NavigationObject

logger = logging.getLogger("waypoint.focus")


class FocusTracker:
    """Per-navigator focus state machine over ``last_focused_key``.

    ``last_focused_key`` is ``None`` while focus is undetermined (before the
    first decision, or while this navigator is blurred).
    """

    __slots__ = ("_attached", "_config", "_last_focused_key", "_navigation", "_sink", "_subscriptions")

    def __init__(
        self,
        navigation: NavigationObject,
        sink: EventSink,
        config: FocusConfig | None = None,
    ) -> None:
        self._navigation = navigation
        self._sink = sink
        self._config = config or FocusConfig()
        self._last_focused_key: str | None = None
        self._subscriptions: list[tuple[str, Callable[[Any], None]]] = []
        self._attached = False

    @property
    def last_focused_key(self) -> str | None:
        return self._last_focused_key

    @property
    def navigation(self) -> NavigationObject:
        return self._navigation

    @property
    def attached(self) -> bool:
        return self._attached

    # -- Lifecycle --

    def attach(self) -> None:
        """Subscribe to the navigation object. Call once, on mount."""
        if self._attached:
            msg = "FocusTracker is already attached."
            raise RuntimeError(msg)

        self._attached = True
        self._last_focused_key = None

        add_listener = getattr(self._navigation, "add_listener", None)
        if add_listener is None:
            logger.debug("Navigation %r has no add_listener; tracker stays passive", self._navigation)
            return

        handlers: tuple[tuple[str, Callable[[Any], None]], ...] = (
            (EventType.ACTION, self.handle_action),
            (EventType.WILL_FOCUS, self.handle_will_focus),
            (EventType.WILL_BLUR, self.handle_will_blur),
        )
        for event_type, handler in handlers:
            add_listener(event_type, handler)
            self._subscriptions.append((event_type, handler))
        logger.debug("Attached focus tracker to %r", self._navigation)

    def detach(self) -> None:
        """Release every subscription made by ``attach``. Idempotent."""
        subscriptions, self._subscriptions = self._subscriptions, []
        self._attached = False
        self._last_focused_key = None

        remove_listener = getattr(self._navigation, "remove_listener", None)
        if remove_listener is None:
            return
        for event_type, handler in subscriptions:
            remove_listener(event_type, handler)
        if subscriptions:
            logger.debug("Detached focus tracker from %r", self._navigation)

    def __enter__(self) -> FocusTracker:
        self.attach()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.detach()

    # -- Incoming events --

    def handle_action(self, payload: TransitionPayload) -> None:
        """React to a state change of this navigator."""
        state = payload.navigator_state
        if state is None:
            msg = f"Action payload state {payload.state.key!r} is not a navigator."
            raise InvalidStateError(msg)
        last_state = payload.last_navigator_state

        current = state.active_route
        previous = last_state.active_route if last_state is not None else None
        enriched = enrich(payload, current, previous, root_context=self._config.root_context)

        if previous is None or previous.key != current.key:
            self.handle_focused_key(current.key, enriched)

        # Completion of an animated transition, independent of route changes
        last_transitioning = last_state.is_transitioning if last_state is not None else None
        if last_transitioning != state.is_transitioning and state.is_transitioning is False:
            if previous is not None:
                self._send(EventType.DID_BLUR, previous.key, enriched)
            self._send(EventType.DID_FOCUS, current.key, enriched)

        if self._config.forward_actions and self._sink.forwards_actions:
            self._send(EventType.ACTION, current.key, enriched)

    def handle_focused_key(self, key: str, payload: EnrichedPayload) -> None:
        """Move focus to ``key`` if this navigator is allowed to propagate it."""
        previous_key = self._last_focused_key
        # Set before emitting: listeners that re-read the tracker see the new key
        self._last_focused_key = key

        if previous_key is None and self._navigation.dangerously_get_parent() is None:
            # A root has nobody to send it willFocus
            self.emit_focus(key, payload)

        if previous_key == key or not self._navigation.is_focused():
            return

        if previous_key is None:
            # Nested navigators wait for the parent's willFocus
            return

        self.emit_focus(key, payload)
        self.emit_blur(previous_key, payload)

    def handle_will_focus(self, payload: TransitionPayload) -> None:
        """The parent is focusing this navigator: focus the active child."""
        route = self._active_route()
        self._last_focused_key = route.key
        self.emit_focus(route.key, self._rebuild(payload, route))

    def handle_will_blur(self, payload: TransitionPayload) -> None:
        """The parent is blurring this navigator: blur the active child."""
        route = self._active_route()
        self._last_focused_key = None
        self.emit_blur(route.key, self._rebuild(payload, route))

    # -- Outgoing events --

    def emit_focus(self, target: str, payload: EnrichedPayload) -> None:
        self._send(EventType.WILL_FOCUS, target, payload)
        if not self._is_animated():
            self._send(EventType.DID_FOCUS, target, payload)

    def emit_blur(self, target: str, payload: EnrichedPayload) -> None:
        self._send(EventType.WILL_BLUR, target, payload)
        if not self._is_animated():
            self._send(EventType.DID_BLUR, target, payload)

    # -- Internal --

    def _send(self, event_type: str, target: str, payload: EnrichedPayload) -> None:
        if self._config.trace_events:
            logger.debug("%s -> %s (%s)", event_type, target, payload.context)
        self._sink.send(str(event_type), target, payload)

    def _current_state(self) -> NavigationState:
        state = self._navigation.state
        if not isinstance(state, NavigationState):
            msg = f"Navigation {self._navigation!r} does not hold a navigator state."
            raise InvalidStateError(msg)
        return state

    def _active_route(self) -> Route:
        return self._current_state().active_route

    def _is_animated(self) -> bool:
        # Read the latest committed state, not the payload
        return self._current_state().is_animated

    def _rebuild(self, payload: TransitionPayload, route: Route) -> EnrichedPayload:
        parent_last = payload.last_navigator_state
        return EnrichedPayload(
            type=payload.type,
            action=payload.action,
            state=route,
            last_state=parent_last.get_route(route.key) if parent_last is not None else None,
            context=build_context(route.key, payload.action.type, payload.context, self._config.root_context),
        )

    def __repr__(self) -> str:
        return f"<FocusTracker {self._navigation!r} last_focused={self._last_focused_key!r}>"
