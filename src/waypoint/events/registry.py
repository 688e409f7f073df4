"""Event registry — listener directory keyed by event type and target.

Each navigator that broadcasts to its children owns one registry. Children
subscribe through a handle scoped to their own route key::

    registry = EventRegistry()
    inbox = registry.create("inbox")
    sub = inbox.add_listener("didFocus", on_focus)

    registry.emit("didFocus", target="inbox", data=payload)  # on_focus(payload)
    sub.remove()

Dispatch is synchronous and snapshots the listener list first: callbacks
added or removed while an ``emit`` is running only affect later emits.

Thread safety:
    None provided. A registry is mutated and dispatched on the same
    logical thread as the trackers that drive it.
"""

from __future__ import annotations

import logging
from typing import Any

from waypoint._internal.types import Listener

logger = logging.getLogger("waypoint.events")


class Subscription:
    """Disposer returned by ``add_listener``."""

    __slots__ = ("_callback", "_event_type", "_subscriber")

    def __init__(self, subscriber: TargetSubscriber, event_type: str, callback: Listener) -> None:
        self._subscriber = subscriber
        self._event_type = event_type
        self._callback = callback

    def remove(self) -> None:
        """Remove the listener. Calling twice is a no-op."""
        self._subscriber.remove_listener(self._event_type, self._callback)


class TargetSubscriber:
    """Subscription handle scoped to a single target key."""

    __slots__ = ("_registry", "target")

    def __init__(self, registry: EventRegistry, target: str) -> None:
        self._registry = registry
        self.target = target

    def add_listener(self, event_type: str, callback: Listener) -> Subscription:
        """Register ``callback`` for ``(event_type, target)``."""
        self._registry._add(event_type, self.target, callback)
        return Subscription(self, event_type, callback)

    def remove_listener(self, event_type: str, callback: Listener) -> None:
        """Remove the first registration of ``callback``. No-op if absent."""
        self._registry._remove(event_type, self.target, callback)

    def __repr__(self) -> str:
        return f"<TargetSubscriber {self.target!r}>"


class EventRegistry:
    """Listener directory: event type -> target key -> ordered callbacks.

    All operations are total over absent keys; nothing here raises.
    """

    __slots__ = ("_listeners",)

    def __init__(self) -> None:
        self._listeners: dict[str, dict[str, list[Listener]]] = {}

    def create(self, target: str) -> TargetSubscriber:
        """Return a subscription handle for events about ``target``."""
        return TargetSubscriber(self, target)

    def emit(self, event_type: str, *, target: str, data: Any = None) -> None:
        """Invoke every listener for ``(event_type, target)`` with ``data``."""
        callbacks = self._lookup(event_type, target)
        if callbacks is None:
            return

        # Copy in case callbacks subscribe or unsubscribe during dispatch
        for callback in tuple(callbacks):
            callback(data)

    def listener_count(self, event_type: str, target: str) -> int:
        """Number of listeners registered for ``(event_type, target)``."""
        callbacks = self._lookup(event_type, target)
        return len(callbacks) if callbacks is not None else 0

    def __len__(self) -> int:
        return sum(len(cbs) for targets in self._listeners.values() for cbs in targets.values())

    def _lookup(self, event_type: str, target: str) -> list[Listener] | None:
        targets = self._listeners.get(event_type)
        if targets is None:
            return None
        return targets.get(target)

    def _add(self, event_type: str, target: str, callback: Listener) -> None:
        targets = self._listeners.setdefault(event_type, {})
        targets.setdefault(target, []).append(callback)

    def _remove(self, event_type: str, target: str, callback: Listener) -> None:
        callbacks = self._lookup(event_type, target)
        if callbacks is None or callback not in callbacks:
            # Kept silent for compatibility; can hide a double unsubscribe
            logger.debug("remove_listener: %s/%s has no such callback %r", event_type, target, callback)
            return

        callbacks.remove(callback)
        if not callbacks:
            targets = self._listeners[event_type]
            del targets[target]
            if not targets:
                del self._listeners[event_type]
