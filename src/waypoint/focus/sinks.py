"""Output ports for ``FocusTracker``.

A tracker never talks to listeners directly. It hands every event to a
sink, and the embedding system picks how events leave:

    # Broadcast through an emitter (usually the navigator's EventRegistry)
    sink = EmitterSink(navigation.events)

    # Or hand everything to one callback
    sink = CallbackSink(lambda target, event_type, data: ...)

Both produce the same event set, order, and payloads.
"""

from typing import Any, Protocol

from waypoint._internal.types import OnEvent


class Emitter(Protocol):
    """Anything with the ``EventRegistry.emit`` shape."""

    def emit(self, event_type: str, *, target: str, data: Any = None) -> None: ...


class EventSink(Protocol):
    """Protocol for tracker output ports."""

    @property
    def forwards_actions(self) -> bool: ...

    def send(self, event_type: str, target: str, data: Any) -> None: ...


class EmitterSink:
    """Broadcast events through an emitter's ``emit(type, target=, data=)``."""

    __slots__ = ("emitter", "forwards_actions")

    def __init__(self, emitter: Emitter, *, forward_actions: bool = True) -> None:
        self.emitter = emitter
        self.forwards_actions = forward_actions

    def send(self, event_type: str, target: str, data: Any) -> None:
        self.emitter.emit(event_type, target=target, data=data)

    def __repr__(self) -> str:
        return f"<EmitterSink {self.emitter!r}>"


class CallbackSink:
    """Invoke a single ``on_event(target, event_type, data)`` callback."""

    __slots__ = ("forwards_actions", "on_event")

    def __init__(self, on_event: OnEvent, *, forward_actions: bool = True) -> None:
        self.on_event = on_event
        self.forwards_actions = forward_actions

    def send(self, event_type: str, target: str, data: Any) -> None:
        self.on_event(target, event_type, data)

    def __repr__(self) -> str:
        return f"<CallbackSink {self.on_event!r}>"
