"""Lifecycle assertion helpers for waypoint tests.

Each assertion produces a clear error message showing the full trace
on failure.
"""

from collections.abc import Sequence

from waypoint.events.types import EventType
from waypoint.testing.recorder import EventRecorder


def _format(pairs: Sequence[tuple[str, str]]) -> str:
    return "\n".join(f"  {event_type:<9} {target}" for event_type, target in pairs) or "  (none)"


def assert_event_sequence(
    recorder: EventRecorder,
    expected: Sequence[tuple[str, str]],
    *,
    include_actions: bool = False,
) -> None:
    """Assert the recorder saw exactly ``expected`` ``(type, target)`` pairs."""
    actual = recorder.pairs(include_actions=include_actions)
    assert actual == list(expected), (
        f"Event sequence mismatch.\nExpected:\n{_format(expected)}\nActual:\n{_format(actual)}"
    )


def assert_no_focus_events(recorder: EventRecorder) -> None:
    """Assert no ``will*``/``did*`` event was recorded."""
    actual = recorder.pairs()
    assert not actual, f"Expected no focus events, got:\n{_format(actual)}"


def assert_focused(recorder: EventRecorder, target: str) -> None:
    """Assert ``target``'s last lifecycle event is ``didFocus``."""
    history = [t for t in recorder.for_target(target) if t != EventType.ACTION]
    assert history, f"{target!r} received no lifecycle events"
    assert history[-1] == "didFocus", (
        f"Expected {target!r} to be focused; its events were {history}"
    )
