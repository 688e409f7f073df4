"""Test utilities for waypoint navigators.

Provides an event recorder and lifecycle sequence assertions. All public
names are re-exported here::

    from waypoint.testing import EventRecorder, assert_event_sequence
"""

from waypoint.testing.assertions import (
    assert_event_sequence,
    assert_focused,
    assert_no_focus_events,
)
from waypoint.testing.recorder import EventRecorder, RecordedEvent

__all__ = [
    "EventRecorder",
    "RecordedEvent",
    "assert_event_sequence",
    "assert_focused",
    "assert_no_focus_events",
]
