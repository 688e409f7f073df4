"""Lifecycle event vocabulary.

The set is closed: trackers emit nothing outside these five types.
"""

from enum import StrEnum


class EventType(StrEnum):
    """Event types exchanged between a navigator and its children."""

    ACTION = "action"
    WILL_FOCUS = "willFocus"
    DID_FOCUS = "didFocus"
    WILL_BLUR = "willBlur"
    DID_BLUR = "didBlur"


FOCUS_EVENTS = frozenset({EventType.WILL_FOCUS, EventType.DID_FOCUS})
BLUR_EVENTS = frozenset({EventType.WILL_BLUR, EventType.DID_BLUR})
LIFECYCLE_EVENTS = FOCUS_EVENTS | BLUR_EVENTS
