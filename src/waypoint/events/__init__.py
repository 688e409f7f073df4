"""Events — lifecycle vocabulary, transition payloads, and the listener registry.

All public names are re-exported here::

    from waypoint.events import EventRegistry, EventType, TransitionPayload
"""

from waypoint.events.payload import EnrichedPayload, TransitionPayload, build_context, enrich
from waypoint.events.registry import EventRegistry, Subscription, TargetSubscriber
from waypoint.events.types import BLUR_EVENTS, FOCUS_EVENTS, LIFECYCLE_EVENTS, EventType

__all__ = [
    "BLUR_EVENTS",
    "FOCUS_EVENTS",
    "LIFECYCLE_EVENTS",
    "EnrichedPayload",
    "EventRegistry",
    "EventType",
    "Subscription",
    "TargetSubscriber",
    "TransitionPayload",
    "build_context",
    "enrich",
]
