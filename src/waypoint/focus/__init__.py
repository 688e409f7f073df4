"""Focus propagation — the per-navigator tracker and its output ports."""

from waypoint.focus.sinks import CallbackSink, EmitterSink, EventSink
from waypoint.focus.tracker import FocusTracker

__all__ = ["CallbackSink", "EmitterSink", "EventSink", "FocusTracker"]
