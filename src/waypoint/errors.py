"""Waypoint exception hierarchy.

Shared across the state model, trackers, the navigation tree, and the CLI
so every module raises and catches the same types.
"""


class WaypointError(Exception):
    """Base for all waypoint-specific errors."""


class ConfigurationError(WaypointError):
    """Raised when a ``FocusConfig`` is invalid.

    Surfaces at construction time, before any tracker is attached.
    """


class InvalidStateError(WaypointError):
    """A navigation state broke the structural contract.

    Raised for empty ``routes``, an ``index`` out of bounds, duplicate
    sibling keys, or a leaf route handed over where a navigator state is
    required. The producer of the state is at fault; trackers do not
    attempt to recover.
    """


class ScenarioError(WaypointError):
    """A replay scenario file could not be loaded."""
