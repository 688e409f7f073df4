"""Focus propagation configuration.

FocusConfig is a frozen dataclass — immutable after creation, shared by
every tracker in a tree, no string-key dict lookups.
"""

from dataclasses import dataclass

from waypoint.errors import ConfigurationError

LOG_LEVELS = frozenset({"debug", "info", "warning", "error", "critical"})


@dataclass(frozen=True, slots=True)
class FocusConfig:
    """Focus tracker configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = FocusConfig(trace_events=True, log_level="debug")
    """

    # Context string fallback when a payload arrives without a parent context
    root_context: str = "Root"

    # Forward ``action`` to the active child after each state change
    forward_actions: bool = True

    # Log every lifecycle emission at DEBUG on the ``waypoint.focus`` logger
    trace_events: bool = False

    # Level used by the CLI when it configures logging
    log_level: str = "warning"

    def __post_init__(self) -> None:
        if not self.root_context:
            msg = "root_context must be a non-empty string."
            raise ConfigurationError(msg)
        if self.log_level.lower() not in LOG_LEVELS:
            allowed = ", ".join(sorted(LOG_LEVELS))
            msg = f"Unknown log_level {self.log_level!r}. Expected one of: {allowed}"
            raise ConfigurationError(msg)
