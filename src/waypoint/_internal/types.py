"""Shared type aliases used across waypoint modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Listener — receives the ``data`` passed to ``emit``
Listener: TypeAlias = Callable[[Any], None]

# Direct-callback output port — (target, event_type, data)
OnEvent: TypeAlias = Callable[[str, str, Any], None]
