"""Scenario files — a recorded sequence of root navigation states.

Format::

    {
      "initial": {"index": 0, "routes": [{"key": "home"}, ...]},
      "steps": [
        {"action": {"type": "Navigate"}, "state": {...}},
        ...
      ]
    }
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from waypoint.errors import InvalidStateError, ScenarioError
from waypoint.state import NavigationAction, NavigationState, action_from_dict, state_from_dict


@dataclass(frozen=True, slots=True)
class Step:
    """One dispatched action and the state it produced."""

    action: NavigationAction
    state: NavigationState


@dataclass(frozen=True, slots=True)
class Scenario:
    """An initial state followed by zero or more steps."""

    initial: NavigationState
    steps: tuple[Step, ...] = ()


def parse_scenario(data: Any) -> Scenario:
    """Build a ``Scenario`` from decoded JSON.

    Raises ``ScenarioError`` for a malformed document and lets
    ``InvalidStateError`` through for states that break the structural
    contract, naming the offending step.
    """
    if not isinstance(data, dict) or "initial" not in data:
        msg = "Scenario must be an object with an 'initial' state."
        raise ScenarioError(msg)

    raw_steps = data.get("steps", [])
    if not isinstance(raw_steps, list):
        msg = "Scenario 'steps' must be a list."
        raise ScenarioError(msg)

    initial = state_from_dict(data["initial"])
    steps: list[Step] = []
    for i, raw in enumerate(raw_steps, start=1):
        if not isinstance(raw, dict) or "action" not in raw or "state" not in raw:
            msg = f"Step {i} needs both 'action' and 'state'."
            raise ScenarioError(msg)
        try:
            steps.append(
                Step(
                    action=action_from_dict(raw["action"]),
                    state=state_from_dict(raw["state"], default_key=initial.key),
                )
            )
        except InvalidStateError as exc:
            msg = f"Step {i}: {exc}"
            raise InvalidStateError(msg) from exc

    return Scenario(initial=initial, steps=tuple(steps))


def load_scenario(path: str | Path) -> Scenario:
    """Read and parse a scenario JSON file."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot read scenario {str(path)!r}: {exc.strerror}"
        raise ScenarioError(msg) from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        msg = f"Scenario {str(path)!r} is not valid JSON: {exc.msg} (line {exc.lineno})"
        raise ScenarioError(msg) from exc
    return parse_scenario(data)
