"""``waypoint check`` — validate every state in a scenario file.

Prints a one-line summary on success. Exits with code 1 and the first
problem found otherwise.
"""

import argparse
import sys

from waypoint.cli._scenario import load_scenario
from waypoint.errors import WaypointError
from waypoint.tree import navigator_paths


def run_check(args: argparse.Namespace) -> None:
    """Load ``args.scenario``; state validation happens while parsing."""
    try:
        scenario = load_scenario(args.scenario)
    except WaypointError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    states = [scenario.initial, *(step.state for step in scenario.steps)]
    navigators = max(len(list(navigator_paths(state))) for state in states)
    print(f"OK: {len(states)} state(s), up to {navigators} navigator(s)")
