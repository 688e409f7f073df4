"""``waypoint replay`` — print the lifecycle trace of a scenario.

Feeds every state of a scenario through a ``NavigationTree`` and prints
one line per emitted event, grouped under the action that caused it.
"""

import argparse
import sys

from waypoint.cli._scenario import load_scenario
from waypoint.config import FocusConfig
from waypoint.errors import WaypointError
from waypoint.testing.recorder import EventRecorder, RecordedEvent
from waypoint.tree import INIT_ACTION, NavigationTree


def format_event(event: RecordedEvent) -> str:
    return f"  {event.type:<9} {event.target:<16} {event.context or ''}".rstrip()


def run_replay(args: argparse.Namespace, config: FocusConfig) -> None:
    """Replay ``args.scenario`` and print the trace to stdout."""
    try:
        scenario = load_scenario(args.scenario)
    except WaypointError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    recorder = EventRecorder()

    def flush(label: str) -> None:
        print(f"# {label}")
        events = recorder.focus_events() if args.no_actions else recorder.events
        for event in events:
            print(format_event(event))
        recorder.clear()

    with NavigationTree(scenario.initial, config=config, on_event=recorder) as tree:
        tree.start()
        flush(INIT_ACTION.type)
        for step in scenario.steps:
            tree.dispatch(step.action, step.state)
            flush(step.action.type)
