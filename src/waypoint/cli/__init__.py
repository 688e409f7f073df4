"""Waypoint CLI — scenario replay and validation.

Entry point registered as ``waypoint`` in ``pyproject.toml``::

    [project.scripts]
    waypoint = "waypoint.cli:main"
"""

import argparse
import logging
import sys

from waypoint.config import FocusConfig


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``waypoint`` command."""
    parser = argparse.ArgumentParser(
        prog="waypoint",
        description="Waypoint — focus propagation for nested navigators.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- waypoint replay ---------------------------------------------------
    replay_parser = subparsers.add_parser("replay", help="Print the lifecycle trace of a scenario")
    replay_parser.add_argument("scenario", help="Path to a scenario JSON file")
    replay_parser.add_argument(
        "--no-actions",
        action="store_true",
        help="Hide forwarded 'action' events in the output",
    )
    replay_parser.add_argument(
        "--root-context",
        default="Root",
        help="Context fallback for top-level emissions (default: Root)",
    )
    replay_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log tracker activity to stderr",
    )

    # -- waypoint check ----------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate the states of a scenario")
    check_parser.add_argument("scenario", help="Path to a scenario JSON file")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "replay":
        from waypoint.cli._replay import run_replay
        from waypoint.errors import ConfigurationError

        try:
            config = FocusConfig(
                root_context=args.root_context,
                trace_events=args.verbose,
                log_level="debug" if args.verbose else "warning",
            )
        except ConfigurationError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            raise SystemExit(2) from exc

        logging.basicConfig(level=config.log_level.upper(), format="%(name)s: %(message)s")
        run_replay(args, config)
    elif args.command == "check":
        from waypoint.cli._check import run_check

        run_check(args)
