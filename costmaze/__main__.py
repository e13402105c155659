"""Module entry point for `python -m costmaze`."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rich.console import Console

from costmaze.app import LOG_LEVELS, configure_logging, run_solver


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Find the cheapest path through a weighted maze."
    )
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Read the maze from this file instead of stdin.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as a JSON report.",
    )
    parser.add_argument(
        "--render",
        action="store_true",
        help="Draw the maze with the route highlighted on stderr.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (defaults to $COSTMAZE_LOG_LEVEL or WARNING).",
    )
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    status = run_solver(
        sys.stdin,
        sys.stdout,
        input_path=args.input,
        as_json=args.json,
        render_console=Console(stderr=True) if args.render else None,
    )
    if status:
        raise SystemExit(status)


if __name__ == "__main__":
    main()
