"""
Application Entry Point
=======================
This module wires the command line to the reboot engine.

Why is this file needed?
------------------------
It acts as the orchestration root. It:
1. Parses the command-line arguments.
2. Sets up logging (stderr console + optional file).
3. Loads the reboot steps through the StepReader.
4. Runs the full reboot (or only the initialization steps) and prints the
   resulting "on" volume.
"""
import argparse
import logging
import sys
from typing import Optional, Sequence

from cuboidreboot.config import EXAMPLE_STEPS_PATH, INITIALIZATION_LIMIT
from cuboidreboot.controller.sequencer import run, run_initialization
from cuboidreboot.logging_config import setup_logging
from cuboidreboot.model.geometry_primitives import InvalidCuboidError
from cuboidreboot.model.io import StepParseError, StepReader

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cuboidreboot",
        description="Compute the number of cells left on after a sequence of cuboid reboot steps.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=EXAMPLE_STEPS_PATH,
        help="File with one 'on|off x=a..b,y=c..d,z=e..f' step per line (default: bundled example)",
    )
    parser.add_argument(
        "--init-only",
        action="store_true",
        help="Only apply the steps lying inside the initialization region",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=INITIALIZATION_LIMIT,
        help=f"Half-width of the initialization region (default: {INITIALIZATION_LIMIT})",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging verbosity (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write logs to this file")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)
    except OSError as e:
        logger.error(f"Cannot open log file '{args.log_file}': {e}")
        return 1

    try:
        steps = StepReader.load(args.input)
        if args.init_only:
            total = run_initialization(steps, limit=args.limit)
        else:
            total = run(steps)
    except (OSError, StepParseError, InvalidCuboidError) as e:
        logger.error(f"Reboot failed: {e}")
        return 1

    print(total)
    return 0


if __name__ == "__main__":
    sys.exit(main())
