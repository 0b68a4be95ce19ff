"""
Input Manager (Reboot Step Text)
Parses reboot steps such as ``on x=-20..26,y=-36..17,z=-47..7`` into
ToggleStep records, one step per line.
"""
import logging
import os
import re
from typing import Optional

from cuboidreboot.model.geometry_primitives import AXES, AxisInterval, Cuboid, InvalidCuboidError
from cuboidreboot.model.region import Polarity, ToggleStep

# Get module logger
logger = logging.getLogger(__name__)

_RANGE_PATTERN = re.compile(r"^\s*(-?\d+)\s*\.\.\s*(-?\d+)\s*$")


class StepParseError(ValueError):
    """Raised when a line of reboot steps cannot be parsed."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        super().__init__(message)


def parse_step(line: str, line_number: Optional[int] = None) -> ToggleStep:
    """
    Parses a single reboot step.

    Args:
        line: Text of the form ``<on|off> x=a..b,y=c..d,z=e..f``. The axes may
              appear in any order but each exactly once.
        line_number: 1-based line number, only used in error messages.

    Returns:
        The parsed ToggleStep.

    Raises:
        StepParseError: If the polarity, an axis or a range is malformed.
    """
    parts = line.split()
    if len(parts) != 2:
        raise StepParseError(f"Expected '<on|off> x=..,y=..,z=..', got '{line.strip()}'.", line_number)

    raw_polarity, raw_cuboid = parts
    try:
        polarity = Polarity(raw_polarity)
    except ValueError:
        raise StepParseError(f"Unknown polarity '{raw_polarity}'.", line_number) from None

    intervals: dict[str, AxisInterval] = {}
    for side in raw_cuboid.split(','):
        axis, sep, axis_range = side.partition('=')
        axis = axis.strip()
        if not sep:
            raise StepParseError(f"Missing '=' in '{side}'.", line_number)
        if axis not in AXES:
            raise StepParseError(f"Unknown axis '{axis}'.", line_number)
        if axis in intervals:
            raise StepParseError(f"Axis '{axis}' given more than once.", line_number)

        match = _RANGE_PATTERN.match(axis_range)
        if match is None:
            raise StepParseError(f"Malformed range '{axis_range}' for axis '{axis}'.", line_number)
        try:
            intervals[axis] = AxisInterval(int(match.group(1)), int(match.group(2)))
        except InvalidCuboidError as e:
            raise StepParseError(f"Invalid range for axis '{axis}': {e}", line_number) from e

    missing = [axis for axis in AXES if axis not in intervals]
    if missing:
        raise StepParseError(f"Missing axis/axes: {', '.join(missing)}.", line_number)

    return ToggleStep(polarity, Cuboid(intervals['x'], intervals['y'], intervals['z']))


def parse_steps(text: str) -> list[ToggleStep]:
    """Parses every non-blank line of ``text`` into a ToggleStep, keeping order."""
    steps: list[ToggleStep] = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        steps.append(parse_step(line, line_number))
    logger.debug(f"Parsed {len(steps)} reboot step(s).")
    return steps


class StepReader:
    """Reads reboot steps from files on disk."""

    @staticmethod
    def load(filepath: str) -> list[ToggleStep]:
        logger.info(f"Loading reboot steps from: {filepath}")
        if not os.path.exists(filepath):
            raise FileNotFoundError(f"Reboot steps file not found: {filepath}")

        try:
            with open(filepath, mode='r', encoding='utf-8') as f:
                text = f.read()
        except UnicodeDecodeError as e:
            raise StepParseError(f"File '{filepath}' is not valid UTF-8 text: {e}") from e

        steps = parse_steps(text)
        logger.info(f"Loaded {len(steps)} reboot step(s) from: {filepath}")
        return steps
