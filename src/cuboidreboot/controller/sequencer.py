"""
Reboot Sequencer
================
Drives an ordered list of toggle steps through a RegionSet and reduces the
final region to a single volume.

Why is this file needed?
------------------------
1. Ordering: Later steps override earlier ones wherever they overlap, so the
   steps are applied strictly in the order given and never re-sorted.
2. Initialization: The reboot can also be restricted to the steps that lie
   inside the small initialization cube around the origin.
"""
from __future__ import annotations

import logging
from typing import Iterable, Iterator

from cuboidreboot.config import INITIALIZATION_LIMIT
from cuboidreboot.model.region import RegionSet, ToggleStep

logger = logging.getLogger(__name__)


class RebootSequencer:
    """
    Applies toggle steps one after another to a fresh region.

    The region moves from empty through one ``apply`` per step to its final
    state; only then is its volume meaningful.
    """

    def __init__(self) -> None:
        self.region = RegionSet()
        self.steps_applied: int = 0

    def run(self, steps: Iterable[ToggleStep]) -> int:
        """
        Applies every step in order and returns the total "on" volume.

        Args:
            steps: Ordered toggle steps. Any iterable is consumed once.

        Returns:
            Number of cells that are on after the last step.
        """
        for step in steps:
            self.region.apply(step)
            self.steps_applied += 1

        total = self.region.volume
        logger.info(
            f"Reboot finished: {self.steps_applied} step(s), "
            f"{len(self.region)} disjoint cuboid(s), volume {total}."
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Final region spans {self.region.bounding_box()}.")
        return total


def run(steps: Iterable[ToggleStep]) -> int:
    """Total "on" volume after applying ``steps`` to an empty region."""
    return RebootSequencer().run(steps)


def is_initialization_step(step: ToggleStep, limit: int = INITIALIZATION_LIMIT) -> bool:
    """True if all bounds of the step's cuboid lie within [-limit, limit]."""
    cuboid = step.cuboid
    bounds = (
        cuboid.x.start, cuboid.x.end,
        cuboid.y.start, cuboid.y.end,
        cuboid.z.start, cuboid.z.end,
    )
    return all(-limit <= bound <= limit for bound in bounds)


def initialization_steps(
    steps: Iterable[ToggleStep],
    limit: int = INITIALIZATION_LIMIT
) -> Iterator[ToggleStep]:
    """Yields only the initialization steps, keeping their order."""
    for step in steps:
        if is_initialization_step(step, limit):
            yield step
        else:
            logger.debug(f"Skipping step outside initialization region: {step}")


def run_initialization(steps: Iterable[ToggleStep], limit: int = INITIALIZATION_LIMIT) -> int:
    """Total "on" volume after applying only the initialization steps."""
    return run(initialization_steps(steps, limit))
