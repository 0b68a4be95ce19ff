"""
Region Set (Data Model)
=======================
This module defines the disjoint decomposition of all "on" space.

Why is this file needed?
------------------------
1. Exactness: Regions reach ~10^15 unit cells, so cells are never enumerated.
   Instead, "on" space is kept as a set of cuboids that never overlap.
2. Summation: Because members are pairwise disjoint, the total volume is the
   plain sum of the member volumes.

Classes:
    Polarity: Whether a step switches its cuboid on or off.
    ToggleStep: One reboot instruction (polarity + cuboid).
    RegionSet: The current disjoint collection of "on" cuboids.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from itertools import combinations
import logging
from typing import Iterator, Optional, TYPE_CHECKING

import numpy as np

from cuboidreboot.model.geometry_primitives import (
    AxisInterval, Cuboid, intersects, subtract, volume
)

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class Polarity(StrEnum):
    ON = "on"
    OFF = "off"


@dataclass(frozen=True)
class ToggleStep:
    """Set every cell of ``cuboid`` to the given polarity."""
    polarity: Polarity
    cuboid: Cuboid

    def __post_init__(self) -> None:
        # Accept plain "on"/"off" strings; anything else raises ValueError
        object.__setattr__(self, "polarity", Polarity(self.polarity))
        if not isinstance(self.cuboid, Cuboid):
            raise TypeError(f"Expected a Cuboid, got {type(self.cuboid).__name__}.")

    def __str__(self) -> str:
        return f"{self.polarity} {self.cuboid}"


class RegionSet:
    """
    Collection of pairwise disjoint cuboids describing the cells that are on.

    The set starts empty and is changed only through ``apply``, which replaces
    the member tuple in one assignment once the new decomposition is complete.
    """

    def __init__(self) -> None:
        self._cuboids: tuple[Cuboid, ...] = ()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(cuboids={len(self._cuboids)}, volume={self.volume})"

    def __len__(self) -> int:
        return len(self._cuboids)

    def __iter__(self) -> Iterator[Cuboid]:
        return iter(self._cuboids)

    @property
    def cuboids(self) -> tuple[Cuboid, ...]:
        return self._cuboids

    @property
    def volume(self) -> int:
        """Total number of cells that are on."""
        return sum(volume(c) for c in self._cuboids)

    def apply(self, step: ToggleStep) -> None:
        """
        Applies one toggle step.

        Every member overlapping the step's cuboid is replaced by the pieces of
        it lying outside that cuboid. For an "on" step the cuboid itself is then
        added. Survivors were all carved to exclude the new cuboid, so the set
        stays disjoint.

        Args:
            step: The step to apply.
        """
        if not isinstance(step, ToggleStep):
            raise TypeError(f"Expected a ToggleStep, got {type(step).__name__}.")

        new_cuboid = step.cuboid
        working: list[Cuboid] = []
        sliced = 0

        for existing in self._cuboids:
            if intersects(existing, new_cuboid):
                working.extend(subtract(existing, new_cuboid))
                sliced += 1
            else:
                working.append(existing)

        if step.polarity is Polarity.ON:
            working.append(new_cuboid)

        self._cuboids = tuple(working)
        logger.debug(
            f"Applied '{step}': sliced {sliced} cuboid(s), region now has {len(self._cuboids)} member(s)."
        )

    def is_disjoint(self) -> bool:
        """Checks that no two members intersect. Quadratic; meant for validation."""
        return not any(intersects(a, b) for a, b in combinations(self._cuboids, 2))

    def bounding_box(self) -> Optional[Cuboid]:
        """Smallest cuboid enclosing every member, or None for an empty region."""
        if not self._cuboids:
            return None
        return Cuboid(
            AxisInterval(min(c.x.start for c in self._cuboids), max(c.x.end for c in self._cuboids)),
            AxisInterval(min(c.y.start for c in self._cuboids), max(c.y.end for c in self._cuboids)),
            AxisInterval(min(c.z.start for c in self._cuboids), max(c.z.end for c in self._cuboids)),
        )

    def to_array(self) -> npt.NDArray[np.int64]:
        """
        Member bounds stacked into an (N, 3, 2) array.

        Raises OverflowError if a coordinate does not fit into int64.
        """
        if not self._cuboids:
            return np.empty((0, 3, 2), dtype=np.int64)
        return np.stack([c.to_array() for c in self._cuboids])
