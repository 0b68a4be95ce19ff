"""
Geometric Primitives for Cuboid Toggling.

Axis-aligned boxes on the integer lattice and the pure operations the region
engine is built from: intersection test, volume and subtraction by slicing.
All bounds are inclusive.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

AXES: tuple[str, str, str] = ("x", "y", "z")


class InvalidCuboidError(ValueError):
    """Raised when an interval or cuboid is malformed (e.g. start > end)."""


@dataclass(frozen=True)
class AxisInterval:
    """An inclusive integer range [start, end] on a single axis."""
    start: int
    end: int

    def __post_init__(self) -> None:
        for bound in (self.start, self.end):
            # bool is an int subclass but never a meaningful coordinate
            if isinstance(bound, bool) or not isinstance(bound, (int, np.integer)):
                raise InvalidCuboidError(f"Interval bounds must be integers, got {bound!r}.")
        if self.start > self.end:
            raise InvalidCuboidError(f"Interval start {self.start} is greater than end {self.end}.")

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"

    @property
    def length(self) -> int:
        """Number of lattice points covered by the interval."""
        return int(self.end) - int(self.start) + 1

    def overlap(self, other: AxisInterval) -> Optional[AxisInterval]:
        """Returns the shared part of two intervals, or None if they are disjoint."""
        start = max(self.start, other.start)
        end = min(self.end, other.end)
        if start > end:
            return None
        return AxisInterval(start, end)


@dataclass(frozen=True)
class Cuboid:
    """
    An axis-aligned box: one inclusive AxisInterval per axis.

    Equality and hashing are structural, so cuboids can be stored in sets and
    compared by value.
    """
    x: AxisInterval
    y: AxisInterval
    z: AxisInterval

    def __post_init__(self) -> None:
        for axis in AXES:
            if not isinstance(getattr(self, axis), AxisInterval):
                raise InvalidCuboidError(f"Cuboid axis '{axis}' must be an AxisInterval.")

    def __str__(self) -> str:
        return f"x={self.x},y={self.y},z={self.z}"

    @classmethod
    def from_bounds(cls, x0: int, x1: int, y0: int, y1: int, z0: int, z1: int) -> Cuboid:
        """Builds a cuboid from six inclusive bounds."""
        return cls(AxisInterval(x0, x1), AxisInterval(y0, y1), AxisInterval(z0, z1))

    def interval(self, axis: str) -> AxisInterval:
        return getattr(self, axis)

    @property
    def volume(self) -> int:
        return volume(self)

    def to_array(self) -> npt.NDArray[np.int64]:
        """Bounds as a (3, 2) array of [start, end] rows ordered x, y, z."""
        return np.array(
            [[self.x.start, self.x.end], [self.y.start, self.y.end], [self.z.start, self.z.end]],
            dtype=np.int64,
        )


def intersects(a: Cuboid, b: Cuboid) -> bool:
    """
    True if the two cuboids share at least one lattice point.

    Touching intervals (a.end == b.start - 1) do not intersect.
    """
    return (
        max(a.x.start, b.x.start) <= min(a.x.end, b.x.end)
        and max(a.y.start, b.y.start) <= min(a.y.end, b.y.end)
        and max(a.z.start, b.z.start) <= min(a.z.end, b.z.end)
    )


def volume(c: Cuboid) -> int:
    """Number of lattice points inside the cuboid."""
    return c.x.length * c.y.length * c.z.length


def intersection(a: Cuboid, b: Cuboid) -> Optional[Cuboid]:
    """Returns the overlapping cuboid a ∩ b, or None if they do not intersect."""
    x = a.x.overlap(b.x)
    y = a.y.overlap(b.y)
    z = a.z.overlap(b.z)
    if x is None or y is None or z is None:
        return None
    return Cuboid(x, y, z)


def subtract(a: Cuboid, base: Cuboid) -> tuple[Cuboid, ...]:
    """
    Computes a \\ base as up to six disjoint cuboids.

    Axes are clipped in the fixed order x, y, z. On each axis the part of the
    remaining core below base is emitted as a slice, then the part above it,
    and the core is shrunk to base's range on that axis. A slice keeps the
    already clipped extent on processed axes and the full extent of ``a`` on
    the others. What is left of the core after z equals a ∩ base and is
    dropped.

    Args:
        a: The cuboid to slice up.
        base: The cuboid to cut out of ``a``.

    Returns:
        Disjoint cuboids whose union is exactly the part of ``a`` outside
        ``base``. ``(a,)`` if the two do not intersect.
    """
    if not intersects(a, base):
        return (a,)

    slices: list[Cuboid] = []
    core = a
    for axis in AXES:
        core_range = core.interval(axis)
        base_range = base.interval(axis)

        if core_range.start < base_range.start:
            below = AxisInterval(core_range.start, base_range.start - 1)
            slices.append(replace(core, **{axis: below}))
            core_range = AxisInterval(base_range.start, core_range.end)

        if core_range.end > base_range.end:
            above = AxisInterval(base_range.end + 1, core_range.end)
            slices.append(replace(core, **{axis: above}))
            core_range = AxisInterval(core_range.start, base_range.end)

        core = replace(core, **{axis: core_range})

    return tuple(slices)
