"""
pytest configuration, fixtures and the brute-force oracle for cuboidreboot tests
"""
import random
from typing import Iterable

import numpy as np
import pytest

from cuboidreboot.model.geometry_primitives import AxisInterval, Cuboid
from cuboidreboot.model.region import Polarity, ToggleStep

# Oracle grid covers [-ORACLE_LIMIT, ORACLE_LIMIT] on every axis
ORACLE_LIMIT = 5

EXAMPLE_TEXT = """\
on x=10..12,y=10..12,z=10..12
on x=11..13,y=11..13,z=11..13
off x=9..11,y=9..11,z=9..11
on x=10..10,y=10..10,z=10..10
"""


def brute_force_volume(steps: Iterable[ToggleStep], limit: int = ORACLE_LIMIT) -> int:
    """Counts "on" cells by toggling every cell of a dense boolean grid."""
    size = 2 * limit + 1
    grid = np.zeros((size, size, size), dtype=bool)
    for step in steps:
        c = step.cuboid
        grid[
            c.x.start + limit:c.x.end + limit + 1,
            c.y.start + limit:c.y.end + limit + 1,
            c.z.start + limit:c.z.end + limit + 1,
        ] = step.polarity is Polarity.ON
    return int(grid.sum())


def cells(cuboid: Cuboid) -> set[tuple[int, int, int]]:
    """Every lattice point of a (small) cuboid."""
    return {
        (x, y, z)
        for x in range(cuboid.x.start, cuboid.x.end + 1)
        for y in range(cuboid.y.start, cuboid.y.end + 1)
        for z in range(cuboid.z.start, cuboid.z.end + 1)
    }


def random_interval(rng: random.Random, limit: int = ORACLE_LIMIT) -> AxisInterval:
    a, b = rng.randint(-limit, limit), rng.randint(-limit, limit)
    return AxisInterval(min(a, b), max(a, b))


def random_cuboid(rng: random.Random, limit: int = ORACLE_LIMIT) -> Cuboid:
    return Cuboid(random_interval(rng, limit), random_interval(rng, limit), random_interval(rng, limit))


def random_steps(rng: random.Random, count: int, limit: int = ORACLE_LIMIT) -> list[ToggleStep]:
    return [
        ToggleStep(rng.choice([Polarity.ON, Polarity.OFF]), random_cuboid(rng, limit))
        for _ in range(count)
    ]


@pytest.fixture
def example_text() -> str:
    return EXAMPLE_TEXT


@pytest.fixture
def example_steps() -> list[ToggleStep]:
    """The four-step example sequence; leaves 39 cells on."""
    return [
        ToggleStep(Polarity.ON, Cuboid.from_bounds(10, 12, 10, 12, 10, 12)),
        ToggleStep(Polarity.ON, Cuboid.from_bounds(11, 13, 11, 13, 11, 13)),
        ToggleStep(Polarity.OFF, Cuboid.from_bounds(9, 11, 9, 11, 9, 11)),
        ToggleStep(Polarity.ON, Cuboid.from_bounds(10, 10, 10, 10, 10, 10)),
    ]


@pytest.fixture
def example_file(tmp_path, example_text):
    path = tmp_path / "steps.txt"
    path.write_text(example_text, encoding="utf-8")
    return path
