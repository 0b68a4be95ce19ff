"""
cuboidreboot - exact volume of a region built from on/off cuboid toggles.

The region is kept as a set of disjoint cuboids, so coordinate ranges far too
large to enumerate cell by cell are handled exactly.
"""
from cuboidreboot.model.geometry_primitives import (
    AxisInterval,
    Cuboid,
    InvalidCuboidError,
    intersection,
    intersects,
    subtract,
    volume,
)
from cuboidreboot.model.region import Polarity, RegionSet, ToggleStep
from cuboidreboot.model.io import StepParseError, StepReader, parse_step, parse_steps
from cuboidreboot.controller.sequencer import (
    RebootSequencer,
    initialization_steps,
    is_initialization_step,
    run,
    run_initialization,
)

__version__ = "0.1.0"

__all__ = [
    "AxisInterval",
    "Cuboid",
    "InvalidCuboidError",
    "intersection",
    "intersects",
    "subtract",
    "volume",
    "Polarity",
    "RegionSet",
    "ToggleStep",
    "StepParseError",
    "StepReader",
    "parse_step",
    "parse_steps",
    "RebootSequencer",
    "initialization_steps",
    "is_initialization_step",
    "run",
    "run_initialization",
]
