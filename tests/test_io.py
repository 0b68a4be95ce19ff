"""
Tests for parsing reboot steps from text
"""
import pytest

from cuboidreboot.model.geometry_primitives import AxisInterval, Cuboid, InvalidCuboidError
from cuboidreboot.model.io import StepParseError, StepReader, parse_step, parse_steps
from cuboidreboot.model.region import Polarity, ToggleStep


def test_parse_step():
    step = parse_step("on x=-20..26,y=-36..17,z=-47..7")
    assert step == ToggleStep(Polarity.ON, Cuboid.from_bounds(-20, 26, -36, 17, -47, 7))


def test_parse_step_any_axis_order():
    step = parse_step("off z=1..2,x=3..4,y=5..6")
    assert step.polarity is Polarity.OFF
    assert step.cuboid == Cuboid.from_bounds(3, 4, 5, 6, 1, 2)


def test_parse_step_ignores_surrounding_whitespace():
    step = parse_step("  on x=1..1,y=2..2,z=3..3  \n")
    assert step.cuboid.x == AxisInterval(1, 1)


@pytest.mark.parametrize(
    "line, fragment",
    [
        ("toggle x=1..2,y=1..2,z=1..2", "Unknown polarity"),
        ("on x=1..2,y=1..2", "Missing axis"),
        ("on x=1..2,y=1..2,z=1..2,x=3..4", "more than once"),
        ("on x=1..2,y=1..2,w=1..2", "Unknown axis"),
        ("on x=1..2,y=1..2,z1..2", "Missing '='"),
        ("on x=1..2,y=1..2,z=1-2", "Malformed range"),
        ("on x=1..2,y=a..2,z=1..2", "Malformed range"),
        ("on", "Expected"),
        ("on x=1..2, y=1..2,z=1..2", "Expected"),
    ],
)
def test_parse_step_errors(line, fragment):
    with pytest.raises(StepParseError, match=fragment):
        parse_step(line)


def test_inverted_range_is_parse_error():
    with pytest.raises(StepParseError) as excinfo:
        parse_step("on x=5..1,y=1..2,z=1..2", line_number=7)
    assert isinstance(excinfo.value.__cause__, InvalidCuboidError)
    assert excinfo.value.line_number == 7
    assert str(excinfo.value).startswith("Line 7:")


def test_parse_steps_skips_blank_lines(example_text):
    steps = parse_steps("\n" + example_text + "\n\n")
    assert len(steps) == 4
    assert steps[2].polarity is Polarity.OFF


def test_parse_steps_reports_line_number():
    with pytest.raises(StepParseError, match="Line 3"):
        parse_steps("on x=1..1,y=1..1,z=1..1\n\nbad line")


def test_load(example_file, example_steps):
    assert StepReader.load(str(example_file)) == example_steps


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        StepReader.load(str(tmp_path / "missing.txt"))


def test_load_non_utf8_file(tmp_path):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"\xff\xfe")
    with pytest.raises(StepParseError, match="not valid UTF-8") as excinfo:
        StepReader.load(str(path))
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
