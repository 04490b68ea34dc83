"""Tests for completing a right triangle from partial input."""

import logging
import math
from pathlib import Path
import sys

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from pythagoras import config  # noqa: E402
from pythagoras.config import Config  # noqa: E402
from pythagoras.errors import (  # noqa: E402
    DegenerateTriangleError,
    InsufficientInputError,
    MissingInputError,
    RightAngleError,
)
from pythagoras.right_angle import one_side, resolve, two_sides  # noqa: E402
from pythagoras.schema import RightAngle, RightAngleInput  # noqa: E402

RADIANS_345 = 0.6435011
A_345 = 3.0
B_345 = 4.0
C_345 = 5.0


def assert_345(result: RightAngle) -> None:
    assert result.rise == pytest.approx(A_345, abs=1e-6)
    assert result.run == pytest.approx(B_345, abs=1e-6)
    assert result.hypotenuse == pytest.approx(C_345, abs=1e-6)
    assert result.angle == pytest.approx(RADIANS_345, abs=1e-6)


@pytest.mark.parametrize(
    "fields",
    [
        {"angle": RADIANS_345, "rise": A_345},
        {"angle": RADIANS_345, "run": B_345},
        {"angle": RADIANS_345, "hypotenuse": C_345},
        {"rise": A_345, "run": B_345},
        {"rise": A_345, "hypotenuse": C_345},
        {"run": B_345, "hypotenuse": C_345},
        {"rise": A_345, "run": B_345, "hypotenuse": C_345},
    ],
)
def test_resolves_345_triangle(fields):
    assert_345(resolve(RightAngleInput(**fields)))


def test_angle_and_rise():
    result = resolve(RightAngleInput(angle=0.6435011, rise=3.0))
    assert result.run == pytest.approx(4.0, abs=1e-6)
    assert result.hypotenuse == pytest.approx(5.0, abs=1e-6)
    assert result.angle == 0.6435011
    assert result.rise == 3.0


def test_run_and_hypotenuse():
    result = resolve(RightAngleInput(run=4.0, hypotenuse=5.0))
    assert result.rise == pytest.approx(3.0, abs=1e-6)
    assert result.angle == pytest.approx(0.6435011, abs=1e-6)


sides = st.floats(
    min_value=1e-3, max_value=1e3, allow_nan=False, allow_infinity=False
)


@given(rise=sides, run=sides)
@settings(deadline=None)
def test_two_sides_recompute_angle(rise: float, run: float) -> None:
    """A supplied angle is replaced by one that matches the two sides."""
    result = resolve(RightAngleInput(rise=rise, run=run, angle=0.1))
    assert math.tan(result.angle) == pytest.approx(rise / run, rel=1e-6)
    assert result.is_consistent()


def test_three_sides_use_rise_and_run():
    result = resolve(RightAngleInput(rise=3.0, run=4.0, hypotenuse=10.0))
    assert result.hypotenuse == pytest.approx(5.0)
    assert result.angle == pytest.approx(RADIANS_345, abs=1e-6)


def test_rise_and_hypotenuse_beat_run_and_hypotenuse():
    # run is absent, so rise+hypotenuse is the first complete pair
    result = two_sides(RightAngleInput(rise=3.0, hypotenuse=5.0, angle=1.2))
    assert result.run == pytest.approx(4.0)
    assert result.angle == pytest.approx(RADIANS_345, abs=1e-6)


def test_one_side_prefers_rise():
    result = one_side(RightAngleInput(angle=RADIANS_345, rise=3.0, hypotenuse=99.0))
    assert result.rise == 3.0
    assert result.hypotenuse == pytest.approx(5.0, abs=1e-6)


def test_one_side_prefers_run_over_hypotenuse():
    result = one_side(RightAngleInput(angle=RADIANS_345, run=4.0, hypotenuse=99.0))
    assert result.rise == pytest.approx(3.0, abs=1e-6)
    assert result.hypotenuse == pytest.approx(5.0, abs=1e-6)


def test_empty_input_is_missing():
    with pytest.raises(MissingInputError):
        resolve(RightAngleInput())


def test_angle_only_is_missing():
    with pytest.raises(MissingInputError) as excinfo:
        resolve(RightAngleInput(angle=RADIANS_345))
    assert excinfo.value.context == {"angle": RADIANS_345}


@pytest.mark.parametrize("field", ["rise", "run", "hypotenuse"])
def test_single_side_is_insufficient(field):
    with pytest.raises(InsufficientInputError):
        resolve(RightAngleInput(**{field: 3.0}))


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        resolve(RightAngleInput(rise=3.0))
    assert issubclass(MissingInputError, RightAngleError)


def test_one_side_requires_angle():
    with pytest.raises(MissingInputError):
        one_side(RightAngleInput(rise=3.0))


def test_one_side_requires_a_side():
    with pytest.raises(MissingInputError):
        one_side(RightAngleInput(angle=RADIANS_345))


def test_two_sides_requires_two_sides():
    with pytest.raises(InsufficientInputError):
        two_sides(RightAngleInput(angle=RADIANS_345, hypotenuse=5.0))


def test_inconsistent_sides_propagate_nan():
    result = resolve(RightAngleInput(rise=6.0, hypotenuse=5.0), strict=False)
    assert math.isnan(result.run)
    assert math.isnan(result.angle)
    assert not result.is_consistent()


def test_strict_rejects_nan():
    with pytest.raises(DegenerateTriangleError):
        resolve(RightAngleInput(rise=6.0, hypotenuse=5.0), strict=True)


def test_strict_rejects_inf():
    with pytest.raises(DegenerateTriangleError):
        resolve(RightAngleInput(angle=0.0, rise=3.0), strict=True)


def test_strict_defaults_from_config(monkeypatch):
    monkeypatch.setattr(config, "_DEFAULT_CONFIG", Config(strict=True))
    with pytest.raises(DegenerateTriangleError):
        resolve(RightAngleInput(rise=6.0, hypotenuse=5.0))
    assert_345(resolve(RightAngleInput(rise=3.0, run=4.0)))


def test_logs_chosen_strategy(caplog):
    caplog.set_level(logging.DEBUG, logger="pythagoras")
    resolve(RightAngleInput(run=4.0, hypotenuse=5.0))
    assert "run and hypotenuse" in caplog.text


def test_from_input_delegates_to_resolve():
    assert_345(RightAngle.from_input(RightAngleInput(angle=RADIANS_345, run=4.0)))
