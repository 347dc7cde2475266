import dataclasses
import math
from decimal import Decimal

import pytest

from plugins.height_compare.core import (
    DivisionByZeroError,
    InvalidMagnitudeError,
    Precision,
)


def test_universe_over_quark_ratio_stays_finite():
    ratio = Precision.from_value(8.7e28).divide(Precision.from_value(1e-13)).to_number()
    assert math.isfinite(ratio)
    assert ratio > 0
    assert ratio == pytest.approx(8.7e41)


def test_pixels_per_meter_at_universe_scale():
    ratio = Precision.from_value(400).divide(Precision.from_value(8.7e28)).to_number()
    assert ratio > 0
    assert ratio == pytest.approx(400 / 8.7e28, rel=1e-12)


def test_division_by_zero_is_signalled():
    with pytest.raises(DivisionByZeroError):
        Precision.from_value(100).divide(Precision.from_value(0))
    with pytest.raises(ZeroDivisionError):
        Precision.from_value(100).divide(0.0)


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf"), "abc", True, None])
def test_from_value_rejects_non_finite_input(value):
    with pytest.raises(InvalidMagnitudeError):
        Precision.from_value(value)


def test_operations_return_new_values():
    base = Precision.from_value(10)
    half = base.divide(4)
    assert base.to_number() == 10
    assert half.to_number() == 2.5
    with pytest.raises(dataclasses.FrozenInstanceError):
        base.value = Decimal(1)


def test_decimal_arithmetic_avoids_binary_tails():
    assert Precision.from_value("0.1").multiply(3).to_decimal() == Decimal("0.3")
    assert Precision.from_value(1.8).multiply(100).to_number() == 180.0


def test_projection_refuses_to_saturate():
    with pytest.raises(InvalidMagnitudeError):
        Precision.from_value(1e300).multiply(1e300).to_number()
    with pytest.raises(InvalidMagnitudeError):
        Precision.from_value(1e-300).divide(1e300).to_number()
    assert Precision.from_value(0).to_number() == 0.0
