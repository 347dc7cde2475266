import pytest

from plugins.height_compare.core import (
    InvalidMagnitudeError,
    UnitSystem,
    get_best_unit,
    get_imperial_grid_unit_label,
)
from plugins.height_compare.core.units import UNIT_ORDER


def _sweep(start_exp=-13, stop_exp=29, steps_per_decade=10):
    count = (stop_exp - start_exp) * steps_per_decade
    return [10 ** (start_exp + i / steps_per_decade) for i in range(count + 1)]


@pytest.mark.parametrize(
    "meters, expected",
    [
        (0, UnitSystem.NANOMETER),
        (1e-13, UnitSystem.NANOMETER),
        (5e-7, UnitSystem.NANOMETER),
        (1e-6, UnitSystem.MICROMETER),
        (5e-4, UnitSystem.MICROMETER),
        (1e-3, UnitSystem.MILLIMETER),
        (0.05, UnitSystem.MILLIMETER),
        (0.1, UnitSystem.CENTIMETER),
        (1.8, UnitSystem.CENTIMETER),
        (9.99, UnitSystem.CENTIMETER),
        (10, UnitSystem.METER),
        (324, UnitSystem.METER),
        (999.9, UnitSystem.METER),
        (1000, UnitSystem.KILOMETER),
        (8.7e28, UnitSystem.KILOMETER),
    ],
)
def test_metric_thresholds(meters, expected):
    assert get_best_unit(meters, True) is expected


@pytest.mark.parametrize(
    "meters, expected",
    [
        (0, UnitSystem.INCH),
        (0.2, UnitSystem.INCH),
        (0.3048, UnitSystem.INCH),
        (0.31, UnitSystem.FOOT),
        (1.8, UnitSystem.FOOT),
        (3000, UnitSystem.FOOT),
        (3100, UnitSystem.MILE),
        (8.7e28, UnitSystem.MILE),
    ],
)
def test_imperial_thresholds(meters, expected):
    assert get_best_unit(meters, False) is expected


@pytest.mark.parametrize("is_metric", [True, False])
def test_selection_is_monotonic_over_full_range(is_metric):
    orders = [UNIT_ORDER[get_best_unit(m, is_metric)] for m in [0.0, *_sweep()]]
    assert orders == sorted(orders)


@pytest.mark.parametrize("value", [-0.5, float("nan"), float("inf")])
def test_invalid_magnitudes(value):
    with pytest.raises(InvalidMagnitudeError):
        get_best_unit(value, True)


def test_imperial_grid_label():
    assert get_imperial_grid_unit_label(0.2) == "in"
    assert get_imperial_grid_unit_label(1.8) == "ft/in"
    assert get_imperial_grid_unit_label(8848) == "mi"


def test_grid_label_agrees_with_best_unit():
    labels = {UnitSystem.INCH: "in", UnitSystem.FOOT: "ft/in", UnitSystem.MILE: "mi"}
    for meters in _sweep(steps_per_decade=3):
        assert get_imperial_grid_unit_label(meters) == labels[get_best_unit(meters, False)]
