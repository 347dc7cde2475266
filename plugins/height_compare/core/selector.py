"""Pick the most readable display unit for a magnitude."""

from __future__ import annotations

from typing import Tuple

from .units import UnitSystem, ensure_length

# Upper bounds in meters (exclusive); anything larger takes the last unit.
METRIC_THRESHOLDS: Tuple[Tuple[float, UnitSystem], ...] = (
    (1e-6, UnitSystem.NANOMETER),
    (1e-3, UnitSystem.MICROMETER),
    (0.1, UnitSystem.MILLIMETER),
    (10.0, UnitSystem.CENTIMETER),
    (1000.0, UnitSystem.METER),
)
METRIC_CEILING = UnitSystem.KILOMETER

FOOT_IN_METERS = 0.3048
# Up to one foot reads in inches, below 10 000 ft in feet and inches.
INCH_LIMIT_M = FOOT_IN_METERS
FOOT_LIMIT_M = 10_000 * FOOT_IN_METERS

IMPERIAL_GRID_LABELS = {
    UnitSystem.INCH: "in",
    UnitSystem.FOOT: "ft/in",
    UnitSystem.MILE: "mi",
}


def _best_metric(meters: float) -> UnitSystem:
    for limit, unit in METRIC_THRESHOLDS:
        if meters < limit:
            return unit
    return METRIC_CEILING


def _best_imperial(meters: float) -> UnitSystem:
    if meters <= INCH_LIMIT_M:
        return UnitSystem.INCH
    if meters < FOOT_LIMIT_M:
        return UnitSystem.FOOT
    return UnitSystem.MILE


def get_best_unit(meters: float, is_metric: bool = True) -> UnitSystem:
    """Return the unit that keeps ``meters`` in a readable range.

    Selection is monotonic in ``meters`` and clamps to nanometers or
    kilometers (inches or miles) at the extremes; zero falls in the smallest
    class.
    """

    value = ensure_length(meters, name="meters")
    if is_metric:
        return _best_metric(value)
    return _best_imperial(value)


def get_imperial_grid_unit_label(meters: float) -> str:
    """Header label for the imperial axis of a chart whose tallest item is ``meters``."""

    return IMPERIAL_GRID_LABELS[get_best_unit(meters, is_metric=False)]


__all__ = [
    "METRIC_THRESHOLDS",
    "FOOT_IN_METERS",
    "INCH_LIMIT_M",
    "FOOT_LIMIT_M",
    "get_best_unit",
    "get_imperial_grid_unit_label",
]
