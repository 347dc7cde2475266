"""Facade for the height comparison core utilities."""

from __future__ import annotations

from .chart import (
    GridLine,
    GridScale,
    apply_zoom,
    build_grid,
    height_to_pixels,
    max_height_in_comparison,
    pixels_per_meter,
)
from .errors import (
    DivisionByZeroError,
    HeightCompareError,
    InvalidMagnitudeError,
    UnsupportedUnitError,
)
from .formatting import (
    DEFAULT_SIGNIFICANT_DIGITS,
    MAX_SIGNIFICANT_DIGITS,
    FormattedResult,
    convert_height,
    convert_height_for_grid_imperial,
    convert_height_precision,
    convert_height_smart,
    convert_height_smart_imperial,
    format_number,
    format_scientific,
)
from .precision import Precision
from .selector import get_best_unit, get_imperial_grid_unit_label
from .settings import HeightCompareSettings, load_settings
from .units import (
    Unit,
    UnitSystem,
    coerce_display_unit,
    coerce_unit_system,
    list_unit_systems,
    to_meters,
    to_unit,
)

__all__ = [
    "DivisionByZeroError",
    "HeightCompareError",
    "InvalidMagnitudeError",
    "UnsupportedUnitError",
    "Precision",
    "Unit",
    "UnitSystem",
    "coerce_display_unit",
    "coerce_unit_system",
    "list_unit_systems",
    "to_meters",
    "to_unit",
    "get_best_unit",
    "get_imperial_grid_unit_label",
    "DEFAULT_SIGNIFICANT_DIGITS",
    "MAX_SIGNIFICANT_DIGITS",
    "FormattedResult",
    "format_number",
    "format_scientific",
    "convert_height",
    "convert_height_precision",
    "convert_height_smart",
    "convert_height_smart_imperial",
    "convert_height_for_grid_imperial",
    "GridLine",
    "GridScale",
    "apply_zoom",
    "build_grid",
    "height_to_pixels",
    "max_height_in_comparison",
    "pixels_per_meter",
    "HeightCompareSettings",
    "load_settings",
]
