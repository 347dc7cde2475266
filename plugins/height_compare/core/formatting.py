"""Bounded-precision display strings for heights."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict

from .errors import HeightCompareError
from .precision import Precision, wide_context
from .selector import get_best_unit
from .units import (
    Unit,
    UnitSystem,
    coerce_display_unit,
    coerce_unit_system,
    conversion_table,
    ensure_length,
)

DEFAULT_SIGNIFICANT_DIGITS = 4
MAX_SIGNIFICANT_DIGITS = 15
# Positional notation inside [1e-3, 1e6); powers of ten outside.
SCIENTIFIC_LOWER = Decimal("1e-3")
SCIENTIFIC_UPPER = Decimal("1e6")
METERS_PER_INCH = Decimal("0.0254")
INCHES_PER_FOOT = 12

_SUPERSCRIPTS = str.maketrans("0123456789-+", "⁰¹²³⁴⁵⁶⁷⁸⁹⁻⁺")


@dataclass(frozen=True)
class FormattedResult:
    """A magnitude expressed in ``unit`` plus its display string."""

    value: float
    unit: str
    formatted: str

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


def _check_digits(precision: int) -> int:
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise HeightCompareError("Significant digits must be an integer.")
    if not 1 <= precision <= MAX_SIGNIFICANT_DIGITS:
        raise HeightCompareError(
            f"Significant digits must be between 1 and {MAX_SIGNIFICANT_DIGITS}."
        )
    return precision


def _round_significant(value: Decimal, digits: int) -> Decimal:
    if value.is_zero():
        return Decimal(0)
    with wide_context():
        quantum = Decimal(1).scaleb(value.adjusted() - digits + 1)
        return value.quantize(quantum, rounding=ROUND_HALF_UP)


def _plain(value: Decimal) -> str:
    if value.is_zero():
        return "0"
    with wide_context(len(value.as_tuple().digits)):
        return format(value.normalize(), "f")


def _scientific(value: Decimal) -> str:
    if value.is_zero():
        return "0"
    exponent = value.adjusted()
    with wide_context():
        mantissa = _plain(value.scaleb(-exponent))
    return f"{mantissa}×10{str(exponent).translate(_SUPERSCRIPTS)}"


def format_scientific(value: float | Decimal, precision: int = DEFAULT_SIGNIFICANT_DIGITS) -> str:
    """Render ``value`` as ``mantissa×10ⁿ`` with ``precision`` significant digits."""

    digits = _check_digits(precision)
    number = Precision.from_value(value).to_decimal()
    return _scientific(_round_significant(number, digits))


def format_number(value: float | Decimal, precision: int = DEFAULT_SIGNIFICANT_DIGITS) -> str:
    """Round ``value`` to ``precision`` significant digits and trim trailing zeros.

    Values between 1e-3 and 1e6 are written positionally (``1.7999999999``
    becomes ``"1.8"``); magnitudes outside that band use a superscript power
    of ten rather than ``e`` notation.
    """

    digits = _check_digits(precision)
    number = Precision.from_value(value).to_decimal()
    rounded = _round_significant(number, digits)
    if rounded.is_zero():
        return "0"
    if SCIENTIFIC_LOWER <= abs(rounded) < SCIENTIFIC_UPPER:
        return _plain(rounded)
    return _scientific(rounded)


def convert_height_precision(
    meters: float,
    unit: UnitSystem | str,
    *,
    precision: int = DEFAULT_SIGNIFICANT_DIGITS,
) -> FormattedResult:
    """Convert ``meters`` into a pre-selected unit without re-selecting it."""

    target = coerce_unit_system(unit)
    length = ensure_length(meters, name="meters")
    converted = Precision.from_value(length).multiply(conversion_table()[target])
    return FormattedResult(
        value=converted.to_number(),
        unit=target.value,
        formatted=f"{format_number(converted.to_decimal(), precision)} {target.value}",
    )


def _total_inches(meters: float) -> Decimal:
    return Precision.from_value(meters).divide(METERS_PER_INCH).to_decimal()


def _feet_and_inches(total_inches: Decimal, *, step: Decimal, compact: bool) -> str:
    # Integer feet may need more digits than the default context holds.
    digits = total_inches.adjusted() - step.as_tuple().exponent + 2
    with wide_context(digits):
        rounded = total_inches.quantize(step, rounding=ROUND_HALF_UP)
        feet, inches = divmod(rounded, INCHES_PER_FOOT)
    if compact and inches.is_zero():
        return f"{int(feet)} ft"
    return f"{int(feet)} ft {_plain(inches)} in"


def convert_height_smart_imperial(
    meters: float, *, precision: int = DEFAULT_SIGNIFICANT_DIGITS
) -> str:
    """Imperial smart display: inches, whole feet and inches, or miles."""

    length = ensure_length(meters, name="meters")
    unit = get_best_unit(length, is_metric=False)
    if unit is UnitSystem.FOOT:
        return _feet_and_inches(_total_inches(length), step=Decimal(1), compact=True)
    return convert_height_precision(length, unit, precision=precision).formatted


def convert_height_smart(
    meters: float,
    is_metric: bool = True,
    *,
    precision: int = DEFAULT_SIGNIFICANT_DIGITS,
) -> str:
    """Format ``meters`` in the most readable unit of the requested family."""

    if not is_metric:
        return convert_height_smart_imperial(meters, precision=precision)
    unit = get_best_unit(meters, is_metric=True)
    return convert_height_precision(meters, unit, precision=precision).formatted


def convert_height_for_grid_imperial(
    meters: float,
    max_meters_in_chart: float,
    *,
    precision: int = DEFAULT_SIGNIFICANT_DIGITS,
) -> str:
    """Imperial gridline label whose unit follows the chart maximum.

    Every gridline of one chart shares the unit picked for
    ``max_meters_in_chart``; only the number changes per line.
    """

    length = ensure_length(meters, name="meters")
    unit = get_best_unit(max_meters_in_chart, is_metric=False)
    if unit is UnitSystem.FOOT:
        return _feet_and_inches(_total_inches(length), step=Decimal("0.1"), compact=False)
    return convert_height_precision(length, unit, precision=precision).formatted


def convert_height(
    meters: float,
    unit: Unit | str,
    *,
    precision: int = DEFAULT_SIGNIFICANT_DIGITS,
) -> str:
    display = coerce_display_unit(unit)
    if display is Unit.FT_IN:
        return convert_height_smart_imperial(meters, precision=precision)
    return convert_height_smart(meters, True, precision=precision)


__all__ = [
    "DEFAULT_SIGNIFICANT_DIGITS",
    "MAX_SIGNIFICANT_DIGITS",
    "FormattedResult",
    "format_number",
    "format_scientific",
    "convert_height_precision",
    "convert_height_smart",
    "convert_height_smart_imperial",
    "convert_height_for_grid_imperial",
    "convert_height",
]
