"""Unit tags and the meter-based conversion table."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from functools import lru_cache
from typing import Dict, List, Mapping

from .errors import InvalidMagnitudeError, UnsupportedUnitError
from .precision import Precision
from .registry import units_per_meter


class UnitSystem(str, Enum):
    """Fine-grained unit tags used for one-shot conversions."""

    NANOMETER = "nm"
    MICROMETER = "μm"
    MILLIMETER = "mm"
    CENTIMETER = "cm"
    METER = "m"
    KILOMETER = "km"
    INCH = "in"
    FOOT = "ft"
    MILE = "mi"

    def __str__(self) -> str:
        return self.value


class Unit(str, Enum):
    """Display families of the comparison chart."""

    CM = "cm"
    FT_IN = "ft-in"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class UnitDefinition:
    """Registry name and family of a :class:`UnitSystem` member."""

    registry_name: str
    family: str
    aliases: tuple[str, ...] = ()


UNIT_DEFINITIONS: Dict[UnitSystem, UnitDefinition] = {
    UnitSystem.NANOMETER: UnitDefinition("nanometer", "metric", ("nanometre",)),
    UnitSystem.MICROMETER: UnitDefinition(
        "micrometer", "metric", ("um", "µm", "micron", "micrometre")
    ),
    UnitSystem.MILLIMETER: UnitDefinition("millimeter", "metric", ("millimetre",)),
    UnitSystem.CENTIMETER: UnitDefinition("centimeter", "metric", ("centimetre",)),
    UnitSystem.METER: UnitDefinition("meter", "metric", ("metre",)),
    UnitSystem.KILOMETER: UnitDefinition("kilometer", "metric", ("kilometre",)),
    UnitSystem.INCH: UnitDefinition("inch", "imperial", ("inches",)),
    UnitSystem.FOOT: UnitDefinition("foot", "imperial", ("feet",)),
    UnitSystem.MILE: UnitDefinition("mile", "imperial", ("miles",)),
}

# Ordering inside each family, smallest first.
UNIT_ORDER: Dict[UnitSystem, int] = {
    UnitSystem.NANOMETER: 0,
    UnitSystem.MICROMETER: 1,
    UnitSystem.MILLIMETER: 2,
    UnitSystem.CENTIMETER: 3,
    UnitSystem.METER: 4,
    UnitSystem.KILOMETER: 5,
    UnitSystem.INCH: 0,
    UnitSystem.FOOT: 1,
    UnitSystem.MILE: 2,
}


def _build_name_lookup() -> Dict[str, UnitSystem]:
    lookup: Dict[str, UnitSystem] = {}
    for unit, definition in UNIT_DEFINITIONS.items():
        lookup[unit.name.lower()] = unit
        lookup[definition.registry_name] = unit
        for alias in definition.aliases:
            lookup[alias.lower()] = unit
    return lookup


# Symbols are case sensitive ("mm" is not "Mm"), names are not.
_SYMBOL_LOOKUP: Dict[str, UnitSystem] = {unit.value: unit for unit in UnitSystem}
_NAME_LOOKUP = _build_name_lookup()
_DISPLAY_LOOKUP: Dict[str, Unit] = {
    "cm": Unit.CM,
    "metric": Unit.CM,
    "ft-in": Unit.FT_IN,
    "ft_in": Unit.FT_IN,
    "imperial": Unit.FT_IN,
}


def coerce_unit_system(tag: UnitSystem | str) -> UnitSystem:
    """Resolve ``tag`` to a :class:`UnitSystem` or raise ``UnsupportedUnitError``."""

    if isinstance(tag, UnitSystem):
        return tag
    if not isinstance(tag, str) or not tag.strip():
        raise UnsupportedUnitError(f"Unsupported unit {tag!r}.")
    text = tag.strip()
    unit = _SYMBOL_LOOKUP.get(text) or _NAME_LOOKUP.get(text.lower())
    if unit is None:
        raise UnsupportedUnitError(f"Unsupported unit '{text}'.")
    return unit


def coerce_display_unit(tag: Unit | str) -> Unit:
    """Resolve ``tag`` to a display :class:`Unit`."""

    if isinstance(tag, Unit):
        return tag
    if not isinstance(tag, str) or not tag.strip():
        raise UnsupportedUnitError(f"Unsupported display unit {tag!r}.")
    unit = _DISPLAY_LOOKUP.get(tag.strip().lower())
    if unit is None:
        raise UnsupportedUnitError(f"Unsupported display unit '{tag.strip()}'.")
    return unit


def is_metric(unit: UnitSystem) -> bool:
    return UNIT_DEFINITIONS[unit].family == "metric"


@lru_cache(maxsize=1)
def conversion_table() -> Mapping[UnitSystem, Decimal]:
    """Return units-per-meter factors for every supported unit."""

    return {
        unit: units_per_meter(definition.registry_name)
        for unit, definition in UNIT_DEFINITIONS.items()
    }


def ensure_length(value: float, *, name: str = "value") -> float:
    """Validate a finite, non-negative length and return it as ``float``."""

    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise InvalidMagnitudeError(f"{name} must be a number.")
    number = float(value)
    if math.isnan(number) or math.isinf(number):
        raise InvalidMagnitudeError(f"{name} must be a finite number.")
    if number < 0:
        raise InvalidMagnitudeError(f"{name} must not be negative.")
    return number


def to_meters(value: float, unit: UnitSystem | str) -> float:
    """Express ``value`` given in ``unit`` in meters.

    Raises :class:`InvalidMagnitudeError` when the result leaves the float range.
    """

    number = ensure_length(value)
    factor = conversion_table()[coerce_unit_system(unit)]
    return Precision.from_value(number).divide(factor).to_number()


def to_unit(meters: float, unit: UnitSystem | str) -> float:
    """Express ``meters`` in ``unit``; the inverse of :func:`to_meters`."""

    number = ensure_length(meters, name="meters")
    factor = conversion_table()[coerce_unit_system(unit)]
    return Precision.from_value(number).multiply(factor).to_number()


def list_unit_systems() -> List[Dict[str, object]]:
    table = conversion_table()
    return [
        {
            "symbol": unit.value,
            "name": unit.name.lower(),
            "family": definition.family,
            "units_per_meter": format(table[unit], "f"),
        }
        for unit, definition in UNIT_DEFINITIONS.items()
    ]


__all__ = [
    "UnitSystem",
    "Unit",
    "UnitDefinition",
    "UNIT_DEFINITIONS",
    "UNIT_ORDER",
    "coerce_unit_system",
    "coerce_display_unit",
    "is_metric",
    "conversion_table",
    "ensure_length",
    "to_meters",
    "to_unit",
    "list_unit_systems",
]
