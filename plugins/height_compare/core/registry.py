"""Shared Pint registry helpers for the height comparison core."""

from __future__ import annotations

from decimal import Decimal
from functools import lru_cache

from pint import UnitRegistry


@lru_cache(maxsize=1)
def get_registry() -> UnitRegistry:
    """Return a singleton :class:`~pint.UnitRegistry` with decimal magnitudes."""

    return UnitRegistry(non_int_type=Decimal)


def units_per_meter(unit_name: str) -> Decimal:
    """Return how many ``unit_name`` fit in one meter."""

    registry = get_registry()
    quantity = registry.Quantity(Decimal(1), "meter").to(unit_name)
    return Decimal(str(quantity.magnitude))


__all__ = ["get_registry", "units_per_meter"]
