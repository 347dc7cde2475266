"""Exception hierarchy for the height comparison core."""

from __future__ import annotations


class HeightCompareError(Exception):
    """Base exception for conversion and formatting failures."""


class UnsupportedUnitError(HeightCompareError):
    """Raised when a unit tag is not part of the conversion table."""


class InvalidMagnitudeError(HeightCompareError):
    """Raised for NaN, infinite or negative lengths."""


class DivisionByZeroError(HeightCompareError, ZeroDivisionError):
    """Raised when a :class:`Precision` divisor is zero."""


__all__ = [
    "HeightCompareError",
    "UnsupportedUnitError",
    "InvalidMagnitudeError",
    "DivisionByZeroError",
]
