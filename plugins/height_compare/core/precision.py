"""Decimal-backed ratio arithmetic for extreme magnitude spans.

A comparison chart divides a pixel height (order 1e2 px) by a character
height that may be anything from a quark (1e-13 m) to the observable
universe (1e29 m). :class:`Precision` performs that division on
:class:`~decimal.Decimal` values so the ratio keeps its significant digits
until the final projection back to ``float``.
"""

from __future__ import annotations

import math
from contextlib import contextmanager
from dataclasses import dataclass
from decimal import MAX_EMAX, MIN_EMIN, Context, Decimal, InvalidOperation, localcontext
from typing import Iterator

from .errors import DivisionByZeroError, InvalidMagnitudeError

PRECISION_DIGITS = 40


def _coerce_decimal(value: object) -> Decimal:
    if isinstance(value, Precision):
        return value.value
    if isinstance(value, bool):
        raise InvalidMagnitudeError("Boolean values are not magnitudes.")
    if isinstance(value, Decimal):
        parsed = value
    elif isinstance(value, int):
        parsed = Decimal(value)
    elif isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            raise InvalidMagnitudeError("Value must be a finite number.")
        parsed = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            parsed = Decimal(value.strip())
        except InvalidOperation as exc:
            raise InvalidMagnitudeError(f"'{value}' is not a valid number.") from exc
    else:
        raise InvalidMagnitudeError(f"Unsupported magnitude type {type(value).__name__}.")
    if parsed.is_nan() or parsed.is_infinite():
        raise InvalidMagnitudeError("Value must be a finite number.")
    return parsed


@contextmanager
def wide_context(digits: int = PRECISION_DIGITS) -> Iterator[Context]:
    """Decimal context with an unbounded exponent range and at least ``digits`` of precision."""

    with localcontext() as ctx:
        ctx.prec = max(PRECISION_DIGITS, digits)
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        yield ctx


@dataclass(frozen=True, slots=True)
class Precision:
    """Immutable decimal magnitude; every operation returns a new instance."""

    value: Decimal

    @classmethod
    def from_value(cls, value: float | int | str | Decimal | "Precision") -> "Precision":
        return cls(_coerce_decimal(value))

    def multiply(self, other: float | int | Decimal | "Precision") -> "Precision":
        operand = _coerce_decimal(other)
        with wide_context():
            return Precision(self.value * operand)

    def divide(self, other: float | int | Decimal | "Precision") -> "Precision":
        divisor = _coerce_decimal(other)
        if divisor.is_zero():
            raise DivisionByZeroError("Cannot divide by a zero magnitude.")
        with wide_context():
            return Precision(self.value / divisor)

    def to_decimal(self) -> Decimal:
        return self.value

    def to_number(self) -> float:
        """Project to ``float``; raises when the projection would saturate."""

        number = float(self.value)
        if math.isinf(number):
            raise InvalidMagnitudeError(f"{self.value} exceeds the float range.")
        if number == 0.0 and not self.value.is_zero():
            raise InvalidMagnitudeError(f"{self.value} underflows the float range.")
        return number

    def __str__(self) -> str:
        return str(self.value)


__all__ = ["Precision", "PRECISION_DIGITS", "wide_context"]
