"""Exceptions raised by the :mod:`frac` package."""
from __future__ import annotations


class RationalError(ArithmeticError):
    """Base class for all errors raised by :class:`frac.Rational`."""


class InvalidArgument(RationalError, ValueError):
    """A constructor received a value it cannot represent (e.g. a zero denominator)."""


class DivideByZero(RationalError, ZeroDivisionError):
    """Division by a zero integer or by a Rational with a zero numerator."""


class ConversionDidNotConverge(RationalError):
    """The continued-fraction expansion of a float exceeded its iteration budget."""

    def __init__(self, value, iterations: int) -> None:
        super().__init__(
            f"continued fraction of {value!r} did not converge "
            f"within {iterations} iterations"
        )
        self.value = value
        self.iterations = iterations


__all__ = [
    "RationalError",
    "InvalidArgument",
    "DivideByZero",
    "ConversionDidNotConverge",
]
