"""Integer rounding of :class:`frac.Rational` values.

All three functions work from :meth:`Rational.evaluate` and Rational
subtraction only, and return an instance of the value's ``int_type``.
"""
from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - import cycle at runtime
    from .rational import Rational

HALF = 0.5


def floor(value: "Rational") -> Any:
    """Return the largest integer not greater than *value*."""
    return value.int_type(math.floor(value.evaluate()))


def ceil(value: "Rational") -> Any:
    """Return the smallest integer not less than *value*."""
    return value.int_type(math.ceil(value.evaluate()))


def round_nearest(value: "Rational") -> Any:
    """Return the integer nearest to *value*; exact halves round up."""
    lower = floor(value)
    diff = value - lower
    if diff.evaluate() < HALF:
        return lower
    return ceil(value)


__all__ = ["floor", "ceil", "round_nearest"]
