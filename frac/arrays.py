"""NumPy object-array helpers for :class:`frac.Rational`."""
from __future__ import annotations

from typing import Any, Type

import numpy as np

from .rational import Rational


def as_rational_array(
    values: Any,
    *,
    cls: Type[Rational] = Rational,
    copy: bool = True,
) -> np.ndarray:
    """Return a ``numpy.ndarray`` of ``cls`` values.

    ``values`` can be any iterable of integers, floats, fractions or
    Rationals, or an existing NumPy array of any shape. Floats go through
    the continued-fraction conversion of ``cls``. When ``copy`` is
    ``False`` and ``values`` is already an object array holding only
    ``cls`` instances, it is returned as is.
    """
    if isinstance(values, np.ndarray):
        array = values
    elif isinstance(values, (list, tuple)):
        array = np.array(values, dtype=object)
    else:
        array = np.array(list(values), dtype=object)

    if not copy and array.dtype == object and all(type(item) is cls for item in array.flat):
        return array
    return np.vectorize(cls, otypes=[object])(array)


def zeros(length: int, *, cls: Type[Rational] = Rational) -> np.ndarray:
    """Return a one-dimensional array of length ``length`` filled with zeros."""
    if length < 0:
        raise ValueError("length must be non-negative")
    array = np.empty(length, dtype=object)
    for index in range(length):
        array[index] = cls()
    return array


def zeros_like(values: Any, *, cls: Type[Rational] = Rational) -> np.ndarray:
    """Return a zero-filled array that matches the shape of ``values``."""
    shape = np.shape(values)
    array = np.empty(shape, dtype=object)
    for index in np.ndindex(shape):
        array[index] = cls()
    return array


def evaluate_array(values: Any, *, cls: Type[Rational] = Rational) -> np.ndarray:
    """Evaluate every element into an array of ``cls.float_type``."""
    array = as_rational_array(values, cls=cls, copy=False)
    result = np.empty(array.shape, dtype=cls.float_type)
    for index in np.ndindex(array.shape):
        result[index] = array[index].evaluate()
    return result


__all__ = ["as_rational_array", "zeros", "zeros_like", "evaluate_array"]
