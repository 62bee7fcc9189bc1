"""Exact rational numbers over a chosen integer and floating type."""

import logging

from .arrays import as_rational_array, evaluate_array, zeros, zeros_like
from .errors import ConversionDidNotConverge, DivideByZero, InvalidArgument, RationalError
from .rational import (
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_TOLERANCE,
    Rational,
    Rational32d,
    Rational32f,
    Rational64d,
    Rational64f,
)
from .rounding import ceil, floor, round_nearest
from .text import parse_rational, read_rational

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Rational",
    "Rational32f",
    "Rational32d",
    "Rational64f",
    "Rational64d",
    "DEFAULT_TOLERANCE",
    "DEFAULT_MAX_ITERATIONS",
    "RationalError",
    "InvalidArgument",
    "DivideByZero",
    "ConversionDidNotConverge",
    "floor",
    "ceil",
    "round_nearest",
    "parse_rational",
    "read_rational",
    "as_rational_array",
    "zeros",
    "zeros_like",
    "evaluate_array",
]
