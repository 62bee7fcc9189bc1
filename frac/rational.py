"""Exact rational numbers generic over an integer and a floating type."""
from __future__ import annotations

import logging
import math
import numbers
import operator
from fractions import Fraction
from typing import Any, ClassVar, Generic, Optional, Tuple, TypeVar

import numpy as np

from . import rounding
from .errors import ConversionDidNotConverge, DivideByZero, InvalidArgument

logger = logging.getLogger(__name__)

IntT = TypeVar("IntT")
FloatT = TypeVar("FloatT")

# Remainders at or below this are treated as zero by the continued fraction.
DEFAULT_TOLERANCE = 1e-9
DEFAULT_MAX_ITERATIONS = 64


def _ensure_int(value: Any, *, name: str) -> Any:
    """Return *value* unchanged when it represents an integer."""
    if isinstance(value, numbers.Integral):
        return value
    raise TypeError(f"{name} must be an integer, got {type(value)!r}")


class Rational(Generic[IntT, FloatT]):
    """Representation of a rational number with automatic simplification.

    The numerator carries the sign, the denominator is always positive and
    both are kept coprime after every constructing or mutating operation.
    ``int_type`` and ``float_type`` select the integer representation of the
    components and the type returned by :meth:`evaluate`; use
    :meth:`specialize` to bind them to fixed-width NumPy scalars.
    """

    __slots__ = ("_numerator", "_denominator")
    __array_priority__ = 1000.0  # Prefer Rational semantics in NumPy expressions.

    int_type: ClassVar[type] = int
    float_type: ClassVar[type] = float
    tolerance: ClassVar[float] = DEFAULT_TOLERANCE
    max_iterations: ClassVar[int] = DEFAULT_MAX_ITERATIONS

    def __init__(self, numerator: Any = 0, denominator: Any = None) -> None:
        if denominator is not None:
            num = _ensure_int(numerator, name="numerator")
            den = _ensure_int(denominator, name="denominator")
            self._assign(self.int_type(num), self.int_type(den))
        elif isinstance(numerator, Rational):
            self._numerator = self.int_type(numerator._numerator)
            self._denominator = self.int_type(numerator._denominator)
        elif isinstance(numerator, numbers.Integral):
            self._assign(self.int_type(numerator), self.int_type(1))
        elif isinstance(numerator, numbers.Rational):  # fractions.Fraction
            self._assign(
                self.int_type(numerator.numerator),
                self.int_type(numerator.denominator),
            )
        elif isinstance(numerator, numbers.Real):
            self._numerator, self._denominator = self._continued_fraction(
                numerator, self.tolerance, self.max_iterations
            )
        else:
            raise TypeError(f"Cannot convert {type(numerator)!r} to {type(self).__name__}")

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def specialize(
        cls,
        int_type: type,
        float_type: type,
        *,
        name: Optional[str] = None,
        tolerance: Optional[float] = None,
        max_iterations: Optional[int] = None,
        doc: Optional[str] = None,
    ) -> type:
        """Return a subclass storing ``int_type`` components and evaluating to ``float_type``."""
        if name is None:
            name = f"{cls.__name__}_{int_type.__name__}_{float_type.__name__}"
        namespace = {
            "__slots__": (),
            "__module__": cls.__module__,
            "__qualname__": name,
            "int_type": int_type,
            "float_type": float_type,
        }
        if doc is not None:
            namespace["__doc__"] = doc
        if tolerance is not None:
            namespace["tolerance"] = tolerance
        if max_iterations is not None:
            if max_iterations < 1:
                raise ValueError("max_iterations must be >= 1")
            namespace["max_iterations"] = max_iterations
        return type(name, (cls,), namespace)

    @classmethod
    def from_int(cls, value: Any) -> "Rational[IntT, FloatT]":
        """Create ``value/1``."""
        return cls(_ensure_int(value, name="value"))

    @classmethod
    def from_float(
        cls,
        value: Any,
        *,
        tolerance: Optional[float] = None,
        max_iterations: Optional[int] = None,
    ) -> "Rational[IntT, FloatT]":
        """Return the continued-fraction approximation of *value*.

        The expansion stops at the first remainder not greater than
        ``tolerance``. If that does not happen within ``max_iterations``
        terms, :class:`~frac.errors.ConversionDidNotConverge` is raised.
        """
        if tolerance is None:
            tolerance = cls.tolerance
        if max_iterations is None:
            max_iterations = cls.max_iterations
        num, den = cls._continued_fraction(value, tolerance, max_iterations)
        return cls._from_parts(num, den)

    @classmethod
    def parse(cls, text: str) -> "Rational[IntT, FloatT]":
        """Parse ``"n"``, ``"n/d"`` or ``"n d"`` (see :func:`frac.text.parse_rational`)."""
        from .text import parse_rational

        return parse_rational(text, cls=cls)

    @classmethod
    def _from_parts(cls, num: Any, den: Any) -> "Rational[IntT, FloatT]":
        # Components must already be canonical.
        obj = cls.__new__(cls)
        obj._numerator = num
        obj._denominator = den
        return obj

    @classmethod
    def _continued_fraction(cls, value: Any, tolerance: float, max_iterations: int) -> Tuple[Any, Any]:
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise TypeError(f"Cannot convert {type(value)!r} to {cls.__name__}")
        remaining = cls.float_type(value)
        if not math.isfinite(remaining):
            raise InvalidArgument("cannot convert NaN or infinity to Rational")

        # Convergent windows: (two steps back, one step back).
        p_prev2, p_prev = cls.int_type(0), cls.int_type(1)
        q_prev2, q_prev = cls.int_type(1), cls.int_type(0)
        for count in range(1, max_iterations + 1):
            whole = math.floor(remaining)
            theta = remaining - cls.float_type(whole)
            term = cls.int_type(whole)
            p_prev2, p_prev = p_prev, term * p_prev + p_prev2
            q_prev2, q_prev = q_prev, term * q_prev + q_prev2
            if not theta > tolerance:
                break
            remaining = cls.float_type(1) / theta
        else:
            logger.warning(
                "Continued fraction of %r exceeded %d terms", value, max_iterations
            )
            raise ConversionDidNotConverge(value, max_iterations)

        num, den = p_prev, q_prev
        if den <= 0:
            num, den = -num, -den
        logger.debug("Continued fraction of %r: %s/%s after %d terms", value, num, den, count)
        return num, den

    # ------------------------------------------------------------------
    # Invariant maintenance
    def _assign(self, num: Any, den: Any) -> None:
        if den == 0:
            raise InvalidArgument("denominator must be non-zero")
        if den <= 0:
            num, den = -num, -den
        self._numerator = num
        self._denominator = den
        self._reduce()

    def _reduce(self) -> None:
        # gcd(0, d) == d, so zero is stored as 0/1.
        gcd = math.gcd(int(self._numerator), int(self._denominator))
        if gcd > 1:
            self._numerator = self.int_type(self._numerator // gcd)
            self._denominator = self.int_type(self._denominator // gcd)

    def _new(self, num: Any, den: Any) -> "Rational[IntT, FloatT]":
        return type(self)(num, den)

    # ------------------------------------------------------------------
    # Properties and helpers
    @property
    def numerator(self) -> IntT:
        return self._numerator

    @property
    def denominator(self) -> IntT:
        return self._denominator

    def evaluate(self) -> FloatT:
        """Return ``numerator / denominator`` as ``float_type``."""
        return self.float_type(self._numerator) / self.float_type(self._denominator)

    def as_fraction(self) -> Fraction:
        """Return a :class:`Fraction` with the same value."""
        return Fraction(int(self._numerator), int(self._denominator))

    def as_integer_ratio(self) -> Tuple[int, int]:
        return int(self._numerator), int(self._denominator)

    def copy(self) -> "Rational[IntT, FloatT]":
        return self._from_parts(self._numerator, self._denominator)

    # ------------------------------------------------------------------
    # Numeric protocol
    def __float__(self) -> float:
        return float(self.evaluate())

    def __int__(self) -> int:
        num, den = self.as_integer_ratio()
        quotient = abs(num) // den
        return quotient if num >= 0 else -quotient

    def __bool__(self) -> bool:
        return bool(self._numerator != 0)

    def __floor__(self) -> IntT:
        return rounding.floor(self)

    def __ceil__(self) -> IntT:
        return rounding.ceil(self)

    def __round__(self, ndigits: Optional[int] = None) -> IntT:
        if ndigits is not None:
            raise TypeError("Rational only supports rounding to an integer")
        return rounding.round_nearest(self)

    # ------------------------------------------------------------------
    # Representation
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._numerator}, {self._denominator})"

    def __str__(self) -> str:
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    def __format__(self, format_spec: str) -> str:
        if format_spec in ("", "r", "R"):
            return str(self)
        return format(float(self), format_spec)

    # ------------------------------------------------------------------
    # Internal helpers
    def _operand(self, other: Any) -> Optional[Tuple[Any, Any]]:
        """Return ``(numerator, denominator)`` of *other*; the denominator is ``None`` for integers."""
        if isinstance(other, Rational):
            return self.int_type(other._numerator), self.int_type(other._denominator)
        if isinstance(other, numbers.Integral):
            return self.int_type(other), None
        return None

    def _combine(self, operand: Tuple[Any, Any], op) -> Tuple[Any, Any]:
        num, den = operand
        if den is None:
            return op(self._numerator, num * self._denominator), self._denominator
        if den == self._denominator:
            return op(self._numerator, num), self._denominator
        return (
            op(self._numerator * den, num * self._denominator),
            self._denominator * den,
        )

    def _product(self, operand: Tuple[Any, Any]) -> Tuple[Any, Any]:
        num, den = operand
        if den is None:
            return self._numerator * num, self._denominator
        return self._numerator * num, self._denominator * den

    def _quotient(self, operand: Tuple[Any, Any]) -> Tuple[Any, Any]:
        num, den = operand
        if num == 0:
            raise DivideByZero("division by zero")
        if den is None:
            return self._numerator, self._denominator * num
        # Multiply by the reciprocal; the pair constructor restores the sign.
        return self._numerator * den, self._denominator * num

    # ------------------------------------------------------------------
    # Arithmetic operators
    def __add__(self, other: Any) -> Any:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self._new(*self._combine(operand, operator.add))

    def __radd__(self, other: Any) -> Any:
        return self.__add__(other)

    def __iadd__(self, other: Any) -> Any:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        self._assign(*self._combine(operand, operator.add))
        return self

    def __sub__(self, other: Any) -> Any:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self._new(*self._combine(operand, operator.sub))

    def __rsub__(self, other: Any) -> Any:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        num, _ = operand
        return self._new(num * self._denominator - self._numerator, self._denominator)

    def __isub__(self, other: Any) -> Any:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        self._assign(*self._combine(operand, operator.sub))
        return self

    def __mul__(self, other: Any) -> Any:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self._new(*self._product(operand))

    def __rmul__(self, other: Any) -> Any:
        return self.__mul__(other)

    def __imul__(self, other: Any) -> Any:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        self._assign(*self._product(operand))
        return self

    def __truediv__(self, other: Any) -> Any:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self._new(*self._quotient(operand))

    def __rtruediv__(self, other: Any) -> Any:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        if self._numerator == 0:
            raise DivideByZero("division by zero")
        num, _ = operand
        return self._new(num * self._denominator, self._numerator)

    def __itruediv__(self, other: Any) -> Any:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        self._assign(*self._quotient(operand))
        return self

    def __neg__(self) -> "Rational[IntT, FloatT]":
        return self._new(-self._numerator, self._denominator)

    def __pos__(self) -> "Rational[IntT, FloatT]":
        return self.copy()

    def __abs__(self) -> "Rational[IntT, FloatT]":
        return self._new(abs(self._numerator), self._denominator)

    # ------------------------------------------------------------------
    # Comparisons
    def __eq__(self, other: Any) -> bool:
        if isinstance(other, numbers.Integral):
            other = type(self)(other)
        elif not isinstance(other, Rational):
            return NotImplemented
        return bool(
            self._numerator == other._numerator
            and self._denominator == other._denominator
        )

    def __gt__(self, other: Any) -> bool:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        num, den = operand
        if den is None:
            den = self.int_type(1)
        if den == self._denominator:
            return bool(self._numerator > num)
        # Both denominators are positive, so cross-multiplying keeps the order.
        return bool(self._numerator * den > num * self._denominator)

    def __ge__(self, other: Any) -> bool:
        greater = self.__gt__(other)
        if greater is NotImplemented:
            return NotImplemented
        return greater or self == other

    def __lt__(self, other: Any) -> bool:
        greater_or_equal = self.__ge__(other)
        if greater_or_equal is NotImplemented:
            return NotImplemented
        return not greater_or_equal

    def __le__(self, other: Any) -> bool:
        greater = self.__gt__(other)
        if greater is NotImplemented:
            return NotImplemented
        return not greater

    # Instances mutate through the compound operators.
    __hash__ = None  # type: ignore[assignment]

    # ------------------------------------------------------------------
    # NumPy interoperability
    _UFUNC_DISPATCH = {
        np.add: operator.add,
        np.subtract: operator.sub,
        np.multiply: operator.mul,
        np.divide: operator.truediv,
        np.true_divide: operator.truediv,
        np.negative: operator.neg,
        np.positive: operator.pos,
        np.absolute: abs,
        np.equal: operator.eq,
        np.not_equal: operator.ne,
        np.greater: operator.gt,
        np.greater_equal: operator.ge,
        np.less: operator.lt,
        np.less_equal: operator.le,
    }
    _UFUNC_COMPARISONS = frozenset(
        (np.equal, np.not_equal, np.greater, np.greater_equal, np.less, np.less_equal)
    )

    def __array_ufunc__(self, ufunc, method, *inputs, **kwargs):
        if method != "__call__":
            return NotImplemented
        if kwargs.get("out") is not None:
            raise NotImplementedError("`out` argument is not supported for Rational ufuncs")
        op = self._UFUNC_DISPATCH.get(ufunc)
        if op is None:
            return NotImplemented

        cls = type(self)
        coerced = []
        has_array = False
        for value in inputs:
            if isinstance(value, Rational):
                coerced.append(value)
            elif isinstance(value, np.ndarray):
                coerced.append(np.vectorize(cls, otypes=[object])(value))
                has_array = True
            else:
                coerced.append(cls(value))
        if has_array:
            otype = bool if ufunc in self._UFUNC_COMPARISONS else object
            vectorised = np.vectorize(lambda *args: op(*args), otypes=[otype])
            return vectorised(*coerced)
        return op(*coerced)


Rational32f = Rational.specialize(
    np.int32,
    np.float32,
    name="Rational32f",
    doc="""Rational with ``numpy.int32`` components evaluating to ``numpy.float32``.

    Converting an inexact ``float32`` (e.g. ``0.3``) keeps expanding on
    rounding noise that never drops below the absolute tolerance, so the
    ``int32`` convergents wrap around and the result can be a wrong value,
    not just a large one. NumPy only emits an overflow ``RuntimeWarning``.
    Specialise with a coarser ``tolerance`` (around ``1e-4``) or use
    ``Rational64f`` for such inputs.
    """,
)
Rational32d = Rational.specialize(np.int32, np.float64, name="Rational32d")
Rational64f = Rational.specialize(np.int64, np.float32, name="Rational64f")
Rational64d = Rational.specialize(np.int64, np.float64, name="Rational64d")


__all__ = [
    "Rational",
    "Rational32f",
    "Rational32d",
    "Rational64f",
    "Rational64d",
    "DEFAULT_TOLERANCE",
    "DEFAULT_MAX_ITERATIONS",
]
