"""Text parsing for :class:`frac.Rational` values.

Rendering lives on the type itself (``str(value)`` gives ``"n"`` or
``"n/d"``); the functions here are the inverse direction.
"""
from __future__ import annotations

import re
from typing import Optional, TextIO, Type

from .errors import InvalidArgument
from .rational import Rational

_LITERAL = re.compile(r"\s*([+-]?\d+)(?:(?:\s*/\s*|\s+)([+-]?\d+))?\s*")


def parse_rational(text: str, *, cls: Type[Rational] = Rational) -> Rational:
    """Build a ``cls`` instance from ``"n"``, ``"n/d"`` or ``"n d"``.

    Raises:
        InvalidArgument: *text* is not one of the accepted forms or the
            denominator is zero.
    """
    match = _LITERAL.fullmatch(text)
    if match is None:
        raise InvalidArgument(f"invalid rational literal: {text!r}")
    num, den = match.groups()
    return cls(int(num), int(den) if den is not None else 1)


def _read_token(stream: TextIO) -> Optional[str]:
    chars = []
    while True:
        char = stream.read(1)
        if not char:
            break
        if char.isspace():
            if chars:
                break
            continue
        chars.append(char)
    return "".join(chars) or None


def _read_int(stream: TextIO, name: str) -> int:
    token = _read_token(stream)
    if token is None:
        raise InvalidArgument(f"missing {name}: unexpected end of input")
    try:
        return int(token)
    except ValueError:
        raise InvalidArgument(f"{name} must be an integer, got {token!r}") from None


def read_rational(stream: TextIO, *, cls: Type[Rational] = Rational) -> Rational:
    """Read a numerator token then a denominator token from *stream*.

    Only the two tokens and the whitespace that terminates them are
    consumed, so several values can be read from the same stream.
    """
    num = _read_int(stream, "numerator")
    den = _read_int(stream, "denominator")
    return cls(num, den)


__all__ = ["parse_rational", "read_rational"]
