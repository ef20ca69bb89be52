# godel_t/core/numerals.py
"""
Numeral model for the System T evaluator.

Natural numbers are carried by plain non-negative Python ints. Zero and
Succ are the only constructors the library uses; everything else is
built from them through the recursor.

The helpers below the constructors live at the boundary (CLI, registry,
self-test). The core never calls them, so the n >= 0 precondition stays
a documented precondition there rather than a guard.
"""

from __future__ import annotations

import re

Zero = 0


def Succ(x: int) -> int:
    """Successor of a numeral."""
    return x + 1


_UNARY_RE = re.compile(r"^(?:S\()*Z\)*$")
_DECIMAL_RE = re.compile(r"-?[0-9]+")


def nat(value) -> int:
    """
    Coerce a boundary value into a numeral.

    Accepts ints (but not bools) and decimal strings.

    Raises:
        ValueError  for negative numbers or non-numeric strings
        TypeError   for any other type
    """
    if isinstance(value, bool):
        # bool is an int subclass; a truth value is not a numeral.
        raise TypeError("expected natural number, got boolean")

    if isinstance(value, int):
        n = value
    elif isinstance(value, str):
        text = value.strip()
        if not _DECIMAL_RE.fullmatch(text):
            raise ValueError(f"expected natural number, got {value!r}")
        n = int(text)
    else:
        raise TypeError(f"expected natural number, got {type(value).__name__}")

    if n < 0:
        raise ValueError(f"natural numbers are non-negative, got {n}")
    return n


def to_unary(n: int) -> str:
    """Render n as S(S(...Z...))."""
    if n < 0:
        raise ValueError("to_unary only supports n>=0")
    return "S(" * n + "Z" + ")" * n


def from_unary(text: str) -> int:
    """
    Parse the S(...Z...) form back into an int.

    Raises ValueError if the text is not a balanced successor chain.
    """
    text = text.strip()
    if not _UNARY_RE.match(text):
        raise ValueError(f"not a unary numeral: {text!r}")

    n = text.count("S(")
    if text.count(")") != n:
        raise ValueError(f"unbalanced unary numeral: {text!r}")
    return n
