# godel_t/logic.py
"""
Boolean connectives and numeric predicates.

The connectives are nested Cases on their first operand; no recursion is
needed. The predicates go through Rec (is_zero) or truncated subtraction.
Names that collide with Python keywords carry a trailing underscore.
"""

from __future__ import annotations

from .arith import subtract
from .core.recursor import Cases, Rec


# ---------------------------------------------------------------------------
# Connectives
# ---------------------------------------------------------------------------

def not_(x: bool) -> bool:
    return Cases(x, False, True)


def and_(x: bool, y: bool) -> bool:
    return Cases(x, y, False)


def or_(x: bool, y: bool) -> bool:
    return Cases(x, True, y)


def xor(x: bool, y: bool) -> bool:
    return Cases(x, not_(y), y)


# ---------------------------------------------------------------------------
# Numeric predicates
# ---------------------------------------------------------------------------

def is_zero(x: int) -> bool:
    """True at the base; any successor collapses to False."""
    return Rec(x, True, lambda z, w: False)


def eq(x: int, y: int) -> bool:
    """
    Equality from truncated subtraction in both directions.

    One direction alone is not enough: subtract(2, 5) is 0 as well.
    """
    return and_(is_zero(subtract(x, y)), is_zero(subtract(y, x)))


def gt(x: int, y: int) -> bool:
    return not_(is_zero(subtract(x, y)))


def lt(x: int, y: int) -> bool:
    return not_(is_zero(subtract(y, x)))


def gte(x: int, y: int) -> bool:
    return or_(eq(x, y), gt(x, y))


def lte(x: int, y: int) -> bool:
    return or_(eq(x, y), lt(x, y))
