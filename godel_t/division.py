# godel_t/division.py
"""
remainder, divide and is_prime.

These are the expensive corners of the library. Each one recurses over x
and, inside every step, re-runs comparisons that are themselves nested
recursions. Nothing is cached: is_prime(x) recomputes remainder(x, z) for
every z below x, roughly O(x^2) remainder-steps on top of the comparison
cost. That cost model is intentional.

Both branches of every Cases are evaluated before the selection, so the
recursive branch is computed even when the x < y short-cut wins.

Literal consequences of the definitions (kept, not patched):

    remainder(x, y) == 0       when x < y
    remainder(x, 0) == 0
    divide(x, 0)    == x + 1   for x > 0
    divide(x, 1)    == x + 1   for x > 0
    is_prime(1)     is True
"""

from __future__ import annotations

from .arith import pred
from .core.numerals import Zero, Succ
from .core.recursor import Cases, Rec
from .logic import eq, is_zero, lt


def remainder(x: int, y: int) -> int:
    """
    Count up modulo y while recursing over x.

    The accumulator wraps back to 0 whenever it reaches pred(y).
    """
    return Cases(
        lt(x, y),
        Zero,
        Rec(
            x,
            Zero,
            lambda z, w: Cases(eq(pred(y), w), Zero, Succ(w)),
        ),
    )


def divide(x: int, y: int) -> int:
    """
    Integer division, counting the z < x whose remainder by y is pred(y).

    Starts from 1 because the first full block of y is never seen by the
    step (remainder(z, y) is 0 for every z < y).
    """
    return Cases(
        lt(x, y),
        Zero,
        Rec(
            x,
            Succ(Zero),
            lambda z, w: Cases(eq(pred(y), remainder(z, y)), Succ(w), w),
        ),
    )


def is_prime(x: int) -> bool:
    """
    True when exactly two z in [0, x) leave remainder(x, z) == 0.

    Those two are always 0 and 1 (remainder by 0 and by 1 are both 0), so
    any further divisor pushes the count past 2. x == 1 is special-cased
    to True.
    """
    return Cases(
        eq(x, Succ(Zero)),
        True,
        eq(
            Succ(Succ(Zero)),
            Rec(
                x,
                Zero,
                lambda z, w: Cases(is_zero(remainder(x, z)), Succ(w), w),
            ),
        ),
    )
