# godel_t/arith.py
"""
Arithmetic on numerals, each function a single application of Rec.

    add(x, y)       Rec y  x  (z, w) -> S w
    multiply(x, y)  Rec y  0  (z, w) -> add(x, w)
    exp(x, y)       Rec y  1  (z, w) -> multiply(x, w)
    double(x)       Rec x  0  (z, w) -> S (S w)
    pred(x)         Rec x  0  (z, w) -> z
    subtract(x, y)  Rec y  x  (z, w) -> pred(w)

subtract is truncated: it saturates at 0 instead of going negative.
remainder / divide / is_prime need the comparison predicates and live in
godel_t.division.
"""

from __future__ import annotations

from .core.numerals import Zero, Succ
from .core.recursor import Rec


def add(x: int, y: int) -> int:
    return Rec(y, x, lambda z, w: Succ(w))


def multiply(x: int, y: int) -> int:
    return Rec(y, Zero, lambda z, w: add(x, w))


def exp(x: int, y: int) -> int:
    """x to the power y; exp(0, 0) == 1."""
    return Rec(y, Succ(Zero), lambda z, w: multiply(x, w))


def double(x: int) -> int:
    return Rec(x, Zero, lambda z, w: Succ(Succ(w)))


def pred(x: int) -> int:
    """Predecessor; pred(0) == 0. The step keeps z and drops the accumulator."""
    return Rec(x, Zero, lambda z, w: z)


def subtract(x: int, y: int) -> int:
    """Truncated subtraction: y-fold pred of x."""
    return Rec(y, x, lambda z, w: pred(w))
