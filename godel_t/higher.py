# godel_t/higher.py
"""
Functions as values: composition, iteration and the Ackermann tower.

Unary numeric functions are plain callables. compose builds a new one and
leaves its inputs untouched; iterate and ackermann recurse with Rec over
*functions* rather than numbers.
"""

from __future__ import annotations

from typing import Callable

from .core.numerals import Zero, Succ
from .core.recursor import Rec

UnaryFn = Callable[[int], int]


def identity(x: int) -> int:
    return x


def compose(f: UnaryFn, g: UnaryFn) -> UnaryFn:
    """x -> f(g(x))"""
    return lambda x: f(g(x))


def iterate(f: UnaryFn, n: int) -> UnaryFn:
    """
    n-fold self-composition of f.

    iterate(f, 0) is the identity; iterate(f, 3) behaves like
    x -> f(f(f(x))).
    """
    return Rec(n, identity, lambda z, w: compose(f, w))


def ackermann(x: int) -> UnaryFn:
    """
    The unary function at level x of the tower.

        ackermann(0)     = Succ
        ackermann(m + 1) = iterate(ackermann(m), ackermann(m)(1))

    Agrees with the textbook A(m, n) for m <= 1. From m = 2 on, the
    iteration count is fixed at ackermann(m-1)(1) instead of depending on
    n, so ackermann(2)(n) == n + 6.
    """
    return Rec(x, Succ, lambda z, w: iterate(w, w(Succ(Zero))))
