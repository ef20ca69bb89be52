# godel_t/core/recursor.py
"""
The recursor and the case combinator.

Reductions:

    Rec 0  s t = s
    Rec Sn s t = t n (Rec n s t)

Every other function in godel_t bottoms out here; Rec is the only source
of looping behaviour in the library.

Stack depth grows linearly with the numeral being recursed over (and
nested recursions stack on top of each other). Large inputs can exhaust
the interpreter's recursion limit and raise RecursionError. Callers that
need more headroom use deep_recursion(); callers that want a loop can opt
into rec_iterative(), which honours the same contract.
"""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Callable, Iterator, TypeVar

from .numerals import Zero

T = TypeVar("T")

Step = Callable[[int, T], T]


def Rec(n: int, base: T, step: Step) -> T:
    """
    Primitive recursion on n.

    Precondition: n >= 0. No memoization; every call recomputes from
    scratch.
    """
    if n == Zero:
        return base
    return step(n - 1, Rec(n - 1, base, step))


def Cases(cond: bool, then_value: T, else_value: T) -> T:
    """
    Select then_value if cond else else_value.

    Both branches arrive already evaluated (Python evaluates call
    arguments eagerly); Cases only picks one.
    """
    return then_value if cond else else_value


def rec_iterative(n: int, base: T, step: Step) -> T:
    """
    Loop form of Rec with the same contract.

    Applies step bottom-up: step(0, base), step(1, ...), ..., step(n-1, ...).
    Opt-in only; the library itself always goes through Rec.
    """
    acc = base
    for z in range(n):
        acc = step(z, acc)
    return acc


@contextmanager
def deep_recursion(limit: int) -> Iterator[int]:
    """
    Temporarily raise the interpreter recursion limit to at least `limit`.

    The limit is never lowered. The previous value is restored on exit.
    Yields the limit in effect inside the block.
    """
    if limit <= 0:
        raise ValueError("recursion limit must be > 0")

    previous = sys.getrecursionlimit()
    effective = max(previous, limit)
    sys.setrecursionlimit(effective)
    try:
        yield effective
    finally:
        sys.setrecursionlimit(previous)
