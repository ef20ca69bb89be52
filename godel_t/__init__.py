# godel_t/__init__.py
"""
godel_t public API surface: Gödel's System T over Python ints.

Everything is derived from one structural recursion primitive:

    - Numerals: Zero, Succ
    - Recursor: Rec, Cases
    - Arithmetic: add, multiply, exp, double, pred, subtract
    - Division: remainder, divide, is_prime
    - Booleans: not_, and_, or_, xor
    - Predicates: is_zero, eq, gt, lt, gte, lte
    - Functions as values: compose, iterate, ackermann

Boundary helpers (nat, to_unary, from_unary), the opt-in loop recursor
(rec_iterative) and deep_recursion() are re-exported from godel_t.core.
The name-based table used by the CLI lives in godel_t.registry.
"""

from __future__ import annotations

from .core.numerals import Zero, Succ, nat, to_unary, from_unary
from .core.recursor import Rec, Cases, rec_iterative, deep_recursion

from .arith import add, multiply, exp, double, pred, subtract
from .logic import not_, and_, or_, xor, is_zero, eq, gt, lt, gte, lte
from .division import remainder, divide, is_prime
from .higher import identity, compose, iterate, ackermann


__version__ = "0.1.0"

__all__ = [
    # numerals
    "Zero",
    "Succ",
    "nat",
    "to_unary",
    "from_unary",

    # recursor
    "Rec",
    "Cases",
    "rec_iterative",
    "deep_recursion",

    # arithmetic
    "add",
    "multiply",
    "exp",
    "double",
    "pred",
    "subtract",

    # division
    "remainder",
    "divide",
    "is_prime",

    # booleans
    "not_",
    "and_",
    "or_",
    "xor",

    # predicates
    "is_zero",
    "eq",
    "gt",
    "lt",
    "gte",
    "lte",

    # functions as values
    "identity",
    "compose",
    "iterate",
    "ackermann",
]
