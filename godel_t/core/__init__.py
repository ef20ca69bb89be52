# godel_t/core/__init__.py
"""Numerals and the recursor: the two pieces everything else is built from."""

from .numerals import Zero, Succ, nat, to_unary, from_unary
from .recursor import Rec, Cases, rec_iterative, deep_recursion

__all__ = [
    "Zero",
    "Succ",
    "nat",
    "to_unary",
    "from_unary",
    "Rec",
    "Cases",
    "rec_iterative",
    "deep_recursion",
]
