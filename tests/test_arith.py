# tests/test_arith.py
"""
Arithmetic laws for add / multiply / exp / double / pred / subtract.

Numerals are kept small: every operation is unary-recursive.
"""

import pytest
from hypothesis import given

from godel_t import add, multiply, exp, double, pred, subtract

from conftest import small_nats


# ---------------------------------------------------------------------------
# Known values
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("fn, args, expected", [
    (add, (1, 2), 3),
    (add, (4, 2), 6),
    (add, (0, 0), 0),
    (multiply, (1, 1), 1),
    (multiply, (0, 3), 0),
    (multiply, (3, 2), 6),
    (exp, (2, 3), 8),
    (exp, (1, 3), 1),
    (exp, (3, 2), 9),
    (exp, (0, 0), 1),
    (double, (0,), 0),
    (double, (3,), 6),
    (pred, (0,), 0),
    (pred, (20,), 19),
    (subtract, (10, 1), 9),
    (subtract, (4, 4), 0),
    (subtract, (2, 3), 0),
])
def test_known_values(fn, args, expected) -> None:
    assert fn(*args) == expected


# ---------------------------------------------------------------------------
# Laws
# ---------------------------------------------------------------------------

@given(a=small_nats(30), b=small_nats(30))
def test_add_matches_int_addition_and_commutes(a: int, b: int) -> None:
    assert add(a, b) == a + b
    assert add(a, b) == add(b, a)


@given(a=small_nats(), b=small_nats(), c=small_nats())
def test_add_associative(a: int, b: int, c: int) -> None:
    assert add(add(a, b), c) == add(a, add(b, c))


@given(a=small_nats(), b=small_nats())
def test_multiply_matches_int_multiplication_and_commutes(a: int, b: int) -> None:
    assert multiply(a, b) == a * b
    assert multiply(a, b) == multiply(b, a)


@given(a=small_nats(6), b=small_nats(6), c=small_nats(6))
def test_multiply_associative(a: int, b: int, c: int) -> None:
    assert multiply(multiply(a, b), c) == multiply(a, multiply(b, c))


@given(x=small_nats(40))
def test_identity_elements(x: int) -> None:
    assert add(x, 0) == x
    assert multiply(x, 1) == x
    assert exp(x, 1) == x
    assert exp(x, 0) == 1


@given(x=small_nats(4), y=small_nats(4))
def test_exp_matches_int_power(x: int, y: int) -> None:
    assert exp(x, y) == x ** y


@given(x=small_nats(40))
def test_double_and_pred(x: int) -> None:
    assert double(x) == add(x, x)
    assert pred(x) == max(x - 1, 0)


@given(a=small_nats(25), b=small_nats(25))
def test_subtract_is_truncated(a: int, b: int) -> None:
    assert subtract(a, b) == max(a - b, 0)
    if a <= b:
        assert subtract(a, b) == 0


@given(a=small_nats(40))
def test_subtract_zero_is_identity(a: int) -> None:
    assert subtract(a, 0) == a


def test_results_are_plain_ints() -> None:
    for value in (add(2, 2), multiply(2, 3), pred(4), subtract(5, 1)):
        assert type(value) is int
