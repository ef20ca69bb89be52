# tests/test_numerals.py
"""
Numeral constructors and boundary helpers.

- Zero / Succ sanity
- nat() coercion and its errors
- to_unary / from_unary
"""

import pytest

from godel_t import Zero, Succ, nat, to_unary, from_unary


def test_zero_and_succ() -> None:
    assert Zero == 0
    assert Succ(Zero) == 1
    assert Succ(Succ(Succ(Zero))) == 3


@pytest.mark.parametrize("raw, expected", [
    (0, 0),
    (7, 7),
    ("12", 12),
    (" 3 ", 3),
])
def test_nat_accepts_naturals(raw, expected) -> None:
    assert nat(raw) == expected


@pytest.mark.parametrize("raw", [-1, "-4", "abc", "1.5", "", "\u0663", "\uff17", "+3"])
def test_nat_rejects_bad_values(raw) -> None:
    with pytest.raises(ValueError):
        nat(raw)


@pytest.mark.parametrize("raw", [True, False, 1.0, None, [1]])
def test_nat_rejects_bad_types(raw) -> None:
    with pytest.raises(TypeError):
        nat(raw)


def test_to_unary() -> None:
    assert to_unary(0) == "Z"
    assert to_unary(1) == "S(Z)"
    assert to_unary(3) == "S(S(S(Z)))"


def test_to_unary_negative_raises() -> None:
    with pytest.raises(ValueError):
        to_unary(-1)


@pytest.mark.parametrize("n", [0, 1, 2, 9])
def test_from_unary_reads_back(n: int) -> None:
    assert from_unary(to_unary(n)) == n


@pytest.mark.parametrize("text", ["", "S(", "S(Z", "Z)", "S(S(Z)", "S(X)", "SZ"])
def test_from_unary_rejects_malformed(text: str) -> None:
    with pytest.raises(ValueError):
        from_unary(text)
