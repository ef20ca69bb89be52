# tests/test_memo.py

import pytest

from godel_t import remainder, multiply
from godel_t.memo import memoized


def test_memoized_matches_unwrapped() -> None:
    fast = memoized(remainder)
    for x, y in [(10, 6), (5, 2), (1, 2), (10, 6)]:
        assert fast(x, y) == remainder(x, y)


def test_memoized_counts_hits() -> None:
    fast = memoized(multiply)
    fast(3, 4)
    fast(3, 4)
    fast(4, 3)
    info = fast.cache_info()
    assert info.hits == 1
    assert info.misses == 2


def test_each_wrapper_has_its_own_cache() -> None:
    a = memoized(multiply)
    b = memoized(multiply)
    a(2, 2)
    assert a.cache_info().currsize == 1
    assert b.cache_info().currsize == 0


def test_cache_clear() -> None:
    fast = memoized(multiply)
    fast(2, 5)
    fast.cache_clear()
    assert fast.cache_info().currsize == 0


def test_core_functions_are_not_cached() -> None:
    assert not hasattr(remainder, "cache_info")
    assert not hasattr(multiply, "cache_info")


def test_memoized_rejects_bad_arguments() -> None:
    with pytest.raises(TypeError):
        memoized(42)  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        memoized(multiply, maxsize=0)
