# tests/test_config.py

import pytest

from godel_t import config


def test_defaults(monkeypatch) -> None:
    monkeypatch.delenv(config.RECURSION_LIMIT_ENV, raising=False)
    monkeypatch.delenv(config.BENCH_REPEATS_ENV, raising=False)
    assert config.recursion_limit() == config.DEFAULT_RECURSION_LIMIT
    assert config.bench_repeats() == config.DEFAULT_BENCH_REPEATS


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv(config.RECURSION_LIMIT_ENV, "25000")
    monkeypatch.setenv(config.BENCH_REPEATS_ENV, " 7 ")
    assert config.recursion_limit() == 25000
    assert config.bench_repeats() == 7


def test_blank_value_falls_back_to_default(monkeypatch) -> None:
    monkeypatch.setenv(config.RECURSION_LIMIT_ENV, "")
    assert config.recursion_limit() == config.DEFAULT_RECURSION_LIMIT


@pytest.mark.parametrize("raw", ["abc", "0", "-5", "1.5"])
def test_invalid_values_name_the_variable(monkeypatch, raw) -> None:
    monkeypatch.setenv(config.RECURSION_LIMIT_ENV, raw)
    with pytest.raises(ValueError) as e:
        config.recursion_limit()
    assert config.RECURSION_LIMIT_ENV in str(e.value)


def test_resolve_recursion_limit_prefers_override(monkeypatch) -> None:
    monkeypatch.setenv(config.RECURSION_LIMIT_ENV, "25000")
    assert config.resolve_recursion_limit(3000) == 3000
    assert config.resolve_recursion_limit(None) == 25000


@pytest.mark.parametrize("override", [0, -5])
def test_resolve_recursion_limit_rejects_non_positive(override) -> None:
    with pytest.raises(ValueError):
        config.resolve_recursion_limit(override)
