# godel_t/config.py
"""
Environment configuration for the godel_t command-line tools.

Variables are read when asked for, never at import time, so tests can
set them with monkeypatch:

    GODEL_T_RECURSION_LIMIT   recursion limit applied by the CLIs (default 10000)
    GODEL_T_BENCH_REPEATS     default repeat count for the bench tool (default 5)

Command-line flags take precedence over these.
"""

from __future__ import annotations

import os
from typing import Optional

RECURSION_LIMIT_ENV = "GODEL_T_RECURSION_LIMIT"
BENCH_REPEATS_ENV = "GODEL_T_BENCH_REPEATS"

DEFAULT_RECURSION_LIMIT = 10000
DEFAULT_BENCH_REPEATS = 5


def _env_positive_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e
    if value <= 0:
        raise ValueError(f"{name} must be > 0, got {value}")
    return value


def recursion_limit() -> int:
    return _env_positive_int(RECURSION_LIMIT_ENV, DEFAULT_RECURSION_LIMIT)


def bench_repeats() -> int:
    return _env_positive_int(BENCH_REPEATS_ENV, DEFAULT_BENCH_REPEATS)


def resolve_recursion_limit(override: Optional[int] = None) -> int:
    """
    The limit a CLI should apply: its --recursion-limit flag if given,
    otherwise the environment.

    Raises ValueError for a limit <= 0, from either source.
    """
    limit = override if override is not None else recursion_limit()
    if limit <= 0:
        raise ValueError(f"recursion limit must be > 0, got {limit}")
    return limit
