"""
Pytest configuration for godel_t tests.

Provides:
- Hypothesis profiles (select with HYPOTHESIS_PROFILE=default|ci)
- REPO_ROOT for tests that shell out to the CLIs or read docs/schemas

Every function under test is unary-recursive, so property tests draw
small numerals; the strategies below keep that in one place.
"""

import os
from pathlib import Path

import pytest
from hypothesis import HealthCheck, settings, strategies as st

REPO_ROOT = Path(__file__).resolve().parents[1]

# =============================================================================
# Hypothesis Configuration
# =============================================================================

settings.register_profile(
    "default",
    max_examples=60,
    deadline=None,  # timings grow fast with the numerals; no per-example deadline
    print_blob=True,
)

settings.register_profile(
    "ci",
    max_examples=200,
    deadline=None,
    print_blob=True,
    derandomize=True,
    suppress_health_check=[HealthCheck.too_slow],
)

settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))


# =============================================================================
# Shared strategies
# =============================================================================

def small_nats(max_value: int = 12):
    return st.integers(min_value=0, max_value=max_value)


@pytest.fixture
def repo_root() -> Path:
    return REPO_ROOT
