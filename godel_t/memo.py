# godel_t/memo.py
"""
Optional memoizing wrapper.

Nothing in godel_t uses this: the recomputation cost of the core is part
of its behaviour. It exists for callers who want to trade memory for
speed on their own functions, e.g.

    from godel_t.memo import memoized
    from godel_t import remainder

    fast_rem = memoized(remainder)
    fast_rem(10, 6)
    fast_rem.cache_info()

Each call to memoized() creates a fresh, private cache. There is no
module-level cache.
"""

from __future__ import annotations

import functools
from typing import Callable, Optional


def memoized(fn: Callable, maxsize: Optional[int] = None):
    """
    Wrap fn with its own cache.

    The wrapper exposes cache_info() and cache_clear(). Arguments must be
    hashable (numerals and booleans are).
    """
    if not callable(fn):
        raise TypeError(f"memoized expects a callable, got {type(fn).__name__}")
    if maxsize is not None and maxsize <= 0:
        raise ValueError("maxsize must be > 0 or None")
    return functools.lru_cache(maxsize=maxsize)(fn)
