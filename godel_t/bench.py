# godel_t/bench.py
"""
Tiny timing helper for godel_t functions.

Everything here is unary-recursive, so timings climb steeply with the
size of the numerals; this makes the cost model easy to see:

    python -m godel_t.bench isPrime 13 --repeats 3
    python -m godel_t.bench remainder 40 7

Or from Python:

    from godel_t.bench import benchmark_call
    from godel_t import multiply

    stats = benchmark_call(multiply, (12, 12), repeats=20)
"""

from __future__ import annotations

import argparse
import sys
import time
from typing import Any, Callable, Dict, List, Optional, Sequence

from . import config
from .core.recursor import deep_recursion
from .registry import coerce_args, get_function


def benchmark_call(
    fn: Callable[..., Any],
    args: Sequence[Any] = (),
    repeats: int = 10,
) -> Dict[str, Any]:
    """
    Call fn(*args) `repeats` times and time each call.

    Returns a small stats dict:
        {
            "repeats": N,
            "result": <value of the last call>,
            "min_s": ...,
            "max_s": ...,
            "avg_s": ...,
            "total_s": ...,
        }
    """
    if repeats <= 0:
        raise ValueError("repeats must be > 0")

    times = []
    result = None

    for _ in range(repeats):
        t0 = time.perf_counter()
        result = fn(*args)
        t1 = time.perf_counter()
        times.append(t1 - t0)

    total = sum(times)
    return {
        "repeats": repeats,
        "result": result,
        "min_s": min(times),
        "max_s": max(times),
        "avg_s": total / repeats,
        "total_s": total,
    }


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Benchmark a godel_t function.")
    parser.add_argument("function", help="Function name, e.g. isPrime or multiply.")
    parser.add_argument("args", nargs="*", help="Arguments (numerals or true/false).")
    parser.add_argument(
        "--repeats",
        type=int,
        default=None,
        help="Number of timed calls (default: $GODEL_T_BENCH_REPEATS or 5).",
    )
    parser.add_argument(
        "--recursion-limit",
        type=int,
        default=None,
        help="Interpreter recursion limit (default: $GODEL_T_RECURSION_LIMIT or 10000).",
    )
    args = parser.parse_args(argv)

    spec = get_function(args.function)
    if spec is None:
        print(f"Invalid input: no function named {args.function!r}", file=sys.stderr)
        return 2

    try:
        call_args = coerce_args(spec, args.args)
        repeats = args.repeats if args.repeats is not None else config.bench_repeats()
        limit = config.resolve_recursion_limit(args.recursion_limit)
        with deep_recursion(limit):
            stats = benchmark_call(spec.fn, call_args, repeats=repeats)
    except (TypeError, ValueError) as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 2
    except RecursionError as e:
        print(f"Evaluation failed: RecursionError: {e}", file=sys.stderr)
        return 1

    print("=== godel_t benchmark ===")
    print(f"call:       {spec.name}({', '.join(str(a) for a in call_args)})")
    print(f"result:     {stats['result']}")
    print(f"repeats:    {stats['repeats']}")
    print(f"total:      {stats['total_s']:.6f} s")
    print(f"avg:        {stats['avg_s']:.6f} s")
    print(f"min:        {stats['min_s']:.6f} s")
    print(f"max:        {stats['max_s']:.6f} s")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
