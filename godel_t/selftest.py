# godel_t/selftest.py
"""
Conformance oracle: a fixed list of calls and their expected results.

Every case is evaluated through the function registry and compared with
strict equality; True is never accepted where 1 is expected, or the other
way round.

Usage:

    python -m godel_t.selftest
    python -m godel_t.selftest --only divide
    python -m godel_t.selftest --json

Exit status is 0 when every selected case passes and 1 otherwise.
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Tuple

from . import config
from .core.recursor import deep_recursion
from .registry import call_function, has_function

Case = Tuple[str, Tuple[Any, ...], Any]

CASES: Tuple[Case, ...] = (
    ("add", (1, 2), 3),
    ("add", (4, 2), 6),
    ("add", (0, 0), 0),

    ("multiply", (1, 1), 1),
    ("multiply", (0, 3), 0),
    ("multiply", (3, 2), 6),

    ("exp", (2, 3), 8),
    ("exp", (1, 3), 1),
    ("exp", (3, 2), 9),

    ("double", (2,), 4),
    ("double", (1,), 2),
    ("double", (3,), 6),

    ("pred", (2,), 1),
    ("pred", (20,), 19),
    ("pred", (0,), 0),

    ("subtract", (10, 1), 9),
    ("subtract", (4, 4), 0),
    ("subtract", (2, 3), 0),

    ("isZero", (0,), True),
    ("isZero", (9,), False),
    ("isZero", (1,), False),

    ("remainder", (4, 2), 0),
    ("remainder", (5, 2), 1),
    ("remainder", (10, 6), 4),
    ("remainder", (1, 2), 0),

    ("divide", (2, 2), 1),
    ("divide", (4, 2), 2),
    ("divide", (6, 2), 3),
    ("divide", (12, 3), 4),
    ("divide", (11, 11), 1),
    ("divide", (10, 5), 2),
    ("divide", (99, 11), 9),
    ("divide", (99, 100), 0),

    ("isPrime", (13,), True),
    ("isPrime", (12,), False),
    ("isPrime", (1,), True),
    ("isPrime", (2,), True),
    ("isPrime", (3,), True),
    ("isPrime", (5,), True),
    ("isPrime", (9,), False),
    ("isPrime", (127,), True),

    ("not", (True,), False),
    ("not", (False,), True),

    ("and", (True, True), True),
    ("and", (True, False), False),
    ("and", (False, True), False),
    ("and", (False, False), False),

    ("or", (True, True), True),
    ("or", (True, False), True),
    ("or", (False, True), True),
    ("or", (False, False), False),

    ("xor", (True, True), False),
    ("xor", (True, False), True),
    ("xor", (False, True), True),
    ("xor", (False, False), False),

    ("eq", (1, 2), False),
    ("eq", (1, 1), True),
    ("eq", (0, 0), True),

    ("gt", (1, 2), False),
    ("gt", (1, 1), False),
    ("gt", (5, 2), True),

    ("lt", (1, 2), True),
    ("lt", (1, 1), False),
    ("lt", (5, 2), False),

    ("gte", (1, 2), False),
    ("gte", (1, 1), True),
    ("gte", (5, 2), True),

    ("lte", (1, 2), True),
    ("lte", (1, 1), True),
    ("lte", (5, 2), False),

    ("ackermann", (1, 1), 3),
    ("ackermann", (0, 2), 3),
    ("ackermann", (1, 0), 2),
    ("ackermann", (0, 1), 2),
)


@dataclass(frozen=True)
class CaseResult:
    name: str
    args: Tuple[Any, ...]
    expected: Any
    actual: Any = None
    ok: bool = False
    error: Optional[str] = None

    def describe(self) -> str:
        call = f"{self.name}({', '.join(repr(a) for a in self.args)})"
        if self.error is not None:
            return f"{call} raised {self.error}; expected {self.expected!r}"
        return f"{call} == {self.actual!r}; expected {self.expected!r}"

    def to_json(self) -> dict[str, Any]:
        return {
            "function": self.name,
            "args": list(self.args),
            "expected": self.expected,
            "actual": self.actual,
            "ok": self.ok,
            "error": self.error,
        }


def strictly_equal(actual: Any, expected: Any) -> bool:
    """== plus an exact type match, so bools and ints never stand in for each other."""
    return type(actual) is type(expected) and actual == expected


def run_case(case: Case) -> CaseResult:
    name, args, expected = case
    try:
        actual = call_function(name, args)
    except Exception as e:
        return CaseResult(name, args, expected, error=f"{type(e).__name__}: {e}")
    return CaseResult(name, args, expected, actual, strictly_equal(actual, expected))


def run_self_test(cases: Iterable[Case] = CASES) -> List[CaseResult]:
    """Evaluate every case in order and return one result per case."""
    return [run_case(case) for case in cases]


def select_cases(only: Optional[str] = None) -> Tuple[Case, ...]:
    if only is None:
        return CASES
    if not has_function(only):
        raise KeyError(f"No function named {only!r}")
    return tuple(c for c in CASES if c[0] == only)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Run the godel_t conformance cases.")
    ap.add_argument("--only", default=None, help="Run only the cases for one function name.")
    ap.add_argument("--json", action="store_true", help="Emit a JSON report instead of text.")
    ap.add_argument(
        "--recursion-limit",
        type=int,
        default=None,
        help="Interpreter recursion limit (default: $GODEL_T_RECURSION_LIMIT or 10000).",
    )
    args = ap.parse_args(argv)

    try:
        cases = select_cases(args.only)
        limit = config.resolve_recursion_limit(args.recursion_limit)
        with deep_recursion(limit):
            results = run_self_test(cases)
    except (KeyError, ValueError) as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 2

    failures = [r for r in results if not r.ok]

    if args.json:
        payload = {
            "total": len(results),
            "passed": len(results) - len(failures),
            "failed": len(failures),
            "results": [r.to_json() for r in results],
        }
        print(json.dumps(payload, ensure_ascii=False))
    else:
        for r in failures:
            print(f"FAIL {r.describe()}", file=sys.stderr)
        print(f"{len(results) - len(failures)}/{len(results)} cases passed")

    return 0 if not failures else 1


if __name__ == "__main__":
    raise SystemExit(main())
