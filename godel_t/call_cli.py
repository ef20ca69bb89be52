from __future__ import annotations

"""
godel_t call CLI

Calls one named function (see godel_t.registry) on command-line
arguments and emits a JSON report.

Contract: emits JSON with schema tag + schema_doc.
"""

import argparse
import datetime
import hashlib
import json
import sys
from typing import Any, List, Optional

from . import config
from .core.numerals import to_unary
from .core.recursor import deep_recursion
from .registry import NAT, coerce_args, get_function, list_function_names


SCHEMA_TAG = "godel-t-call.v1"
SCHEMA_DOC = "docs/schemas/call_schema.json"


def _utc_now_z() -> str:
    return datetime.datetime.now(datetime.timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")


def _inputs_hash(function: str, args: List[Any]) -> str:
    payload = json.dumps({"function": function, "args": args}, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def _render(result: Any, kind: str, unary: bool) -> Any:
    if unary and kind == NAT and result is not None:
        return to_unary(result)
    return result


def _emit(payload: dict[str, Any], pretty: bool) -> None:
    if pretty:
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print(json.dumps(payload, ensure_ascii=False))


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Call a godel_t function and emit JSON.")
    ap.add_argument("--schema", action="store_true", help="Print schema tag + schema doc path and exit.")
    ap.add_argument("--list", action="store_true", help="List known function names and exit.")
    ap.add_argument("--pretty", action="store_true", help="Pretty-print JSON output.")
    ap.add_argument("--unary", action="store_true", help="Render numeral results as S(...Z...).")
    ap.add_argument(
        "--recursion-limit",
        type=int,
        default=None,
        help="Interpreter recursion limit (default: $GODEL_T_RECURSION_LIMIT or 10000).",
    )
    ap.add_argument("function", nargs="?", help="Function name (e.g. add, isPrime, ackermann)")
    ap.add_argument("args", nargs="*", help="Arguments: numerals or true/false")

    args = ap.parse_args(argv)

    if args.schema:
        print(f"{SCHEMA_TAG} {SCHEMA_DOC}")
        return 0

    if args.list:
        for name in list_function_names():
            print(name)
        return 0

    if not args.function:
        ap.error("function is required unless --schema or --list is used")

    spec = get_function(args.function)
    if spec is None:
        print(f"Invalid input: no function named {args.function!r}", file=sys.stderr)
        return 2

    try:
        call_args = coerce_args(spec, args.args)
        limit = config.resolve_recursion_limit(args.recursion_limit)
    except (TypeError, ValueError) as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 2

    warnings: List[str] = []
    try:
        with deep_recursion(limit):
            result = spec.fn(*call_args)
        ok = True
    except RecursionError as e:
        ok = False
        result = None
        warnings.append(f"RecursionError: {e}")

    payload: dict[str, Any] = {
        "schema": SCHEMA_TAG,
        "schema_doc": SCHEMA_DOC,
        "function": spec.name,
        "args": call_args,
        "result": _render(result, spec.kind, args.unary),
        "ok": bool(ok),
        "warnings": warnings,
        "meta": {
            "tool": "call_cli",
            "generated_at": _utc_now_z(),
            "determinism": {
                "inputs_hash": _inputs_hash(spec.name, call_args),
            },
        },
    }

    _emit(payload, pretty=bool(args.pretty))
    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
