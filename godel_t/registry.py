# godel_t/registry.py
"""
Read-only table of the functions godel_t exposes by name.

Names follow the external spelling (isZero, isPrime, not, and, ...), so
callers that only have a string (the CLI, the self-test harness) can look
a function up without knowing the Python spelling.

Design:

- The table is a MappingProxyType built once at import time; there is no
  register/clear API and no runtime mutation.
- Each entry records argument kinds ("nat" / "bool") so raw CLI strings
  can be coerced before the call.
- ackermann is exposed as a two-numeral entry (m, n) -> ackermann(m)(n).
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping, Sequence, Tuple

from .arith import add, double, exp, multiply, pred, subtract
from .core.numerals import nat
from .division import divide, is_prime, remainder
from .higher import ackermann
from .logic import and_, eq, gt, gte, is_zero, lt, lte, not_, or_, xor

NAT = "nat"
BOOL = "bool"


@dataclass(frozen=True)
class FunctionSpec:
    name: str
    fn: Callable[..., Any]
    params: Tuple[str, ...]
    kind: str

    @property
    def arity(self) -> int:
        return len(self.params)


def _apply_ackermann(m: int, n: int) -> int:
    return ackermann(m)(n)


def _spec(name: str, fn: Callable[..., Any], params: Tuple[str, ...], kind: str):
    return name, FunctionSpec(name=name, fn=fn, params=params, kind=kind)


_FUNCTIONS: Mapping[str, FunctionSpec] = MappingProxyType(dict([
    # arithmetic
    _spec("add", add, (NAT, NAT), NAT),
    _spec("multiply", multiply, (NAT, NAT), NAT),
    _spec("exp", exp, (NAT, NAT), NAT),
    _spec("double", double, (NAT,), NAT),
    _spec("pred", pred, (NAT,), NAT),
    _spec("subtract", subtract, (NAT, NAT), NAT),
    _spec("remainder", remainder, (NAT, NAT), NAT),
    _spec("divide", divide, (NAT, NAT), NAT),
    _spec("isPrime", is_prime, (NAT,), BOOL),
    # booleans
    _spec("not", not_, (BOOL,), BOOL),
    _spec("and", and_, (BOOL, BOOL), BOOL),
    _spec("or", or_, (BOOL, BOOL), BOOL),
    _spec("xor", xor, (BOOL, BOOL), BOOL),
    # predicates
    _spec("isZero", is_zero, (NAT,), BOOL),
    _spec("eq", eq, (NAT, NAT), BOOL),
    _spec("gt", gt, (NAT, NAT), BOOL),
    _spec("lt", lt, (NAT, NAT), BOOL),
    _spec("gte", gte, (NAT, NAT), BOOL),
    _spec("lte", lte, (NAT, NAT), BOOL),
    # higher-order
    _spec("ackermann", _apply_ackermann, (NAT, NAT), NAT),
]))


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------

def get_function(name: str) -> FunctionSpec | None:
    """Return the entry for name, or None if there is none."""
    return _FUNCTIONS.get(name)


def has_function(name: str) -> bool:
    return name in _FUNCTIONS


def list_function_names() -> list[str]:
    """All exposed names, sorted for stability."""
    return sorted(_FUNCTIONS.keys())


# ---------------------------------------------------------------------------
# Argument coercion and calls
# ---------------------------------------------------------------------------

_TRUE = ("true", "1")
_FALSE = ("false", "0")


def parse_bool(value) -> bool:
    """
    Coerce a boundary value into a truth value.

    Accepts bools, the ints 0 / 1 and the strings true / false / 1 / 0
    (any case).
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if value in (0, 1):
            return bool(value)
        raise ValueError(f"expected boolean, got {value!r}")
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE:
            return True
        if text in _FALSE:
            return False
        raise ValueError(f"expected boolean, got {value!r}")
    raise TypeError(f"expected boolean, got {type(value).__name__}")


def coerce_args(spec: FunctionSpec, args: Sequence[Any]) -> list[Any]:
    """
    Check arity and coerce each argument to the kind spec expects.

    Raises:
        TypeError   on arity mismatch or unusable argument types
        ValueError  on out-of-domain values (negative numerals, bad booleans)
    """
    if len(args) != spec.arity:
        raise TypeError(
            f"{spec.name} takes {spec.arity} argument(s), got {len(args)}"
        )

    out: list[Any] = []
    for kind, raw in zip(spec.params, args):
        out.append(nat(raw) if kind == NAT else parse_bool(raw))
    return out


def call_function(name: str, args: Sequence[Any]):
    """
    Look up a function by name and call it on coerced arguments.

    Raises:
        KeyError    if no such function is exposed
        TypeError   on arity mismatch
        ValueError  on bad argument values
    """
    spec = get_function(name)
    if spec is None:
        raise KeyError(f"No function named {name!r}")
    return spec.fn(*coerce_args(spec, args))
