"""
godel_t/cli.py

Umbrella CLI router for the godel_t tools.

This file is intentionally thin and does not re-implement leaf flags.
It only routes:

  godel call <...>       -> godel_t.call_cli.main(<...>)
  godel list             -> godel_t.call_cli.main(["--list"])
  godel selftest <...>   -> godel_t.selftest.main(<...>)
  godel bench <...>      -> godel_t.bench.main(<...>)

All remaining arguments are forwarded verbatim.
"""

from __future__ import annotations

import sys
from typing import List


HELP = """\
usage: godel <call|list|selftest|bench> ...

godel_t umbrella CLI (routes to the call, self-test and bench tools).

commands:
  call       Delegate to: python -m godel_t.call_cli ...
  list       List the callable function names
  selftest   Delegate to: python -m godel_t.selftest ...
  bench      Delegate to: python -m godel_t.bench ...

examples:
  godel call add 2 3 --pretty
  godel call isPrime 13
  godel call ackermann 1 1 --unary
  godel selftest --only divide
  godel bench isPrime 13 --repeats 3
"""


def _help(code: int = 0) -> int:
    print(HELP)
    return code


def main(argv: List[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    if not argv or argv[0] in ("-h", "--help", "help"):
        return _help(0)

    top, rest = argv[0], argv[1:]

    if top == "call":
        from godel_t.call_cli import main as call_main

        return int(call_main(rest))

    if top == "list":
        from godel_t.call_cli import main as call_main

        return int(call_main(["--list"]))

    if top == "selftest":
        from godel_t.selftest import main as selftest_main

        return int(selftest_main(rest))

    if top == "bench":
        from godel_t.bench import main as bench_main

        return int(bench_main(rest))

    print(f"godel: unknown command: {top!r}", file=sys.stderr)
    return _help(2)


if __name__ == "__main__":
    raise SystemExit(main())
