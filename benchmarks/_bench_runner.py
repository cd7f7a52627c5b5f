#!/usr/bin/env python3
"""Fibonacci timing benchmark: naive recursion vs memoize vs memo_fib.

Each variant is timed for n = 5, 10, ..., 95 with a fresh cache per
measurement. Naive recursion is exponential, so it stops at --naive-limit.

Usage:
    python _bench_runner.py --tag py3.12
    python _bench_runner.py --tag py3.13 --quick
"""

import argparse
import json
import logging
import platform
import sys
import sysconfig
import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

RESULTS_DIR = Path(__file__).resolve().parent / "results"

log = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# Contestant abstraction
# ═══════════════════════════════════════════════════════════════════════════


@dataclass
class Contestant:
    name: str
    make: Callable[[], Callable[[int], int]]
    limit: int | None = None


def _make_memoized():
    from memokit import memoize

    @memoize(key="identity")
    def fn(n):
        if n <= 2:
            return 1
        return fn(n - 1) + fn(n - 2)

    return fn


def _build_contestants(naive_limit: int) -> list[Contestant]:
    from memokit import fib, memo_fib

    return [
        Contestant(name="fib", make=lambda: fib, limit=naive_limit),
        Contestant(name="memoize", make=_make_memoized),
        Contestant(name="memo_fib", make=lambda: memo_fib),
    ]


# ═══════════════════════════════════════════════════════════════════════════
# Environment info
# ═══════════════════════════════════════════════════════════════════════════


def python_info() -> dict:
    """Collect Python build/runtime details."""
    gil_disabled = getattr(sys.flags, "nogil", False) or sysconfig.get_config_var("Py_GIL_DISABLED")
    return {
        "version": sys.version.split()[0],
        "implementation": platform.python_implementation(),
        "build": platform.python_build()[0],
        "compiler": platform.python_compiler(),
        "arch": platform.machine(),
        "gil_disabled": bool(gil_disabled),
    }


# ═══════════════════════════════════════════════════════════════════════════
# Timing
# ═══════════════════════════════════════════════════════════════════════════


def _time_once(make, n: int) -> float:
    """Time one call on a freshly built function, return elapsed ms."""
    fn = make()
    t0 = time.perf_counter()
    fn(n)
    return (time.perf_counter() - t0) * 1000.0


def bench_fib(
    contestants: list[Contestant],
    ns: list[int],
    repeat: int = 3,
) -> dict[str, dict[str, float]]:
    results: dict[str, dict[str, float]] = {}

    for c in contestants:
        c_results: dict[str, float] = {}
        for n in ns:
            if c.limit is not None and n > c.limit:
                break
            best = min(_time_once(c.make, n) for _ in range(repeat))
            c_results[str(n)] = best
            log.info("  %-9s n=%-3d %10.3f ms", c.name, n, best)
        results[c.name] = c_results

    return results


def verify_correctness(contestants: list[Contestant], ns: list[int]) -> bool:
    """Every variant must agree with the explicit-cache recursion."""
    from memokit import memo_fib

    for c in contestants:
        for n in ns:
            if c.limit is not None and n > c.limit:
                break
            expected = memo_fib(n)
            got = c.make()(n)
            if got != expected:
                log.error("MISMATCH %s(%d): got %d, expected %d", c.name, n, got, expected)
                return False
    return True


# ═══════════════════════════════════════════════════════════════════════════
# Main
# ═══════════════════════════════════════════════════════════════════════════


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--tag", default=f"py{sys.version_info.major}.{sys.version_info.minor}")
    parser.add_argument("--naive-limit", type=int, default=30)
    parser.add_argument("--repeat", type=int, default=3)
    parser.add_argument("--quick", action="store_true", help="n up to 30, single repeat")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    max_n = 30 if args.quick else 95
    repeat = 1 if args.quick else args.repeat
    ns = list(range(5, max_n + 1, 5))
    contestants = _build_contestants(args.naive_limit)

    log.info("Verifying correctness...")
    if not verify_correctness(contestants, ns):
        return 1

    log.info("Timing (best of %d):", repeat)
    results = {
        "tag": args.tag,
        "python": python_info(),
        "naive_limit": args.naive_limit,
        "fib": bench_fib(contestants, ns, repeat=repeat),
    }

    RESULTS_DIR.mkdir(parents=True, exist_ok=True)
    out = RESULTS_DIR / f"fib_{args.tag}.json"
    out.write_text(json.dumps(results, indent=2))
    log.info("Wrote %s", out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
