#!/usr/bin/env python3
"""Generate Fibonacci timing charts from benchmark JSON results.

Produces one PNG per result file in benchmarks/results/:
  - fib_<tag>.png   Elapsed time per n for fib, memoize and memo_fib (log scale)

Usage:
    uv run python benchmarks/_generate_charts.py
"""

import json
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402, I001

RESULTS_DIR = Path(__file__).resolve().parent / "results"

LIBS = ["fib", "memoize", "memo_fib"]
COLORS = {"fib": "#ea580c", "memoize": "#2563eb", "memo_fib": "#16a34a"}
LABELS = {"fib": "naive recursion", "memoize": "memoize(fib)", "memo_fib": "memo_fib"}

DPI = 150


def _py_label(data: dict) -> str:
    py = data["python"]
    ver = py["version"]
    suffix = "t (no GIL)" if py["gil_disabled"] else ""
    return f"Python {ver}{suffix}"


def chart_fib_timing(data: dict, out: Path) -> None:
    """Line chart: elapsed ms per n, one line per variant."""
    fig, ax = plt.subplots(figsize=(8, 5))

    for lib in LIBS:
        series = data["fib"].get(lib, {})
        if not series:
            continue
        ns = sorted(int(k) for k in series)
        values = [series[str(n)] for n in ns]
        ax.plot(ns, values, marker="o", label=LABELS[lib], color=COLORS[lib], linewidth=2)

    ax.set_xlabel("n")
    ax.set_ylabel("Elapsed (ms)")
    ax.set_yscale("log")
    ax.set_title(f"Fibonacci timing — {_py_label(data)}")
    ax.legend()
    ax.grid(axis="y", alpha=0.3)
    fig.tight_layout()
    fig.savefig(out, dpi=DPI)
    plt.close(fig)
    print(f"  {out.name}")


def main() -> None:
    paths = sorted(RESULTS_DIR.glob("fib_*.json"))
    if not paths:
        print(f"No results in {RESULTS_DIR}, run _bench_runner.py first")
        return
    print("Generating charts:")
    for p in paths:
        chart_fib_timing(json.loads(p.read_text()), p.with_suffix(".png"))


if __name__ == "__main__":
    main()
