#!/usr/bin/env python3
"""Generate a Markdown report from Fibonacci timing JSON files.

Usage:
    python benchmarks/_report_generator.py
    python benchmarks/_report_generator.py --tags py3.12,py3.13
"""

import argparse
import json
import platform
from datetime import datetime, timezone
from pathlib import Path

RESULTS_DIR = Path(__file__).resolve().parent / "results"
REPORT_PATH = Path(__file__).resolve().parent / "BENCHMARK_REPORT.md"

VARIANTS = ["fib", "memoize", "memo_fib"]


def _fmt_ms(ms: float) -> str:
    if ms >= 1_000:
        return f"{ms / 1_000:.2f}s"
    if ms >= 1:
        return f"{ms:.1f}ms"
    return f"{ms * 1_000:.0f}µs"


def _load_results(tags: list[str] | None) -> dict[str, dict]:
    data: dict[str, dict] = {}
    if tags:
        for tag in tags:
            p = RESULTS_DIR / f"fib_{tag}.json"
            if p.exists():
                data[tag] = json.loads(p.read_text())
            else:
                print(f"Warning: {p} not found, skipping")
    else:
        for p in sorted(RESULTS_DIR.glob("fib_*.json")):
            tag = p.stem.removeprefix("fib_")
            data[tag] = json.loads(p.read_text())
    return data


def _md_table(headers: list[str], rows: list[list[str]]) -> str:
    lines = []
    lines.append("| " + " | ".join(headers) + " |")
    lines.append("| " + " | ".join("---" for _ in headers) + " |")
    for row in rows:
        lines.append("| " + " | ".join(row) + " |")
    return "\n".join(lines)


def generate_report(data: dict[str, dict]) -> str:
    sections: list[str] = []

    now = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")
    sections.append("# memokit Fibonacci Timing Report\n")
    sections.append(f"Generated: {now}  ")
    sections.append(f"Machine: {platform.machine()} / {platform.system()} {platform.release()}  ")

    versions = []
    for tag, run in data.items():
        py = run["python"]
        ft = " (free-threaded)" if py["gil_disabled"] else ""
        versions.append(f"**{tag}**: Python {py['version']}{ft}")
    sections.append("Python versions: " + ", ".join(versions) + "\n")

    for tag, run in data.items():
        py = run["python"]
        sections.append(f"## {tag} — Python {py['version']}\n")

        fib = run["fib"]
        all_ns = sorted({int(n) for series in fib.values() for n in series})
        headers = ["n"] + [v for v in VARIANTS if v in fib]
        rows = []
        for n in all_ns:
            row = [str(n)]
            for name in headers[1:]:
                val = fib[name].get(str(n))
                row.append(_fmt_ms(val) if val is not None else "-")
            rows.append(row)
        sections.append(_md_table(headers, rows))
        sections.append(
            f"\n*Naive recursion stops at n = {run['naive_limit']} (exponential time)*\n"
        )

    return "\n".join(sections)


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate Fibonacci timing report")
    parser.add_argument(
        "--tags",
        type=str,
        default=None,
        help="Comma-separated list of tags to include (default: all fib_*.json files)",
    )
    args = parser.parse_args()

    tags = [t.strip() for t in args.tags.split(",")] if args.tags else None
    data = _load_results(tags)

    if not data:
        print("No benchmark results found.")
        return

    report = generate_report(data)
    REPORT_PATH.write_text(report)
    print(f"Report written to {REPORT_PATH}")
    print(f"  Datasets: {list(data.keys())}")


if __name__ == "__main__":
    main()
