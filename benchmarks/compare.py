"""Summarize utfstring benchmark results.

Reads the JSON files written by ``bench_throughput.py`` and
``bench_latency.py`` and reports how much the no-multi-unit fast path
saves: the ratio of ``logical_length`` latency on emoji text to the
same call on ASCII text.

Usage::

    python benchmarks/bench_throughput.py
    python benchmarks/bench_latency.py
    python benchmarks/compare.py
"""
from __future__ import annotations

import json
from pathlib import Path

from rich.console import Console
from rich.table import Table

RESULTS_DIR = Path(__file__).parent / "results"

_RESULT_FILES: dict[str, str] = {
    "mapping": "mapping_throughput_baseline.json",
    "slice": "slice_throughput_baseline.json",
    "emoji_length": "latency_baseline.json",
    "ascii_length": "ascii_latency_baseline.json",
}


def load_results(results_dir: Path = RESULTS_DIR) -> dict[str, dict[str, float]]:
    """Return the available result files keyed by short name; missing runs are omitted."""
    results: dict[str, dict[str, float]] = {}
    for key, fname in _RESULT_FILES.items():
        path = results_dir / fname
        if path.exists():
            results[key] = json.loads(path.read_text(encoding="utf-8"))
    return results


def fast_path_speedup(results: dict[str, dict[str, float]]) -> float | None:
    """Return emoji-text mean latency divided by ASCII-text mean latency.

    ``None`` when either latency run is missing or reports zero.
    """
    emoji = results.get("emoji_length", {}).get("avg_latency_ms", 0.0)
    ascii_ = results.get("ascii_length", {}).get("avg_latency_ms", 0.0)
    if not emoji or not ascii_:
        return None
    return float(emoji) / float(ascii_)


def main() -> None:
    console = Console()
    results = load_results()
    if not results:
        console.print(f"[yellow]No results in {RESULTS_DIR}; run the benchmarks first.[/yellow]")
        return

    table = Table(title="utfstring benchmarks")
    table.add_column("Operation")
    table.add_column("Ops/sec", justify="right")
    table.add_column("Mean", justify="right")
    table.add_column("p95", justify="right")
    for data in results.values():
        p95 = data.get("p95_ms")
        table.add_row(
            str(data["operation"]),
            f"{float(data['ops_per_second']):,.0f}",
            f"{float(data['avg_latency_ms']):.4f}ms",
            "n/a" if p95 is None else f"{float(p95):.4f}ms",
        )
    console.print(table)

    speedup = fast_path_speedup(results)
    if speedup is not None:
        console.print(f"ASCII fast path: logical_length is {speedup:.1f}x faster than on emoji text")


if __name__ == "__main__":
    main()
