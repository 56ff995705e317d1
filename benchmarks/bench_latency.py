"""Benchmark: logical length latency (p50/p95/mean).

Compares per-call latency of ``logical_length`` on plain ASCII text,
which takes the no-multi-unit fast path, against emoji-heavy text.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from utfstring.mapper.mapper import IndexMapper
from utfstring.units.codec import to_code_units

_WARMUP: int = 100
_ITERATIONS: int = 3_000

_ASCII_TEXT = "The quick brown fox jumps over the lazy dog. " * 20
_EMOJI_TEXT = to_code_units("The quick \U0001F98A jumps over the lazy \U0001F436. " * 20)


def _measure(text: str) -> list[float]:
    mapper = IndexMapper()
    for _ in range(_WARMUP):
        mapper.logical_length(text)

    latencies_ms: list[float] = []
    for _ in range(_ITERATIONS):
        t0 = time.perf_counter()
        mapper.logical_length(text)
        latencies_ms.append((time.perf_counter() - t0) * 1000)
    return latencies_ms


def _summarize(operation: str, latencies_ms: list[float]) -> dict[str, object]:
    sorted_lats = sorted(latencies_ms)
    n = len(sorted_lats)
    total = sum(latencies_ms) / 1000

    result: dict[str, object] = {
        "operation": operation,
        "iterations": n,
        "total_seconds": round(total, 4),
        "ops_per_second": round(n / total, 1),
        "avg_latency_ms": round(sum(latencies_ms) / n, 4),
        "p50_ms": round(sorted_lats[int(n * 0.50)], 4),
        "p95_ms": round(sorted_lats[min(int(n * 0.95), n - 1)], 4),
    }
    print(
        f"[bench_latency] {result['operation']}: "
        f"p50={result['p50_ms']:.4f}ms  p95={result['p95_ms']:.4f}ms  "
        f"mean={result['avg_latency_ms']:.4f}ms"
    )
    return result


def bench_length_latency() -> dict[str, object]:
    """Benchmark ``logical_length`` latency on emoji-heavy text.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms, p50_ms, p95_ms.
    """
    return _summarize("logical_length_latency_emoji", _measure(_EMOJI_TEXT))


def bench_ascii_length_latency() -> dict[str, object]:
    """Benchmark ``logical_length`` latency on ASCII text (fast path)."""
    return _summarize("logical_length_latency_ascii", _measure(_ASCII_TEXT))


if __name__ == "__main__":
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)

    for bench_fn, fname in [
        (bench_length_latency, "latency_baseline.json"),
        (bench_ascii_length_latency, "ascii_latency_baseline.json"),
    ]:
        result = bench_fn()
        output_path = results_dir / fname
        with open(output_path, "w", encoding="utf-8") as fh:
            json.dump(result, fh, indent=2)
        print(f"Results saved to {output_path}")
