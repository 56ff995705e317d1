"""Benchmark: index mapping and slicing throughput.

Measures how many character-to-code-unit lookups and logical slices can
complete per second on an emoji-heavy text, using the public
IndexMapper and RangeOps APIs.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from utfstring.classifier.classifier import VISUAL_CLASSIFIER
from utfstring.mapper.mapper import IndexMapper
from utfstring.ops.ranges import RangeOps
from utfstring.units.codec import to_code_units

_ITERATIONS: int = 5_000
_SLICE_ITERATIONS: int = 2_000

_SAMPLE_TEXT = to_code_units(
    "Shipping update \U0001F69A for order #1042: packed \U0001F4E6, "
    "cleared customs \U0001F1E9\U0001F1EA → \U0001F1EB\U0001F1F7, "
    "arriving Friday \U0001F642. " * 8
)


def _report(operation: str, iterations: int, total: float) -> dict[str, object]:
    result: dict[str, object] = {
        "operation": operation,
        "iterations": iterations,
        "total_seconds": round(total, 4),
        "ops_per_second": round(iterations / total, 1),
        "avg_latency_ms": round(total / iterations * 1000, 4),
    }
    print(
        f"[bench_throughput] {result['operation']}: "
        f"{result['ops_per_second']:,.0f} ops/sec  "
        f"avg {result['avg_latency_ms']:.4f} ms"
    )
    return result


def bench_mapping_throughput() -> dict[str, object]:
    """Benchmark character-index to code-unit-index lookups.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    mapper = IndexMapper()
    length = mapper.logical_length(_SAMPLE_TEXT)

    start = time.perf_counter()
    for i in range(_ITERATIONS):
        mapper.char_index_to_code_unit_index(_SAMPLE_TEXT, i % length)
    total = time.perf_counter() - start
    return _report("char_index_mapping_throughput", _ITERATIONS, total)


def bench_slice_throughput() -> dict[str, object]:
    """Benchmark logical slicing with the visual (flag-aware) classifier.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    ops = RangeOps(VISUAL_CLASSIFIER)
    length = ops.mapper.logical_length(_SAMPLE_TEXT)

    start = time.perf_counter()
    for i in range(_SLICE_ITERATIONS):
        ops.slice(_SAMPLE_TEXT, i % length, -1)
    total = time.perf_counter() - start
    return _report("visual_slice_throughput", _SLICE_ITERATIONS, total)


if __name__ == "__main__":
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)

    for bench_fn, fname in [
        (bench_mapping_throughput, "mapping_throughput_baseline.json"),
        (bench_slice_throughput, "slice_throughput_baseline.json"),
    ]:
        result = bench_fn()
        output_path = results_dir / fname
        with open(output_path, "w", encoding="utf-8") as fh:
            json.dump(result, fh, indent=2)
        print(f"Results saved to {output_path}")
