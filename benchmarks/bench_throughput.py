"""Benchmark: scanning throughput per engine.

Measures how many full scans of a sample program each registered
engine completes per second through the public ``labscan.tokenize()`` API.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import labscan

_ITERATIONS: int = 5_000

_SAMPLE_PROGRAM = """
total = 0;
i = 1;
do {
  total = total + values[i] * 2.5;
  i = i + 1;
  do {
    k = k - 1;
  } while (k > 0)
} while (i <= n);
"""


def _bench_engine(engine: str) -> dict[str, object]:
    start = time.perf_counter()
    for _ in range(_ITERATIONS):
        labscan.tokenize(_SAMPLE_PROGRAM, engine=engine)
    total = time.perf_counter() - start

    result: dict[str, object] = {
        "operation": f"{engine}_scan_throughput",
        "iterations": _ITERATIONS,
        "total_seconds": round(total, 4),
        "ops_per_second": round(_ITERATIONS / total, 1),
        "avg_latency_ms": round(total / _ITERATIONS * 1000, 4),
    }
    print(
        f"[bench_throughput] {result['operation']}: "
        f"{result['ops_per_second']:,.0f} ops/sec  "
        f"avg {result['avg_latency_ms']:.4f} ms"
    )
    return result


def bench_grammar_throughput() -> dict[str, object]:
    """Benchmark the recursive-descent grammar engine.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    return _bench_engine("grammar")


def bench_pattern_throughput() -> dict[str, object]:
    """Benchmark the regular-expression pattern engine.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    return _bench_engine("pattern")


if __name__ == "__main__":
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)

    for bench_fn, fname in [
        (bench_grammar_throughput, "grammar_throughput_baseline.json"),
        (bench_pattern_throughput, "pattern_throughput_baseline.json"),
    ]:
        result = bench_fn()
        output_path = results_dir / fname
        with open(output_path, "w", encoding="utf-8") as fh:
            json.dump(result, fh, indent=2)
        print(f"Results saved to {output_path}")
