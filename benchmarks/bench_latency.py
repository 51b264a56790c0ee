"""Benchmark: grammar scan latency (p50/p95/mean).

Measures per-call latency of the default engine on a small program and
on a larger one built by repeating a loop body.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import labscan

_WARMUP: int = 100
_ITERATIONS: int = 3_000

_SMALL_PROGRAM = "do { x = x + 1; } while (x < 10);"

_LARGE_PROGRAM = "\n".join(
    f"do {{ a[{n}] = a[{n}] * -{n + 1}.5 / b; c = c + a[{n}]; }} while (c != {n + 1})"
    for n in range(50)
)


def _latency(operation: str, source: str, iterations: int) -> dict[str, object]:
    for _ in range(_WARMUP):
        labscan.tokenize(source)

    latencies_ms: list[float] = []
    for _ in range(iterations):
        t0 = time.perf_counter()
        labscan.tokenize(source)
        latencies_ms.append((time.perf_counter() - t0) * 1000)

    sorted_lats = sorted(latencies_ms)
    n = len(sorted_lats)
    total = sum(latencies_ms) / 1000

    result: dict[str, object] = {
        "operation": operation,
        "iterations": iterations,
        "total_seconds": round(total, 4),
        "ops_per_second": round(iterations / total, 1),
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


def bench_scan_latency() -> dict[str, object]:
    """Benchmark grammar scan latency on a one-loop program.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms, p50_ms, p95_ms.
    """
    return _latency("grammar_scan_latency_small", _SMALL_PROGRAM, _ITERATIONS)


def bench_scan_latency_large() -> dict[str, object]:
    """Benchmark grammar scan latency on a fifty-loop program."""
    return _latency("grammar_scan_latency_large", _LARGE_PROGRAM, _ITERATIONS // 10)


if __name__ == "__main__":
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    for bench_fn, fname in [
        (bench_scan_latency, "latency_small_baseline.json"),
        (bench_scan_latency_large, "latency_large_baseline.json"),
    ]:
        result = bench_fn()
        output_path = results_dir / fname
        with open(output_path, "w", encoding="utf-8") as fh:
            json.dump(result, fh, indent=2)
        print(f"Results saved to {output_path}")
