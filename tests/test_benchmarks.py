"""Structural tests for the labscan benchmark module."""
from __future__ import annotations

import importlib
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent.parent / "benchmarks"))


def test_bench_throughput_importable() -> None:
    """Verify bench_throughput module can be imported."""
    mod = importlib.import_module("bench_throughput")
    assert hasattr(mod, "bench_grammar_throughput")
    assert hasattr(mod, "bench_pattern_throughput")


def test_bench_latency_importable() -> None:
    """Verify bench_latency module can be imported."""
    mod = importlib.import_module("bench_latency")
    assert hasattr(mod, "bench_scan_latency")
    assert hasattr(mod, "bench_scan_latency_large")


def test_sample_programs_scan_cleanly() -> None:
    """The benchmark inputs are valid programs for every engine."""
    import labscan
    from bench_latency import _LARGE_PROGRAM, _SMALL_PROGRAM
    from bench_throughput import _SAMPLE_PROGRAM

    for source in (_SAMPLE_PROGRAM, _SMALL_PROGRAM, _LARGE_PROGRAM):
        assert labscan.tokenize(source, engine="grammar") == labscan.tokenize(source, engine="pattern")
