"""Benchmark: election registry latency — cast_vote and get_results p99.

Measures per-call latency of ElectionRegistry.cast_vote() across a fresh
roster, then of get_results() on the filled ledger.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from panchayat_election.election.registry import ElectionRegistry
from panchayat_election.election.schema import Candidate

_VOTERS: int = 5_000
_RESULT_ITERATIONS: int = 200
_CANDIDATE_COUNT: int = 7  # Typical ward ballot size.


def _make_registry() -> ElectionRegistry:
    candidates = [
        Candidate(id=f"C{i}", name=f"Candidate {i}", party=f"Party {i % 3}")
        for i in range(_CANDIDATE_COUNT)
    ]
    registry = ElectionRegistry(candidates)
    for i in range(_VOTERS):
        registry.register_voter({"id": f"voter-{i}", "name": f"Voter {i}", "age": 18 + i % 60})
    return registry


def _summarise(operation: str, latencies_ms: list[float]) -> dict[str, object]:
    sorted_lats = sorted(latencies_ms)
    n = len(sorted_lats)
    total = sum(latencies_ms) / 1000
    return {
        "operation": operation,
        "iterations": n,
        "total_seconds": round(total, 4),
        "ops_per_second": round(n / total, 1) if total > 0 else 0.0,
        "avg_latency_ms": round(sum(latencies_ms) / n, 4),
        "p99_latency_ms": round(sorted_lats[min(int(n * 0.99), n - 1)], 4),
    }


def bench_registry_latency() -> dict[str, object]:
    """Benchmark cast_vote() then get_results() per-call latency.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms, p99_latency_ms, results_p99_latency_ms.
    """
    registry = _make_registry()

    vote_lats: list[float] = []
    for i in range(_VOTERS):
        candidate_id = f"C{i % _CANDIDATE_COUNT}"
        t0 = time.perf_counter()
        registry.cast_vote(f"voter-{i}", candidate_id, lambda r: r, lambda e: e)
        vote_lats.append((time.perf_counter() - t0) * 1000)

    result_lats: list[float] = []
    for _ in range(_RESULT_ITERATIONS):
        t0 = time.perf_counter()
        registry.get_results()
        result_lats.append((time.perf_counter() - t0) * 1000)

    result = _summarise("registry_cast_vote_latency", vote_lats)
    result["results_p99_latency_ms"] = _summarise("get_results", result_lats)["p99_latency_ms"]
    print(
        f"[bench_registry_latency] {result['operation']}: "
        f"p99={result['p99_latency_ms']:.4f}ms  "
        f"mean={result['avg_latency_ms']:.4f}ms  "
        f"get_results p99={result['results_p99_latency_ms']:.4f}ms"
    )
    return result


def run_benchmark() -> dict[str, object]:
    """Entry point returning the benchmark result dict."""
    return bench_registry_latency()


if __name__ == "__main__":
    result = run_benchmark()
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    output_path = results_dir / "latency_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(result, fh, indent=2)
    print(f"Results saved to {output_path}")
