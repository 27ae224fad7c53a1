from __future__ import annotations
from typing import List

from ..core.models import BenchmarkReport
from ..core.utils import ns_to_ms


def format_counts(sequential_count: int, parallel_count: int) -> List[str]:
    return [
        f"Total Primes Found (Sequential): {sequential_count}",
        f"Total Primes Found (Parallel): {parallel_count}",
    ]


def format_results(report: BenchmarkReport) -> List[str]:
    """
    Lines of the final block, e.g.:

      Performance Results:
      Number of Workers: 8
      Average Sequential Time: 2310 ms
      Average Parallel Time: 402 ms
      Speedup: 5.75x
    """
    return [
        "",
        "Performance Results:",
        f"Number of Workers: {report.worker_count}",
        f"Average Sequential Time: {ns_to_ms(report.sequential_mean_ns)} ms",
        f"Average Parallel Time: {ns_to_ms(report.parallel_mean_ns)} ms",
        f"Speedup: {report.speedup:.2f}x",
    ]
