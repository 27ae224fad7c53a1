from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List


class PoolKind(str, Enum):
    PROCESS = "process"
    THREAD = "thread"


@dataclass(frozen=True)
class Range:
    start: int
    end: int  # inclusive

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError(f"range start {self.start} is greater than end {self.end}")

    def __len__(self) -> int:
        return self.end - self.start + 1


@dataclass(frozen=True)
class Segment:
    """One worker's slice of a Range. Empty when end == start - 1."""
    index: int
    start: int
    end: int

    @property
    def is_empty(self) -> bool:
        return self.end < self.start

    def __len__(self) -> int:
        return max(0, self.end - self.start + 1)


@dataclass
class TimingSample:
    durations_ns: List[int] = field(default_factory=list)

    def add(self, elapsed_ns: int) -> None:
        self.durations_ns.append(elapsed_ns)

    def mean_ns(self) -> int:
        # integer mean, the remainder is dropped
        if not self.durations_ns:
            raise ValueError("mean of an empty timing sample")
        return sum(self.durations_ns) // len(self.durations_ns)

    def __len__(self) -> int:
        return len(self.durations_ns)


@dataclass
class BenchmarkReport:
    run_id: str
    range: Range
    worker_count: int
    pool: PoolKind
    test_runs: int
    sequential_count: int
    parallel_count: int
    sequential_mean_ns: int
    parallel_mean_ns: int

    @property
    def speedup(self) -> float:
        if self.parallel_mean_ns == 0:
            return float("inf")
        return self.sequential_mean_ns / self.parallel_mean_ns

    @property
    def counts_match(self) -> bool:
        return self.sequential_count == self.parallel_count
