from __future__ import annotations
from typing import Optional

from .models import Segment


class BenchmarkError(Exception):
    """Fatal condition: the benchmark run is aborted, no report is produced."""


class JoinTimeout(BenchmarkError):
    def __init__(self, timeout_s: float, pending: int):
        self.timeout_s = timeout_s
        self.pending = pending
        super().__init__(f"join_timeout: {pending} segment(s) unfinished after {timeout_s}s")


class WorkerFailure(BenchmarkError):
    def __init__(self, segment: Segment, reason: Optional[str] = None):
        self.segment = segment
        self.reason = reason
        super().__init__(
            f"worker_failed: segment {segment.index} [{segment.start}..{segment.end}]"
            + (f": {reason}" if reason else "")
        )
