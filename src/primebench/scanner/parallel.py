from __future__ import annotations
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor, wait
from typing import Callable, List, Union

import structlog

from ..core.errors import JoinTimeout, WorkerFailure
from ..core.models import PoolKind, Range
from .partition import partition
from .sequential import primes_between

log = structlog.get_logger(__name__)

DEFAULT_JOIN_TIMEOUT_S = 60.0

SegmentFn = Callable[[int, int], List[int]]


class ParallelRangeScanner:
    """
    Fork/join scan over a static partition of the range.

    A fresh pool of worker_count workers is created for every scan() call and
    released before it returns. Results are concatenated in partition order, so
    the output is ascending regardless of which worker finishes first.

    segment_fn must be a module-level function when pool is "process" (it is
    pickled into the worker processes).
    """

    def __init__(
        self,
        worker_count: int,
        *,
        pool: Union[PoolKind, str] = PoolKind.PROCESS,
        join_timeout_s: float = DEFAULT_JOIN_TIMEOUT_S,
        segment_fn: SegmentFn = primes_between,
    ):
        if worker_count < 1:
            raise ValueError(f"worker_count must be >= 1, got {worker_count}")
        self.worker_count = worker_count
        self.pool = PoolKind(pool)
        self.join_timeout_s = join_timeout_s
        self.segment_fn = segment_fn

    def _executor(self) -> Executor:
        if self.pool is PoolKind.THREAD:
            return ThreadPoolExecutor(max_workers=self.worker_count, thread_name_prefix="primebench")
        return ProcessPoolExecutor(max_workers=self.worker_count)

    def scan(self, rng: Range) -> List[int]:
        segments = partition(rng, self.worker_count)
        log.debug(
            "parallel_scan_started",
            start=rng.start,
            end=rng.end,
            workers=self.worker_count,
            pool=self.pool.value,
        )

        executor = self._executor()
        timed_out = False
        try:
            futures = [executor.submit(self.segment_fn, seg.start, seg.end) for seg in segments]
            _, pending = wait(futures, timeout=self.join_timeout_s)
            if pending:
                timed_out = True
                log.error("join_timeout", timeout_s=self.join_timeout_s, pending=len(pending))
                raise JoinTimeout(self.join_timeout_s, len(pending))

            primes: List[int] = []
            for seg, fut in zip(segments, futures):
                try:
                    primes.extend(fut.result())
                except Exception as e:
                    log.error("worker_failed", segment=seg.index, start=seg.start, end=seg.end, error=repr(e))
                    raise WorkerFailure(seg, reason=repr(e)) from e
            return primes
        finally:
            # in-flight workers are never cancelled; after a timeout we just stop waiting on them
            executor.shutdown(wait=not timed_out)


def scan_parallel(
    rng: Range,
    worker_count: int,
    *,
    pool: Union[PoolKind, str] = PoolKind.PROCESS,
    join_timeout_s: float = DEFAULT_JOIN_TIMEOUT_S,
) -> List[int]:
    return ParallelRangeScanner(worker_count, pool=pool, join_timeout_s=join_timeout_s).scan(rng)
