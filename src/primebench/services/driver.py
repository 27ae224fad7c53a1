from __future__ import annotations
import time
from typing import Callable, Optional

import structlog

from ..core.models import BenchmarkReport, TimingSample
from ..core.utils import new_run_id
from ..scanner.parallel import ParallelRangeScanner
from ..scanner.sequential import scan
from ..settings import Settings, load_settings
from .report import format_counts, format_results

log = structlog.get_logger(__name__)


class BenchmarkDriver:
    """
    Runs the sequential and the parallel scanner test_runs times over the same
    range, echoes the first-run prime counts, then the averaged results.

    Any JoinTimeout / WorkerFailure from the parallel scanner propagates out of
    run(); nothing past that point is printed.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        echo: Callable[[str], None] = print,
        clock: Callable[[], int] = time.perf_counter_ns,
    ):
        self.settings = settings or load_settings()
        self.echo = echo
        self.clock = clock

        self.range = self.settings.range
        self.parallel = ParallelRangeScanner(
            self.settings.worker_count,
            pool=self.settings.pool,
            join_timeout_s=self.settings.join_timeout_s,
        )

    def _timed(self, fn, *args):
        t0 = self.clock()
        out = fn(*args)
        return out, self.clock() - t0

    def run(self) -> BenchmarkReport:
        run_id = new_run_id()
        s = self.settings
        log.info(
            "benchmark_started",
            run_id=run_id,
            start=self.range.start,
            end=self.range.end,
            test_runs=s.test_runs,
            workers=self.parallel.worker_count,
            pool=self.parallel.pool.value,
        )

        sequential_times = TimingSample()
        parallel_times = TimingSample()
        sequential_count = parallel_count = 0

        for run in range(s.test_runs):
            seq_primes, seq_ns = self._timed(scan, self.range)
            sequential_times.add(seq_ns)

            par_primes, par_ns = self._timed(self.parallel.scan, self.range)
            parallel_times.add(par_ns)

            log.info("trial_finished", run_id=run_id, run=run, sequential_ns=seq_ns, parallel_ns=par_ns)

            if run == 0:
                sequential_count, parallel_count = len(seq_primes), len(par_primes)
                for line in format_counts(sequential_count, parallel_count):
                    self.echo(line)
                if sequential_count != parallel_count:
                    log.error(
                        "prime_count_mismatch",
                        run_id=run_id,
                        sequential=sequential_count,
                        parallel=parallel_count,
                    )

        report = BenchmarkReport(
            run_id=run_id,
            range=self.range,
            worker_count=self.parallel.worker_count,
            pool=self.parallel.pool,
            test_runs=s.test_runs,
            sequential_count=sequential_count,
            parallel_count=parallel_count,
            sequential_mean_ns=sequential_times.mean_ns(),
            parallel_mean_ns=parallel_times.mean_ns(),
        )
        for line in format_results(report):
            self.echo(line)

        log.info(
            "benchmark_finished",
            run_id=run_id,
            sequential_mean_ns=report.sequential_mean_ns,
            parallel_mean_ns=report.parallel_mean_ns,
            speedup=round(report.speedup, 4),
        )
        return report
