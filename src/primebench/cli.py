from __future__ import annotations
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from .core.errors import BenchmarkError
from .logging import setup_logging
from .services.driver import BenchmarkDriver
from .settings import apply_overrides, load_settings


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="primebench",
        description="Compare sequential and parallel prime enumeration over an inclusive range.",
    )
    ap.add_argument("--config", type=Path, default=None, help="YAML config (default: conf/primebench.yaml)")
    ap.add_argument("--start", type=int, default=None)
    ap.add_argument("--end", type=int, default=None)
    ap.add_argument("--runs", dest="test_runs", type=int, default=None)
    ap.add_argument("--workers", type=int, default=None, help="pool size (default: CPU count)")
    ap.add_argument("--pool", choices=["process", "thread"], default=None)
    ap.add_argument("--timeout", dest="join_timeout_s", type=float, default=None, help="join timeout in seconds")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        s = load_settings(args.config)
        s = apply_overrides(
            s,
            start=args.start,
            end=args.end,
            test_runs=args.test_runs,
            workers=args.workers,
            pool=args.pool,
            join_timeout_s=args.join_timeout_s,
        )
    except ValidationError as e:
        print(f"invalid configuration:\n{e}", file=sys.stderr)
        return 2

    log = setup_logging(s.log_level, s.log_json)
    try:
        BenchmarkDriver(s).run()
    except BenchmarkError as e:
        log.error("benchmark_aborted", error=str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
