from __future__ import annotations
import os, random, string, time

NS_PER_MS = 1_000_000


def new_run_id() -> str:
    suf = "".join(random.choice(string.hexdigits.lower()) for _ in range(6))
    return f"{int(time.time())}-{suf}"


def ns_to_ms(ns: int) -> int:
    return ns // NS_PER_MS


def hardware_concurrency() -> int:
    # os.cpu_count() may return None on exotic platforms
    return os.cpu_count() or 1
