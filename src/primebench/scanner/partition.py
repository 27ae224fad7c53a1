from __future__ import annotations
from typing import List

from ..core.models import Range, Segment


def partition(rng: Range, worker_count: int) -> List[Segment]:
    """
    Split rng into exactly worker_count contiguous segments.

    Every segment but the last gets (len(rng) // worker_count) numbers; the last
    one runs up to rng.end and absorbs the remainder. When worker_count exceeds
    the range length the leading segments are empty.
    """
    if worker_count < 1:
        raise ValueError(f"worker_count must be >= 1, got {worker_count}")

    size = len(rng) // worker_count
    segments: List[Segment] = []
    for i in range(worker_count):
        seg_start = rng.start + i * size
        seg_end = rng.end if i == worker_count - 1 else seg_start + size - 1
        segments.append(Segment(index=i, start=seg_start, end=seg_end))
    return segments
