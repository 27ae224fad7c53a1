from __future__ import annotations
from typing import List

from ..core.models import Range
from ..core.primality import is_prime


def primes_between(start: int, end: int) -> List[int]:
    """Primes in [start, end], ascending. Empty when end < start."""
    primes: List[int] = []
    for number in range(start, end + 1):
        if is_prime(number):
            primes.append(number)
    return primes


def scan(rng: Range) -> List[int]:
    return primes_between(rng.start, rng.end)
