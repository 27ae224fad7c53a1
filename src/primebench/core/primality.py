from __future__ import annotations
import math


def is_prime(n: int) -> bool:
    """Trial division up to floor(sqrt(n))."""
    if n <= 1:
        return False
    if n <= 3:
        return True
    for i in range(2, math.isqrt(n) + 1):
        if n % i == 0:
            return False
    return True
