"""Number-theory helpers and a prefix-sum table for range queries."""

from collections.abc import Iterable
from itertools import accumulate


def gcd(m: int, n: int) -> int:
    """Greatest common divisor of ``m`` and ``n`` by Euclid's algorithm."""
    if n == 0:
        raise ValueError("the second number must be non-zero")
    while m % n:
        m, n = n, m % n
    return n


def _sieve(limit: int) -> list[bool]:
    """Primality flags for 0..limit-1."""
    is_prime = [True] * limit
    for small in range(min(limit, 2)):
        is_prime[small] = False
    candidate = 2
    while candidate * candidate < limit:
        if is_prime[candidate]:
            for multiple in range(candidate * candidate, limit, candidate):
                is_prime[multiple] = False
        candidate += 1
    return is_prime


def prime_sum(n: int) -> tuple[int, int] | None:
    """Write ``n`` as a sum of two primes, smallest first prime first.

    Returns None when no such pair exists.
    """
    if n < 2:
        return None
    is_prime = _sieve(n)
    for first in range(2, n):
        if is_prime[first] and is_prime[n - first]:
            return first, n - first
    return None


class PrefixSum:
    """Constant-time sums over inclusive, 1-based index ranges."""

    def __init__(self, values: Iterable[int]):
        self._prefix = [0, *accumulate(values)]

    def __len__(self) -> int:
        return len(self._prefix) - 1

    def range_sum(self, left: int, right: int) -> int:
        """Sum of the elements at positions ``left`` through ``right`` (1-based)."""
        if left > right:
            raise ValueError(f"range start {left} is after range end {right}")
        if not 1 <= left <= right <= len(self):
            raise IndexError(f"range {left}..{right} is outside 1..{len(self)}")
        return self._prefix[right] - self._prefix[left - 1]