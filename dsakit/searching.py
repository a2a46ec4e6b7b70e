"""Linear and binary search, bounds, and the Cartesian product of two sets."""

import bisect
from collections.abc import Iterable, Sequence
from itertools import product


def linear_search(values: Iterable, key) -> int | None:
    """Index of the first element equal to ``key``, or None if there is none."""
    for position, value in enumerate(values):
        if value == key:
            return position
    return None


def lower_bound(values: Sequence, key) -> int:
    """First index in sorted ``values`` whose element is not less than ``key``."""
    return bisect.bisect_left(values, key)


def upper_bound(values: Sequence, key) -> int:
    """First index in sorted ``values`` whose element is greater than ``key``."""
    return bisect.bisect_right(values, key)


def binary_search(values: Sequence, key) -> bool:
    """Whether ``key`` occurs in sorted ``values``."""
    position = lower_bound(values, key)
    return position < len(values) and values[position] == key


def count_occurrences(values: Sequence, key) -> int:
    """How many times ``key`` occurs in sorted ``values``."""
    return upper_bound(values, key) - lower_bound(values, key)


def cartesian_product(first: Iterable, second: Iterable) -> list[tuple]:
    """Every pair ``(a, b)`` with ``a`` from ``first`` and ``b`` from ``second``."""
    return list(product(first, second))