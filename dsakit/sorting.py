"""Classic comparison and counting sorts, plus inversion counting.

Every function takes any iterable and returns a new list; the input is
never modified.
"""

from collections.abc import Iterable
from operator import index as _as_index

from .heaps import build_max_heap, sift_down

COUNTING_RANGE = 256


def sort_012(values: Iterable[int]) -> list[int]:
    """Sort a sequence of 0s, 1s and 2s in one pass (Dutch national flag).

    Anything that is neither 0 nor 1 is treated as belonging to the top band.
    """
    items = list(values)
    low = mid = 0
    high = len(items) - 1
    while mid <= high:
        if items[mid] == 0:
            items[low], items[mid] = items[mid], items[low]
            low += 1
            mid += 1
        elif items[mid] == 1:
            mid += 1
        else:
            items[mid], items[high] = items[high], items[mid]
            high -= 1
    return items


def bubble_sort(values: Iterable) -> list:
    """Sort by repeatedly swapping adjacent out-of-order elements."""
    items = list(values)
    size = len(items)
    for passes in range(1, size):
        for i in range(size - passes):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
    return items


def insertion_sort(values: Iterable) -> list:
    """Sort by inserting each element into the sorted prefix before it."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def selection_sort(values: Iterable) -> list:
    """Sort by moving the smallest remaining element to the front each pass."""
    items = list(values)
    size = len(items)
    for i in range(size):
        for j in range(i + 1, size):
            if items[j] < items[i]:
                items[i], items[j] = items[j], items[i]
    return items


def counting_sort(values: Iterable[int]) -> list[int]:
    """Sort integers in the range 0..255 by counting occurrences.

    Raises ValueError for a value outside that range and TypeError for a
    value that is not an integer.
    """
    counts = [0] * COUNTING_RANGE
    for value in values:
        number = _as_index(value)
        if not 0 <= number < COUNTING_RANGE:
            raise ValueError(
                f"counting sort accepts values in 0..{COUNTING_RANGE - 1}, got {number}"
            )
        counts[number] += 1
    return [number for number, count in enumerate(counts) for _ in range(count)]


def _merge(left: list, right: list) -> tuple[list, int]:
    """Merge two sorted lists stably; also count cross inversions."""
    merged = []
    inversions = 0
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
            inversions += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, inversions


def _sort_and_count(items: list) -> tuple[list, int]:
    if len(items) <= 1:
        return list(items), 0
    middle = (len(items) + 1) // 2
    left, left_count = _sort_and_count(items[:middle])
    right, right_count = _sort_and_count(items[middle:])
    merged, cross_count = _merge(left, right)
    return merged, left_count + right_count + cross_count


def merge_sort(values: Iterable) -> list:
    """Stable top-down merge sort."""
    merged, _ = _sort_and_count(list(values))
    return merged


def count_inversions(values: Iterable) -> int:
    """Count pairs i < j with values[i] > values[j]."""
    _, inversions = _sort_and_count(list(values))
    return inversions


def _partition_last(items: list, start: int, end: int) -> int:
    pivot = items[end]
    boundary = start - 1
    for j in range(start, end):
        if items[j] <= pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[end] = items[end], items[boundary + 1]
    return boundary + 1


def _partition_first(items: list, low: int, high: int) -> int:
    pivot = items[low]
    left, right = low, high
    while left < right:
        while items[left] <= pivot and left < high:
            left += 1
        while right > low and items[right] > pivot:
            right -= 1
        if left < right:
            items[left], items[right] = items[right], items[left]
    items[low], items[right] = items[right], items[low]
    return right


def _quick_sort(values: Iterable, partition) -> list:
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        start, end = pending.pop()
        if start >= end:
            continue
        pivot_at = partition(items, start, end)
        pending.append((start, pivot_at - 1))
        pending.append((pivot_at + 1, end))
    return items


def quick_sort(values: Iterable) -> list:
    """Quick sort partitioning around the last element (Lomuto scheme)."""
    return _quick_sort(values, _partition_last)


def quick_sort_first_pivot(values: Iterable) -> list:
    """Quick sort partitioning around the first element."""
    return _quick_sort(values, _partition_first)


def heap_sort(values: Iterable) -> list:
    """Sort ascending by building a max-heap and extracting the root repeatedly."""
    items = build_max_heap(values)
    for end in range(len(items) - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        sift_down(items, end, 0)
    return items