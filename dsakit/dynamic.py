"""Dynamic-programming and exhaustive-search optimisation problems."""

from collections.abc import Iterable, Sequence
from itertools import pairwise, permutations


def knapsack_01(
    profits: Iterable[int], weights: Iterable[int], capacity: int
) -> int:
    """Best total profit from items taken whole, within ``capacity``.

    An empty item list or a non-positive capacity yields 0.
    """
    profits = list(profits)
    weights = list(weights)
    if len(profits) != len(weights):
        raise ValueError("profits and weights must have the same length")
    if capacity <= 0 or not profits:
        return 0
    best = [0] * (capacity + 1)
    for profit, weight in zip(profits, weights):
        if weight < 0:
            raise ValueError(f"weights must be non-negative, got {weight}")
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + profit)
    return best[capacity]


def subset_sum(values: Iterable[int], target: int) -> bool:
    """Whether some subset of ``values`` (each used at most once) sums to ``target``."""
    items = list(values)
    if any(value < 0 for value in items):
        raise ValueError("values must be non-negative")
    if target < 0:
        return False
    window = (1 << (target + 1)) - 1
    reachable = 1
    for value in items:
        reachable = (reachable | (reachable << value)) & window
    return bool(reachable >> target & 1)


def can_partition(values: Iterable[int]) -> bool:
    """Whether ``values`` splits into two groups with equal sums."""
    items = list(values)
    total = sum(items)
    if total % 2:
        return False
    return subset_sum(items, total // 2)


def tsp_min_cost(graph: Sequence[Sequence[int]], start: int = 0) -> int:
    """Cheapest tour visiting every vertex once and returning to ``start``.

    Every ordering of the other vertices is tried.
    """
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("cost matrix must be square")
    if not 0 <= start < size:
        raise IndexError(f"start vertex {start} is outside the graph")
    others = [vertex for vertex in range(size) if vertex != start]
    return min(
        sum(graph[a][b] for a, b in pairwise((start, *order, start)))
        for order in permutations(others)
    )