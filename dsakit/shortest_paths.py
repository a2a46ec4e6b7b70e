"""Single-source and all-pairs shortest paths."""

import heapq
import math
from collections.abc import Hashable, Iterable, Sequence
from itertools import count

from .graph import WeightedGraph


class NegativeCycleError(ValueError):
    """Raised when a graph holds a cycle of negative total weight."""


def bellman_ford(
    vertex_count: int, edges: Iterable[tuple[int, int, float]]
) -> list[float]:
    """Shortest distances from vertex 0 over directed ``(src, dst, weight)`` edges.

    Unreachable vertices get ``math.inf``; a reachable negative cycle raises
    NegativeCycleError.
    """
    if vertex_count < 1:
        raise ValueError(f"graph needs at least one vertex, got {vertex_count}")
    edge_list = list(edges)
    for src, dst, _ in edge_list:
        for v in (src, dst):
            if not 0 <= v < vertex_count:
                raise IndexError(f"vertex {v} is outside 0..{vertex_count - 1}")

    distance = [math.inf] * vertex_count
    distance[0] = 0

    def relax() -> bool:
        changed = False
        for src, dst, weight in edge_list:
            if distance[src] != math.inf and distance[src] + weight < distance[dst]:
                distance[dst] = distance[src] + weight
                changed = True
        return changed

    updated = False
    for _ in range(vertex_count - 1):
        updated = relax()
        if not updated:
            break
    if updated and any(
        distance[src] != math.inf and distance[src] + weight < distance[dst]
        for src, dst, weight in edge_list
    ):
        raise NegativeCycleError("graph has a negative-weight cycle")
    return distance


def dijkstra(graph: WeightedGraph, source: Hashable) -> dict[Hashable, float]:
    """Shortest distances from ``source`` to every node of ``graph``.

    Unreachable nodes get ``math.inf``.  Negative weights raise ValueError.
    """
    nodes = graph.nodes()
    for node in nodes:
        for _, weight in graph.neighbours(node):
            if weight < 0:
                raise ValueError(f"negative edge weight {weight} from {node!r}")

    distance: dict[Hashable, float] = {node: math.inf for node in nodes}
    distance[source] = 0
    tiebreak = count()
    heap = [(0, next(tiebreak), source)]
    while heap:
        dist, _, node = heapq.heappop(heap)
        if dist > distance[node]:
            continue
        for neighbour, weight in graph.neighbours(node):
            candidate = dist + weight
            if candidate < distance[neighbour]:
                distance[neighbour] = candidate
                heapq.heappush(heap, (candidate, next(tiebreak), neighbour))
    return distance


def floyd_warshall(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    """All-pairs shortest distances from a square weight matrix.

    Missing edges are ``math.inf``; the input is left unchanged.
    """
    dist = [list(row) for row in matrix]
    size = len(dist)
    if any(len(row) != size for row in dist):
        raise ValueError("weight matrix must be square")
    for k in range(size):
        through = dist[k]
        for row in dist:
            via = row[k]
            for j in range(size):
                if row[j] > via + through[j]:
                    row[j] = via + through[j]
    return dist