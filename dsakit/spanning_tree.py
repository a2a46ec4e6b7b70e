"""Minimum spanning trees by Kruskal's and Prim's algorithms."""

import heapq
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from operator import attrgetter


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge."""

    src: int
    dest: int
    weight: float


class RankedDisjointSet:
    """Disjoint sets over ``0..size-1`` with union by size and path compression."""

    def __init__(self, size: int):
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self._parent = [-1] * size
        self._rank = [1] * size

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, i: int) -> int:
        """Return the representative of the set holding ``i``."""
        if not 0 <= i < len(self._parent):
            raise IndexError(f"element {i} is outside 0..{len(self._parent) - 1}")
        parent = self._parent
        root = i
        while parent[root] != -1:
            root = parent[root]
        while i != root and parent[i] != root:
            parent[i], i = root, parent[i]
        return root

    def unite(self, x: int, y: int) -> bool:
        """Merge the sets holding ``x`` and ``y``; False if they were already one."""
        s1 = self.find(x)
        s2 = self.find(y)
        if s1 == s2:
            return False
        if self._rank[s1] < self._rank[s2]:
            s1, s2 = s2, s1
        self._parent[s2] = s1
        self._rank[s1] += self._rank[s2]
        return True


def _as_edge(edge: Edge | tuple[int, int, float]) -> Edge:
    return edge if isinstance(edge, Edge) else Edge(*edge)


def _check_vertices(vertex_count: int, *vertices: int) -> None:
    for v in vertices:
        if not 0 <= v < vertex_count:
            raise IndexError(f"vertex {v} is outside 0..{vertex_count - 1}")


def kruskal(
    vertex_count: int, edges: Iterable[Edge | tuple[int, int, float]]
) -> list[Edge]:
    """Edges of a minimum spanning tree, lightest first.

    Each edge is reported with its smaller endpoint as ``src``.  Raises
    ValueError when the graph is not connected.
    """
    if vertex_count < 1:
        raise ValueError(f"graph needs at least one vertex, got {vertex_count}")
    candidates = sorted((_as_edge(e) for e in edges), key=attrgetter("weight"))
    for edge in candidates:
        _check_vertices(vertex_count, edge.src, edge.dest)
    forest = RankedDisjointSet(vertex_count)
    tree: list[Edge] = []
    for edge in candidates:
        if len(tree) == vertex_count - 1:
            break
        if forest.unite(edge.src, edge.dest):
            low, high = sorted((edge.src, edge.dest))
            tree.append(Edge(low, high, edge.weight))
    if len(tree) != vertex_count - 1:
        raise ValueError("graph is not connected")
    return tree


def kruskal_weight(
    vertex_count: int, edges: Iterable[tuple[int, int, float]]
) -> float:
    """Total weight of a minimum spanning forest of ``(x, y, weight)`` edges."""
    ordered = sorted((weight, x, y) for x, y, weight in edges)
    for _, x, y in ordered:
        _check_vertices(vertex_count, x, y)
    forest = RankedDisjointSet(vertex_count)
    return sum(weight for weight, x, y in ordered if forest.unite(x, y))


def prim_tree(matrix: Sequence[Sequence[float]]) -> list[Edge]:
    """Minimum spanning tree of an adjacency matrix grown from vertex 0.

    Zero entries mean no edge.  Returns one ``Edge(parent, vertex, weight)``
    for each vertex after 0, ordered by vertex.  Raises ValueError when the
    graph is not connected.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    if size == 0:
        return []
    distance = [math.inf] * size
    parent = [-1] * size
    in_tree = [False] * size
    distance[0] = 0
    for _ in range(size):
        best = math.inf
        u = -1
        for v in range(size):
            if not in_tree[v] and distance[v] < best:
                best, u = distance[v], v
        if u == -1:
            raise ValueError("graph is not connected")
        in_tree[u] = True
        for v, weight in enumerate(matrix[u]):
            if weight and not in_tree[v] and weight < distance[v]:
                distance[v] = weight
                parent[v] = u
    return [Edge(parent[v], v, matrix[parent[v]][v]) for v in range(1, size)]


def prim_weight(vertex_count: int, edges: Iterable[tuple[int, int, float]]) -> float:
    """Weight of the minimum spanning tree of the component holding vertex 0."""
    if vertex_count < 1:
        raise ValueError(f"graph needs at least one vertex, got {vertex_count}")
    adjacency: list[list[tuple[int, float]]] = [[] for _ in range(vertex_count)]
    for x, y, weight in edges:
        _check_vertices(vertex_count, x, y)
        adjacency[x].append((y, weight))
        adjacency[y].append((x, weight))

    visited = [False] * vertex_count
    total = 0
    queue: list[tuple[float, int]] = [(0, 0)]
    while queue:
        weight, node = heapq.heappop(queue)
        if visited[node]:
            continue
        visited[node] = True
        total += weight
        for neighbour, edge_weight in adjacency[node]:
            if not visited[neighbour]:
                heapq.heappush(queue, (edge_weight, neighbour))
    return total