"""Adjacency-list graphs, traversals, articulation points and greedy colouring."""

from collections import deque
from collections.abc import Hashable, Iterable, Mapping, Sequence


class Graph:
    """An undirected, unweighted graph keyed by hashable nodes."""

    def __init__(self):
        self._adjacency: dict[Hashable, list[Hashable]] = {}

    def add_edge(self, x: Hashable, y: Hashable) -> None:
        """Connect ``x`` and ``y`` in both directions."""
        self._adjacency.setdefault(x, []).append(y)
        self._adjacency.setdefault(y, []).append(x)

    def neighbours(self, node: Hashable) -> list[Hashable]:
        """Neighbours of ``node`` in the order their edges were added."""
        return list(self._adjacency.get(node, ()))

    def bfs(self, source: Hashable) -> list[Hashable]:
        """Nodes reachable from ``source`` in breadth-first order."""
        visited = {source}
        order = []
        queue = deque([source])
        while queue:
            node = queue.popleft()
            order.append(node)
            for neighbour in self._adjacency.get(node, ()):
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order

    def dfs(self, source: Hashable) -> list[Hashable]:
        """Nodes reachable from ``source`` in depth-first (preorder) order."""
        visited = {source}
        order = [source]
        stack = [iter(self._adjacency.get(source, ()))]
        while stack:
            for neighbour in stack[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    stack.append(iter(self._adjacency.get(neighbour, ())))
                    break
            else:
                stack.pop()
        return order


class WeightedGraph:
    """A graph whose edges carry weights and may be one-way."""

    def __init__(self):
        self._adjacency: dict[Hashable, list[tuple[Hashable, float]]] = {}

    def add_edge(
        self, u: Hashable, v: Hashable, weight: float, bidirectional: bool = True
    ) -> None:
        """Add an edge from ``u`` to ``v``, and back when ``bidirectional``."""
        self._adjacency.setdefault(u, []).append((v, weight))
        back = self._adjacency.setdefault(v, [])
        if bidirectional:
            back.append((u, weight))

    def neighbours(self, node: Hashable) -> list[tuple[Hashable, float]]:
        """``(neighbour, weight)`` pairs for the edges leaving ``node``."""
        return list(self._adjacency.get(node, ()))

    def nodes(self) -> list[Hashable]:
        """Every node mentioned by an edge, in the order first seen."""
        return list(self._adjacency)


def _adjacency_lists(
    vertex_count: int,
    adjacency: Mapping[int, Iterable[int]] | Sequence[Iterable[int]],
) -> list[list[int]]:
    if vertex_count < 0:
        raise ValueError(f"vertex count must be non-negative, got {vertex_count}")
    if isinstance(adjacency, Mapping):
        for vertex in adjacency:
            if not 0 <= vertex < vertex_count:
                raise IndexError(f"vertex {vertex} is outside 0..{vertex_count - 1}")
        lists = [list(adjacency.get(v, ())) for v in range(vertex_count)]
    else:
        rows = [list(row) for row in adjacency]
        if len(rows) > vertex_count:
            raise IndexError("adjacency lists more vertices than vertex_count")
        lists = rows + [[] for _ in range(vertex_count - len(rows))]
    for row in lists:
        for v in row:
            if not 0 <= v < vertex_count:
                raise IndexError(f"vertex {v} is outside 0..{vertex_count - 1}")
    return lists


def articulation_points(
    vertex_count: int,
    adjacency: Mapping[int, Iterable[int]] | Sequence[Iterable[int]],
) -> list[int]:
    """Vertices whose removal disconnects their component (Tarjan), ascending."""
    lists = _adjacency_lists(vertex_count, adjacency)
    discovered = [-1] * vertex_count
    low = [0] * vertex_count
    parent = [-1] * vertex_count
    points: set[int] = set()
    clock = 0

    for root in range(vertex_count):
        if discovered[root] != -1:
            continue
        discovered[root] = low[root] = clock
        clock += 1
        root_children = 0
        stack = [(root, iter(lists[root]))]
        while stack:
            u, pending = stack[-1]
            for v in pending:
                if discovered[v] == -1:
                    parent[v] = u
                    if u == root:
                        root_children += 1
                    discovered[v] = low[v] = clock
                    clock += 1
                    stack.append((v, iter(lists[v])))
                    break
                if v != parent[u]:
                    low[u] = min(low[u], discovered[v])
            else:
                stack.pop()
                if stack:
                    p = stack[-1][0]
                    low[p] = min(low[p], low[u])
                    if p != root and low[u] >= discovered[p]:
                        points.add(p)
        if root_children > 1:
            points.add(root)
    return sorted(points)


def greedy_coloring(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Colour vertices in index order with the smallest colour free of their neighbours.

    Returns the colour of each vertex; vertex 0 always gets colour 0.
    """
    neighbours = _adjacency_lists(vertex_count, [])
    for x, y in edges:
        for v in (x, y):
            if not 0 <= v < vertex_count:
                raise IndexError(f"vertex {v} is outside 0..{vertex_count - 1}")
        neighbours[x].append(y)
        neighbours[y].append(x)

    colours = [-1] * vertex_count
    for vertex in range(vertex_count):
        taken = {colours[n] for n in neighbours[vertex] if colours[n] != -1}
        colour = 0
        while colour in taken:
            colour += 1
        colours[vertex] = colour
    return colours