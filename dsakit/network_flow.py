"""Maximum flow by the Ford-Fulkerson method with breadth-first augmenting paths."""

import math
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass, field
from itertools import pairwise


@dataclass
class FlowResult:
    """The maximum flow value and the augmenting paths that built it."""

    max_flow: float = 0
    paths: list[list[int]] = field(default_factory=list)


def _augmenting_path(
    residual: list[list[float]], source: int, sink: int
) -> tuple[list[int], float] | None:
    parent = {source: source}
    queue = deque([(source, math.inf)])
    while queue:
        node, capacity = queue.popleft()
        for dest, room in enumerate(residual[node]):
            if dest == node or dest in parent or room <= 0:
                continue
            parent[dest] = node
            bottleneck = min(capacity, room)
            if dest == sink:
                path = [sink]
                while path[-1] != source:
                    path.append(parent[path[-1]])
                path.reverse()
                return path, bottleneck
            queue.append((dest, bottleneck))
    return None


def ford_fulkerson(
    capacity: Sequence[Sequence[float]], source: int, sink: int
) -> FlowResult:
    """Maximum flow from ``source`` to ``sink`` in a capacity matrix.

    The input matrix is left unchanged.
    """
    residual = [list(row) for row in capacity]
    size = len(residual)
    if any(len(row) != size for row in residual):
        raise ValueError("capacity matrix must be square")
    for vertex in (source, sink):
        if not 0 <= vertex < size:
            raise IndexError(f"vertex {vertex} is outside 0..{size - 1}")
    if source == sink:
        raise ValueError("source and sink must differ")

    result = FlowResult()
    while (found := _augmenting_path(residual, source, sink)) is not None:
        path, bottleneck = found
        for u, v in pairwise(path):
            residual[u][v] -= bottleneck
            residual[v][u] += bottleneck
        result.max_flow += bottleneck
        result.paths.append(path)
    return result