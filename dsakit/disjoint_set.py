"""Disjoint-set forest with union by rank and path compression."""


class UnionFind:
    """Maintains a partition of ``0..size-1`` into disjoint sets."""

    def __init__(self, size: int):
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self._parent = list(range(size))
        self._rank = [0] * size
        self._set_size = [1] * size
        self._num_sets = size

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, i: int) -> None:
        if not 0 <= i < len(self._parent):
            raise IndexError(f"element {i} is outside 0..{len(self._parent) - 1}")

    def find_set(self, i: int) -> int:
        """Return the representative of the set holding ``i``."""
        self._check(i)
        parent = self._parent
        root = i
        while parent[root] != root:
            root = parent[root]
        while parent[i] != root:
            parent[i], i = root, parent[i]
        return root

    def is_same_set(self, i: int, j: int) -> bool:
        """Whether ``i`` and ``j`` belong to the same set."""
        return self.find_set(i) == self.find_set(j)

    def size_of_set(self, i: int) -> int:
        """Number of elements in the set holding ``i``."""
        return self._set_size[self.find_set(i)]

    def num_disjoint_sets(self) -> int:
        """Number of sets currently maintained."""
        return self._num_sets

    def union_set(self, i: int, j: int) -> None:
        """Merge the sets holding ``i`` and ``j``."""
        x = self.find_set(i)
        y = self.find_set(j)
        if x == y:
            return
        if self._rank[x] > self._rank[y]:
            x, y = y, x
        self._parent[x] = y
        if self._rank[x] == self._rank[y]:
            self._rank[y] += 1
        self._set_size[y] += self._set_size[x]
        self._num_sets -= 1