"""Array-backed binary heaps and the heapify primitives they rest on."""

from collections.abc import Iterable


def sift_down(values: list, size: int, index: int) -> None:
    """Restore the max-heap property below ``index`` within ``values[:size]``, in place."""
    if size > len(values):
        raise ValueError(f"heap size {size} exceeds list length {len(values)}")
    while True:
        largest = index
        left = 2 * index + 1
        right = left + 1
        if left < size and values[left] > values[largest]:
            largest = left
        if right < size and values[right] > values[largest]:
            largest = right
        if largest == index:
            return
        values[index], values[largest] = values[largest], values[index]
        index = largest


def build_max_heap(values: Iterable) -> list:
    """Return a new list holding ``values`` arranged as a max-heap."""
    items = list(values)
    for index in range(len(items) // 2 - 1, -1, -1):
        sift_down(items, len(items), index)
    return items


class MaxHeap:
    """A max-heap supporting insertion and removal of the root."""

    def __init__(self, values: Iterable = ()):
        self._items = build_max_heap(values)

    def __len__(self) -> int:
        return len(self._items)

    def insert(self, key) -> None:
        """Add ``key`` and move it up until its parent is not smaller."""
        items = self._items
        items.append(key)
        position = len(items) - 1
        while position > 0:
            parent = (position - 1) // 2
            if items[parent] >= items[position]:
                break
            items[parent], items[position] = items[position], items[parent]
            position = parent

    def delete_root(self):
        """Remove and return the largest element."""
        if not self._items:
            raise IndexError("delete_root from an empty heap")
        root = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            sift_down(self._items, len(self._items), 0)
        return root

    def items(self) -> list:
        """Return the heap's array representation."""
        return list(self._items)


class MinHeap:
    """A min-heap supporting insertion and removal of any stored value."""

    def __init__(self, values: Iterable = ()):
        self._items = list(values)
        for index in range(len(self._items) // 2 - 1, -1, -1):
            self._sift_down(index)

    def __len__(self) -> int:
        return len(self._items)

    def _sift_up(self, position: int) -> None:
        items = self._items
        while position > 0:
            parent = (position - 1) // 2
            if items[parent] <= items[position]:
                return
            items[parent], items[position] = items[position], items[parent]
            position = parent

    def _sift_down(self, position: int) -> None:
        items = self._items
        size = len(items)
        while True:
            smallest = position
            left = 2 * position + 1
            right = left + 1
            if left < size and items[left] < items[smallest]:
                smallest = left
            if right < size and items[right] < items[smallest]:
                smallest = right
            if smallest == position:
                return
            items[position], items[smallest] = items[smallest], items[position]
            position = smallest

    def insert(self, value) -> None:
        """Add ``value`` to the heap."""
        self._items.append(value)
        self._sift_up(len(self._items) - 1)

    def delete(self, value) -> None:
        """Remove one occurrence of ``value``; ValueError if it is absent."""
        try:
            position = self._items.index(value)
        except ValueError:
            raise ValueError(f"{value!r} is not in the heap") from None
        last = self._items.pop()
        if position == len(self._items):
            return
        self._items[position] = last
        parent = (position - 1) // 2
        if position > 0 and self._items[position] < self._items[parent]:
            self._sift_up(position)
        else:
            self._sift_down(position)

    def items(self) -> list:
        """Return the heap's array representation."""
        return list(self._items)