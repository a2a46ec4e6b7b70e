"""A singly linked list addressed by 1-based positions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(slots=True, eq=False)
class _Node:
    data: object
    next: _Node | None = None


class LinkedList:
    """A singly linked list supporting insertion and deletion by position."""

    def __init__(self, values: Iterable = ()):
        self._head: _Node | None = None
        self._size = 0
        tail: _Node | None = None
        for value in values:
            node = _Node(value)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _node_at(self, position: int) -> _Node:
        node = self._head
        for _ in range(position - 1):
            node = node.next
        return node

    def insert(self, value, position: int) -> None:
        """Insert ``value`` so that it ends up at ``position`` (1 to len + 1)."""
        if not 1 <= position <= self._size + 1:
            raise IndexError(
                f"insert position {position} is outside 1..{self._size + 1}"
            )
        if position == 1:
            self._head = _Node(value, self._head)
        else:
            previous = self._node_at(position - 1)
            previous.next = _Node(value, previous.next)
        self._size += 1

    def delete(self, position: int):
        """Remove and return the value at ``position`` (1 to len)."""
        if not 1 <= position <= self._size:
            raise IndexError(f"delete position {position} is outside 1..{self._size}")
        if position == 1:
            removed = self._head
            self._head = removed.next
        else:
            previous = self._node_at(position - 1)
            removed = previous.next
            previous.next = removed.next
        self._size -= 1
        return removed.data