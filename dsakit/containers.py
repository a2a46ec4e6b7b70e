"""A fixed-capacity stack and queue reversal."""

from collections import deque
from collections.abc import Iterable


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(Exception):
    """Raised when reading from an empty stack."""


class BoundedStack:
    """A last-in, first-out stack that holds at most ``capacity`` items."""

    def __init__(self, capacity: int = 5):
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._items: list = []

    def __len__(self) -> int:
        return len(self._items)

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def peek(self):
        """Return the top item without removing it."""
        if self.is_empty():
            raise StackUnderflowError("peek at an empty stack")
        return self._items[-1]

    def push(self, item) -> None:
        """Put ``item`` on top of the stack."""
        if self.is_full():
            raise StackOverflowError(f"stack is full at {self.capacity} items")
        self._items.append(item)

    def pop(self):
        """Remove and return the top item."""
        if self.is_empty():
            raise StackUnderflowError("pop from an empty stack")
        return self._items.pop()


def reverse_queue(queue: Iterable) -> deque:
    """Return a new queue holding the items of ``queue`` in reverse order."""
    stack = list(queue)
    reversed_queue: deque = deque()
    while stack:
        reversed_queue.append(stack.pop())
    return reversed_queue


def reverse_queue_recursive(queue: deque) -> None:
    """Reverse ``queue`` in place by recursion."""
    if not queue:
        return
    front = queue.popleft()
    reverse_queue_recursive(queue)
    queue.append(front)