"""A self-balancing AVL search tree of distinct keys."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(slots=True, eq=False)
class _Node:
    key: object
    left: _Node | None = None
    right: _Node | None = None
    height: int = 1


def _height(node: _Node | None) -> int:
    return node.height if node is not None else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: _Node | None) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


def _rebalance(node: _Node) -> _Node:
    _update(node)
    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


class AVLTree:
    """A binary search tree kept height-balanced on insertion and deletion.

    Inserting a key already present leaves the tree unchanged, as does
    deleting a key that is absent.
    """

    def __init__(self, keys: Iterable = ()):
        self._root: _Node | None = None
        self._size = 0
        for key in keys:
            self.insert(key)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key) -> bool:
        return self.search(key)

    def _insert(self, node: _Node | None, key) -> _Node:
        if node is None:
            self._size += 1
            return _Node(key)
        if key < node.key:
            node.left = self._insert(node.left, key)
        elif key > node.key:
            node.right = self._insert(node.right, key)
        else:
            return node
        return _rebalance(node)

    def insert(self, key) -> None:
        """Add ``key`` to the tree."""
        self._root = self._insert(self._root, key)

    def _delete(self, node: _Node | None, key) -> _Node | None:
        if node is None:
            return None
        if key < node.key:
            node.left = self._delete(node.left, key)
        elif key > node.key:
            node.right = self._delete(node.right, key)
        elif node.left is None or node.right is None:
            self._size -= 1
            node = node.left if node.left is not None else node.right
            if node is None:
                return None
        else:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.key = successor.key
            node.right = self._delete(node.right, successor.key)
        return _rebalance(node)

    def delete(self, key) -> None:
        """Remove ``key`` if it is in the tree."""
        self._root = self._delete(self._root, key)

    def search(self, key) -> bool:
        """Whether ``key`` is in the tree."""
        node = self._root
        while node is not None:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right
        return False

    def preorder(self) -> list:
        """Keys in root, left, right order."""
        order = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            order.append(node.key)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return order

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path; 0 when empty."""
        return _height(self._root)