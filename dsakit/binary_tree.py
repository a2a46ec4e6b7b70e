"""Binary trees: an unbalanced search tree and the classic traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(eq=False)
class TreeNode:
    """A binary tree node with an optional link back to its parent."""

    value: object
    left: TreeNode | None = None
    right: TreeNode | None = None
    parent: TreeNode | None = field(default=None, repr=False)


def inorder(root: TreeNode | None) -> list:
    """Values in left, root, right order."""
    order = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        order.append(node.value)
        node = node.right
    return order


def preorder(root: TreeNode | None) -> list:
    """Values in root, left, right order."""
    order = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        order.append(node.value)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return order


def postorder(root: TreeNode | None) -> list:
    """Values in left, right, root order."""
    reversed_order = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        reversed_order.append(node.value)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    reversed_order.reverse()
    return reversed_order


def level_order(root: TreeNode | None) -> list:
    """Values level by level from the root, left to right within a level."""
    order = []
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        order.append(node.value)
        for child in (node.left, node.right):
            if child is not None:
                queue.append(child)
    return order


def tree_height(root: TreeNode | None) -> int:
    """Number of nodes on the longest path from the root down to a leaf."""
    height = 0
    level = [root] if root is not None else []
    while level:
        height += 1
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return height


def morris_inorder(root: TreeNode | None) -> list:
    """In-order values using temporary threads instead of a stack.

    The tree is restored to its original shape before returning.
    """
    order = []
    current = root
    while current is not None:
        if current.left is None:
            order.append(current.value)
            current = current.right
            continue
        predecessor = current.left
        while predecessor.right is not None and predecessor.right is not current:
            predecessor = predecessor.right
        if predecessor.right is None:
            predecessor.right = current
            current = current.left
        else:
            predecessor.right = None
            order.append(current.value)
            current = current.right
    return order


class BinarySearchTree:
    """An unbalanced binary search tree; duplicate values are ignored."""

    def __init__(self, values: Iterable = ()):
        self.root: TreeNode | None = None
        for value in values:
            self.insert(value)

    def insert(self, value) -> None:
        """Add ``value`` below the node where the search for it ends."""
        if self.root is None:
            self.root = TreeNode(value)
            return
        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = TreeNode(value, parent=node)
                    return
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = TreeNode(value, parent=node)
                    return
                node = node.right
            else:
                return

    def inorder(self) -> list:
        """Values in ascending order."""
        return inorder(self.root)

    def preorder(self) -> list:
        """Values in root, left, right order."""
        return preorder(self.root)

    def postorder(self) -> list:
        """Values in left, right, root order."""
        return postorder(self.root)