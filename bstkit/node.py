"""Binary search tree nodes and the basic operations for building them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class TreeNode:
    """A node of a binary search tree."""

    val: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def insert(root: TreeNode | None, val: int) -> TreeNode:
    """Insert ``val`` into the tree and return its root.

    Values equal to a node's value go into its right subtree.
    """
    node = TreeNode(val)
    if root is None:
        return node
    current = root
    while True:
        if current.val > val:
            if current.left is None:
                current.left = node
                return root
            current = current.left
        else:
            if current.right is None:
                current.right = node
                return root
            current = current.right


def build(values: Iterable[int]) -> TreeNode | None:
    """Build a tree by inserting ``values`` in order; ``None`` if there are none."""
    root: TreeNode | None = None
    for val in values:
        root = insert(root, val)
    return root


def inorder(root: TreeNode | None) -> Iterator[int]:
    """Yield the tree's values in in-order sequence."""
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.val
        node = node.right


def size(root: TreeNode | None) -> int:
    """Return the number of nodes in the tree."""
    count = 0
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        count += 1
        stack.extend(child for child in (node.left, node.right) if child is not None)
    return count