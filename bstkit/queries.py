"""Lookups on binary search trees."""

from __future__ import annotations

from itertools import islice

from bstkit.iterator import BSTIterator
from bstkit.node import TreeNode


def search(root: TreeNode | None, val: int) -> TreeNode | None:
    """Return the node holding ``val``, or ``None``."""
    node = root
    while node is not None:
        if node.val == val:
            return node
        node = node.left if node.val > val else node.right
    return None


def ceil(root: TreeNode | None, key: int) -> int | None:
    """Return the smallest value ``>= key``, or ``None`` if there is none."""
    result = None
    node = root
    while node is not None:
        if node.val == key:
            return key
        if node.val > key:
            result = node.val
            node = node.left
        else:
            node = node.right
    return result


def floor(root: TreeNode | None, key: int) -> int | None:
    """Return the largest value ``<= key``, or ``None`` if there is none."""
    result = None
    node = root
    while node is not None:
        if node.val == key:
            return key
        if node.val < key:
            result = node.val
            node = node.right
        else:
            node = node.left
    return result


def predecessor(root: TreeNode | None, key: int) -> int | None:
    """Return the largest value strictly below ``key``, or ``None``."""
    result = None
    node = root
    while node is not None:
        if node.val < key:
            result = node.val
            node = node.right
        else:
            node = node.left
    return result


def successor(root: TreeNode | None, key: int) -> int | None:
    """Return the smallest value strictly above ``key``, or ``None``."""
    result = None
    node = root
    while node is not None:
        if node.val > key:
            result = node.val
            node = node.left
        else:
            node = node.right
    return result


def neighbours(root: TreeNode | None, key: int) -> tuple[int | None, int | None]:
    """Return ``(predecessor, successor)`` of ``key``."""
    return predecessor(root, key), successor(root, key)


def lowest_common_ancestor(root: TreeNode | None, p: int, q: int) -> TreeNode | None:
    """Return the lowest node whose subtree spans both ``p`` and ``q``."""
    node = root
    while node is not None:
        if p < node.val and q < node.val:
            node = node.left
        elif p > node.val and q > node.val:
            node = node.right
        else:
            return node
    return root


def kth_smallest(root: TreeNode | None, k: int) -> int:
    """Return the k-th smallest value (1-based); IndexError if out of range."""
    return _kth(BSTIterator(root), k)


def kth_largest(root: TreeNode | None, k: int) -> int:
    """Return the k-th largest value (1-based); IndexError if out of range."""
    return _kth(BSTIterator(root, reverse=True), k)


def _kth(values: BSTIterator, k: int) -> int:
    if k < 1:
        raise IndexError(f"k must be at least 1, got {k}")
    for val in islice(values, k - 1, k):
        return val
    raise IndexError(f"tree has fewer than {k} values")


def two_sum(root: TreeNode | None, k: int) -> bool:
    """Return whether two distinct values in the tree add up to ``k``."""
    if root is None:
        return False
    low = BSTIterator(root)
    high = BSTIterator(root, reverse=True)
    i = next(low)
    j = next(high)
    while i < j:
        total = i + j
        if total == k:
            return True
        if total < k:
            i = next(low)
        else:
            j = next(high)
    return False