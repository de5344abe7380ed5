"""Lazy in-order traversal of a binary search tree."""

from __future__ import annotations

from collections.abc import Iterator

from bstkit.node import TreeNode


class BSTIterator(Iterator[int]):
    """Yield a tree's values in ascending order, or descending when ``reverse``."""

    def __init__(self, root: TreeNode | None, reverse: bool = False) -> None:
        self._reverse = reverse
        self._stack: list[TreeNode] = []
        self._push_all(root)

    def _push_all(self, node: TreeNode | None) -> None:
        while node is not None:
            self._stack.append(node)
            node = node.right if self._reverse else node.left

    def __iter__(self) -> BSTIterator:
        return self

    def __next__(self) -> int:
        if not self._stack:
            raise StopIteration
        node = self._stack.pop()
        self._push_all(node.left if self._reverse else node.right)
        return node.val

    def has_next(self) -> bool:
        """Return whether another value remains."""
        return bool(self._stack)