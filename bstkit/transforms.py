"""Operations that reshape, rebuild, repair or check binary search trees."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from bstkit.node import TreeNode


def _splice_out(node: TreeNode) -> TreeNode | None:
    """Return the subtree that replaces ``node`` once it is removed."""
    if node.left is None:
        return node.right
    if node.right is None:
        return node.left
    rightmost = node.left
    while rightmost.right is not None:
        rightmost = rightmost.right
    rightmost.right = node.right
    return node.left


def delete_node(root: TreeNode | None, key: int) -> TreeNode | None:
    """Remove the first node holding ``key`` and return the new root.

    The removed node's right subtree is hung under the rightmost node of its
    left subtree. A tree without ``key`` is returned unchanged.
    """
    if root is None:
        return None
    if root.val == key:
        return _splice_out(root)
    node: TreeNode | None = root
    while node is not None:
        if node.val > key:
            if node.left is not None and node.left.val == key:
                node.left = _splice_out(node.left)
                break
            node = node.left
        else:
            if node.right is not None and node.right.val == key:
                node.right = _splice_out(node.right)
                break
            node = node.right
    return root


def from_preorder(preorder: Iterable[int]) -> TreeNode | None:
    """Build the tree whose pre-order traversal is ``preorder``.

    A value equal to an ancestor's value goes into that ancestor's left subtree.
    """
    root: TreeNode | None = None
    stack: list[TreeNode] = []
    for val in preorder:
        node = TreeNode(val)
        if root is None:
            root = node
            stack.append(node)
            continue
        parent = None
        while stack and stack[-1].val < val:
            parent = stack.pop()
        if parent is None:
            stack[-1].left = node
        else:
            parent.right = node
        stack.append(node)
    return root


def _inorder_nodes(root: TreeNode | None) -> Iterator[TreeNode]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def recover(root: TreeNode | None) -> None:
    """Swap back the two values of a tree in which exactly two were exchanged.

    Raises ValueError if the tree is already in order.
    """
    first: TreeNode | None = None
    middle: TreeNode | None = None
    last: TreeNode | None = None
    prev: TreeNode | None = None
    for node in _inorder_nodes(root):
        if prev is not None and prev.val > node.val:
            if first is None:
                first, middle = prev, node
            else:
                last = node
        prev = node
    if first is None or middle is None:
        raise ValueError("tree has no misplaced values")
    other = last if last is not None else middle
    first.val, other.val = other.val, first.val


@dataclass(frozen=True)
class _Span:
    maxi: float
    mini: float
    size: int


_EMPTY = _Span(-math.inf, math.inf, 0)


def _postorder(root: TreeNode | None) -> Iterator[TreeNode]:
    stack: list[tuple[TreeNode, bool]] = [(root, False)] if root is not None else []
    while stack:
        node, visited = stack.pop()
        if visited:
            yield node
            continue
        stack.append((node, True))
        for child in (node.right, node.left):
            if child is not None:
                stack.append((child, False))


def largest_bst_size(root: TreeNode | None) -> int:
    """Return the number of nodes in the largest subtree that is a valid BST."""
    spans: dict[int, _Span] = {}
    result = _EMPTY
    for node in _postorder(root):
        left = spans.pop(id(node.left), _EMPTY) if node.left is not None else _EMPTY
        right = spans.pop(id(node.right), _EMPTY) if node.right is not None else _EMPTY
        if left.maxi < node.val < right.mini:
            result = _Span(
                max(node.val, right.maxi),
                min(node.val, left.mini),
                1 + left.size + right.size,
            )
        else:
            result = _Span(math.inf, -math.inf, max(left.size, right.size))
        spans[id(node)] = result
    return result.size


def is_valid(root: TreeNode | None) -> bool:
    """Return whether every value lies strictly between its ancestors' bounds."""
    stack: list[tuple[TreeNode | None, float, float]] = [(root, -math.inf, math.inf)]
    while stack:
        node, low, high = stack.pop()
        if node is None:
            continue
        if not low < node.val < high:
            return False
        stack.append((node.left, low, node.val))
        stack.append((node.right, node.val, high))
    return True