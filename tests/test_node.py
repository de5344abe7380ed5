from hypothesis import given
from hypothesis import strategies as st

from bstkit.node import TreeNode, build, inorder, insert, size

CEIL_TREE = [8, 3, 10, 1, 6, 14, 13, 4, 7]


def test_insert_into_empty_creates_node():
    root = insert(None, 42)
    assert root.val == 42
    assert root.left is None and root.right is None


def test_insert_returns_same_root():
    root = build(CEIL_TREE)
    assert insert(root, 9) is root
    assert list(inorder(root)) == sorted(CEIL_TREE + [9])


def test_build_shape_matches_insertion_order():
    root = build(CEIL_TREE)
    assert root.val == 8
    assert root.left.val == 3
    assert root.right.val == 10
    assert root.right.right.left.val == 13
    assert root.left.right.left.val == 4


def test_duplicates_go_right():
    root = build([5, 5])
    assert root.left is None
    assert root.right.val == 5


def test_build_empty_is_none():
    assert build([]) is None


def test_inorder_of_empty_tree():
    assert list(inorder(None)) == []


def test_size_of_empty_tree():
    assert size(None) == 0


def test_manual_tree_inorder():
    root = TreeNode(2, TreeNode(1), TreeNode(3))
    assert list(inorder(root)) == [1, 2, 3]
    assert size(root) == 3


@given(st.lists(st.integers(-1000, 1000)))
def test_inorder_is_sorted(values):
    assert list(inorder(build(values))) == sorted(values)


@given(st.lists(st.integers(-1000, 1000)))
def test_size_counts_all_values(values):
    assert size(build(values)) == len(values)