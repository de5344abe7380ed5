import pytest
from hypothesis import given
from hypothesis import strategies as st

from bstkit.iterator import BSTIterator
from bstkit.node import build


def test_source_example_sorted_order():
    root = build([7, 3, 15, 9, 20])
    assert list(BSTIterator(root)) == [3, 7, 9, 15, 20]


def test_has_next_tracks_progress():
    it = BSTIterator(build([2, 1]))
    assert it.has_next() is True
    assert next(it) == 1
    assert it.has_next() is True
    assert next(it) == 2
    assert it.has_next() is False


def test_empty_tree_has_nothing():
    it = BSTIterator(None)
    assert it.has_next() is False
    with pytest.raises(StopIteration):
        next(it)


def test_exhausted_iterator_raises():
    it = BSTIterator(build([4]))
    assert next(it) == 4
    with pytest.raises(StopIteration):
        next(it)


def test_iter_returns_self():
    it = BSTIterator(build([1, 2]))
    assert iter(it) is it


@given(st.lists(st.integers(-1000, 1000)))
def test_forward_is_ascending(values):
    assert list(BSTIterator(build(values))) == sorted(values)


@given(st.lists(st.integers(-1000, 1000)))
def test_reverse_is_descending(values):
    assert list(BSTIterator(build(values), reverse=True)) == sorted(values, reverse=True)