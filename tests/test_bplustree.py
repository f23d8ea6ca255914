import pytest
from hypothesis import given
from hypothesis import strategies as st

from arboles.bplustree import BPlusTree

DEMO = [10, 20, 30, 40, 50, 60, 70, 80]


def _demo_tree():
    tree = BPlusTree(2)
    for value in DEMO:
        tree.insert(value)
    return tree


def test_traversal_of_demo_data():
    assert list(_demo_tree()) == DEMO


def test_lazy_delete_of_demo_data():
    tree = _demo_tree()
    tree.delete_lazy(30)
    tree.delete_lazy(50)
    assert list(tree) == [10, 20, 40, 60, 70, 80]
    assert 30 not in tree
    assert 50 not in tree
    assert 40 in tree


def test_delete_missing_raises_key_error():
    tree = _demo_tree()
    with pytest.raises(KeyError):
        tree.delete_lazy(35)


def test_delete_twice_raises_key_error():
    tree = _demo_tree()
    tree.delete_lazy(30)
    with pytest.raises(KeyError):
        tree.delete_lazy(30)


def test_empty_tree():
    tree = BPlusTree(2)
    assert list(tree) == []
    assert 10 not in tree
    with pytest.raises(KeyError):
        tree.delete_lazy(10)


def test_degree_below_two_rejected():
    with pytest.raises(ValueError):
        BPlusTree(1)


@given(st.lists(st.integers(-1000, 1000)), st.sampled_from([2, 3, 4]))
def test_iteration_is_sorted_with_duplicates(values, t):
    tree = BPlusTree(t)
    for value in values:
        tree.insert(value)
    assert list(tree) == sorted(values)


@given(st.lists(st.integers(-1000, 1000), unique=True), st.sampled_from([2, 3, 5]))
def test_every_inserted_key_is_found(values, t):
    tree = BPlusTree(t)
    for value in values:
        tree.insert(value)
    assert all(value in tree for value in values)


@given(st.data())
def test_lazy_delete_removes_exactly_the_chosen_keys(data):
    values = data.draw(st.lists(st.integers(-500, 500), unique=True))
    removed = data.draw(st.sets(st.sampled_from(values)) if values else st.just(set()))
    tree = BPlusTree(2)
    for value in values:
        tree.insert(value)
    for value in removed:
        tree.delete_lazy(value)
    assert list(tree) == sorted(set(values) - removed)
    assert all((value in tree) == (value not in removed) for value in values)