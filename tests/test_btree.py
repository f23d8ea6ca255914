import pytest
from hypothesis import given
from hypothesis import strategies as st

from arboles.btree import BTree


def _demo_tree():
    tree = BTree(4)
    for value in (10, 20, 30, 40, 50):
        tree.insert(value)
    return tree


def test_sequential_access_of_demo():
    assert list(_demo_tree()) == [10, 20, 30, 40, 50]


def test_lazy_delete_hides_key():
    tree = _demo_tree()
    assert 30 in tree
    assert tree.delete_lazy(30) is True
    assert 30 not in tree
    assert list(tree) == [10, 20, 40, 50]


def test_delete_missing_returns_false():
    tree = _demo_tree()
    assert tree.delete_lazy(99) is False
    assert list(tree) == [10, 20, 30, 40, 50]


def test_empty_tree():
    tree = BTree(4)
    assert list(tree) == []
    assert 1 not in tree


def test_order_below_three_rejected():
    with pytest.raises(ValueError):
        BTree(2)


def test_reinserting_deleted_value_makes_it_visible_again():
    tree = BTree(4)
    tree.insert(5)
    tree.delete_lazy(5)
    tree.insert(5)
    assert list(tree) == [5]


@given(st.lists(st.integers(-1000, 1000)), st.sampled_from([3, 4, 5, 7]))
def test_iteration_is_sorted_with_duplicates(values, order):
    tree = BTree(order)
    for value in values:
        tree.insert(value)
    assert list(tree) == sorted(values)


@given(st.lists(st.integers(-1000, 1000), unique=True), st.sampled_from([3, 4, 6]))
def test_every_inserted_value_is_found(values, order):
    tree = BTree(order)
    for value in values:
        tree.insert(value)
    assert all(value in tree for value in values)


@given(st.data())
def test_lazy_delete_removes_exactly_the_chosen_values(data):
    values = data.draw(st.lists(st.integers(-500, 500), unique=True))
    removed = data.draw(st.sets(st.sampled_from(values)) if values else st.just(set()))
    tree = BTree(4)
    for value in values:
        tree.insert(value)
    for value in removed:
        assert tree.delete_lazy(value)
    assert list(tree) == sorted(set(values) - removed)
    assert all((value in tree) == (value not in removed) for value in values)