import pytest

from arboles.naive_btree import NaiveBTree, NodeFullError


def test_three_inserts_fit_in_order_four():
    tree = NaiveBTree(4)
    for value in (10, 20, 30):
        tree.insert(value)
    assert tree.keys() == [10, 20, 30]


def test_fourth_insert_raises_node_full():
    tree = NaiveBTree(4)
    for value in (10, 20, 30):
        tree.insert(value)
    with pytest.raises(NodeFullError) as info:
        tree.insert(40)
    assert info.value.value == 40
    assert tree.keys() == [10, 20, 30]


def test_keys_keep_insertion_order():
    tree = NaiveBTree(4)
    tree.insert(30)
    tree.insert(10)
    assert tree.keys() == [30, 10]


@pytest.mark.parametrize("order", [2, 3, 5, 8])
def test_capacity_is_order_minus_one(order):
    tree = NaiveBTree(order)
    for value in range(order - 1):
        tree.insert(value)
    with pytest.raises(NodeFullError):
        tree.insert(order)
    assert len(tree.keys()) == order - 1


def test_default_order_is_four():
    tree = NaiveBTree()
    assert tree.capacity == 3


def test_order_below_two_rejected():
    with pytest.raises(ValueError):
        NaiveBTree(1)


def test_keys_returns_a_copy():
    tree = NaiveBTree(4)
    tree.insert(1)
    tree.keys().append(99)
    assert tree.keys() == [1]