"""A B-tree sketch that never splits: a single leaf that fills up and then refuses keys."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass, field


class NodeFullError(Exception):
    """Raised when a key lands in a leaf that has no room left."""

    def __init__(self, value: object) -> None:
        super().__init__(f"cannot insert {value!r}: the node is full")
        self.value = value


@dataclass
class _Node:
    leaf: bool
    keys: list = field(default_factory=list)
    children: list[_Node] = field(default_factory=list)


class NaiveBTree:
    """A tree of fixed order that appends keys to its leaf and never rebalances."""

    def __init__(self, order: int = 4) -> None:
        if order < 2:
            raise ValueError("order must be at least 2")
        self.order = order
        self._root = _Node(leaf=True)

    @property
    def capacity(self) -> int:
        """Number of keys a node can hold."""
        return self.order - 1

    def insert(self, value) -> None:
        """Append ``value`` to the leaf it belongs in, or raise NodeFullError."""
        node = self._root
        while not node.leaf:
            node = node.children[bisect_left(node.keys, value)]
        if len(node.keys) >= self.capacity:
            raise NodeFullError(value)
        node.keys.append(value)

    def keys(self) -> list:
        """Keys held by the root, in the order they were inserted."""
        return list(self._root.keys)