"""B-tree with proactive splitting and lazy (tombstone) deletion."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class _Node:
    leaf: bool
    keys: list = field(default_factory=list)
    deleted: list[bool] = field(default_factory=list)
    children: list[_Node] = field(default_factory=list)


class BTree:
    """B-tree of a given order; deleted keys stay in place but are hidden."""

    def __init__(self, order: int = 4) -> None:
        if order < 3:
            raise ValueError("order must be at least 3")
        self.order = order
        self._root = _Node(leaf=True)

    @property
    def _max_keys(self) -> int:
        return self.order - 1

    def _split_child(self, parent: _Node, i: int) -> None:
        child = parent.children[i]
        mid = (self.order - 1) // 2
        sibling = _Node(
            leaf=child.leaf,
            keys=child.keys[mid + 1:],
            deleted=child.deleted[mid + 1:],
        )
        if not child.leaf:
            sibling.children = child.children[mid + 1:]
            del child.children[mid + 1:]
        up_key, up_deleted = child.keys[mid], child.deleted[mid]
        del child.keys[mid:]
        del child.deleted[mid:]
        parent.children.insert(i + 1, sibling)
        parent.keys.insert(i, up_key)
        parent.deleted.insert(i, up_deleted)

    def insert(self, value) -> None:
        """Insert ``value``; duplicates are kept."""
        if len(self._root.keys) == self._max_keys:
            new_root = _Node(leaf=False, children=[self._root])
            self._split_child(new_root, 0)
            self._root = new_root
        node = self._root
        while not node.leaf:
            i = bisect_right(node.keys, value)
            if len(node.children[i].keys) == self._max_keys:
                self._split_child(node, i)
                if value > node.keys[i]:
                    i += 1
            node = node.children[i]
        i = bisect_right(node.keys, value)
        node.keys.insert(i, value)
        node.deleted.insert(i, False)

    def _find(self, value) -> tuple[_Node, int] | None:
        node = self._root
        while True:
            i = bisect_left(node.keys, value)
            if i < len(node.keys) and node.keys[i] == value:
                return node, i
            if node.leaf:
                return None
            node = node.children[i]

    def __contains__(self, value) -> bool:
        found = self._find(value)
        if found is None:
            return False
        node, i = found
        return not node.deleted[i]

    def delete_lazy(self, value) -> bool:
        """Mark the first stored occurrence of ``value`` as deleted.

        Returns whether a stored key matched.
        """
        found = self._find(value)
        if found is None:
            return False
        node, i = found
        node.deleted[i] = True
        return True

    def __iter__(self) -> Iterator:
        return self._walk(self._root)

    def _walk(self, node: _Node) -> Iterator:
        if node.leaf:
            yield from (key for key, gone in zip(node.keys, node.deleted) if not gone)
            return
        for child, key, gone in zip(node.children, node.keys, node.deleted):
            yield from self._walk(child)
            if not gone:
                yield key
        yield from self._walk(node.children[-1])