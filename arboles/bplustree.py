"""B+ tree with linked leaves and lazy (tombstone) deletion."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class _Node:
    leaf: bool
    keys: list = field(default_factory=list)
    deleted: list[bool] = field(default_factory=list)
    children: list[_Node] = field(default_factory=list)
    next: Optional[_Node] = None


class BPlusTree:
    """B+ tree of minimum degree ``t``; all keys live in the linked leaves."""

    def __init__(self, t: int = 2) -> None:
        if t < 2:
            raise ValueError("minimum degree must be at least 2")
        self.t = t
        self._root = _Node(leaf=True)

    def _is_full(self, node: _Node) -> bool:
        return len(node.keys) == 2 * self.t - 1

    def _split_child(self, parent: _Node, i: int) -> None:
        t = self.t
        child = parent.children[i]
        if child.leaf:
            sibling = _Node(
                leaf=True,
                keys=child.keys[t - 1:],
                deleted=child.deleted[t - 1:],
                next=child.next,
            )
            del child.keys[t - 1:]
            del child.deleted[t - 1:]
            child.next = sibling
            separator = sibling.keys[0]
        else:
            sibling = _Node(
                leaf=False,
                keys=child.keys[t:],
                children=child.children[t:],
            )
            separator = child.keys[t - 1]
            del child.keys[t - 1:]
            del child.children[t:]
        parent.children.insert(i + 1, sibling)
        parent.keys.insert(i, separator)

    def insert(self, key) -> None:
        """Insert ``key``; duplicates are kept."""
        if self._is_full(self._root):
            new_root = _Node(leaf=False, children=[self._root])
            self._split_child(new_root, 0)
            self._root = new_root
        node = self._root
        while not node.leaf:
            i = bisect_right(node.keys, key)
            if self._is_full(node.children[i]):
                self._split_child(node, i)
                if key >= node.keys[i]:
                    i += 1
            node = node.children[i]
        i = bisect_right(node.keys, key)
        node.keys.insert(i, key)
        node.deleted.insert(i, False)

    def _locate(self, key) -> tuple[_Node, int] | None:
        node = self._root
        while not node.leaf:
            node = node.children[bisect_right(node.keys, key)]
        i = bisect_left(node.keys, key)
        if i < len(node.keys) and node.keys[i] == key and not node.deleted[i]:
            return node, i
        return None

    def __contains__(self, key) -> bool:
        return self._locate(key) is not None

    def delete_lazy(self, key) -> None:
        """Mark ``key`` as deleted in its leaf; raise KeyError if it is not present."""
        found = self._locate(key)
        if found is None:
            raise KeyError(key)
        leaf, i = found
        leaf.deleted[i] = True

    def __iter__(self) -> Iterator:
        node: Optional[_Node] = self._root
        while not node.leaf:
            node = node.children[0]
        while node is not None:
            yield from (key for key, gone in zip(node.keys, node.deleted) if not gone)
            node = node.next