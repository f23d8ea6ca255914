"""General n-ary tree whose nodes know their parent and their ordered children."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional


class Node:
    """A tree node holding ``data``, a link to its parent and its ordered children."""

    def __init__(self, data: Any) -> None:
        self.data = data
        self.parent: Optional[Node] = None
        self._children: list[Node] = []

    def __repr__(self) -> str:
        return f"Node({self.data!r})"

    def add_child(self, child: Node) -> None:
        """Append ``child`` as the last child, detaching it from any former parent."""
        if child.parent is not None:
            child.parent._detach(child)
        child.parent = self
        self._children.append(child)

    def _detach(self, child: Node) -> None:
        for position, candidate in enumerate(self._children):
            if candidate is child:
                del self._children[position]
                child.parent = None
                return

    def root(self) -> Node:
        """The topmost ancestor of this node."""
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def children(self) -> list[Node]:
        """The children of this node, leftmost first."""
        return list(self._children)

    @property
    def first_child(self) -> Optional[Node]:
        """The leftmost child, or None for a leaf."""
        return self._children[0] if self._children else None

    @property
    def right_sibling(self) -> Optional[Node]:
        """The next child of the same parent, or None."""
        if self.parent is None:
            return None
        siblings = self.parent._children
        for position, candidate in enumerate(siblings):
            if candidate is self:
                return siblings[position + 1] if position + 1 < len(siblings) else None
        return None

    def _nodes(self) -> Iterator[Node]:
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node._children))

    def find(self, data: Any) -> Optional[Node]:
        """The first node in preorder whose data equals ``data``, or None."""
        return next((node for node in self._nodes() if node.data == data), None)

    def insert(self, parent_data: Any, data: Any) -> Node:
        """Add a new node holding ``data`` under the node holding ``parent_data``.

        Raises KeyError if no node holds ``parent_data``.
        """
        parent = self.find(parent_data)
        if parent is None:
            raise KeyError(parent_data)
        child = Node(data)
        parent.add_child(child)
        return child

    def remove(self, data: Any) -> Node:
        """Detach the node holding ``data`` together with its subtree and return it.

        Raises KeyError if no node holds ``data`` and ValueError if it is the root.
        """
        node = self.find(data)
        if node is None:
            raise KeyError(data)
        if node.parent is None:
            raise ValueError("the root cannot be removed")
        node.parent._detach(node)
        return node

    def preorder(self) -> Iterator[Any]:
        """Data of the subtree: node first, then each child's subtree."""
        return (node.data for node in self._nodes())

    def inorder(self) -> Iterator[Any]:
        """Data of the subtree: first child's subtree, node, then the other children."""
        if self._children:
            yield from self._children[0].inorder()
        yield self.data
        for child in self._children[1:]:
            yield from child.inorder()

    def postorder(self) -> Iterator[Any]:
        """Data of the subtree: each child's subtree first, then the node."""
        for child in self._children:
            yield from child.postorder()
        yield self.data