"""Minimal n-ary tree: a value and a list of subtrees, newest child first."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class SimpleTree:
    """A node holding ``data`` and its child subtrees."""

    data: Any
    children: list[SimpleTree] = field(default_factory=list)

    def add_child(self, child: SimpleTree) -> None:
        """Attach ``child`` at the front of the children list."""
        self.children.insert(0, child)