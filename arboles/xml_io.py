"""Line-oriented XML persistence for general trees."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable
from typing import Any, Optional, TextIO
from xml.sax.saxutils import escape, unescape

from arboles.general_tree import Node

_INDENT = "  "
_ENTITIES = {'"': "&quot;", "\n": "&#10;", "\r": "&#13;"}
_REVERSE_ENTITIES = {value: key for key, value in _ENTITIES.items()}
_ATTRIBUTE = 'dato="'


def _write_node(stream: TextIO, node: Node, to_string: Callable[[Any], str], level: int) -> None:
    indent = _INDENT * level
    value = escape(to_string(node.data), _ENTITIES)
    children = node.children()
    if not children:
        stream.write(f'{indent}<nodo dato="{value}"/>\n')
        return
    stream.write(f'{indent}<nodo dato="{value}">\n')
    for child in children:
        _write_node(stream, child, to_string, level + 1)
    stream.write(f"{indent}</nodo>\n")


def write_xml(tree: Node, stream: TextIO, to_string: Callable[[Any], str] = str) -> None:
    """Write ``tree`` to ``stream``, one element per line, data as ``to_string`` renders it."""
    stream.write('<?xml version="1.0" encoding="UTF-8"?>\n')
    stream.write("<arbol>\n")
    _write_node(stream, tree, to_string, 1)
    stream.write("</arbol>\n")


def save_xml(
    tree: Node, path: str | os.PathLike, to_string: Callable[[Any], str] = str
) -> None:
    """Write ``tree`` to the file at ``path``."""
    with open(path, "w", encoding="utf-8") as stream:
        write_xml(tree, stream, to_string)


def _attribute(line: str) -> Optional[str]:
    start = line.find(_ATTRIBUTE)
    if start < 0:
        return None
    start += len(_ATTRIBUTE)
    end = line.find('"', start)
    if end < 0:
        return None
    return unescape(line[start:end], _REVERSE_ENTITIES)


def read_xml(
    stream: Iterable[str], from_string: Callable[[str], Any] = str
) -> Optional[Node]:
    """Rebuild a tree from lines written by :func:`write_xml`; None if there is no node."""
    stack: list[Node] = []
    root: Optional[Node] = None
    for line in stream:
        if "<?xml" in line or "<arbol" in line or "</arbol" in line:
            continue
        opens = False
        if "/>" in line:
            pass
        elif "<nodo" in line and "</nodo" not in line:
            opens = True
        elif "</nodo" in line:
            if stack:
                stack.pop()
            continue
        else:
            continue
        value = _attribute(line)
        if value is None:
            continue
        node = Node(from_string(value))
        if stack:
            stack[-1].add_child(node)
        else:
            root = node
        if opens:
            stack.append(node)
    return root


def load_xml(
    path: str | os.PathLike, from_string: Callable[[str], Any] = str
) -> Optional[Node]:
    """Read a tree from the file at ``path``."""
    with open(path, encoding="utf-8") as stream:
        return read_xml(stream, from_string)