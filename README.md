# arboles

Small tree data structures in plain Python, with no dependencies outside the
standard library.

- `arboles.naive_btree.NaiveBTree(order=4)`: a B-tree that has a single leaf
  and never splits it. `insert(value)` appends the value to the leaf and raises
  `NodeFullError` once the leaf holds `order - 1` keys (the `capacity`
  property). `keys()` returns the stored keys in insertion order.
- `arboles.btree.BTree(order=4)`: a B-tree (order at least 3) that splits full
  nodes on the way down. `insert(value)` keeps duplicates; `value in tree`
  searches; `delete_lazy(value)` marks the first stored occurrence as deleted
  and returns whether one was found; iterating yields the live keys in order.
- `arboles.bplustree.BPlusTree(t=2)`: a B+ tree of minimum degree `t` (at least
  2) whose keys all live in linked leaves. `insert(key)`, `key in tree`,
  `delete_lazy(key)` (raises `KeyError` if the key is absent or already
  deleted), and iteration, which walks the leaf chain.
- `arboles.simple_tree.SimpleTree(data)`: a minimal node with `data` and a
  `children` list; `add_child(child)` puts the child at the front.
- `arboles.general_tree.Node(data)`: an n-ary tree node with `parent`,
  `children()`, `first_child`, `right_sibling` and `root()`. `find(data)`
  returns the first match in preorder or `None`; `insert(parent_data, data)`
  adds and returns a new child (raises `KeyError` if the parent is not found);
  `remove(data)` detaches and returns a subtree (raises `KeyError` if not
  found, `ValueError` for the root). `preorder()`, `inorder()` and
  `postorder()` yield node data.
- `arboles.xml_io`: `write_xml(tree, stream, to_string=str)` and
  `save_xml(tree, path, to_string=str)` write a `Node` tree as XML, one
  element per line; `read_xml(stream, from_string=str)` and
  `load_xml(path, from_string=str)` rebuild it, returning `None` when the input
  holds no node.

## Installation

```
pip install .
```

## Usage

```python
from arboles.btree import BTree

tree = BTree(4)
for value in (10, 20, 30, 40, 50):
    tree.insert(value)

print(list(tree))        # [10, 20, 30, 40, 50]
tree.delete_lazy(30)
print(30 in tree)        # False
print(list(tree))        # [10, 20, 40, 50]
```

```python
from arboles.bplustree import BPlusTree

tree = BPlusTree(2)
for key in (10, 20, 30, 40, 50, 60, 70, 80):
    tree.insert(key)
tree.delete_lazy(50)
print(list(tree))        # [10, 20, 30, 40, 60, 70, 80]
```

```python
from arboles.general_tree import Node
from arboles.xml_io import save_xml, load_xml

root = Node(1)
root.add_child(Node(2))
root.add_child(Node(3))
root.insert(3, 10)

print(list(root.preorder()))   # [1, 2, 3, 10]

save_xml(root, "arbol.xml", str)
loaded = load_xml("arbol.xml", int)
print(list(loaded.preorder())) # [1, 2, 3, 10]
```

## Demo

A walkthrough of the general tree (including XML save and load), the B-tree
and the B+ tree:

```
arboles-demo
```

Pass `general`, `btree`, `bplus` or `all` (the default) to choose which part
runs. The XML step writes `arbol.xml` in the current directory; use
`--xml PATH` to write elsewhere. The command exits with status 1 if that file
cannot be written or read.

## Limitations

- Deletion in `BTree` and `BPlusTree` is lazy only: keys are marked as deleted
  and hidden from searches and iteration, but never removed, and the trees are
  never rebalanced or shrunk.
- `NaiveBTree` never grows beyond its single leaf.
- The XML reader is line-oriented and is meant for files written by
  `write_xml`; it is not a general XML parser.

## Tests

```
pip install .[test]
pytest
```