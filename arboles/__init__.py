"""Tree data structures: B-trees, B+ trees, n-ary trees and XML persistence for them."""

__version__ = "0.1.0"
__all__ = ["naive_btree", "btree", "bplustree", "simple_tree", "general_tree", "xml_io", "demo"]