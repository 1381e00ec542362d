"""Core abstractions for AssetTreeLib.

This module contains the node model and the adapter, traverser and
collector classes that every tree operation is built from.
"""

from .node import TreeNode, AssetNode, AssetTreeNode
from .adapter import TreeAdapter, ParentPointerAdapter, CorruptTreeError
from .traverser import TreeTraverser, DescendantTraverser, TreeBuilder, walk_forest, descendants_of
from .collector import DataCollector, ItemCountCollector, PathCollector

__all__ = [
    "TreeNode",
    "AssetNode",
    "AssetTreeNode",
    "TreeAdapter",
    "ParentPointerAdapter",
    "CorruptTreeError",
    "TreeTraverser",
    "DescendantTraverser",
    "TreeBuilder",
    "walk_forest",
    "descendants_of",
    "DataCollector",
    "ItemCountCollector",
    "PathCollector",
]
