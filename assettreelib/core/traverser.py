"""Tree traversal strategies for AssetTreeLib.

Traversers walk a parent-pointer collection through a ParentPointerAdapter.
Only folders are descended into - files are always leaves, whatever the
data says about their children.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Iterator, List, Optional, Set, Tuple

from .adapter import ParentPointerAdapter
from .node import AssetNode, AssetTreeNode


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies."""

    def __init__(self, adapter: ParentPointerAdapter):
        """Initialize traverser with an adapter.

        Args:
            adapter: ParentPointerAdapter for navigating the collection
        """
        self.adapter = adapter

    @abstractmethod
    def traverse(self, parent_id: Optional[str] = None,
                 depth: int = 0) -> Iterator[Tuple[AssetNode, int]]:
        """Traverse everything below ``parent_id``.

        Args:
            parent_id: Folder to start under (None = the root level)
            depth: Depth reported for the first level of nodes

        Yields:
            Tuples of (node, depth)
        """
        pass

    def _children(self, start_id: Optional[str], parent_id: Optional[str],
                  level: int) -> List[AssetNode]:
        """Children of ``parent_id``, checking the walk bound when non-empty."""
        children = self.adapter.children_of(parent_id)
        if children:
            self.adapter.check_steps(start_id or "<root>", level)
        return children

    def _enter(self, start_id: Optional[str], folder: AssetNode, expanding: Set[Optional[str]]) -> None:
        """Mark ``folder`` as being expanded; a repeat means a parent cycle."""
        if folder.id in expanding:
            self.adapter.report_cycle(start_id or "<root>", folder.id)
        expanding.add(folder.id)


class DescendantTraverser(TreeTraverser):
    """Children-first traversal used for descendant sets.

    All direct children come first, then each folder child's descendants in
    turn. A node always appears before its own descendants.

    The walk keeps an explicit stack, so deep or corrupted collections raise
    CorruptTreeError rather than exhausting the interpreter's recursion limit.
    """

    def traverse(self, parent_id: Optional[str] = None,
                 depth: int = 0) -> Iterator[Tuple[AssetNode, int]]:
        expanding: Set[Optional[str]] = {parent_id}

        children = self._children(parent_id, parent_id, 1)
        for child in children:
            yield (child, depth)

        # Each entry: (expanded folder id, its folder children still to expand)
        stack = [(parent_id, iter([c for c in children if c.is_folder]))]
        while stack:
            owner, pending = stack[-1]
            folder = next(pending, None)
            if folder is None:
                stack.pop()
                expanding.discard(owner)
                continue

            self._enter(parent_id, folder, expanding)
            level = len(stack) + 1
            children = self._children(parent_id, folder.id, level)
            for child in children:
                yield (child, depth + level - 1)
            stack.append((folder.id, iter([c for c in children if c.is_folder])))


class TreeBuilder(TreeTraverser):
    """Builds nested AssetTreeNode forests for recursive rendering."""

    def build(self, parent_id: Optional[str] = None, depth: int = 0) -> List[AssetTreeNode]:
        """Build the forest hanging under ``parent_id``.

        ``depth`` is copied into each level and does not bound construction.

        Raises:
            CorruptTreeError: If a folder turns up inside its own subtree
        """
        forest: List[AssetTreeNode] = []
        expanding: Set[Optional[str]] = {parent_id}

        # Each entry: (folder id, list to fill, children left to place, their depth)
        stack = [(parent_id, forest, iter(self._children(parent_id, parent_id, 1)), depth)]
        while stack:
            owner, siblings, pending, level_depth = stack[-1]
            child = next(pending, None)
            if child is None:
                stack.pop()
                expanding.discard(owner)
                continue

            tree_node = AssetTreeNode(asset=child, depth=level_depth)
            siblings.append(tree_node)
            if child.is_folder:
                self._enter(parent_id, child, expanding)
                grandchildren = self._children(parent_id, child.id, len(stack) + 1)
                stack.append((child.id, tree_node.children, iter(grandchildren), level_depth + 1))

        return forest

    def traverse(self, parent_id: Optional[str] = None,
                 depth: int = 0) -> Iterator[Tuple[AssetNode, int]]:
        """Pre-order walk: each folder is followed by its whole subtree."""
        return walk_forest(self.build(parent_id, depth))


def walk_forest(forest: Iterable[AssetTreeNode]) -> Iterator[Tuple[AssetNode, int]]:
    """Pre-order walk over an already built forest.

    Yields:
        Tuples of (asset, depth) with the depth stored on each tree node
    """
    stack = [iter(forest)]
    while stack:
        tree_node = next(stack[-1], None)
        if tree_node is None:
            stack.pop()
            continue
        yield (tree_node.asset, tree_node.depth)
        if tree_node.children:
            stack.append(iter(tree_node.children))


def descendants_of(adapter: ParentPointerAdapter, asset_id: Optional[str]) -> List[AssetNode]:
    """Every node nested under ``asset_id``, in DescendantTraverser order."""
    return [node for node, _ in DescendantTraverser(adapter).traverse(asset_id)]
