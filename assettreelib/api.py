"""High-level API for AssetTreeLib.

This module provides simple, functional interfaces over a flat collection
of AssetNodes. Every function is pure: it indexes the collection it is
given, answers the question, and keeps nothing between calls. Callers own
the collection and re-derive breadcrumbs, listings and counts from it on
every render.
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union

from .config import AssetTreeConfig
from .core.adapter import ParentPointerAdapter
from .core.collector import ItemCountCollector, PathCollector
from .core.node import AssetNode, AssetTreeNode
from .core.traverser import DescendantTraverser, TreeBuilder, descendants_of, walk_forest
from .results import FlatEntry, ItemCount, ParentFolderOption, PathEntry, SearchResults


logger = logging.getLogger(__name__)

RawAsset = Union[AssetNode, Mapping[str, Any]]


# Normalization

def normalize(nodes: Iterable[RawAsset]) -> List[AssetNode]:
    """Normalize legacy records so every node has a parent and a type.

    Wire records with no ``parent_id`` key come out with ``parent_id=None``
    and records with no ``asset_type`` come out as files. Normalizing an
    already normalized collection returns an equal collection.

    Args:
        nodes: AssetNodes and/or JSON wire records (mappings)

    Returns:
        New list of AssetNodes

    Example:
        >>> normalize([{"id": "x", "asset_name": "old"}])[0].to_dict()
        {'id': 'x', 'asset_name': 'old', 'asset_type': 'file', 'parent_id': None}
    """
    normalized = []
    for raw in nodes:
        node = raw if isinstance(raw, AssetNode) else AssetNode.from_dict(raw)
        normalized.append(node.normalized())
    return normalized


# Lightroom and Google-Drive call sites use their own names for the same step
normalize_assets = normalize


def normalize_records(records: Iterable[RawAsset]) -> List[dict]:
    """Normalize and serialise back to JSON wire records."""
    return [node.to_dict() for node in normalize(records)]


# Tree construction

def get_root_assets(nodes: Sequence[AssetNode]) -> List[AssetNode]:
    """Get every node with no parent reference (None or empty)."""
    return [node for node in nodes if node.is_root]


def get_children(nodes: Sequence[AssetNode], parent_id: Optional[str],
                 *, config: Optional[AssetTreeConfig] = None) -> List[AssetNode]:
    """Get the direct children of ``parent_id`` in source order."""
    return ParentPointerAdapter(nodes, config).children_of(parent_id)


def has_children(nodes: Sequence[AssetNode], folder_id: str) -> bool:
    """Check if any node points at ``folder_id`` as its parent."""
    return any(node.parent_id == folder_id for node in nodes)


def build_tree(nodes: Sequence[AssetNode],
               parent_id: Optional[str] = None,
               depth: int = 0,
               *, config: Optional[AssetTreeConfig] = None) -> List[AssetTreeNode]:
    """Build a nested forest from the flat collection.

    Only folders are descended into. ``depth`` is recorded on each tree
    node; it does not limit how deep construction goes.

    Args:
        nodes: Flat node collection
        parent_id: Build the forest under this folder (None = root level)
        depth: Depth recorded for the first level

    Returns:
        List of AssetTreeNode, children in source order

    Raises:
        CorruptTreeError: If the parent references contain a cycle
    """
    return TreeBuilder(ParentPointerAdapter(nodes, config)).build(parent_id, depth)


def flatten_tree(tree: Sequence[AssetTreeNode]) -> List[FlatEntry]:
    """Flatten a built forest, each parent followed by its subtree."""
    return [FlatEntry(asset=asset, depth=depth) for asset, depth in walk_forest(tree)]


# Navigation & breadcrumbs

def get_parent_asset(nodes: Sequence[AssetNode], asset_id: str,
                     *, config: Optional[AssetTreeConfig] = None) -> Optional[AssetNode]:
    """Get the node one level up; None at root or for a dangling reference."""
    adapter = ParentPointerAdapter(nodes, config)
    asset = adapter.get(asset_id)
    if asset is None:
        return None
    return adapter.get_parent(asset)


def get_parent_chain(nodes: Sequence[AssetNode], asset_id: str,
                     *, config: Optional[AssetTreeConfig] = None) -> List[AssetNode]:
    """Get ancestors from the outermost root down to the direct parent.

    The asset itself is not included.
    """
    adapter = ParentPointerAdapter(nodes, config)
    asset = adapter.get(asset_id)
    if asset is None:
        return []
    return list(reversed(list(adapter.ancestors(asset))))


def get_asset_path_with_ids(nodes: Sequence[AssetNode], asset_id: str,
                            *, config: Optional[AssetTreeConfig] = None) -> List[PathEntry]:
    """Get the breadcrumb trail to an asset, the asset itself last.

    Example:
        >>> [e.name for e in get_asset_path_with_ids(nodes, "f3")]
        ['Wedding Shoots', 'Smith Wedding', 'Final Edits']
    """
    adapter = ParentPointerAdapter(nodes, config)
    return _path_entries(adapter, asset_id)


def get_asset_path(nodes: Sequence[AssetNode], asset_id: str,
                   *, config: Optional[AssetTreeConfig] = None) -> List[str]:
    """Get the names along the breadcrumb trail to an asset."""
    return [entry.name for entry in get_asset_path_with_ids(nodes, asset_id, config=config)]


def is_descendant_of(nodes: Sequence[AssetNode], asset_id: str, ancestor_id: Optional[str],
                     *, config: Optional[AssetTreeConfig] = None) -> bool:
    """Check if ``ancestor_id`` appears anywhere above ``asset_id``.

    A parent reference counts even when it dangles.
    """
    if not ancestor_id:
        return False

    adapter = ParentPointerAdapter(nodes, config)
    current = adapter.get(asset_id)
    steps = 0
    while current is not None and not current.is_root:
        if current.parent_id == ancestor_id:
            return True
        steps += 1
        adapter.check_steps(asset_id, steps)
        current = adapter.get(current.parent_id)
    return False


def get_available_parent_folders(nodes: Sequence[AssetNode],
                                 exclude_id: Optional[str] = None,
                                 *, config: Optional[AssetTreeConfig] = None) -> List[ParentFolderOption]:
    """List folders an asset may be moved into.

    ``exclude_id`` and its whole subtree are left out, so an asset is never
    offered as a parent of itself. Folders already at the deepest level
    that may hold children are returned with ``disabled=True``.

    Returns:
        Options sorted by their full path string
    """
    adapter = ParentPointerAdapter(nodes, config)
    limit = adapter.config.max_nesting_depth
    separator = adapter.config.path_separator

    excluded = set()
    if exclude_id:
        excluded.add(exclude_id)
        excluded.update(node.id for node in descendants_of(adapter, exclude_id))

    options = []
    for folder in adapter.nodes:
        if not folder.is_folder or folder.id in excluded:
            continue
        depth = adapter.depth_of(folder.id)
        options.append(ParentFolderOption(
            id=folder.id,
            name=folder.name,
            path=separator.join(entry.name for entry in _path_entries(adapter, folder.id)),
            depth=depth,
            disabled=depth >= limit - 1,
        ))

    return sorted(options, key=lambda option: (option.path.casefold(), option.path))


def get_current_folder_contents(nodes: Sequence[AssetNode], folder_id: Optional[str]) -> List[AssetNode]:
    """Get what a browser shows inside ``folder_id`` (None = root level)."""
    if folder_id is None:
        return get_root_assets(nodes)
    return [node for node in nodes if node.parent_id == folder_id]


# Search & aggregation

def get_all_descendants(nodes: Sequence[AssetNode], asset_id: str,
                        *, config: Optional[AssetTreeConfig] = None) -> List[AssetNode]:
    """Get every node nested under ``asset_id``.

    Direct children come first, then each folder child's descendants in
    turn, so a node always precedes its own descendants.

    Raises:
        CorruptTreeError: If the parent references contain a cycle
    """
    return descendants_of(ParentPointerAdapter(nodes, config), asset_id)


def matches_search(nodes: Sequence[AssetNode], asset: AssetNode, query: str,
                   *, config: Optional[AssetTreeConfig] = None) -> bool:
    """Check if an asset or, for a folder, any of its descendants matches.

    Matching is a case-insensitive substring test on the name.
    """
    return _matches(ParentPointerAdapter(nodes, config), asset, query.lower())


def search_assets(nodes: Sequence[AssetNode], query: str,
                  *, config: Optional[AssetTreeConfig] = None) -> SearchResults:
    """Search the whole collection, ignoring folder navigation.

    Folders that contain a match at any depth are returned alongside the
    match itself. A blank query is not a search and returns no results.

    Example:
        >>> results = search_assets(nodes, "beach")
        >>> [n.name for n in results.combined]
        ['Trip', 'beach_sunset.jpg']
    """
    if not query.strip():
        return SearchResults()

    adapter = ParentPointerAdapter(nodes, config)
    needle = query.lower()
    matched = [node for node in adapter.nodes if _matches(adapter, node, needle)]
    logger.debug("Search %r matched %d of %d assets", query, len(matched), len(adapter))

    return SearchResults(
        folders=[node for node in matched if node.is_folder],
        files=[node for node in matched if not node.is_folder],
    )


def get_folder_item_count(nodes: Sequence[AssetNode], folder_id: str,
                          *, config: Optional[AssetTreeConfig] = None) -> ItemCount:
    """Count the direct children of a folder."""
    adapter = ParentPointerAdapter(nodes, config)
    collector = ItemCountCollector(adapter)
    for child in adapter.children_of(folder_id):
        collector.collect(child, 1)
    return collector.result()


def get_total_item_count(nodes: Sequence[AssetNode], folder_id: str,
                         *, config: Optional[AssetTreeConfig] = None) -> ItemCount:
    """Count everything nested under a folder, at any depth."""
    adapter = ParentPointerAdapter(nodes, config)
    collector = ItemCountCollector(adapter)
    for node, depth in DescendantTraverser(adapter).traverse(folder_id, 1):
        collector.collect(node, depth)
    return collector.result()


def get_folders_by_color(nodes: Sequence[AssetNode], color: str) -> List[AssetNode]:
    """Get folders tagged with ``color``."""
    return [node for node in nodes if node.is_folder and node.payload.get("color") == color]


def get_used_folder_colors(nodes: Sequence[AssetNode]) -> List[str]:
    """Get distinct folder colours in first-seen order."""
    colors: List[str] = []
    for node in nodes:
        color = node.payload.get("color")
        if node.is_folder and color and color not in colors:
            colors.append(color)
    return colors


# Collection updates (the caller persists the result)

def remove_asset(nodes: Sequence[AssetNode], asset_id: str,
                 *, config: Optional[AssetTreeConfig] = None) -> List[AssetNode]:
    """Return a new collection without ``asset_id`` and everything under it."""
    adapter = ParentPointerAdapter(nodes, config)
    if asset_id not in adapter:
        return list(nodes)

    doomed = {asset_id}
    doomed.update(node.id for node in descendants_of(adapter, asset_id))
    logger.debug("Removing %r with %d nested item(s)", asset_id, len(doomed) - 1)
    return [node for node in nodes if node.id not in doomed]


def apply_update(nodes: Sequence[AssetNode], updated: AssetNode) -> List[AssetNode]:
    """Return a new collection with the node sharing ``updated.id`` swapped in."""
    return [updated if node.id == updated.id else node for node in nodes]


# Helpers

def _path_entries(adapter: ParentPointerAdapter, asset_id: str) -> List[PathEntry]:
    asset = adapter.get(asset_id)
    if asset is None:
        return []
    return PathCollector(adapter).collect(asset)


def _matches(adapter: ParentPointerAdapter, asset: AssetNode, needle: str) -> bool:
    if needle in asset.name.lower():
        return True
    if asset.is_folder:
        return any(needle in node.name.lower() for node in descendants_of(adapter, asset.id))
    return False
