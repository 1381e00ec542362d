"""Test fixtures for AssetTreeLib consumers.

Small builders for node collections so tests can describe a forest in a
line or two instead of spelling out every AssetNode.
"""

from typing import Any, Dict, List, Mapping, Optional, Union

from ..config import AssetType
from ..core.node import AssetNode


def make_asset(node_id: str,
               name: Optional[str] = None,
               asset_type: Union[AssetType, str, None] = AssetType.FILE,
               parent: Optional[str] = None,
               **payload: Any) -> AssetNode:
    """Build one node. ``name`` defaults to the id.

    Extra keywords become payload, so ``asset_id=...`` links a deliverable.
    """
    return AssetNode(
        id=node_id,
        name=node_id if name is None else name,
        type=AssetType.parse(asset_type) if asset_type is not None else None,
        parent_id=parent,
        payload=dict(payload),
    )


def make_folder(node_id: str, name: Optional[str] = None,
                parent: Optional[str] = None, **payload: Any) -> AssetNode:
    """Build one folder node."""
    return make_asset(node_id, name, AssetType.FOLDER, parent, **payload)


def make_chain(length: int, prefix: str = "F",
               parent: Optional[str] = None) -> List[AssetNode]:
    """Build ``length`` nested folders F1 > F2 > ... > Fn.

    F1 sits under ``parent`` (root level by default), so with the default
    Fk has depth k - 1.
    """
    chain = []
    for index in range(1, length + 1):
        folder = make_folder(f"{prefix}{index}", parent=parent)
        chain.append(folder)
        parent = folder.id
    return chain


def make_forest(layout: Mapping[str, Any], parent: Optional[str] = None) -> List[AssetNode]:
    """Build a collection from a nested description.

    Keys are names (also used as ids). A mapping value makes a folder whose
    contents are that mapping; any other value makes a file. Nodes come out
    in pre-order, each folder before its contents.

    Example:
        >>> [n.id for n in make_forest({"Trip": {"beach.jpg": None}})]
        ['Trip', 'beach.jpg']
    """
    nodes: List[AssetNode] = []
    for name, contents in layout.items():
        if isinstance(contents, Mapping):
            nodes.append(make_folder(name, parent=parent))
            nodes.extend(make_forest(contents, parent=name))
        else:
            nodes.append(make_asset(name, parent=parent))
    return nodes


def index_by_id(nodes: List[AssetNode]) -> Dict[str, AssetNode]:
    """Map ids to nodes for quick lookups in assertions."""
    return {node.id: node for node in nodes}
