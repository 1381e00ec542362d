"""Node abstractions for AssetTreeLib.

AssetNode is intentionally kept simple - it's a flat record with a parent
reference. Navigation logic lives in the TreeAdapter, which indexes a flat
list of nodes and answers parent/child questions about it.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Mapping, Optional

from ..config import AssetType


class TreeNode(ABC):
    """Abstract base class for nodes in a parent-pointer tree.

    Navigation (how to get children, parents, etc.) is handled by the
    TreeAdapter, so a node only has to identify itself and say whether it
    can hold children.
    """

    @abstractmethod
    def identifier(self) -> str:
        """Return a unique identifier for this node.

        The identifier must be unique within one node collection and
        stable for the node's lifetime.
        """
        pass

    @abstractmethod
    def is_leaf(self) -> bool:
        """Check if this node can never have children."""
        pass

    @abstractmethod
    def metadata(self) -> Dict[str, Any]:
        """Return lightweight metadata about this node."""
        pass

    def __str__(self) -> str:
        return self.identifier()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.identifier()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TreeNode):
            return NotImplemented
        return self.identifier() == other.identifier()

    def __hash__(self) -> int:
        return hash(self.identifier())


# Wire keys that map onto AssetNode fields; anything else is payload
_WIRE_FIELDS = ("id", "asset_name", "asset_type", "parent_id")


@dataclass(frozen=True, repr=False)
class AssetNode(TreeNode):
    """One Lightroom image or Google-Drive file/folder.

    ``type`` is None for legacy records that never stored one; normalize()
    defaults it to FILE. ``parent_id`` is None for root-level nodes.
    Type-specific fields (preview URLs, links, colour tag, creation
    timestamp) ride along in ``payload`` and are ignored by tree logic.
    """

    id: str
    name: str
    type: Optional[AssetType] = None
    parent_id: Optional[str] = None
    payload: Dict[str, Any] = field(default_factory=dict)

    def identifier(self) -> str:
        return self.id

    def is_leaf(self) -> bool:
        return self.type is not AssetType.FOLDER

    def metadata(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type.value if self.type else None,
            "parent_id": self.parent_id,
            **self.payload,
        }

    @property
    def is_folder(self) -> bool:
        return self.type is AssetType.FOLDER

    @property
    def is_root(self) -> bool:
        # Empty string counts as "no parent", same as None
        return not self.parent_id

    def with_parent(self, parent_id: Optional[str]) -> "AssetNode":
        """Return a copy of this node attached to ``parent_id``.

        The payload is copied too, so the two nodes share no mutable state.
        """
        return replace(self, parent_id=parent_id, payload=dict(self.payload))

    def normalized(self) -> "AssetNode":
        """Return this node with an unset type defaulted to FILE."""
        if self.type is None:
            return replace(self, type=AssetType.FILE)
        return self

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> "AssetNode":
        """Build a node from its JSON wire shape.

        An absent ``parent_id`` key and an explicit null both become None.
        An absent or null ``asset_type`` leaves ``type`` unset.

        Args:
            record: Mapping with ``id``, ``asset_name`` and optional
                ``asset_type`` / ``parent_id`` plus type-specific keys

        Returns:
            AssetNode instance

        Raises:
            KeyError: If ``id`` is missing
            ValueError: If ``asset_type`` is not a known type
        """
        raw_type = record.get("asset_type")
        return cls(
            id=record["id"],
            name=record.get("asset_name", ""),
            type=AssetType.parse(raw_type) if raw_type is not None else None,
            parent_id=record.get("parent_id"),
            payload={k: v for k, v in record.items() if k not in _WIRE_FIELDS},
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialise back to the JSON wire shape."""
        record: Dict[str, Any] = {"id": self.id, "asset_name": self.name}
        if self.type is not None:
            record["asset_type"] = self.type.value
        record["parent_id"] = self.parent_id
        record.update(self.payload)
        return record

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        kind = self.type.value if self.type else "unset"
        return f"AssetNode(id={self.id!r}, name={self.name!r}, type={kind}, parent_id={self.parent_id!r})"


@dataclass
class AssetTreeNode:
    """A node in a built tree: the asset, its children, and its depth.

    ``depth`` is informational - it is copied from the build call and does
    not bound construction.
    """

    asset: AssetNode
    children: List["AssetTreeNode"] = field(default_factory=list)
    depth: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "asset": self.asset.to_dict(),
            "children": [child.to_dict() for child in self.children],
            "depth": self.depth,
        }
