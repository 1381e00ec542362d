"""Result objects returned by AssetTreeLib operations.

Tree operations never raise for domain conditions (a rejected move, an
invalid name). They return one of these values and the caller branches on
the boolean and shows ``error``/``reason`` to the user.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional

if TYPE_CHECKING:
    from .core.node import AssetNode


def _compact(record: Dict[str, Any]) -> Dict[str, Any]:
    """Drop optional keys that are None."""
    return {key: value for key, value in record.items() if value is not None}


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validation check.

    Integrity checks phrase a failure as ``reason``; name checks read it
    back as ``error``. Both names refer to the same message.
    """
    valid: bool
    reason: Optional[str] = None

    @property
    def error(self) -> Optional[str]:
        return self.reason

    def __bool__(self) -> bool:
        return self.valid

    def to_dict(self, key: str = "reason") -> Dict[str, Any]:
        return _compact({"valid": self.valid, key: self.reason})


@dataclass(frozen=True)
class DepthCheck:
    """Outcome of a nesting depth check.

    ``current_depth`` is the depth the new child would land at.
    """
    valid: bool
    current_depth: int
    max_allowed: int

    def __bool__(self) -> bool:
        return self.valid

    def to_dict(self) -> Dict[str, Any]:
        return {
            "valid": self.valid,
            "currentDepth": self.current_depth,
            "maxAllowed": self.max_allowed,
        }


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a move.

    On success ``updated_asset`` holds the re-parented copy; the caller is
    responsible for persisting it.
    """
    success: bool
    error: Optional[str] = None
    updated_asset: Optional["AssetNode"] = None

    def __bool__(self) -> bool:
        return self.success

    def to_dict(self) -> Dict[str, Any]:
        return _compact({
            "success": self.success,
            "error": self.error,
            "updatedAsset": self.updated_asset.to_dict() if self.updated_asset else None,
        })


@dataclass(frozen=True)
class ItemCount:
    """File/folder tally for a folder."""
    total: int = 0
    files: int = 0
    folders: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {"total": self.total, "files": self.files, "folders": self.folders}


@dataclass(frozen=True)
class PathEntry:
    """One breadcrumb segment."""
    id: str
    name: str

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "name": self.name}


@dataclass(frozen=True)
class FlatEntry:
    """A node from a flattened tree with its display depth."""
    asset: "AssetNode"
    depth: int


@dataclass(frozen=True)
class ParentFolderOption:
    """One entry of the "move to folder" dropdown."""
    id: str
    name: str
    path: str
    depth: int
    disabled: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "path": self.path,
            "depth": self.depth,
            "disabled": self.disabled,
        }


@dataclass(frozen=True)
class SearchResults:
    """Search matches split by type, each group in source order."""
    folders: List["AssetNode"] = field(default_factory=list)
    files: List["AssetNode"] = field(default_factory=list)

    @property
    def combined(self) -> List["AssetNode"]:
        """Folders first, then files (keyboard navigation order)."""
        return self.folders + self.files

    @property
    def ids(self) -> List[str]:
        return [node.id for node in self.combined]

    def __len__(self) -> int:
        return len(self.folders) + len(self.files)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.ids
