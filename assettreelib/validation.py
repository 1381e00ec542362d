"""Integrity validation for AssetTreeLib.

These checks are the only thing standing between the data and a parent
cycle or an over-deep folder: they must run before any change to a node's
``parent_id`` is committed. Read-time operations trust what they let
through.
"""

import logging
from typing import Optional, Sequence

from .config import AssetTreeConfig, resolve_config
from .core.adapter import ParentPointerAdapter
from .core.node import AssetNode
from .core.traverser import descendants_of
from .results import DepthCheck, MoveResult, ValidationResult


logger = logging.getLogger(__name__)

SELF_PARENT_REASON = "Cannot set folder as its own parent"
DESCENDANT_PARENT_REASON = "Cannot set parent to a descendant folder (would create circular reference)"
ASSET_NOT_FOUND = "Asset not found"


def get_asset_depth(nodes: Sequence[AssetNode], asset_id: str,
                    *, config: Optional[AssetTreeConfig] = None) -> int:
    """Get the nesting level of an asset (root = 0).

    Unknown ids report depth 0. A parent reference that dangles still
    counts as one level.
    """
    return ParentPointerAdapter(nodes, config).depth_of(asset_id)


def validate_nesting_depth(nodes: Sequence[AssetNode], parent_id: Optional[str],
                           *, config: Optional[AssetTreeConfig] = None) -> DepthCheck:
    """Check that a new child of ``parent_id`` stays within the depth limit.

    Returns:
        DepthCheck whose ``current_depth`` is the depth the child would
        land at; valid while that depth is below ``max_allowed``
    """
    adapter = ParentPointerAdapter(nodes, config)
    limit = adapter.config.max_nesting_depth
    if not parent_id:
        return DepthCheck(valid=True, current_depth=0, max_allowed=limit)

    child_depth = adapter.depth_of(parent_id) + 1
    return DepthCheck(valid=child_depth < limit, current_depth=child_depth, max_allowed=limit)


def validate_no_circular_reference(nodes: Sequence[AssetNode], asset_id: str,
                                   new_parent_id: Optional[str],
                                   *, config: Optional[AssetTreeConfig] = None) -> ValidationResult:
    """Check that re-parenting ``asset_id`` cannot create a cycle.

    Detaching to the root level is always safe. Otherwise the new parent
    may be neither the asset itself nor anything nested under it.
    """
    if not new_parent_id:
        return ValidationResult(valid=True)

    if asset_id == new_parent_id:
        return ValidationResult(valid=False, reason=SELF_PARENT_REASON)

    adapter = ParentPointerAdapter(nodes, config)
    if any(node.id == new_parent_id for node in descendants_of(adapter, asset_id)):
        return ValidationResult(valid=False, reason=DESCENDANT_PARENT_REASON)

    return ValidationResult(valid=True)


def move_asset(nodes: Sequence[AssetNode], asset_id: str, new_parent_id: Optional[str],
               *, config: Optional[AssetTreeConfig] = None) -> MoveResult:
    """Validate a move and return the re-parented asset.

    Runs the circular-reference check, then the depth check, stopping at
    the first failure. Nothing is mutated: on success the caller persists
    ``updated_asset``.

    Example:
        >>> result = move_asset(nodes, "root", "b")
        >>> result.success, result.error
        (False, 'Cannot set parent to a descendant folder (would create circular reference)')
    """
    adapter = ParentPointerAdapter(nodes, config)
    asset = adapter.get(asset_id)
    if asset is None:
        return MoveResult(success=False, error=ASSET_NOT_FOUND)

    circular = validate_no_circular_reference(adapter.nodes, asset_id, new_parent_id,
                                              config=adapter.config)
    if not circular.valid:
        logger.debug("Rejected move of %r under %r: %s", asset_id, new_parent_id, circular.reason)
        return MoveResult(success=False, error=circular.reason)

    depth = validate_nesting_depth(adapter.nodes, new_parent_id, config=adapter.config)
    if not depth.valid:
        error = f"Maximum nesting depth ({depth.max_allowed} levels) would be exceeded"
        logger.debug("Rejected move of %r under %r: %s", asset_id, new_parent_id, error)
        return MoveResult(success=False, error=error)

    return MoveResult(success=True, updated_asset=asset.with_parent(new_parent_id))


def validate_folder_name(name: Optional[str],
                         *, config: Optional[AssetTreeConfig] = None) -> ValidationResult:
    """Check a folder name before it is submitted.

    A name must be non-blank, at most ``max_name_length`` characters once
    trimmed, and free of the characters ``< > : " / \\ | ? *``.
    """
    config = resolve_config(config)
    if not name or not name.strip():
        return ValidationResult(valid=False, reason="Folder name cannot be empty")

    if len(name.strip()) > config.max_name_length:
        return ValidationResult(
            valid=False,
            reason=f"Folder name must be {config.max_name_length} characters or less",
        )

    if any(char in config.invalid_name_chars for char in name):
        return ValidationResult(valid=False, reason="Folder name contains invalid characters")

    return ValidationResult(valid=True)
