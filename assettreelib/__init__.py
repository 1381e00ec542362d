"""AssetTreeLib - hierarchical folder trees for project asset galleries.

AssetTreeLib turns a flat list of Lightroom or Google-Drive assets, each
pointing at its parent folder, into something a browser can navigate:
trees, breadcrumbs, descendant sets, recursive search and item counts,
plus the validation that keeps folders acyclic and at most ten levels deep.

Every operation is a pure function over the list you pass in:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from assettreelib import normalize, build_tree, move_asset

    nodes = normalize(records)          # JSON wire records -> AssetNodes
    result = move_asset(nodes, "a", "b")
    if result.success:
        save(result.updated_asset)      # persisting is up to you
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.3.0"

from .config import (
    MAX_NESTING_DEPTH,
    MAX_NAME_LENGTH,
    INVALID_NAME_CHARS,
    PATH_SEPARATOR,
    AssetType,
    AssetTreeConfig,
    AssetTreeError,
    ConfigurationError,
)
from .core import AssetNode, AssetTreeNode, ParentPointerAdapter, CorruptTreeError
from .results import (
    ValidationResult,
    DepthCheck,
    MoveResult,
    ItemCount,
    PathEntry,
    FlatEntry,
    ParentFolderOption,
    SearchResults,
)
from .api import (
    normalize,
    normalize_assets,
    normalize_records,
    get_root_assets,
    get_children,
    has_children,
    build_tree,
    flatten_tree,
    get_parent_asset,
    get_parent_chain,
    get_asset_path,
    get_asset_path_with_ids,
    is_descendant_of,
    get_available_parent_folders,
    get_current_folder_contents,
    get_all_descendants,
    matches_search,
    search_assets,
    get_folder_item_count,
    get_total_item_count,
    get_folders_by_color,
    get_used_folder_colors,
    remove_asset,
    apply_update,
)
from .validation import (
    get_asset_depth,
    validate_nesting_depth,
    validate_no_circular_reference,
    move_asset,
    validate_folder_name,
)
from .planning import ViewConfig, FolderViewPlan, ViewConfigError
from .adapters import GDriveAdapter, LightroomAdapter

__all__ = [
    "__version__",
    # Config
    "MAX_NESTING_DEPTH",
    "MAX_NAME_LENGTH",
    "INVALID_NAME_CHARS",
    "PATH_SEPARATOR",
    "AssetType",
    "AssetTreeConfig",
    "AssetTreeError",
    "ConfigurationError",
    # Model
    "AssetNode",
    "AssetTreeNode",
    "ParentPointerAdapter",
    "CorruptTreeError",
    # Results
    "ValidationResult",
    "DepthCheck",
    "MoveResult",
    "ItemCount",
    "PathEntry",
    "FlatEntry",
    "ParentFolderOption",
    "SearchResults",
    # API
    "normalize",
    "normalize_assets",
    "normalize_records",
    "get_root_assets",
    "get_children",
    "has_children",
    "build_tree",
    "flatten_tree",
    "get_parent_asset",
    "get_parent_chain",
    "get_asset_path",
    "get_asset_path_with_ids",
    "is_descendant_of",
    "get_available_parent_folders",
    "get_current_folder_contents",
    "get_all_descendants",
    "matches_search",
    "search_assets",
    "get_folder_item_count",
    "get_total_item_count",
    "get_folders_by_color",
    "get_used_folder_colors",
    "remove_asset",
    "apply_update",
    # Validation
    "get_asset_depth",
    "validate_nesting_depth",
    "validate_no_circular_reference",
    "move_asset",
    "validate_folder_name",
    # Planning
    "ViewConfig",
    "FolderViewPlan",
    "ViewConfigError",
    # Adapters
    "GDriveAdapter",
    "LightroomAdapter",
]
