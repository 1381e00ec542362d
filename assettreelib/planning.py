"""View planning for AssetTreeLib.

A FolderViewPlan turns the asset browser's explicit view state (current
folder, search box, filter dropdowns) into the list of assets to show. The
plan validates the view against the collection first and only then
executes - the same validate-then-execute shape as a traversal plan.

Plans hold no state of their own beyond their inputs. Build a new plan
whenever the folder, query or filters change.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from .api import get_asset_path_with_ids, search_assets
from .config import AssetTreeConfig, AssetTreeError, AssetType
from .core.adapter import ParentPointerAdapter
from .core.node import AssetNode
from .results import PathEntry, SearchResults


logger = logging.getLogger(__name__)

ALL = "all"
NO_ASSET = "no-asset"


class ViewConfigError(AssetTreeError):
    """Raised when a view cannot be satisfied by the node collection."""
    pass


@dataclass(frozen=True)
class ViewConfig:
    """What the browser is currently looking at."""

    current_folder_id: Optional[str] = None   # None = root level
    search_query: str = ""                    # Non-blank = search everything
    filter_asset_id: str = ALL                # ALL, NO_ASSET or a deliverable id
    filter_type: str = ALL                    # ALL, "file" or "folder"
    group_by_asset: bool = False

    @property
    def is_searching(self) -> bool:
        return bool(self.search_query.strip())

    def validate(self) -> List[str]:
        """Validate the view for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not self.filter_asset_id:
            errors.append("filter_asset_id cannot be empty")

        if self.filter_type != ALL:
            try:
                AssetType.parse(self.filter_type)
            except ValueError:
                errors.append(f"Unknown filter_type: {self.filter_type!r}")

        return errors


class FolderViewPlan:
    """Validated plan for one render of an asset browser.

    While a search query is active, folder navigation is bypassed and the
    whole collection is searched. Otherwise only the current folder's
    direct contents are listed. The asset and type filters apply to both.
    """

    def __init__(self, view: ViewConfig, nodes: Sequence[AssetNode],
                 config: Optional[AssetTreeConfig] = None):
        """Create and validate a view plan.

        Args:
            view: Browser view state
            nodes: Normalized node collection
            config: Tree configuration

        Raises:
            ViewConfigError: If the view is invalid or its current folder
                is not a folder in ``nodes``
        """
        self.view = view
        self.adapter = ParentPointerAdapter(nodes, config)

        view_errors = view.validate()
        if view_errors:
            raise ViewConfigError(f"Invalid view: {'; '.join(view_errors)}")

        if view.current_folder_id is not None:
            folder = self.adapter.get(view.current_folder_id)
            if folder is None or not folder.is_folder:
                raise ViewConfigError(f"Current folder not found: {view.current_folder_id!r}")

        self.nodes_processed = 0

    def execute(self) -> List[AssetNode]:
        """Produce the assets to display.

        Browsing lists the current folder in source order. Searching lists
        matching folders, then matching files, each group in source order.
        """
        if self.view.is_searching:
            candidates = search_assets(self.adapter.nodes, self.view.search_query,
                                       config=self.adapter.config).combined
        elif self.view.current_folder_id is None:
            candidates = self.adapter.roots()
        else:
            candidates = self.adapter.children_of(self.view.current_folder_id)

        visible = [node for node in candidates if self._passes_filters(node)]
        self.nodes_processed = len(visible)
        logger.debug("View %s listed %d asset(s)", self.get_summary(), len(visible))
        return visible

    def search_results(self) -> SearchResults:
        """Split the visible search matches into folders and files.

        Empty when no search is active.
        """
        if not self.view.is_searching:
            return SearchResults()

        visible = self.execute()
        return SearchResults(
            folders=[node for node in visible if node.is_folder],
            files=[node for node in visible if not node.is_folder],
        )

    def groups(self) -> Optional[Dict[str, List[AssetNode]]]:
        """Group visible assets by linked deliverable id.

        Assets without one land under ``"no-asset"``. Returns None when
        grouping is off.
        """
        if not self.view.group_by_asset:
            return None

        grouped: Dict[str, List[AssetNode]] = {}
        for node in self.execute():
            key = node.payload.get("asset_id") or NO_ASSET
            grouped.setdefault(key, []).append(node)
        return grouped

    def breadcrumbs(self) -> List[PathEntry]:
        """Breadcrumb trail for the current folder ([] at root level)."""
        if self.view.current_folder_id is None:
            return []
        return get_asset_path_with_ids(self.adapter.nodes, self.view.current_folder_id,
                                       config=self.adapter.config)

    def navigate_up(self) -> Optional[str]:
        """Folder id one level up from the current folder (None = root)."""
        folder = self.adapter.get(self.view.current_folder_id)
        if folder is None:
            return None
        parent = self.adapter.get_parent(folder)
        return parent.id if parent is not None else None

    def get_summary(self) -> Dict[str, Any]:
        """Get summary of the view plan.

        Useful for debugging and logging.
        """
        return {
            'mode': 'search' if self.view.is_searching else 'browse',
            'current_folder_id': self.view.current_folder_id,
            'search_query': self.view.search_query,
            'filter_asset_id': self.view.filter_asset_id,
            'filter_type': self.view.filter_type,
            'group_by_asset': self.view.group_by_asset,
            'total_assets': len(self.adapter),
        }

    def _passes_filters(self, node: AssetNode) -> bool:
        linked = node.payload.get("asset_id")
        if self.view.filter_asset_id == NO_ASSET:
            if linked:
                return False
        elif self.view.filter_asset_id != ALL and linked != self.view.filter_asset_id:
            return False

        if self.view.filter_type != ALL:
            return node.type is AssetType.parse(self.view.filter_type)
        return True
