"""Data collection strategies for AssetTreeLib.

DataCollectors define what information to extract from nodes as a
traversal hands them over, so the same walk can count items or rebuild a
breadcrumb.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, List

from ..results import ItemCount, PathEntry
from .adapter import ParentPointerAdapter
from .node import AssetNode


logger = logging.getLogger(__name__)


class DataCollector(ABC):
    """Abstract base class for data collection strategies."""

    def __init__(self, adapter: ParentPointerAdapter):
        """Initialize collector with an adapter.

        Args:
            adapter: ParentPointerAdapter for additional node lookups
        """
        self.adapter = adapter

    @abstractmethod
    def collect(self, node: AssetNode, depth: int) -> Any:
        """Collect data from a node.

        Args:
            node: The node to collect data from
            depth: Depth of the node in the current walk

        Returns:
            Collected data (type depends on collector)
        """
        pass


class ItemCountCollector(DataCollector):
    """Tallies how many files and folders it has been shown.

    Anything that is not a folder counts as a file, so
    ``total == files + folders`` always holds.
    """

    def __init__(self, adapter: ParentPointerAdapter):
        super().__init__(adapter)
        self.files = 0
        self.folders = 0

    def collect(self, node: AssetNode, depth: int) -> ItemCount:
        if node.is_folder:
            self.folders += 1
        else:
            self.files += 1
        return self.result()

    def result(self) -> ItemCount:
        return ItemCount(total=self.files + self.folders,
                         files=self.files,
                         folders=self.folders)


class PathCollector(DataCollector):
    """Collects the root-first path to each node, node included.

    The walk stops at the first missing ancestor, so a dangling parent
    reference yields a path that starts at the highest node still present.
    """

    def collect(self, node: AssetNode, depth: int = 0) -> List[PathEntry]:
        chain = list(self.adapter.ancestors(node))
        top = chain[-1] if chain else node
        if not top.is_root:
            logger.warning("Asset %r references missing parent %r", top.id, top.parent_id)

        path = [PathEntry(id=ancestor.id, name=ancestor.name) for ancestor in reversed(chain)]
        path.append(PathEntry(id=node.id, name=node.name))
        return path

