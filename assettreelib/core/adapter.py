"""TreeAdapter abstraction for AssetTreeLib.

The adapter provides the navigation logic for a flat, parent-pointer node
collection: it indexes the nodes by id once, then answers child, parent and
ancestor questions against that index. Adapters are cheap and short-lived -
the functional API builds a fresh one for every call.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional

from ..config import AssetTreeConfig, AssetTreeError, resolve_config
from .node import AssetNode, TreeNode


logger = logging.getLogger(__name__)


class CorruptTreeError(AssetTreeError):
    """Raised when a walk finds a parent cycle.

    Either the walk exceeded its step bound, or a descent reached a folder
    that is already being expanded (``revisited``).
    """

    def __init__(self, node_id: str, limit: int, revisited: Optional[str] = None):
        if revisited is not None:
            reason = f"reached folder {revisited!r} inside itself"
        else:
            reason = f"exceeded {limit} steps"
        super().__init__(
            f"Traversal from {node_id!r} {reason}; "
            f"the parent references contain a cycle"
        )
        self.node_id = node_id
        self.limit = limit
        self.revisited = revisited


class TreeAdapter(ABC):
    """Abstract adapter for navigating a tree structure.

    TreeNode is just a data container; the adapter knows HOW to move
    between nodes.
    """

    @abstractmethod
    def get_children(self, node: TreeNode) -> Iterator[TreeNode]:
        """Get an iterator of child nodes for the given node."""
        pass

    @abstractmethod
    def get_parent(self, node: TreeNode) -> Optional[TreeNode]:
        """Get the parent node, or None if the node is a root."""
        pass

    @abstractmethod
    def get_depth(self, node: TreeNode) -> int:
        """Calculate the depth of a node where root = 0."""
        pass


class ParentPointerAdapter(TreeAdapter):
    """Adapter over a flat list of AssetNodes linked by ``parent_id``.

    Lookups by id return the first node carrying that id. Children are
    returned in the order they appear in the source list.

    Every walk is bounded: by ``config.max_traversal_steps`` when set,
    otherwise by the number of nodes (no acyclic walk can be longer).
    """

    def __init__(self, nodes: Iterable[AssetNode],
                 config: Optional[AssetTreeConfig] = None):
        """Index a node collection.

        Args:
            nodes: Flat node collection (not modified)
            config: Tree configuration (defaults to the module default)
        """
        self.nodes: List[AssetNode] = list(nodes)
        self.config = resolve_config(config)
        self._by_id: Dict[str, AssetNode] = {}
        self._children: Dict[Optional[str], List[AssetNode]] = {}

        for node in self.nodes:
            self._by_id.setdefault(node.id, node)
            self._children.setdefault(node.parent_id, []).append(node)

        if self.config.max_traversal_steps is not None:
            self.step_limit = self.config.max_traversal_steps
        else:
            self.step_limit = len(self.nodes)

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]],
                     config: Optional[AssetTreeConfig] = None) -> "ParentPointerAdapter":
        """Index JSON wire records, normalizing legacy ones on the way in."""
        return cls([AssetNode.from_dict(record).normalized() for record in records], config)

    def to_records(self) -> List[Dict[str, Any]]:
        """Serialise the indexed collection back to JSON wire records."""
        return [node.to_dict() for node in self.nodes]

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._by_id

    def get(self, node_id: Optional[str]) -> Optional[AssetNode]:
        """Look up a node by id (None for unknown or None ids)."""
        if node_id is None:
            return None
        return self._by_id.get(node_id)

    def children_of(self, parent_id: Optional[str]) -> List[AssetNode]:
        """Return nodes whose ``parent_id`` equals ``parent_id`` exactly."""
        return list(self._children.get(parent_id, ()))

    def roots(self) -> List[AssetNode]:
        """Return every node without a parent reference."""
        return [node for node in self.nodes if node.is_root]

    def get_children(self, node: TreeNode) -> Iterator[AssetNode]:
        return iter(self._children.get(node.identifier(), ()))

    def get_parent(self, node: TreeNode) -> Optional[AssetNode]:
        """Return the parent node; None at root or for a dangling reference."""
        if not isinstance(node, AssetNode) or node.is_root:
            return None
        return self._by_id.get(node.parent_id)

    def ancestors(self, node: AssetNode) -> Iterator[AssetNode]:
        """Yield existing ancestors, nearest first.

        Stops at a root or at a dangling parent reference.

        Raises:
            CorruptTreeError: If the walk exceeds the step bound
        """
        steps = 0
        current = self.get_parent(node)
        while current is not None:
            steps += 1
            self.check_steps(node.id, steps)
            yield current
            current = self.get_parent(current)

    def depth_of(self, node_id: str) -> int:
        """Count parent references from ``node_id`` up to a root.

        A dangling parent reference still counts as one level; an unknown
        id has depth 0.

        Raises:
            CorruptTreeError: If the walk exceeds the step bound
        """
        depth = 0
        current = self.get(node_id)
        while current is not None and not current.is_root:
            depth += 1
            self.check_steps(node_id, depth)
            current = self.get(current.parent_id)
        return depth

    def get_depth(self, node: TreeNode) -> int:
        return self.depth_of(node.identifier())

    def check_steps(self, node_id: str, steps: int) -> None:
        """Raise CorruptTreeError once ``steps`` passes the bound."""
        if steps > self.step_limit:
            logger.error("Parent cycle detected while walking from %r", node_id)
            raise CorruptTreeError(node_id, self.step_limit)

    def report_cycle(self, node_id: str, revisited: str) -> None:
        """Raise CorruptTreeError for a folder found inside its own subtree."""
        logger.error("Parent cycle detected at %r while walking from %r", revisited, node_id)
        raise CorruptTreeError(node_id, self.step_limit, revisited=revisited)
