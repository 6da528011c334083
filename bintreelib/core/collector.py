"""Data collection strategies for BinTreeLib.

DataCollectors define what information to extract from nodes during a
traversal, so the same traversal can produce plain values, live nodes,
visit events for animation, or anything a user-supplied visitor returns.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional

from .node import TreeNode
from .adapter import BinaryTreeAdapter
from ..config import TraversalOrder
from ..snapshot import VisitEvent


class DataCollector(ABC):
    """Abstract base class for data collection strategies."""

    def __init__(self, adapter: Optional[BinaryTreeAdapter] = None):
        """Initialize collector with an adapter.

        Args:
            adapter: BinaryTreeAdapter for additional node operations
        """
        self.adapter = adapter or BinaryTreeAdapter()

    @abstractmethod
    def collect(self, node: TreeNode, depth: int) -> Any:
        """Collect data from a node.

        Args:
            node: The node to collect data from
            depth: Current depth in traversal

        Returns:
            Collected data (type depends on collector)
        """
        pass


class ValueCollector(DataCollector):
    """Collects only node values."""

    def collect(self, node: TreeNode, depth: int) -> Any:
        return node.value


class NodeCollector(DataCollector):
    """Collects the live TreeNode objects.

    The nodes stay owned by the tree; mutating the tree afterwards may
    change their values.
    """

    def collect(self, node: TreeNode, depth: int) -> TreeNode:
        return node


class MetadataCollector(DataCollector):
    """Collects node metadata plus depth and child count via the adapter."""

    def collect(self, node: TreeNode, depth: int) -> Dict[str, Any]:
        metadata = node.metadata()
        metadata['depth'] = depth
        metadata['child_count'] = sum(1 for _ in self.adapter.get_children(node))
        return metadata


class VisitEventCollector(DataCollector):
    """Numbers each visited node into a VisitEvent.

    One collector instance records one traversal; ``events`` holds the
    sequence in visiting order.
    """

    def __init__(self, order: TraversalOrder, adapter: Optional[BinaryTreeAdapter] = None):
        super().__init__(adapter)
        self.order = order
        self.events: List[VisitEvent] = []

    def collect(self, node: TreeNode, depth: int) -> VisitEvent:
        event = VisitEvent(
            step=len(self.events),
            value=node.value,
            depth=depth,
            order=self.order,
        )
        self.events.append(event)
        return event


class CustomCollector(DataCollector):
    """Collector that uses a user-provided visitor function.

    Allows custom data collection logic without subclassing. The visitor is
    called with the node only, matching the per-node callback used by tree
    traversal methods.
    """

    def __init__(self, visitor: Callable[[TreeNode], Any],
                 adapter: Optional[BinaryTreeAdapter] = None):
        super().__init__(adapter)
        self.visitor = visitor

    def collect(self, node: TreeNode, depth: int) -> Any:
        return self.visitor(node)
