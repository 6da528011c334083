"""Shared base class for all BinTreeLib tree variants.

BinaryTree owns the root, the traversal surface and the comparison-based
recursive deletion. Variants specialize it by overriding insertion and the
hooks that run while a recursive mutation unwinds. SearchTree replaces the
recursion with an iterative walk.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterator, List, Optional, Union

from ..config import TreeConfig, TreeVariant, TraversalOrder
from ..core.adapter import BinaryTreeAdapter
from ..core.node import TreeNode, Number, subtree_height
from ..core.traverser import create_traverser
from ..errors import ConfigurationError, InvalidValueError
from ..snapshot import NodeSnapshot, TreeSnapshot
from ..validation import validate_value

Visitor = Callable[[TreeNode], Any]
OrderLike = Union[TraversalOrder, str]


class BinaryTree(ABC):
    """Abstract binary tree with shared traversal and deletion.

    Mutations follow one contract: a recursive helper receives a subtree
    root and returns the (possibly different) root of that subtree, and the
    caller reassigns its link to the result. Rotations and successor
    deletion propagate upward this way, including replacement of the
    overall root.

    Not safe for concurrent mutation. Don't consume a traversal iterator
    while modifying the tree.
    """

    variant: TreeVariant

    def __init__(self,
                 config: Optional[TreeConfig] = None,
                 adapter: Optional[BinaryTreeAdapter] = None):
        """Create an empty tree.

        Args:
            config: TreeConfig whose variant matches this class
                (default: TreeConfig for this variant)
            adapter: BinaryTreeAdapter used by traversals

        Raises:
            ConfigurationError: If config is invalid or names another variant
        """
        if config is None:
            config = TreeConfig(variant=self.variant)

        config_errors = config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )
        if config.variant is not self.variant:
            raise ConfigurationError(
                f"{self.__class__.__name__} cannot be built from a "
                f"{config.variant.value!r} config"
            )

        self.config = config
        self.adapter = adapter or BinaryTreeAdapter()
        self.root: Optional[TreeNode] = None
        self._size = 0
        self._removed = False

    # Mutation

    def insert(self, value: Number) -> bool:
        """Insert a value.

        Inserting a value already in the tree is a no-op.

        Args:
            value: Number to insert

        Returns:
            True if a node was added

        Raises:
            InvalidValueError: If the value is not an orderable number
        """
        value = self._check_value(value)
        inserted = self._insert(value)
        if inserted:
            self._size += 1
        return inserted

    def delete(self, value: Number) -> bool:
        """Delete a value.

        Deleting an absent value leaves the tree unchanged and is reported
        through the configured missing-value policy (silent by default).

        Args:
            value: Number to delete

        Returns:
            True if a node was removed

        Raises:
            InvalidValueError: If the value is not an orderable number
            ValueNotFoundError: If absent and the policy is strict
        """
        value = self._check_value(value)
        removed = self._delete(value)
        if removed:
            self._size -= 1
        else:
            self._report_missing(value)
        return removed

    def _report_missing(self, value: Number) -> None:
        """Called when a delete removed nothing."""
        self.config.missing_policy.handle(value, self.variant.value)

    def clear(self) -> None:
        """Drop every node."""
        self.root = None
        self._size = 0

    @abstractmethod
    def _insert(self, value: Number) -> bool:
        """Variant-specific insertion. Returns True if a node was added."""
        pass

    def _delete(self, value: Number) -> bool:
        self._removed = False
        self.root = self._delete_rec(self.root, value)
        return self._removed

    def _delete_rec(self, node: Optional[TreeNode], value: Number) -> Optional[TreeNode]:
        """Find ``value`` by comparison and remove it from this subtree.

        Returns:
            New root of the subtree
        """
        if node is None:
            return None

        if value < node.value:
            node.left = self._delete_rec(node.left, value)
        elif value > node.value:
            node.right = self._delete_rec(node.right, value)
        else:
            # Zero or one child: the child takes this node's place
            if node.left is None:
                self._removed = True
                return node.right
            if node.right is None:
                self._removed = True
                return node.left
            self._replace_with_successor(node)

        return self._rebalance_after_delete(node)

    def _replace_with_successor(self, node: TreeNode) -> None:
        """Two-child case: take the in-order successor's value, then delete
        the successor from the right subtree."""
        successor = self._get_min_value_node(node.right)
        node.value = successor.value
        node.right = self._delete_rec(node.right, successor.value)

    def _rebalance_after_delete(self, node: TreeNode) -> TreeNode:
        """Hook run on each node of the deletion path while unwinding."""
        return node

    def _get_min_value_node(self, node: TreeNode) -> TreeNode:
        """Leftmost descendant of ``node`` (``node`` itself if it has no left child)."""
        current = node
        while current.left is not None:
            current = current.left
        return current

    def _check_value(self, value: Any) -> Number:
        if self.config.validate_values:
            return validate_value(value)
        return value

    # Queries

    def contains(self, value: Number) -> bool:
        """Check membership with a full scan of the tree."""
        value = self._check_value(value)
        return any(node.value == value for node in self.level_order())

    def __contains__(self, value: Any) -> bool:
        try:
            return self.contains(value)
        except InvalidValueError:
            return False

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self.root is None

    def height(self) -> int:
        """Number of levels in the tree (0 when empty)."""
        return subtree_height(self.root)

    def snapshot(self) -> TreeSnapshot:
        """Frozen copy of the current topology for rendering."""
        return TreeSnapshot(
            variant=self.variant.value,
            root=NodeSnapshot.from_node(self.root),
            size=len(self),
            height=self.height(),
        )

    # Traversal

    def traverse(self,
                 order: Optional[OrderLike] = None,
                 visitor: Optional[Visitor] = None,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[TreeNode]:
        """Lazily visit nodes in the given order.

        Each call starts a fresh traversal. The visitor, if given, is called
        once per node just before the node is yielded.

        Args:
            order: TraversalOrder or name (default: config.default_order)
            visitor: Callback invoked with each node
            max_depth: Deepest level to visit (root is depth 0)
            min_depth: Shallowest level to yield

        Returns:
            Iterator of TreeNode

        Raises:
            ValueError: If the order name is not recognized
        """
        traverser = create_traverser(order or self.config.default_order, self.adapter)
        pairs = traverser.traverse(self.root, max_depth=max_depth, min_depth=min_depth)
        return self._visit(pairs, visitor)

    @staticmethod
    def _visit(pairs, visitor: Optional[Visitor]) -> Iterator[TreeNode]:
        for node, _ in pairs:
            if visitor is not None:
                visitor(node)
            yield node

    def inorder(self, visitor: Optional[Visitor] = None) -> Iterator[TreeNode]:
        """Left, node, right. On a search tree this is ascending order.

        Lazy: the visitor runs only as the iterator is consumed. Use
        ``walk("inorder", visitor)`` to visit every node immediately.
        """
        return self.traverse(TraversalOrder.INORDER, visitor)

    def preorder(self, visitor: Optional[Visitor] = None) -> Iterator[TreeNode]:
        """Node, left, right. Lazy like ``inorder``; see ``walk`` for eager use."""
        return self.traverse(TraversalOrder.PREORDER, visitor)

    def postorder(self, visitor: Optional[Visitor] = None) -> Iterator[TreeNode]:
        """Left, right, node. Lazy like ``inorder``; see ``walk`` for eager use."""
        return self.traverse(TraversalOrder.POSTORDER, visitor)

    def level_order(self, visitor: Optional[Visitor] = None) -> Iterator[TreeNode]:
        """Breadth-first, left to right. Lazy like ``inorder``; see ``walk``
        for eager use."""
        return self.traverse(TraversalOrder.LEVEL_ORDER, visitor)

    def walk(self, order: Optional[OrderLike] = None,
             visitor: Optional[Visitor] = None) -> List[TreeNode]:
        """Eager version of ``traverse``: run to completion and return the nodes."""
        return list(self.traverse(order, visitor))

    def values(self, order: Optional[OrderLike] = None) -> List[Number]:
        """Node values in the given order."""
        return [node.value for node in self.traverse(order)]

    def __iter__(self) -> Iterator[Number]:
        return (node.value for node in self.traverse())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={len(self)}, height={self.height()})"
