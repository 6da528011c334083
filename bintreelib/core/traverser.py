"""Tree traversal strategies for BinTreeLib.

Traversers implement the four standard visiting orders for binary trees.
They work through a BinaryTreeAdapter, so every tree variant shares the
same traversal code.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple, Union

from .node import TreeNode
from .adapter import BinaryTreeAdapter
from ..config import TraversalOrder, parse_order


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Each call to ``traverse`` returns a fresh generator, so a traversal is
    lazy, finite and restartable. Traversers never modify the tree.
    """

    order: TraversalOrder

    def __init__(self, adapter: Optional[BinaryTreeAdapter] = None):
        """Initialize traverser with an adapter.

        Args:
            adapter: BinaryTreeAdapter for navigating the tree
        """
        self.adapter = adapter or BinaryTreeAdapter()

    @abstractmethod
    def traverse(self,
                 root: Optional[TreeNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal (None yields nothing)
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        if max_depth is None:
            return True
        return depth < max_depth


class InOrderTraverser(TreeTraverser):
    """In-order traversal: left subtree, node, right subtree.

    On a search tree this yields values in strictly increasing order.
    """

    order = TraversalOrder.INORDER

    def traverse(self,
                 root: Optional[TreeNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        stack: List[Tuple[TreeNode, int]] = []
        current = root
        depth = 0

        while stack or current is not None:
            # Walk as far left as the depth limit allows
            while current is not None:
                stack.append((current, depth))
                if self._should_explore(depth, max_depth):
                    current = self.adapter.get_left(current)
                else:
                    current = None
                depth += 1

            node, depth = stack.pop()
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                current = self.adapter.get_right(node)
            else:
                current = None
            depth += 1


class PreOrderTraverser(TreeTraverser):
    """Pre-order traversal: node, left subtree, right subtree.

    Visits parent before children. Replaying the values into an empty
    search tree rebuilds the same shape.
    """

    order = TraversalOrder.PREORDER

    def traverse(self,
                 root: Optional[TreeNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        if root is None:
            return
        stack: List[Tuple[TreeNode, int]] = [(root, 0)]

        while stack:
            node, depth = stack.pop()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                # Push right first so left is popped first
                children = list(self.adapter.get_children(node))
                for child in reversed(children):
                    stack.append((child, depth + 1))


class PostOrderTraverser(TreeTraverser):
    """Post-order traversal: left subtree, right subtree, node.

    Visits children before parent. Good for teardown or aggregating
    subtree values.
    """

    order = TraversalOrder.POSTORDER

    def traverse(self,
                 root: Optional[TreeNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        if root is None:
            return
        # Third element marks nodes whose children are already on the stack
        stack: List[Tuple[TreeNode, int, bool]] = [(root, 0, False)]

        while stack:
            node, depth, expanded = stack.pop()

            if expanded:
                if self._should_yield(depth, min_depth, max_depth):
                    yield (node, depth)
                continue

            stack.append((node, depth, True))
            if self._should_explore(depth, max_depth):
                children = list(self.adapter.get_children(node))
                for child in reversed(children):
                    stack.append((child, depth + 1, False))


class LevelOrderTraverser(TreeTraverser):
    """Level-order (breadth-first) traversal.

    Visits all nodes at depth N, left to right, before depth N+1.
    """

    order = TraversalOrder.LEVEL_ORDER

    def traverse(self,
                 root: Optional[TreeNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        if root is None:
            return
        queue: Deque[Tuple[TreeNode, int]] = deque([(root, 0)])

        while queue:
            node, depth = queue.popleft()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                for child in self.adapter.get_children(node):
                    queue.append((child, depth + 1))


_TRAVERSERS = {
    TraversalOrder.INORDER: InOrderTraverser,
    TraversalOrder.PREORDER: PreOrderTraverser,
    TraversalOrder.POSTORDER: PostOrderTraverser,
    TraversalOrder.LEVEL_ORDER: LevelOrderTraverser,
}


def create_traverser(order: Union[TraversalOrder, str],
                     adapter: Optional[BinaryTreeAdapter] = None) -> TreeTraverser:
    """Create a traverser instance by order.

    Args:
        order: TraversalOrder or a name such as "inorder", "pre_order", "bfs"
        adapter: BinaryTreeAdapter for the tree (default adapter if None)

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If order name is not recognized
    """
    return _TRAVERSERS[parse_order(order)](adapter)
