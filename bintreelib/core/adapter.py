"""BinaryTreeAdapter for BinTreeLib.

The adapter provides the navigation logic traversers and collectors rely on,
decoupling "how to walk a binary node" from "what order to visit it in".
"""

from typing import Iterator, Optional
from .node import TreeNode


class BinaryTreeAdapter:
    """Navigates the left/right links of TreeNode instances.

    Traversers never touch ``node.left`` / ``node.right`` directly; they go
    through the adapter. This keeps traversal code shared between all three
    tree variants and lets tests substitute an adapter when needed.
    """

    def get_left(self, node: TreeNode) -> Optional[TreeNode]:
        """Return the left child or None."""
        return node.left

    def get_right(self, node: TreeNode) -> Optional[TreeNode]:
        """Return the right child or None."""
        return node.right

    def get_children(self, node: TreeNode) -> Iterator[TreeNode]:
        """Get an iterator of present children, left before right.

        Args:
            node: The parent node

        Returns:
            Iterator yielding zero, one or two child nodes
        """
        left = self.get_left(node)
        if left is not None:
            yield left
        right = self.get_right(node)
        if right is not None:
            yield right

    def estimated_size(self, node: Optional[TreeNode]) -> int:
        """Count the nodes in the subtree rooted at ``node``.

        Args:
            node: Root of subtree to count (None counts as empty)

        Returns:
            Exact node count
        """
        if node is None:
            return 0
        count = 0
        stack = [node]
        while stack:
            current = stack.pop()
            count += 1
            stack.extend(self.get_children(current))
        return count
