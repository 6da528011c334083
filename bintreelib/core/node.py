"""TreeNode storage unit for BinTreeLib.

The TreeNode is intentionally kept simple - it's primarily a data container.
Structural rules (where a value goes, when to rotate) live in the tree
variants, and navigation for traversal is delegated to the adapter.
"""

from typing import Any, Dict, Optional, Union

Number = Union[int, float]


class TreeNode:
    """A single node in a binary tree.

    Each node exclusively owns its children. There are no parent
    back-references, so structural changes always flow through the
    recursive "return the new subtree root" contract of the tree variants.

    ``height`` is only maintained by the balanced variant. Other variants
    leave it at its initial value of 1.
    """

    __slots__ = ('value', 'left', 'right', 'height')

    def __init__(self, value: Number):
        self.value = value
        self.left: Optional['TreeNode'] = None
        self.right: Optional['TreeNode'] = None
        self.height = 1

    def identifier(self) -> str:
        """Return the node's value as a string.

        Values are unique within a tree, so this is stable for the
        lifetime of the value. Note that deletion by successor replaces a
        node's value in place, which changes its identifier.
        """
        return str(self.value)

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self.left is None and self.right is None

    def child_count(self) -> int:
        """Number of present children (0, 1 or 2)."""
        return (self.left is not None) + (self.right is not None)

    def metadata(self) -> Dict[str, Any]:
        """Return lightweight information about this node.

        Returns:
            Dict with value, height, is_leaf and child_count
        """
        return {
            'value': self.value,
            'height': self.height,
            'is_leaf': self.is_leaf(),
            'child_count': self.child_count(),
        }

    def __str__(self) -> str:
        return self.identifier()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(value={self.value!r}, height={self.height})"


def get_height(node: Optional[TreeNode]) -> int:
    """Stored height of a node, treating an absent node as 0."""
    if node is None:
        return 0
    return node.height


def get_balance(node: Optional[TreeNode]) -> int:
    """Balance factor (left height minus right height), 0 for an absent node."""
    if node is None:
        return 0
    return get_height(node.left) - get_height(node.right)


def update_height(node: TreeNode) -> None:
    """Recompute a node's height from its children's stored heights."""
    node.height = 1 + max(get_height(node.left), get_height(node.right))


def subtree_height(node: Optional[TreeNode]) -> int:
    """Structural height of a subtree, computed without trusting stored heights.

    Works for every variant, including those that never maintain
    ``TreeNode.height``. Iterative so degenerate trees don't recurse deeply.
    """
    if node is None:
        return 0
    height = 0
    level = [node]
    while level:
        height += 1
        next_level = []
        for current in level:
            if current.left is not None:
                next_level.append(current.left)
            if current.right is not None:
                next_level.append(current.right)
        level = next_level
    return height
