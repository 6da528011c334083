"""Binary search tree."""

from typing import Optional

from ..config import TreeVariant
from ..core.node import TreeNode, Number
from ..errors import EmptyTreeError
from .base import BinaryTree


class SearchTree(BinaryTree):
    """Binary search tree without duplicates.

    Every value in a node's left subtree is strictly smaller than the node's
    value, every value in its right subtree strictly larger. Deleting a node
    with two children copies its in-order successor's value into it and then
    removes the successor from the right subtree.

    Nothing bounds the height, so sorted input builds a chain as deep as the
    tree is large. Insert and delete therefore walk down with a parent
    pointer instead of recursing.
    """

    variant = TreeVariant.SEARCH

    def _insert(self, value: Number) -> bool:
        if self.root is None:
            self.root = TreeNode(value)
            return True

        current = self.root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = TreeNode(value)
                    return True
                current = current.left
            elif value > current.value:
                if current.right is None:
                    current.right = TreeNode(value)
                    return True
                current = current.right
            else:
                return False

    def _delete(self, value: Number) -> bool:
        parent: Optional[TreeNode] = None
        current = self.root
        while current is not None and value != current.value:
            parent = current
            current = current.left if value < current.value else current.right

        if current is None:
            return False

        if current.left is not None and current.right is not None:
            # Successor is the right subtree's minimum, so it has no left child
            successor_parent = current
            successor = current.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            current.value = successor.value
            self._replace_child(successor_parent, successor, successor.right)
        else:
            child = current.left if current.left is not None else current.right
            self._replace_child(parent, current, child)
        return True

    def _replace_child(self, parent: Optional[TreeNode], old: TreeNode,
                       new: Optional[TreeNode]) -> None:
        """Point whichever link held ``old`` (or the root) at ``new``."""
        if parent is None:
            self.root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def contains(self, value: Number) -> bool:
        """Check membership by binary search."""
        value = self._check_value(value)
        current = self.root
        while current is not None:
            if value == current.value:
                return True
            current = current.left if value < current.value else current.right
        return False

    def min(self) -> Number:
        """Smallest value in the tree.

        Raises:
            EmptyTreeError: If the tree is empty
        """
        if self.root is None:
            raise EmptyTreeError("min() of an empty tree")
        return self._get_min_value_node(self.root).value

    def max(self) -> Number:
        """Largest value in the tree.

        Raises:
            EmptyTreeError: If the tree is empty
        """
        if self.root is None:
            raise EmptyTreeError("max() of an empty tree")
        current = self.root
        while current.right is not None:
            current = current.right
        return current.value
