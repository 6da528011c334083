"""Unordered binary tree.

Values fill the tree in level order, so the shape depends only on insertion
order and the tree stays as complete as possible. No value ordering is
implied.
"""

import warnings
from collections import deque
from typing import Deque

from ..config import TreeVariant
from ..core.node import TreeNode, Number
from ..errors import UnorderedDeleteWarning
from .base import BinaryTree


class UnorderedTree(BinaryTree):
    """Binary tree with level-order insertion and no duplicates.

    Deletion is inherited from BinaryTree and locates the target by
    comparing values, as if the tree were a search tree. Since level-order
    insertion doesn't keep values ordered, a value that is present can be
    missed. When that happens the tree is left unchanged and an
    UnorderedDeleteWarning is emitted in place of the missing-value policy,
    so a strict policy doesn't report a value that is actually there.

    Example:
        >>> tree = UnorderedTree()
        >>> for v in (1, 2, 3):
        ...     _ = tree.insert(v)
        >>> tree.values("levelorder")
        [1, 2, 3]
    """

    variant = TreeVariant.BINARY

    def _insert(self, value: Number) -> bool:
        if self.root is None:
            self.root = TreeNode(value)
            return True

        if self.contains(value):
            return False

        new_node = TreeNode(value)
        queue: Deque[TreeNode] = deque([self.root])

        # First open slot in level order, left before right
        while queue:
            current = queue.popleft()

            if current.left is None:
                current.left = new_node
                return True
            queue.append(current.left)

            if current.right is None:
                current.right = new_node
                return True
            queue.append(current.right)

        return False

    def _report_missing(self, value: Number) -> None:
        # Present but unreachable by comparison: not a miss for the policy
        if self.contains(value):
            warnings.warn(
                f"Value {value!r} is in the tree but comparison-based delete "
                f"could not reach it; unordered trees don't keep values ordered.",
                UnorderedDeleteWarning,
                stacklevel=3,
            )
            return
        super()._report_missing(value)

    def _replace_with_successor(self, node: TreeNode) -> None:
        # The leftmost node of the right subtree isn't necessarily its
        # minimum here, so searching for it by value again could miss and
        # leave a duplicate. Splice it out directly instead.
        parent = node
        successor = node.right
        while successor.left is not None:
            parent = successor
            successor = successor.left

        node.value = successor.value
        if parent is node:
            parent.right = successor.right
        else:
            parent.left = successor.right
        self._removed = True
