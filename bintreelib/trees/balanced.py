"""Self-balancing AVL tree.

Each node stores its height. After every insert or delete, the nodes on the
mutation path recompute their height and balance factor on the way back up,
and at most one rotation pattern per node restores
``|height(left) - height(right)| <= 1``.
"""

from typing import Optional

from ..config import TreeVariant
from ..core.node import TreeNode, Number, get_balance, get_height, update_height
from .base import BinaryTree
from .search import SearchTree


class BalancedTree(SearchTree):
    """AVL tree with SearchTree's ordering and lookups.

    Unlike SearchTree, mutations recurse: each node on the path goes through
    descend -> reattach -> update height -> compute balance -> rebalance
    -> return new subtree root. The height bound keeps the recursion at
    O(log n) frames.
    """

    variant = TreeVariant.BALANCED

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._inserted = False

    def _insert(self, value: Number) -> bool:
        self._inserted = False
        self.root = self._insert_rec(self.root, value)
        return self._inserted

    def _insert_rec(self, node: Optional[TreeNode], value: Number) -> TreeNode:
        """Place ``value`` in this subtree and return the subtree's new root."""
        if node is None:
            self._inserted = True
            return TreeNode(value)

        if value < node.value:
            node.left = self._insert_rec(node.left, value)
        elif value > node.value:
            node.right = self._insert_rec(node.right, value)
        else:
            # Duplicate: nothing changes below, so nothing to fix up
            return node

        return self._rebalance_after_insert(node, value)

    def _delete(self, value: Number) -> bool:
        # Recursive delete from BinaryTree, so _rebalance_after_delete runs
        # on every node of the path
        return BinaryTree._delete(self, value)

    def _rebalance_after_insert(self, node: TreeNode, value: Number) -> TreeNode:
        update_height(node)
        balance = get_balance(node)

        # The inserted value tells us which grandchild grew

        # Left-Left Case
        if balance > 1 and value < node.left.value:
            return self._right_rotate(node)

        # Right-Right Case
        if balance < -1 and value > node.right.value:
            return self._left_rotate(node)

        # Left-Right Case
        if balance > 1 and value > node.left.value:
            node.left = self._left_rotate(node.left)
            return self._right_rotate(node)

        # Right-Left Case
        if balance < -1 and value < node.right.value:
            node.right = self._right_rotate(node.right)
            return self._left_rotate(node)

        return node

    def _rebalance_after_delete(self, node: TreeNode) -> TreeNode:
        update_height(node)
        balance = get_balance(node)

        # The deleted value is gone, so the children's balance picks the case

        # Left-Left Case
        if balance > 1 and get_balance(node.left) >= 0:
            return self._right_rotate(node)

        # Left-Right Case
        if balance > 1 and get_balance(node.left) < 0:
            node.left = self._left_rotate(node.left)
            return self._right_rotate(node)

        # Right-Right Case
        if balance < -1 and get_balance(node.right) <= 0:
            return self._left_rotate(node)

        # Right-Left Case
        if balance < -1 and get_balance(node.right) > 0:
            node.right = self._right_rotate(node.right)
            return self._left_rotate(node)

        return node

    def _left_rotate(self, z: TreeNode) -> TreeNode:
        """
        Single left rotation around ``z``.

        ``z.right`` becomes the subtree root and ``z`` its left child. Only
        the heights of those two nodes are recomputed.
        """
        y = z.right
        t2 = y.left

        y.left = z
        z.right = t2

        update_height(z)
        update_height(y)

        return y

    def _right_rotate(self, z: TreeNode) -> TreeNode:
        """
        Single right rotation around ``z``.

        ``z.left`` becomes the subtree root and ``z`` its right child. Only
        the heights of those two nodes are recomputed.
        """
        y = z.left
        t3 = y.right

        y.right = z
        z.left = t3

        update_height(z)
        update_height(y)

        return y

    def height(self) -> int:
        """Number of levels, read from the root's stored height."""
        return get_height(self.root)
