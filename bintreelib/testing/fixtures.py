"""Test fixtures for BinTreeLib consumers.

These fixtures check structural invariants of a tree from the outside,
without exposing variant internals as part of the public API.
"""

from typing import Any, Dict, List, Optional, Set

from ..core.node import TreeNode, subtree_height
from ..trees import BinaryTree, SearchTree, BalancedTree


class TreeTestHelper:
    """Public test fixture for tree invariant verification.

    Designed for test suites of projects that build on BinTreeLib, and for
    the library's own property tests.

    Example:
        tree = BalancedTree()
        for v in values:
            tree.insert(v)
        helper = TreeTestHelper(tree)

        assert helper.violations() == []
        assert helper.get_summary()['balanced']
    """

    def __init__(self, tree: BinaryTree):
        """Initialize with the tree to inspect.

        Args:
            tree: Any BinTreeLib tree variant
        """
        self._tree = tree

    def _nodes(self) -> List[TreeNode]:
        # Post-order, so children are checked before their parents
        return list(self._tree.postorder())

    def is_ordered(self) -> bool:
        """True if an in-order traversal is strictly increasing."""
        values = self._tree.values('inorder')
        return all(a < b for a, b in zip(values, values[1:]))

    def has_duplicates(self) -> bool:
        seen: Set[Any] = set()
        for node in self._nodes():
            if node.value in seen:
                return True
            seen.add(node.value)
        return False

    def is_balanced(self) -> bool:
        """True if every node's subtrees differ in height by at most one.

        Uses structural heights, so it is meaningful for every variant.
        """
        return self._first_imbalance() is None

    def heights_consistent(self) -> bool:
        """True if every stored height equals 1 + max(child heights)."""
        return self._first_bad_height() is None

    def _first_imbalance(self) -> Optional[TreeNode]:
        heights: Dict[int, int] = {}
        for node in self._nodes():
            left = heights.get(id(node.left), 0) if node.left else 0
            right = heights.get(id(node.right), 0) if node.right else 0
            if abs(left - right) > 1:
                return node
            heights[id(node)] = 1 + max(left, right)
        return None

    def _first_bad_height(self) -> Optional[TreeNode]:
        for node in self._nodes():
            left = node.left.height if node.left else 0
            right = node.right.height if node.right else 0
            if node.height != 1 + max(left, right):
                return node
        return None

    def violations(self) -> List[str]:
        """List every invariant the tree's variant promises but breaks.

        Returns:
            Human-readable violation descriptions (empty if all hold)
        """
        problems = []

        if len(self._nodes()) != len(self._tree):
            problems.append(
                f"size mismatch: len() is {len(self._tree)}, "
                f"tree holds {len(self._nodes())} nodes"
            )

        if self.has_duplicates():
            problems.append("duplicate values present")

        if isinstance(self._tree, SearchTree) and not self.is_ordered():
            problems.append("in-order traversal is not strictly increasing")

        if isinstance(self._tree, BalancedTree):
            node = self._first_imbalance()
            if node is not None:
                problems.append(f"node {node.value!r} is out of balance")
            node = self._first_bad_height()
            if node is not None:
                problems.append(f"node {node.value!r} has stale height {node.height}")

        return problems

    def get_summary(self) -> Dict[str, Any]:
        """Returns high-level tree state for testing.

        Returns:
            Dictionary containing:
            - variant: Variant name
            - size: Node count
            - height: Structural height
            - ordered: In-order traversal strictly increasing
            - balanced: AVL balance holds at every node
            - valid: No violations for this variant
        """
        return {
            'variant': self._tree.variant.value,
            'size': len(self._tree),
            'height': subtree_height(self._tree.root),
            'ordered': self.is_ordered(),
            'balanced': self.is_balanced(),
            'valid': not self.violations(),
        }
