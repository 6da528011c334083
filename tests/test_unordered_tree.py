"""Unit tests for UnorderedTree.

Covers level-order placement, duplicate suppression, and the
comparison-based deletion the unordered tree shares with the search trees.
"""

import sys
import unittest
import warnings
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from bintreelib import (
    UnorderedTree,
    UnorderedDeleteWarning,
    TreeConfig,
    TreeVariant,
    CollectMissingPolicy,
    ValueNotFoundError,
)
from bintreelib.testing import TreeTestHelper


def shape(node):
    """Nested (value, left, right) tuples for structural comparison."""
    if node is None:
        return None
    return (node.value, shape(node.left), shape(node.right))


class TestUnorderedInsert(unittest.TestCase):
    """Level-order, first-open-slot placement."""

    def setUp(self):
        self.tree = UnorderedTree()

    def test_empty_tree(self):
        self.assertTrue(self.tree.is_empty())
        self.assertEqual(len(self.tree), 0)
        self.assertEqual(self.tree.height(), 0)
        self.assertEqual(self.tree.variant, TreeVariant.BINARY)

    def test_first_value_becomes_root(self):
        self.assertTrue(self.tree.insert(9))
        self.assertEqual(self.tree.root.value, 9)
        self.assertEqual(len(self.tree), 1)

    def test_level_order_placement_ignores_numeric_order(self):
        for value in (1, 2, 3):
            self.tree.insert(value)
        self.assertEqual(self.tree.root.value, 1)
        self.assertEqual(self.tree.root.left.value, 2)
        self.assertEqual(self.tree.root.right.value, 3)

    def test_descending_values_still_fill_level_order(self):
        for value in (7, 6, 5, 4, 3, 2, 1):
            self.tree.insert(value)
        self.assertEqual(self.tree.values('levelorder'), [7, 6, 5, 4, 3, 2, 1])
        self.assertEqual(self.tree.height(), 3)

    def test_fills_left_to_right_on_each_level(self):
        for value in (10, 20, 30, 40, 50):
            self.tree.insert(value)
        root = self.tree.root
        self.assertEqual(root.left.left.value, 40)
        self.assertEqual(root.left.right.value, 50)
        self.assertIsNone(root.right.left)

    def test_duplicate_insert_is_noop(self):
        for value in (1, 2, 3, 4):
            self.tree.insert(value)
        before = shape(self.tree.root)

        self.assertFalse(self.tree.insert(3))
        self.assertEqual(shape(self.tree.root), before)
        self.assertEqual(len(self.tree), 4)

    def test_duplicate_of_root_is_noop(self):
        self.tree.insert(5)
        self.assertFalse(self.tree.insert(5))
        self.assertEqual(len(self.tree), 1)

    def test_contains_scans_whole_tree(self):
        for value in (50, 10, 90, 5):
            self.tree.insert(value)
        self.assertIn(5, self.tree)
        self.assertIn(90, self.tree)
        self.assertNotIn(6, self.tree)
        self.assertNotIn("x", self.tree)


class TestUnorderedDelete(unittest.TestCase):
    """Comparison-based deletion on a tree that may not be ordered."""

    def setUp(self):
        self.tree = UnorderedTree()

    def test_delete_leaf_reachable_by_comparison(self):
        # 2 < 5 so descent goes left and finds it
        for value in (5, 2, 8):
            self.tree.insert(value)
        self.assertTrue(self.tree.delete(2))
        self.assertIsNone(self.tree.root.left)
        self.assertEqual(len(self.tree), 2)

    def test_delete_root_with_two_children(self):
        for value in (5, 2, 8):
            self.tree.insert(value)
        self.assertTrue(self.tree.delete(5))
        self.assertEqual(self.tree.root.value, 8)
        self.assertEqual(self.tree.root.left.value, 2)
        self.assertIsNone(self.tree.root.right)

    def test_two_child_delete_splices_leftmost_of_right_subtree(self):
        # Level order: 5 / (1, 9) / (2, 3, 4, 6)
        for value in (5, 1, 9, 2, 3, 4, 6):
            self.tree.insert(value)
        self.assertTrue(self.tree.delete(5))

        # Leftmost of right subtree (9 -> 4) moved up, no duplicates left
        self.assertEqual(self.tree.root.value, 4)
        self.assertIsNone(self.tree.root.right.left)
        self.assertEqual(self.tree.root.right.right.value, 6)
        self.assertFalse(TreeTestHelper(self.tree).has_duplicates())
        self.assertEqual(len(self.tree), 6)

    def test_unreachable_value_warns_and_keeps_tree(self):
        # 1 is inserted at root.right although it is smaller than the root
        for value in (5, 8, 1):
            self.tree.insert(value)
        before = shape(self.tree.root)

        with self.assertWarns(UnorderedDeleteWarning):
            removed = self.tree.delete(1)

        self.assertFalse(removed)
        self.assertEqual(shape(self.tree.root), before)
        self.assertEqual(len(self.tree), 3)

    def test_unreachable_value_skips_strict_policy(self):
        tree = UnorderedTree(TreeConfig.strict(TreeVariant.BINARY))
        for value in (5, 8, 1):
            tree.insert(value)

        with self.assertWarns(UnorderedDeleteWarning):
            self.assertFalse(tree.delete(1))
        self.assertIn(1, tree)

        # A real miss still goes through the policy
        with self.assertRaises(ValueNotFoundError):
            tree.delete(42)

    def test_unreachable_value_not_recorded_as_miss(self):
        policy = CollectMissingPolicy(verbose=False)
        tree = UnorderedTree(TreeConfig(variant=TreeVariant.BINARY, missing_policy=policy))
        for value in (5, 8, 1):
            tree.insert(value)

        with self.assertWarns(UnorderedDeleteWarning):
            tree.delete(1)
        tree.delete(42)

        self.assertEqual([m['value'] for m in policy.misses], [42])

    def test_delete_absent_value_is_silent_noop(self):
        for value in (1, 2, 3):
            self.tree.insert(value)
        before = shape(self.tree.root)

        with warnings.catch_warnings():
            warnings.simplefilter("error")
            self.assertFalse(self.tree.delete(99))

        self.assertEqual(shape(self.tree.root), before)

    def test_delete_from_empty_tree(self):
        self.assertFalse(self.tree.delete(1))
        self.assertTrue(self.tree.is_empty())

    def test_clear(self):
        for value in (1, 2, 3):
            self.tree.insert(value)
        self.tree.clear()
        self.assertTrue(self.tree.is_empty())
        self.assertEqual(len(self.tree), 0)


if __name__ == '__main__':
    unittest.main()
