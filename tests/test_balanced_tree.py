"""Unit tests for BalancedTree (AVL).

Each rotation case is triggered explicitly for both insertion and deletion,
and every test finishes by checking balance and stored heights.
"""

import sys
import unittest
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from bintreelib import BalancedTree, SearchTree, TreeVariant
from bintreelib.core import TreeNode, get_balance
from bintreelib.testing import TreeTestHelper


def shape(node):
    if node is None:
        return None
    return (node.value, shape(node.left), shape(node.right))


def build(values):
    tree = BalancedTree()
    for value in values:
        tree.insert(value)
    return tree


class AVLTestCase(unittest.TestCase):

    def assertValidAVL(self, tree):
        self.assertEqual(TreeTestHelper(tree).violations(), [])


class TestBalancedInsertRotations(AVLTestCase):
    """The four insertion cases."""

    def test_variant(self):
        self.assertEqual(BalancedTree().variant, TreeVariant.BALANCED)
        self.assertIsInstance(BalancedTree(), SearchTree)

    def test_right_right_case(self):
        tree = build([10, 20, 30])
        self.assertEqual(shape(tree.root),
                         (20, (10, None, None), (30, None, None)))
        self.assertEqual(tree.root.height, 2)
        self.assertEqual(tree.root.left.height, 1)
        self.assertEqual(tree.root.right.height, 1)
        self.assertValidAVL(tree)

    def test_left_left_case(self):
        tree = build([30, 20, 10])
        self.assertEqual(shape(tree.root),
                         (20, (10, None, None), (30, None, None)))
        self.assertValidAVL(tree)

    def test_left_right_case(self):
        tree = build([30, 10, 20])
        self.assertEqual(shape(tree.root),
                         (20, (10, None, None), (30, None, None)))
        self.assertValidAVL(tree)

    def test_right_left_case(self):
        tree = build([10, 30, 20])
        self.assertEqual(shape(tree.root),
                         (20, (10, None, None), (30, None, None)))
        self.assertValidAVL(tree)

    def test_sequential_inserts_stay_logarithmic(self):
        tree = build(range(1, 8))
        self.assertEqual(tree.height(), 3)
        self.assertEqual(tree.root.value, 4)
        self.assertEqual(tree.values('levelorder'), [4, 2, 6, 1, 3, 5, 7])
        self.assertValidAVL(tree)

    def test_rotation_below_root(self):
        tree = build([10, 20, 30, 40, 50, 25])
        self.assertEqual(tree.root.value, 30)
        self.assertEqual(tree.values(), [10, 20, 25, 30, 40, 50])
        self.assertLessEqual(tree.height(), 3)
        self.assertValidAVL(tree)

    def test_hundred_sequential_inserts(self):
        tree = build(range(100))
        # AVL height bound for 100 nodes is well under 10
        self.assertLessEqual(tree.height(), 8)
        self.assertValidAVL(tree)

    def test_duplicate_insert_leaves_heights_untouched(self):
        tree = build([20, 10, 30, 5])
        before = shape(tree.root)
        heights = [n.height for n in tree.preorder()]

        self.assertFalse(tree.insert(10))

        self.assertEqual(shape(tree.root), before)
        self.assertEqual([n.height for n in tree.preorder()], heights)
        self.assertEqual(len(tree), 4)


class TestBalancedDeleteRotations(AVLTestCase):
    """Rebalancing after deletion uses the children's balance factors."""

    def test_delete_triggers_right_rotation(self):
        # 20(10(5), 30); deleting 30 leaves a left-left imbalance
        tree = build([20, 10, 30, 5])
        tree.delete(30)
        self.assertEqual(shape(tree.root),
                         (10, (5, None, None), (20, None, None)))
        self.assertValidAVL(tree)

    def test_delete_with_left_child_balanced_uses_single_rotation(self):
        # Left child has balance 0 after removing 30
        tree = build([20, 10, 30, 5, 15])
        tree.delete(30)
        self.assertEqual(tree.root.value, 10)
        self.assertEqual(shape(tree.root.right), (20, (15, None, None), None))
        self.assertValidAVL(tree)

    def test_delete_triggers_left_right_rotation(self):
        tree = build([20, 10, 30, 15])
        tree.delete(30)
        self.assertEqual(shape(tree.root),
                         (15, (10, None, None), (20, None, None)))
        self.assertValidAVL(tree)

    def test_delete_triggers_left_rotation(self):
        tree = build([20, 10, 30, 40])
        tree.delete(10)
        self.assertEqual(shape(tree.root),
                         (30, (20, None, None), (40, None, None)))
        self.assertValidAVL(tree)

    def test_delete_triggers_right_left_rotation(self):
        tree = build([20, 10, 30, 25])
        tree.delete(10)
        self.assertEqual(shape(tree.root),
                         (25, (20, None, None), (30, None, None)))
        self.assertValidAVL(tree)

    def test_delete_two_child_root_uses_successor(self):
        tree = build([20, 10, 30, 25, 35])
        tree.delete(20)
        self.assertEqual(tree.root.value, 25)
        self.assertEqual(tree.values(), [10, 25, 30, 35])
        self.assertValidAVL(tree)

    def test_delete_absent_value_changes_nothing(self):
        tree = build(range(1, 8))
        before = shape(tree.root)
        heights = [n.height for n in tree.preorder()]

        self.assertFalse(tree.delete(100))

        self.assertEqual(shape(tree.root), before)
        self.assertEqual([n.height for n in tree.preorder()], heights)

    def test_delete_everything_in_mixed_order(self):
        values = [50, 20, 80, 10, 30, 70, 90, 5, 15, 25, 35, 60, 75, 85, 95]
        tree = build(values)
        for value in [20, 90, 50, 5, 75, 30, 10, 95, 60, 15, 85, 25, 35, 70, 80]:
            self.assertTrue(tree.delete(value))
            self.assertValidAVL(tree)
        self.assertTrue(tree.is_empty())
        self.assertEqual(tree.height(), 0)


class TestRotationPrimitives(unittest.TestCase):
    """Rotations touch exactly two heights and preserve in-order sequence."""

    def test_left_rotate(self):
        tree = BalancedTree()
        z = TreeNode(1)
        z.right = TreeNode(2)
        z.right.right = TreeNode(3)
        z.right.height = 2
        z.height = 3

        y = tree._left_rotate(z)

        self.assertEqual(y.value, 2)
        self.assertIs(y.left, z)
        self.assertEqual(z.height, 1)
        self.assertEqual(y.height, 2)
        self.assertEqual(y.right.height, 1)

    def test_right_rotate_moves_inner_subtree(self):
        tree = BalancedTree()
        z = TreeNode(10)
        z.left = TreeNode(5)
        z.left.right = TreeNode(7)
        z.left.height = 2
        z.height = 3

        y = tree._right_rotate(z)

        self.assertEqual(y.value, 5)
        self.assertIs(y.right, z)
        self.assertEqual(z.left.value, 7)
        self.assertEqual(z.height, 2)
        self.assertEqual(y.height, 3)
        # A single rotation can't fix a left-right shape
        self.assertEqual(get_balance(y), -2)


if __name__ == '__main__':
    unittest.main()
