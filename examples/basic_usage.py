#!/usr/bin/env python3
"""Basic usage of the three BinTreeLib tree variants.

Builds the same values into an unordered tree, a binary search tree and
an AVL tree, then prints each tree's shape and traversals.
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from bintreelib import (
    TraversalOrder,
    build_tree,
    collect_values,
    get_tree_stats,
)

VALUES = [50, 30, 70, 20, 40, 60, 80, 10, 25, 35]


def show(tree, title):
    print(f"\n=== {title} ===")
    stats = get_tree_stats(tree)
    print(f"size={stats['total_nodes']} height={stats['height']} "
          f"leaves={stats['leaf_nodes']}")

    for level, values in enumerate(tree.snapshot().level_values()):
        print(f"  level {level}: {values}")

    for order in TraversalOrder:
        print(f"  {order.value:<10} {collect_values(tree, order)}")


def main():
    for variant, title in (("binary", "Unordered (level-order fill)"),
                           ("bst", "Binary search tree"),
                           ("avl", "AVL tree")):
        show(build_tree(VALUES, variant), title)

    print("\n=== Sequential inserts 1..15 ===")
    for variant in ("bst", "avl"):
        tree = build_tree(range(1, 16), variant)
        print(f"  {variant}: height {tree.height()}")

    tree = build_tree(VALUES, "avl")
    tree.delete(50)
    print(f"\nAVL after deleting the root: new root is {tree.root.value}")


if __name__ == "__main__":
    main()
