#!/usr/bin/env python3
"""
Benchmark the three BinTreeLib variants against each other.

For sorted and shuffled input of several sizes this measures:
1. Insert time
2. Resulting height
3. Membership lookup time
4. In-order traversal time

Sorted input is where the plain search tree degenerates and the AVL tree
earns its rotations. Sorted search-tree runs are capped, since each insert
walks the whole chain.
"""

import argparse
import random
import sys
import time
from pathlib import Path
from typing import Dict, List

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from bintreelib import UnorderedTree, SearchTree, BalancedTree

# Sorted inserts into a plain search tree cost O(n^2) overall
SORTED_BST_LIMIT = 5000


class TreeBenchmark:
    """Benchmark suite for one input size."""

    def __init__(self, size: int, seed: int = 0):
        self.size = size
        self.sorted_values = list(range(size))
        self.shuffled_values = self.sorted_values[:]
        random.Random(seed).shuffle(self.shuffled_values)
        self.results: List[Dict] = []

    def run_one(self, tree_class, values: List[int], label: str):
        tree = tree_class()

        start = time.perf_counter()
        for value in values:
            tree.insert(value)
        insert_time = time.perf_counter() - start

        probes = values[:: max(1, len(values) // 1000)]
        start = time.perf_counter()
        for value in probes:
            tree.contains(value)
        lookup_time = time.perf_counter() - start

        start = time.perf_counter()
        tree.values('inorder')
        traverse_time = time.perf_counter() - start

        self.results.append({
            'tree': tree_class.__name__,
            'input': label,
            'height': tree.height(),
            'insert_s': insert_time,
            'lookup_us': lookup_time / len(probes) * 1e6,
            'traverse_s': traverse_time,
        })

    def run(self, include_unordered: bool):
        for label, values in (("shuffled", self.shuffled_values),
                              ("sorted", self.sorted_values)):
            self.run_one(BalancedTree, values, label)
            if label == "shuffled" or self.size <= SORTED_BST_LIMIT:
                self.run_one(SearchTree, values, label)
            if include_unordered:
                self.run_one(UnorderedTree, values, label)

    def print_results(self):
        print(f"\nn = {self.size:,}")
        print(f"  {'tree':<14}{'input':<10}{'height':>8}{'insert s':>11}"
              f"{'lookup us':>11}{'inorder s':>11}")
        for r in self.results:
            print(f"  {r['tree']:<14}{r['input']:<10}{r['height']:>8}"
                  f"{r['insert_s']:>11.4f}{r['lookup_us']:>11.2f}"
                  f"{r['traverse_s']:>11.4f}")


def main():
    parser = argparse.ArgumentParser(description="Compare tree variant heights and timings")
    parser.add_argument("--sizes", type=int, nargs="+", default=[100, 800, 10000],
                        help="Input sizes to benchmark")
    parser.add_argument("--unordered", action="store_true",
                        help="Include the unordered tree (quadratic insert)")
    args = parser.parse_args()

    print("=" * 70)
    print("BinTreeLib variant comparison")
    print("=" * 70)

    for size in args.sizes:
        bench = TreeBenchmark(size)
        bench.run(include_unordered=args.unordered)
        bench.print_results()


if __name__ == "__main__":
    main()
