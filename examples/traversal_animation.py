#!/usr/bin/env python3
"""Console replay of a traversal.

A TreeSession produces a detached snapshot of the tree and an ordered list
of visit events. This script plays the events back one per tick, marking
each visited value in a sideways drawing of the snapshot, the same way a
graphical front end would highlight nodes.

Usage:
    python examples/traversal_animation.py avl inorder 10 20 30 40 50
    python examples/traversal_animation.py bst levelorder --delay 0.2 5 3 8 1
"""

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional, Set

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from bintreelib import InvalidValueError, NodeSnapshot, TreeSession


def render(node: Optional[NodeSnapshot], visited: Set, current, depth: int = 0) -> List[str]:
    """Draw the tree rotated 90 degrees: right subtree on top."""
    if node is None:
        return []
    if node.value == current:
        label = f"[{node.value}]"
    elif node.value in visited:
        label = f"*{node.value}*"
    else:
        label = f" {node.value} "
    return (render(node.right, visited, current, depth + 1)
            + ["      " * depth + label]
            + render(node.left, visited, current, depth + 1))


def main():
    parser = argparse.ArgumentParser(description="Replay a tree traversal")
    parser.add_argument("variant", help="binary, bst or avl")
    parser.add_argument("order", help="inorder, preorder, postorder or levelorder")
    parser.add_argument("values", nargs="+", help="Integers to insert")
    parser.add_argument("--delay", type=float, default=0.5,
                        help="Seconds between steps (default: 0.5)")
    args = parser.parse_args()

    session = TreeSession(args.variant)
    for text in args.values:
        try:
            session.insert(text)
        except InvalidValueError as e:
            print(f"WARNING: skipping {text!r}: {e}", file=sys.stderr)

    snapshot = session.snapshot()
    events = session.traverse(args.order)
    visited = set()

    for event in events:
        print(f"\nstep {event.step + 1}/{len(events)}: visit {event.value} "
              f"(depth {event.depth})")
        print("\n".join(render(snapshot.root, visited, event.value)))
        visited.add(event.value)
        time.sleep(args.delay)

    print(f"\n{args.order}: {[e.value for e in events]}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
