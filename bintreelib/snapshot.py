"""Immutable views of tree state for presentation layers.

A renderer never receives live TreeNode objects. It gets a TreeSnapshot of
the topology after each mutation, and a list of VisitEvent records for each
traversal it wants to animate. Both are plain frozen dataclasses, safe to
hold on to while the tree keeps changing.
"""

from dataclasses import dataclass
from itertools import zip_longest
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .core.node import TreeNode, Number
from .config import TraversalOrder

_END = object()


@dataclass(frozen=True, eq=False, repr=False)
class NodeSnapshot:
    """Frozen copy of one node and its subtree.

    A snapshot of a degenerate search tree is a chain as long as the tree,
    so building, comparing, hashing and converting all walk the subtree with
    an explicit stack rather than recursing.
    """

    value: Number
    height: int
    left: Optional['NodeSnapshot'] = None
    right: Optional['NodeSnapshot'] = None

    @classmethod
    def from_node(cls, node: Optional[TreeNode]) -> Optional['NodeSnapshot']:
        if node is None:
            return None

        # Post-order, so both children exist before their parent is frozen
        built: Dict[int, NodeSnapshot] = {}
        stack: List[Tuple[TreeNode, bool]] = [(node, False)]
        while stack:
            current, expanded = stack.pop()
            if expanded:
                built[id(current)] = cls(
                    value=current.value,
                    height=current.height,
                    left=built.pop(id(current.left)) if current.left is not None else None,
                    right=built.pop(id(current.right)) if current.right is not None else None,
                )
                continue
            stack.append((current, True))
            if current.right is not None:
                stack.append((current.right, False))
            if current.left is not None:
                stack.append((current.left, False))
        return built[id(node)]

    def _preorder_items(self) -> Iterator[Optional[Tuple[Number, int]]]:
        """(value, height) pairs in pre-order, None for each empty link."""
        stack: List[Optional[NodeSnapshot]] = [self]
        while stack:
            current = stack.pop()
            if current is None:
                yield None
                continue
            yield (current.value, current.height)
            stack.append(current.right)
            stack.append(current.left)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NodeSnapshot):
            return NotImplemented
        if self is other:
            return True
        return all(a == b for a, b in zip_longest(self._preorder_items(),
                                                   other._preorder_items(),
                                                   fillvalue=_END))

    def __hash__(self) -> int:
        return hash(tuple(self._preorder_items()))

    def __repr__(self) -> str:
        left = self.left.value if self.left is not None else None
        right = self.right.value if self.right is not None else None
        return (f"NodeSnapshot(value={self.value!r}, height={self.height}, "
                f"left={left!r}, right={right!r})")

    def to_dict(self) -> Dict[str, Any]:
        result = _node_dict(self)
        stack = [(self, result)]
        while stack:
            snapshot, out = stack.pop()
            for side in ('left', 'right'):
                child = getattr(snapshot, side)
                if child is not None:
                    out[side] = _node_dict(child)
                    stack.append((child, out[side]))
        return result


def _node_dict(snapshot: NodeSnapshot) -> Dict[str, Any]:
    return {'value': snapshot.value, 'height': snapshot.height, 'left': None, 'right': None}


@dataclass(frozen=True)
class TreeSnapshot:
    """Frozen copy of a whole tree's topology.

    Attributes:
        variant: Variant name ("binary", "bst", "avl")
        root: Snapshot of the root node, None for an empty tree
        size: Number of nodes
        height: Structural height (0 for an empty tree)
    """

    variant: str
    root: Optional[NodeSnapshot]
    size: int
    height: int

    @property
    def is_empty(self) -> bool:
        return self.root is None

    def level_values(self) -> List[List[Number]]:
        """Values grouped by depth, left to right within each level."""
        levels: List[List[Number]] = []
        current = [self.root] if self.root is not None else []
        while current:
            levels.append([n.value for n in current])
            next_level = []
            for n in current:
                if n.left is not None:
                    next_level.append(n.left)
                if n.right is not None:
                    next_level.append(n.right)
            current = next_level
        return levels

    def to_dict(self) -> Dict[str, Any]:
        return {
            'variant': self.variant,
            'size': self.size,
            'height': self.height,
            'root': self.root.to_dict() if self.root else None,
        }


@dataclass(frozen=True)
class VisitEvent:
    """One step of a recorded traversal.

    A presentation layer highlights ``value`` at position ``step``; all
    timing is its own business.
    """

    step: int
    value: Number
    depth: int
    order: TraversalOrder
