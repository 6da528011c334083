"""High-level API for BinTreeLib.

This module provides simple, functional interfaces for common tree
operations. These functions wrap the object-oriented API for ease of use in
simple cases.
"""

from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple, Type, Union

from .config import TreeConfig, TreeVariant, TraversalOrder, parse_variant, parse_order
from .core.collector import DataCollector, ValueCollector, VisitEventCollector
from .core.node import TreeNode, Number
from .core.traverser import create_traverser
from .snapshot import VisitEvent
from .trees import BinaryTree, UnorderedTree, SearchTree, BalancedTree

_TREE_CLASSES: Dict[TreeVariant, Type[BinaryTree]] = {
    TreeVariant.BINARY: UnorderedTree,
    TreeVariant.SEARCH: SearchTree,
    TreeVariant.BALANCED: BalancedTree,
}


def create_tree(variant: Union[TreeVariant, str, TreeConfig] = TreeVariant.BINARY) -> BinaryTree:
    """Create an empty tree of the requested variant.

    Args:
        variant: TreeVariant, a variant name ("binary", "bst", "avl", ...)
            or a full TreeConfig

    Returns:
        Empty UnorderedTree, SearchTree or BalancedTree

    Raises:
        ValueError: If the variant name is not recognized
        ConfigurationError: If a TreeConfig fails validation

    Example:
        >>> tree = create_tree("avl")
        >>> type(tree).__name__
        'BalancedTree'
    """
    if isinstance(variant, TreeConfig):
        config = variant
        tree_class = _TREE_CLASSES.get(config.variant, UnorderedTree)
        return tree_class(config)

    return _TREE_CLASSES[parse_variant(variant)]()


def build_tree(values: Iterable[Number],
               variant: Union[TreeVariant, str, TreeConfig] = TreeVariant.BINARY) -> BinaryTree:
    """Create a tree and insert ``values`` in order.

    Example:
        >>> build_tree([5, 3, 8], "bst").values()
        [3, 5, 8]
    """
    tree = create_tree(variant)
    for value in values:
        tree.insert(value)
    return tree


def traverse_tree(tree: BinaryTree,
                  order: Union[TraversalOrder, str] = TraversalOrder.INORDER,
                  visitor: Optional[Callable[[TreeNode], Any]] = None,
                  max_depth: Optional[int] = None,
                  min_depth: int = 0) -> Iterator[TreeNode]:
    """Simple interface for tree traversal.

    Args:
        tree: Tree to traverse
        order: Traversal order (inorder, preorder, postorder, levelorder)
        visitor: Callback invoked once per node
        max_depth: Deepest level to visit (root is depth 0)
        min_depth: Shallowest level to yield

    Returns:
        Lazy iterator of TreeNode

    Example:
        >>> tree = build_tree([2, 1, 3], "bst")
        >>> [n.value for n in traverse_tree(tree, "preorder")]
        [2, 1, 3]
    """
    return tree.traverse(order, visitor, max_depth=max_depth, min_depth=min_depth)


def collect_tree_data(tree: BinaryTree,
                      order: Union[TraversalOrder, str] = TraversalOrder.INORDER,
                      collector: Optional[DataCollector] = None,
                      max_depth: Optional[int] = None,
                      min_depth: int = 0) -> Iterator[Tuple[TreeNode, Any]]:
    """Traverse a tree and collect data from each node.

    Args:
        tree: Tree to traverse
        order: Traversal order
        collector: DataCollector to apply (default: ValueCollector)
        max_depth: Deepest level to visit
        min_depth: Shallowest level to yield

    Yields:
        Tuples of (node, collected_data)
    """
    traverser = create_traverser(order, tree.adapter)
    if collector is None:
        collector = ValueCollector(tree.adapter)
    for node, depth in traverser.traverse(tree.root, max_depth=max_depth, min_depth=min_depth):
        yield node, collector.collect(node, depth)


def collect_values(tree: BinaryTree,
                   order: Union[TraversalOrder, str] = TraversalOrder.INORDER) -> List[Number]:
    """Node values in the given order."""
    return [data for _, data in collect_tree_data(tree, order)]


def record_traversal(tree: BinaryTree,
                     order: Union[TraversalOrder, str] = TraversalOrder.INORDER) -> List[VisitEvent]:
    """Run a traversal to completion and return its visit events.

    The result is what an animation layer replays, one highlighted node per
    event, at whatever pace it likes.

    Example:
        >>> events = record_traversal(build_tree([1, 2, 3]), "levelorder")
        >>> [(e.step, e.value, e.depth) for e in events]
        [(0, 1, 0), (1, 2, 1), (2, 3, 1)]
    """
    order = parse_order(order)
    collector = VisitEventCollector(order, tree.adapter)
    for _ in collect_tree_data(tree, order, collector):
        pass
    return collector.events


def count_nodes(tree: BinaryTree, **kwargs) -> int:
    """Count nodes visited by a traversal (see traverse_tree for options).

    Without depth limits this equals ``len(tree)``.
    """
    count = 0
    for _ in traverse_tree(tree, **kwargs):
        count += 1
    return count


def find_nodes(tree: BinaryTree,
               predicate: Callable[[TreeNode], bool],
               order: Union[TraversalOrder, str] = TraversalOrder.INORDER) -> Iterator[TreeNode]:
    """Find nodes that match a predicate.

    Example:
        >>> tree = build_tree(range(1, 8), "avl")
        >>> [n.value for n in find_nodes(tree, lambda n: n.value % 2 == 0)]
        [2, 4, 6]
    """
    for node in traverse_tree(tree, order):
        if predicate(node):
            yield node


def get_leaf_nodes(tree: BinaryTree,
                   order: Union[TraversalOrder, str] = TraversalOrder.INORDER) -> Iterator[TreeNode]:
    """Get all leaf nodes in a tree."""
    return find_nodes(tree, lambda node: node.is_leaf(), order)


def get_tree_stats(tree: BinaryTree) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with total_nodes, leaf_nodes, internal_nodes, height,
        depths (node count per depth) and average_branching

    Example:
        >>> stats = get_tree_stats(build_tree(range(1, 8), "avl"))
        >>> stats['height'], stats['leaf_nodes']
        (3, 4)
    """
    stats: Dict[str, Any] = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'height': 0,
        'depths': {},
    }

    traverser = create_traverser(TraversalOrder.LEVEL_ORDER, tree.adapter)
    for node, depth in traverser.traverse(tree.root):
        stats['total_nodes'] += 1

        if node.is_leaf():
            stats['leaf_nodes'] += 1

        stats['height'] = max(stats['height'], depth + 1)

        if depth not in stats['depths']:
            stats['depths'][depth] = 0
        stats['depths'][depth] += 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    # Edges per internal node; 0 for trees without internal nodes
    stats['average_branching'] = (
        (stats['total_nodes'] - 1) / stats['internal_nodes']
        if stats['internal_nodes'] > 0 else 0
    )

    return stats
