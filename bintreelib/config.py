"""Configuration system for BinTreeLib.

This module defines how users choose a tree variant, the default traversal
order, and how deletes of absent values are reported.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Union

from .policies import (
    MissingValuePolicy,
    IgnoreMissingPolicy,
    StrictMissingPolicy,
    CollectMissingPolicy,
)


class TreeVariant(Enum):
    """Which tree structure to build.

    Values match the option names used by the visualizer front end.
    """
    BINARY = "binary"       # Unordered, level-order insertion
    SEARCH = "bst"          # Binary search tree
    BALANCED = "avl"        # Self-balancing AVL tree


class TraversalOrder(Enum):
    """Order in which a traversal visits nodes."""
    INORDER = "inorder"             # Left, node, right
    PREORDER = "preorder"           # Node, left, right
    POSTORDER = "postorder"         # Left, right, node
    LEVEL_ORDER = "levelorder"      # Breadth-first, top to bottom


_VARIANT_ALIASES = {
    'binary': TreeVariant.BINARY,
    'unordered': TreeVariant.BINARY,
    'bst': TreeVariant.SEARCH,
    'search': TreeVariant.SEARCH,
    'avl': TreeVariant.BALANCED,
    'balanced': TreeVariant.BALANCED,
}

_ORDER_ALIASES = {
    'inorder': TraversalOrder.INORDER,
    'in_order': TraversalOrder.INORDER,
    'preorder': TraversalOrder.PREORDER,
    'pre_order': TraversalOrder.PREORDER,
    'postorder': TraversalOrder.POSTORDER,
    'post_order': TraversalOrder.POSTORDER,
    'levelorder': TraversalOrder.LEVEL_ORDER,
    'level_order': TraversalOrder.LEVEL_ORDER,
    'bfs': TraversalOrder.LEVEL_ORDER,
}


def parse_variant(variant: Union[TreeVariant, str]) -> TreeVariant:
    """Parse a variant from string or enum.

    Raises:
        ValueError: If the name is not recognized
    """
    if isinstance(variant, TreeVariant):
        return variant
    key = variant.lower() if isinstance(variant, str) else str(variant)
    if key in _VARIANT_ALIASES:
        return _VARIANT_ALIASES[key]
    raise ValueError(
        f"Unknown tree variant: {variant}. "
        f"Choose from: {', '.join(_VARIANT_ALIASES.keys())}"
    )


def parse_order(order: Union[TraversalOrder, str]) -> TraversalOrder:
    """Parse a traversal order from string or enum.

    Raises:
        ValueError: If the name is not recognized
    """
    if isinstance(order, TraversalOrder):
        return order
    key = order.lower() if isinstance(order, str) else str(order)
    if key in _ORDER_ALIASES:
        return _ORDER_ALIASES[key]
    raise ValueError(
        f"Unknown traversal order: {order}. "
        f"Choose from: {', '.join(_ORDER_ALIASES.keys())}"
    )


@dataclass
class TreeConfig:
    """Complete configuration for building a tree.

    This is the primary way users describe the tree they want when going
    through ``create_tree`` or ``TreeSession``.
    """

    variant: TreeVariant = TreeVariant.BINARY

    # How deletes of absent values are reported
    missing_policy: MissingValuePolicy = field(default_factory=IgnoreMissingPolicy)

    # Reject non-numeric values before they reach the tree
    validate_values: bool = True

    # Order used by iteration helpers when none is given
    default_order: TraversalOrder = TraversalOrder.INORDER

    @classmethod
    def strict(cls, variant: TreeVariant = TreeVariant.SEARCH) -> 'TreeConfig':
        """Create config that raises on deletes of absent values.

        Args:
            variant: Tree variant to build

        Returns:
            TreeConfig with StrictMissingPolicy
        """
        return cls(
            variant=variant,
            missing_policy=StrictMissingPolicy(),
            validate_values=True,
        )

    @classmethod
    def lenient(cls, variant: TreeVariant = TreeVariant.SEARCH,
                verbose: bool = False) -> 'TreeConfig':
        """Create config that records misses instead of raising.

        Args:
            variant: Tree variant to build
            verbose: Print a warning to stderr on each miss

        Returns:
            TreeConfig with CollectMissingPolicy
        """
        return cls(
            variant=variant,
            missing_policy=CollectMissingPolicy(verbose=verbose),
        )

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.variant, TreeVariant):
            errors.append(f"variant must be a TreeVariant, got {self.variant!r}")

        if not isinstance(self.missing_policy, MissingValuePolicy):
            errors.append("missing_policy must be a MissingValuePolicy instance")

        if not isinstance(self.default_order, TraversalOrder):
            errors.append(f"default_order must be a TraversalOrder, got {self.default_order!r}")

        return errors
