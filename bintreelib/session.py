"""TreeSession: the core-facing contract for a visualization front end.

A session holds exactly one tree at a time. Switching variants discards the
current tree and starts empty. Mutations accept raw form input, and return
a fresh TreeSnapshot for re-rendering. Traversals come back as a list of
VisitEvents that the front end replays with its own timer.
"""

from typing import Any, List, Optional, Union

from .api import create_tree, record_traversal
from .config import TreeConfig, TreeVariant, TraversalOrder, parse_variant
from .snapshot import TreeSnapshot, VisitEvent
from .trees import BinaryTree
from .validation import parse_value


class TreeSession:
    """One visualizer's worth of tree state.

    Example:
        >>> session = TreeSession("avl")
        >>> for text in ("10", "20", "30"):
        ...     snapshot = session.insert(text)
        >>> snapshot.root.value
        20
        >>> [e.value for e in session.traverse("preorder")]
        [20, 10, 30]
    """

    def __init__(self,
                 variant: Union[TreeVariant, str] = TreeVariant.BINARY,
                 config: Optional[TreeConfig] = None):
        """Start a session with an empty tree.

        Args:
            variant: Initial tree variant (ignored when config is given)
            config: Full configuration; its variant wins over ``variant``
        """
        self._config = config
        self.tree: BinaryTree = create_tree(config if config is not None else variant)

    @property
    def variant(self) -> TreeVariant:
        return self.tree.variant

    def select_variant(self, variant: Union[TreeVariant, str]) -> TreeSnapshot:
        """Switch to another variant, discarding the current tree.

        Selecting the current variant also starts over with an empty tree.
        A session built from a TreeConfig keeps that config's policy and
        settings for the new variant.

        Returns:
            Snapshot of the new, empty tree
        """
        variant = parse_variant(variant)
        if self._config is not None:
            self._config = TreeConfig(
                variant=variant,
                missing_policy=self._config.missing_policy,
                validate_values=self._config.validate_values,
                default_order=self._config.default_order,
            )
            self.tree = create_tree(self._config)
        else:
            self.tree = create_tree(variant)
        return self.snapshot()

    def insert(self, raw_value: Any) -> TreeSnapshot:
        """Parse and insert a value, then return the new topology.

        Raises:
            InvalidValueError: If the input is not an integer or number
        """
        self.tree.insert(parse_value(raw_value))
        return self.snapshot()

    def delete(self, raw_value: Any) -> TreeSnapshot:
        """Parse and delete a value, then return the new topology.

        Raises:
            InvalidValueError: If the input is not an integer or number
            ValueNotFoundError: If absent under a strict policy
        """
        self.tree.delete(parse_value(raw_value))
        return self.snapshot()

    def traverse(self, order: Union[TraversalOrder, str] = TraversalOrder.INORDER) -> List[VisitEvent]:
        """Record a traversal of the current tree for step-by-step replay."""
        return record_traversal(self.tree, order)

    def snapshot(self) -> TreeSnapshot:
        return self.tree.snapshot()

    def __repr__(self) -> str:
        return f"TreeSession(variant={self.variant.value!r}, tree={self.tree!r})"
