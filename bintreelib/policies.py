"""
Missing-value policies for BinTreeLib.

Deleting a value that isn't in the tree is a no-op by default. This module
lets callers choose a different behavior through the Policy pattern, without
changing the tree variants themselves.
"""

import sys
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from .errors import ValueNotFoundError


class MissingValuePolicy(ABC):
    """
    Base class for missing-value policies.

    A tree calls ``handle`` after a delete found nothing to remove. The tree
    is unchanged at that point; the policy only decides what the caller sees.
    """

    @abstractmethod
    def handle(self, value: Any, variant: str) -> None:
        """
        Handle a delete of an absent value.

        Args:
            value: The value that was not found
            variant: Name of the tree variant ("binary", "bst", "avl")

        Raises:
            ValueNotFoundError: If the policy treats misses as errors
        """
        pass


class IgnoreMissingPolicy(MissingValuePolicy):
    """
    Policy that silently ignores missing values.

    This is the default behavior and matches the visualizer, where deleting
    a number that isn't shown simply does nothing.
    """

    def handle(self, value: Any, variant: str) -> None:
        return None


class StrictMissingPolicy(MissingValuePolicy):
    """
    Policy that raises ValueNotFoundError for every miss.

    Useful when the caller considers a delete of an absent value a bug.
    """

    def handle(self, value: Any, variant: str) -> None:
        raise ValueNotFoundError(value, variant)


class CollectMissingPolicy(MissingValuePolicy):
    """
    Policy that records misses and optionally warns on stderr.

    Misses are collected for later inspection and the delete stays a no-op.
    """

    def __init__(self, verbose: bool = True):
        """
        Initialize the policy.

        Args:
            verbose: If True, print warnings to stderr when a miss occurs
        """
        self.misses: List[Dict[str, Any]] = []
        self.verbose = verbose

    def handle(self, value: Any, variant: str) -> None:
        self.misses.append({
            'value': value,
            'variant': variant,
        })
        if self.verbose:
            print(f"WARNING: Delete of {value!r} ignored, not found in {variant} tree",
                  file=sys.stderr)

    def get_statistics(self) -> dict:
        """
        Get statistics about misses encountered.

        Returns:
            Dictionary with total count, per-variant counts and details
        """
        by_variant: Dict[str, int] = {}
        for miss in self.misses:
            by_variant[miss['variant']] = by_variant.get(miss['variant'], 0) + 1
        return {
            'total_misses': len(self.misses),
            'by_variant': by_variant,
            'misses': self.misses,
        }

    def clear(self) -> None:
        """Forget all recorded misses."""
        self.misses.clear()
