"""Tree variants for BinTreeLib.

All three share BinaryTree's traversal and deletion code and differ in how
values are placed and how the tree is fixed up after a mutation.
"""

from .base import BinaryTree
from .unordered import UnorderedTree
from .search import SearchTree
from .balanced import BalancedTree

__all__ = [
    "BinaryTree",
    "UnorderedTree",
    "SearchTree",
    "BalancedTree",
]
