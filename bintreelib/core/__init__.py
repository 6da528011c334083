"""Core building blocks for BinTreeLib.

This package contains the node storage unit and the traversal machinery
shared by every tree variant.
"""

from .node import TreeNode, get_height, get_balance, update_height, subtree_height
from .adapter import BinaryTreeAdapter
from .traverser import (
    TreeTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .collector import (
    DataCollector,
    ValueCollector,
    NodeCollector,
    MetadataCollector,
    VisitEventCollector,
    CustomCollector,
)

__all__ = [
    "TreeNode",
    "get_height",
    "get_balance",
    "update_height",
    "subtree_height",
    "BinaryTreeAdapter",
    "TreeTraverser",
    "InOrderTraverser",
    "PreOrderTraverser",
    "PostOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    "DataCollector",
    "ValueCollector",
    "NodeCollector",
    "MetadataCollector",
    "VisitEventCollector",
    "CustomCollector",
]
