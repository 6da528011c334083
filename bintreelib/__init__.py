"""BinTreeLib - Binary, Search and AVL Trees with Shared Traversal.

BinTreeLib implements three related binary trees and the traversal and
snapshot surface a visualizer needs to draw and animate them.

Choose your tree:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Unordered (level-order fill):
    from bintreelib import UnorderedTree

Binary search tree:
    from bintreelib import SearchTree

Self-balancing AVL tree:
    from bintreelib import BalancedTree
━━━━━━━━━━━━━━━━━━━━━━━━━━

All three share the same traversal API (inorder, preorder, postorder,
level_order). A front end typically drives them through TreeSession.
"""

__version__ = "0.3.0"

# Core components
from .core.node import TreeNode
from .core.adapter import BinaryTreeAdapter
from .core.traverser import (
    TreeTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .core.collector import (
    DataCollector,
    ValueCollector,
    NodeCollector,
    MetadataCollector,
    VisitEventCollector,
    CustomCollector,
)

# Tree variants
from .trees import BinaryTree, UnorderedTree, SearchTree, BalancedTree

# Configuration, errors and policies
from .config import TreeConfig, TreeVariant, TraversalOrder
from .errors import (
    TreeError,
    InvalidValueError,
    ValueNotFoundError,
    EmptyTreeError,
    ConfigurationError,
    UnorderedDeleteWarning,
)
from .policies import (
    MissingValuePolicy,
    IgnoreMissingPolicy,
    StrictMissingPolicy,
    CollectMissingPolicy,
)
from .validation import validate_value, parse_value

# Presentation contract
from .snapshot import NodeSnapshot, TreeSnapshot, VisitEvent
from .session import TreeSession

# High-level API
from .api import (
    create_tree,
    build_tree,
    traverse_tree,
    collect_tree_data,
    collect_values,
    record_traversal,
    count_nodes,
    find_nodes,
    get_leaf_nodes,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Core
    'TreeNode',
    'BinaryTreeAdapter',
    'TreeTraverser',
    'InOrderTraverser',
    'PreOrderTraverser',
    'PostOrderTraverser',
    'LevelOrderTraverser',
    'create_traverser',
    'DataCollector',
    'ValueCollector',
    'NodeCollector',
    'MetadataCollector',
    'VisitEventCollector',
    'CustomCollector',
    # Trees
    'BinaryTree',
    'UnorderedTree',
    'SearchTree',
    'BalancedTree',
    # Config
    'TreeConfig',
    'TreeVariant',
    'TraversalOrder',
    # Errors and policies
    'TreeError',
    'InvalidValueError',
    'ValueNotFoundError',
    'EmptyTreeError',
    'ConfigurationError',
    'UnorderedDeleteWarning',
    'MissingValuePolicy',
    'IgnoreMissingPolicy',
    'StrictMissingPolicy',
    'CollectMissingPolicy',
    'validate_value',
    'parse_value',
    # Presentation
    'NodeSnapshot',
    'TreeSnapshot',
    'VisitEvent',
    'TreeSession',
    # API
    'create_tree',
    'build_tree',
    'traverse_tree',
    'collect_tree_data',
    'collect_values',
    'record_traversal',
    'count_nodes',
    'find_nodes',
    'get_leaf_nodes',
    'get_tree_stats',
]
