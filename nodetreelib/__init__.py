"""NodeTreeLib - In-memory hierarchical containers.

A Node holds a value and an ordered list of child nodes it owns
exclusively. Nodes walk themselves in pre-order or level order, answer
shallow and recursive membership queries, and remove matching values at
any depth.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from nodetreelib import Node

    root = Node("A")
    root.append("B").append("D")
    root.append("C").append("E")
    [n.value for n in root.dfs()]   # A, B, D, C, E
    [n.value for n in root.bfs()]   # A, B, C, D, E
━━━━━━━━━━━━━━━━━━━━━━━━━━

Depth-aware traversal, filtering and data collection live in the
functional API (``traverse_tree``, ``collect_tree_data`` ...).
"""

import logging

__version__ = "0.1.0"

from .exceptions import NodeTreeError, OwnershipError, ConfigurationError
from .core import (
    Node,
    find_first,
    NodeIterator,
    DepthFirstIterator,
    BreadthFirstIterator,
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
    DataCollector,
    NodeCollector,
    ValueCollector,
    DepthCollector,
    ChildCountCollector,
    PathCollector,
    CustomCollector,
)
from .tree import Tree, Graph, as_node
from .config import (
    TraversalConfig,
    TraversalStrategy,
    DataRequirement,
    FilterConfig,
    DepthConfig,
    PerformanceConfig,
)
from .planning import ExecutionPlan
from .api import (
    traverse_tree,
    collect_tree_data,
    count_nodes,
    find_nodes,
    find_value,
    get_tree_paths,
    get_leaf_nodes,
    get_tree_stats,
)


def setup_logging(level=logging.INFO):
    """Set the level of every nodetreelib logger.

    The library never installs handlers; configure those in the
    application (e.g. with ``logging.basicConfig``).

    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        'nodetreelib',
        'nodetreelib.core.node',
        'nodetreelib.planning',
    ]

    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    '__version__',
    # Core
    'Node',
    'Tree',
    'Graph',
    'as_node',
    'find_first',
    'NodeIterator',
    'DepthFirstIterator',
    'BreadthFirstIterator',
    # Traversal
    'TreeTraverser',
    'BreadthFirstTraverser',
    'DepthFirstPreOrderTraverser',
    'DepthFirstPostOrderTraverser',
    'LevelOrderTraverser',
    'create_traverser',
    'DataCollector',
    'NodeCollector',
    'ValueCollector',
    'DepthCollector',
    'ChildCountCollector',
    'PathCollector',
    'CustomCollector',
    # Config
    'TraversalConfig',
    'TraversalStrategy',
    'DataRequirement',
    'FilterConfig',
    'DepthConfig',
    'PerformanceConfig',
    'ExecutionPlan',
    # Errors
    'NodeTreeError',
    'OwnershipError',
    'ConfigurationError',
    # API
    'traverse_tree',
    'collect_tree_data',
    'count_nodes',
    'find_nodes',
    'find_value',
    'get_tree_paths',
    'get_leaf_nodes',
    'get_tree_stats',
    'setup_logging',
]
