"""Core node, iterator, traverser and collector types."""

from .iterators import NodeIterator, DepthFirstIterator, BreadthFirstIterator
from .node import Node, find_first
from .traverser import (
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .collector import (
    DataCollector,
    NodeCollector,
    ValueCollector,
    DepthCollector,
    ChildCountCollector,
    PathCollector,
    CustomCollector,
)

__all__ = [
    'Node',
    'find_first',
    'NodeIterator',
    'DepthFirstIterator',
    'BreadthFirstIterator',
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
]
