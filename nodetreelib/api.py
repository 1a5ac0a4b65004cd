"""High-level API for NodeTreeLib.

This module provides simple, functional interfaces for common tree traversal
operations. These functions wrap the ExecutionPlan API for ease of use in
simple cases. Every ``root`` argument may be a Node, a Tree or a Graph.
"""

from typing import Iterator, Optional, Callable, Any, Union, Tuple, List, Dict

from .config import (
    TraversalConfig,
    TraversalStrategy,
    DataRequirement,
    DepthConfig,
    FilterConfig,
    PerformanceConfig,
)
from .core.node import Node
from .planning import ExecutionPlan
from .tree import NodeWrapper, as_node

RootLike = Union[Node, NodeWrapper]


def traverse_tree(
    root: RootLike,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.BREADTH_FIRST,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
    include_filter: Optional[Callable[[Node], bool]] = None,
    exclude_filter: Optional[Callable[[Node], bool]] = None,
    prune_on_exclude: bool = False,
    max_nodes: Optional[int] = None,
    on_error: Optional[Callable[[Node, Exception], None]] = None,
    **kwargs
) -> Iterator[Node]:
    """Simple interface for tree traversal.

    Args:
        root: Starting node for traversal
        strategy: Traversal strategy (bfs, dfs_pre, dfs_post, level)
        max_depth: Maximum depth to traverse
        min_depth: Minimum depth before yielding nodes
        include_filter: Function to determine if node should be included
        exclude_filter: Function to determine if node should be excluded
        prune_on_exclude: Also skip everything below an excluded node
        max_nodes: Stop after yielding this many nodes
        on_error: Error handler callback; errors are skipped when given
        **kwargs: Additional TraversalConfig attributes

    Yields:
        Nodes that match the criteria

    Example:
        >>> root = Node("A")
        >>> root.append("B").append("D")
        Node('D', children=0)
        >>> [n.value for n in traverse_tree(root, strategy="dfs_pre")]
        ['A', 'B', 'D']
    """
    config = TraversalConfig(
        strategy=_parse_strategy(strategy),
        depth=DepthConfig(
            min_depth=min_depth,
            max_depth=max_depth
        ),
        filter=FilterConfig(
            include_filter=include_filter,
            exclude_filter=exclude_filter,
            prune_on_exclude=prune_on_exclude
        ),
        data_requirements=DataRequirement.NODE,
        performance=PerformanceConfig(
            max_nodes=max_nodes
        ),
        on_error=on_error,
        skip_errors=on_error is not None
    )

    # Power users can set any other TraversalConfig attribute
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)

    plan = ExecutionPlan(config)

    for node, _ in plan.execute(as_node(root)):
        yield node


def collect_tree_data(
    root: RootLike,
    data_requirement: DataRequirement = DataRequirement.VALUE,
    **kwargs
) -> Iterator[Tuple[Node, Any]]:
    """Traverse tree and collect specified data.

    Similar to traverse_tree but yields both nodes and collected data.

    Args:
        root: Starting node for traversal
        data_requirement: What data to collect
        **kwargs: Additional traversal options (see traverse_tree)

    Yields:
        Tuples of (node, collected_data)
    """
    config_kwargs = kwargs.copy()
    config_kwargs['data_requirement'] = data_requirement

    config = _build_config_from_kwargs(**config_kwargs)
    plan = ExecutionPlan(config)

    yield from plan.execute(as_node(root))


def count_nodes(root: RootLike, **kwargs) -> int:
    """Count nodes in a tree that match criteria.

    Args:
        root: Starting node for traversal
        **kwargs: Traversal options (see traverse_tree)

    Returns:
        Number of nodes that match criteria
    """
    count = 0
    for _ in traverse_tree(root, **kwargs):
        count += 1
    return count


def find_nodes(
    root: RootLike,
    predicate: Callable[[Node], bool],
    **kwargs
) -> Iterator[Node]:
    """Find nodes that match a predicate.

    Example:
        >>> evens = list(find_nodes(root, lambda n: n.value % 2 == 0))
    """
    kwargs['include_filter'] = predicate
    yield from traverse_tree(root, **kwargs)


def find_value(root: RootLike, value: Any, **kwargs) -> Iterator[Node]:
    """Yield every node whose value equals ``value``."""
    yield from find_nodes(root, lambda node: node == value, **kwargs)


def get_tree_paths(root: RootLike, **kwargs) -> Iterator[List[Any]]:
    """Get the list of values from root to each node.

    Example:
        >>> for path in get_tree_paths(root, max_depth=2):
        ...     print(" -> ".join(map(str, path)))
    """
    kwargs['data_requirement'] = DataRequirement.PATH

    for _, path_data in collect_tree_data(root, **kwargs):
        yield path_data


def get_leaf_nodes(root: RootLike, **kwargs) -> Iterator[Node]:
    """Get all leaf nodes (nodes with no children) in a tree."""
    for node in traverse_tree(root, **kwargs):
        if node.is_leaf():
            yield node


def get_tree_stats(root: RootLike, **kwargs) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with total_nodes, leaf_nodes, internal_nodes, max_depth,
        per-depth counts under 'depths', and average_branching (mean number
        of children per internal node)
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'depths': {},
    }
    child_total = 0

    for node, depth in collect_tree_data(
        root,
        data_requirement=DataRequirement.DEPTH,
        **kwargs
    ):
        stats['total_nodes'] += 1
        child_total += len(node)

        if node.is_leaf():
            stats['leaf_nodes'] += 1

        stats['max_depth'] = max(stats['max_depth'], depth)
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    stats['average_branching'] = (
        child_total / stats['internal_nodes']
        if stats['internal_nodes'] > 0 else 0
    )

    return stats


# Helper functions

def _parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Raises:
        ValueError: If the name is not a known strategy
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_map = {
        'bfs': TraversalStrategy.BREADTH_FIRST,
        'breadth_first': TraversalStrategy.BREADTH_FIRST,
        'dfs': TraversalStrategy.DEPTH_FIRST_PRE,
        'dfs_pre': TraversalStrategy.DEPTH_FIRST_PRE,
        'depth_first_pre': TraversalStrategy.DEPTH_FIRST_PRE,
        'dfs_post': TraversalStrategy.DEPTH_FIRST_POST,
        'depth_first_post': TraversalStrategy.DEPTH_FIRST_POST,
        'level': TraversalStrategy.LEVEL_ORDER,
        'level_order': TraversalStrategy.LEVEL_ORDER,
    }

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower in strategy_map:
        return strategy_map[strategy_lower]

    raise ValueError(f"Unknown traversal strategy: {strategy}")


def _build_config_from_kwargs(**kwargs) -> TraversalConfig:
    """Build TraversalConfig from keyword arguments."""
    config = TraversalConfig()

    if 'strategy' in kwargs:
        config.strategy = _parse_strategy(kwargs.pop('strategy'))

    if 'max_depth' in kwargs:
        config.depth.max_depth = kwargs.pop('max_depth')

    if 'min_depth' in kwargs:
        config.depth.min_depth = kwargs.pop('min_depth')

    if 'include_filter' in kwargs:
        config.filter.include_filter = kwargs.pop('include_filter')

    if 'exclude_filter' in kwargs:
        config.filter.exclude_filter = kwargs.pop('exclude_filter')

    if 'prune_on_exclude' in kwargs:
        config.filter.prune_on_exclude = kwargs.pop('prune_on_exclude')

    if 'data_requirement' in kwargs:
        config.data_requirements = kwargs.pop('data_requirement')

    if 'max_nodes' in kwargs:
        config.performance.max_nodes = kwargs.pop('max_nodes')

    if 'on_error' in kwargs:
        config.on_error = kwargs.pop('on_error')
        config.skip_errors = config.on_error is not None

    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)

    return config
