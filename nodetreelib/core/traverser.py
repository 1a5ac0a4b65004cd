"""Depth-aware traversal strategies for NodeTreeLib.

Where the iterators in ``iterators.py`` yield bare nodes, traversers yield
``(node, depth)`` tuples and can stop descending past a maximum depth.
They are what ExecutionPlan and the functional API are built on.

All strategies use explicit stacks or queues rather than recursion, and
none of them track visited nodes.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Callable, Deque, Iterator, List, Optional, Tuple

from .node import Node

# Called with (node, depth); returning False skips that node's children
ExploreFilter = Callable[[Node, int], bool]


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Traversers implement the algorithms for walking through trees in
    different orders (breadth-first, depth-first, etc.).
    """

    @abstractmethod
    def traverse(self,
                 root: Node,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0,
                 explore_filter: Optional[ExploreFilter] = None) -> Iterator[Tuple[Node, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes
            explore_filter: Called as (node, depth); when it returns False
                the node is still visited but its children are not

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        """Check if a node at given depth should be yielded."""
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self,
                        node: Node,
                        depth: int,
                        max_depth: Optional[int],
                        explore_filter: Optional[ExploreFilter] = None) -> bool:
        """Check if children of node at given depth should be explored."""
        if max_depth is not None and depth >= max_depth:
            return False
        if explore_filter is not None:
            return explore_filter(node, depth)
        return True


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all nodes at depth N before visiting nodes at depth N+1.
    """

    def traverse(self,
                 root: Node,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0,
                 explore_filter: Optional[ExploreFilter] = None) -> Iterator[Tuple[Node, int]]:
        queue: Deque[Tuple[Node, int]] = deque([(root, 0)])

        while queue:
            node, depth = queue.popleft()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(node, depth, max_depth, explore_filter):
                for child in node.children:
                    queue.append((child, depth + 1))


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits parent before children, left to right. Good for copying trees
    or printing indented outlines.
    """

    def traverse(self,
                 root: Node,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0,
                 explore_filter: Optional[ExploreFilter] = None) -> Iterator[Tuple[Node, int]]:
        stack: List[Tuple[Node, int]] = [(root, 0)]

        while stack:
            node, depth = stack.pop()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(node, depth, max_depth, explore_filter):
                for child in reversed(node.children):
                    stack.append((child, depth + 1))


class DepthFirstPostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits children before parent. Good for deletion or for aggregating
    values bottom-up.
    """

    def traverse(self,
                 root: Node,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0,
                 explore_filter: Optional[ExploreFilter] = None) -> Iterator[Tuple[Node, int]]:
        # Each entry carries whether its children have been pushed yet
        stack: List[Tuple[Node, int, bool]] = [(root, 0, False)]

        while stack:
            node, depth, expanded = stack.pop()

            if expanded or node.is_leaf() or not self._should_explore(node, depth, max_depth, explore_filter):
                if self._should_yield(depth, min_depth, max_depth):
                    yield (node, depth)
                continue

            stack.append((node, depth, True))
            for child in reversed(node.children):
                stack.append((child, depth + 1, False))


class LevelOrderTraverser(TreeTraverser):
    """Level-order traversal with level grouping.

    Same order as breadth-first, but builds each level completely before
    moving on. Useful when all nodes at one depth are processed together.
    """

    def traverse(self,
                 root: Node,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0,
                 explore_filter: Optional[ExploreFilter] = None) -> Iterator[Tuple[Node, int]]:
        current_level: List[Node] = [root]
        current_depth = 0

        while current_level and (max_depth is None or current_depth <= max_depth):
            next_level: List[Node] = []

            for node in current_level:
                if self._should_yield(current_depth, min_depth, max_depth):
                    yield (node, current_depth)

                if self._should_explore(node, current_depth, max_depth, explore_filter):
                    next_level.extend(node.children)

            current_level = next_level
            current_depth += 1


# Factory function for creating traversers by name
def create_traverser(strategy: str) -> TreeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: Name of traversal strategy (bfs, dfs_pre, dfs_post, level)

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'bfs': BreadthFirstTraverser,
        'breadth_first': BreadthFirstTraverser,
        'dfs': DepthFirstPreOrderTraverser,
        'dfs_pre': DepthFirstPreOrderTraverser,
        'depth_first_pre': DepthFirstPreOrderTraverser,
        'dfs_post': DepthFirstPostOrderTraverser,
        'depth_first_post': DepthFirstPostOrderTraverser,
        'level': LevelOrderTraverser,
        'level_order': LevelOrderTraverser,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower]()
