"""Configuration system for NodeTreeLib.

This module defines how users specify their traversal requirements,
including what data they need, how to filter nodes, and how many nodes
to process.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Callable, Set, Any, List


class DataRequirement(Enum):
    """Specifies what data is collected for each visited node."""
    NODE = "node"                        # The Node object itself
    VALUE = "value"                      # Just the payload
    PATH = "path"                        # Values from root to node
    CHILDREN_COUNT = "children_count"    # Number of immediate children
    DEPTH = "depth"                      # Depth relative to root
    CUSTOM = "custom"                    # User-defined collection


class TraversalStrategy(Enum):
    """How to traverse the tree."""
    BREADTH_FIRST = "bfs"           # Level by level
    DEPTH_FIRST_PRE = "dfs_pre"     # Parent before children
    DEPTH_FIRST_POST = "dfs_post"   # Children before parent
    LEVEL_ORDER = "level"           # Grouped by level
    CUSTOM = "custom"               # User-defined traverser


@dataclass
class FilterConfig:
    """Configuration for filtering nodes during traversal."""

    include_filter: Optional[Callable[[Any], bool]] = None  # Include predicate
    exclude_filter: Optional[Callable[[Any], bool]] = None  # Exclude predicate
    prune_on_exclude: bool = False  # Skip subtrees of excluded nodes

    def should_explore_children(self, node) -> bool:
        """Check if the children of a node should be visited at all.

        Only an excluded node with ``prune_on_exclude`` set is pruned; the
        include filter never stops descent.
        """
        if self.prune_on_exclude and self.exclude_filter:
            return not self.exclude_filter(node)
        return True

    def should_include(self, node) -> bool:
        """Check if a node should be included based on filters.

        Args:
            node: Node to check

        Returns:
            True if node passes all filters
        """
        # Exclusion takes precedence
        if self.exclude_filter and self.exclude_filter(node):
            return False

        if self.include_filter:
            return self.include_filter(node)

        return True


@dataclass
class DepthConfig:
    """Configuration for depth-based filtering."""

    min_depth: int = 0                          # Minimum depth to yield
    max_depth: Optional[int] = None            # Maximum depth to traverse
    specific_depths: Optional[Set[int]] = None  # Only these specific depths

    def should_yield(self, depth: int) -> bool:
        """Check if nodes at this depth should be yielded.

        Args:
            depth: Current depth

        Returns:
            True if depth is within configured range
        """
        if self.specific_depths is not None:
            return depth in self.specific_depths

        if depth < self.min_depth:
            return False
        if self.max_depth is not None and depth > self.max_depth:
            return False

        return True

    def should_explore(self, depth: int) -> bool:
        """Check if children of a node at this depth can still be yielded."""
        if self.specific_depths is not None:
            return any(d > depth for d in self.specific_depths)

        if self.max_depth is not None and depth >= self.max_depth:
            return False

        return True

    def effective_max_depth(self) -> Optional[int]:
        """Deepest level the traverser needs to reach."""
        if self.specific_depths:
            deepest = max(self.specific_depths)
            if self.max_depth is not None:
                return min(deepest, self.max_depth)
            return deepest
        return self.max_depth


@dataclass
class PerformanceConfig:
    """Configuration for resource limits."""

    max_nodes: Optional[int] = None   # Maximum nodes to yield

    def check_node_limit(self, node_count: int) -> bool:
        """Check if node limit exceeded.

        Args:
            node_count: Number of nodes processed

        Returns:
            True if within limits or no limit set
        """
        if self.max_nodes is None:
            return True
        return node_count <= self.max_nodes


@dataclass
class TraversalConfig:
    """Complete configuration for tree traversal.

    This is the primary way users specify what they want from a traversal.
    The ExecutionPlan validates this configuration before anything is
    visited.
    """

    # Traversal algorithm
    strategy: TraversalStrategy = TraversalStrategy.BREADTH_FIRST
    custom_traverser: Optional[Any] = None  # Custom traverser instance

    # Depth control
    depth: DepthConfig = field(default_factory=DepthConfig)

    # Node filtering
    filter: FilterConfig = field(default_factory=FilterConfig)

    # Data collection
    data_requirements: DataRequirement = DataRequirement.NODE
    custom_collector: Optional[Any] = None  # Custom collector instance

    # Limits
    performance: PerformanceConfig = field(default_factory=PerformanceConfig)

    # Error handling
    on_error: Optional[Callable[[Any, Exception], None]] = None
    skip_errors: bool = False  # Continue on errors vs fail fast

    # Progress reporting
    progress_callback: Optional[Callable[[int], None]] = None
    progress_interval: int = 100  # Report every N nodes

    # Convenience constructors for common configurations

    @classmethod
    def shallow_scan(cls, max_depth: int = 1) -> 'TraversalConfig':
        """Create config for shallow scanning.

        Args:
            max_depth: How deep to scan (default 1 = immediate children only)

        Returns:
            TraversalConfig for shallow scanning
        """
        return cls(
            strategy=TraversalStrategy.BREADTH_FIRST,
            depth=DepthConfig(max_depth=max_depth),
        )

    @classmethod
    def deep_scan(cls, data_requirement: DataRequirement = DataRequirement.NODE) -> 'TraversalConfig':
        """Create config for a full post-order walk, suited to aggregation."""
        return cls(
            strategy=TraversalStrategy.DEPTH_FIRST_POST,
            data_requirements=data_requirement,
        )

    @classmethod
    def values_only(cls, strategy: TraversalStrategy = TraversalStrategy.DEPTH_FIRST_PRE) -> 'TraversalConfig':
        """Create config that yields node values in the given order."""
        return cls(
            strategy=strategy,
            data_requirements=DataRequirement.VALUE,
        )

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.depth.min_depth < 0:
            errors.append("min_depth cannot be negative")

        if self.depth.max_depth is not None:
            if self.depth.max_depth < 0:
                errors.append("max_depth cannot be negative")
            if self.depth.max_depth < self.depth.min_depth:
                errors.append("max_depth cannot be less than min_depth")

        if self.depth.specific_depths is not None:
            if any(d < 0 for d in self.depth.specific_depths):
                errors.append("specific_depths cannot contain negative depths")

        if self.performance.max_nodes is not None and self.performance.max_nodes <= 0:
            errors.append("max_nodes must be positive")

        if self.progress_interval <= 0:
            errors.append("progress_interval must be positive")

        if self.strategy == TraversalStrategy.CUSTOM and self.custom_traverser is None:
            errors.append("custom_traverser required when strategy is CUSTOM")

        if self.data_requirements == DataRequirement.CUSTOM and self.custom_collector is None:
            errors.append("custom_collector required when data_requirements is CUSTOM")

        return errors
