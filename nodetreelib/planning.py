"""Execution planning for NodeTreeLib.

The ExecutionPlan validates a TraversalConfig and coordinates the actual
traversal: it picks the traverser and collector, applies filters and
limits, and decides what happens when collecting from a node fails.
"""

import logging
from typing import Any, Dict, Iterator, List, Tuple

from .config import DataRequirement, TraversalConfig, TraversalStrategy
from .core.collector import (
    ChildCountCollector,
    DataCollector,
    DepthCollector,
    NodeCollector,
    PathCollector,
    ValueCollector,
)
from .core.node import Node
from .core.traverser import TreeTraverser, create_traverser
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class ExecutionPlan:
    """Validated execution plan for tree traversal.

    The ExecutionPlan is the bridge between user intent (TraversalConfig)
    and execution. Configuration problems surface when the plan is built,
    before any node is visited.
    """

    def __init__(self, config: TraversalConfig):
        """Create and validate an execution plan.

        Args:
            config: User's traversal configuration

        Raises:
            ConfigurationError: If the configuration is inconsistent
        """
        self.config = config

        config_errors = config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.traverser = self._select_traverser()
        self.collector = self._select_collector()

        # Track execution state
        self.nodes_processed = 0
        self.errors_encountered: List[Tuple[Any, str]] = []

        logger.debug("Built execution plan: %s", self.get_summary())

    def _select_traverser(self) -> TreeTraverser:
        """Select appropriate traverser based on configuration."""
        if self.config.strategy == TraversalStrategy.CUSTOM:
            return self.config.custom_traverser

        return create_traverser(self.config.strategy.value)

    def _select_collector(self) -> DataCollector:
        """Select appropriate data collector based on requirements."""
        if self.config.data_requirements == DataRequirement.CUSTOM:
            return self.config.custom_collector

        collector_map = {
            DataRequirement.NODE: NodeCollector,
            DataRequirement.VALUE: ValueCollector,
            DataRequirement.PATH: PathCollector,
            DataRequirement.CHILDREN_COUNT: ChildCountCollector,
            DataRequirement.DEPTH: DepthCollector,
        }

        return collector_map[self.config.data_requirements]()

    def _should_descend(self, node: Node, depth: int) -> bool:
        """Whether the traverser should visit the children of ``node``."""
        return (self.config.depth.should_explore(depth)
                and self.config.filter.should_explore_children(node))

    def _handle_error(self, node: Node, error: Exception) -> None:
        """Record an error and notify the user's handler, if any."""
        self.errors_encountered.append((node.value, str(error)))
        logger.warning("Error while processing %r: %s", node, error)

        if self.config.on_error:
            self.config.on_error(node, error)

    def _report_progress(self) -> None:
        if self.config.progress_callback:
            if self.nodes_processed % self.config.progress_interval == 0:
                self.config.progress_callback(self.nodes_processed)

    def execute(self, root: Node) -> Iterator[Tuple[Node, Any]]:
        """Execute the traversal plan.

        Args:
            root: Root node to start traversal from

        Yields:
            Tuples of (node, collected_data)
        """
        self.nodes_processed = 0
        self.errors_encountered = []

        self.collector.start(root)

        for node, depth in self.traverser.traverse(
            root,
            max_depth=self.config.depth.effective_max_depth(),
            min_depth=self.config.depth.min_depth,
            explore_filter=self._should_descend
        ):
            try:
                if not self.config.filter.should_include(node):
                    continue

                if not self.config.depth.should_yield(depth):
                    continue

                # Stop before collecting for a node that would be dropped
                if not self.config.performance.check_node_limit(self.nodes_processed + 1):
                    break

                data = self.collector.collect(node, depth)
            except Exception as e:
                self._handle_error(node, e)
                if not self.config.skip_errors:
                    raise
                continue

            self.nodes_processed += 1
            self._report_progress()

            yield (node, data)

    def get_summary(self) -> Dict[str, Any]:
        """Get summary of execution plan.

        Returns:
            Dictionary with plan details
        """
        return {
            'strategy': self.config.strategy.value,
            'data_requirements': self.config.data_requirements.value,
            'max_depth': self.config.depth.max_depth,
            'min_depth': self.config.depth.min_depth,
            'max_nodes': self.config.performance.max_nodes,
            'prune_on_exclude': self.config.filter.prune_on_exclude,
            'traverser': self.traverser.__class__.__name__,
            'collector': self.collector.__class__.__name__,
        }
