"""Tests for TraversalConfig validation and ExecutionPlan behaviour."""

import unittest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from nodetreelib import (
    ConfigurationError,
    CustomCollector,
    DataRequirement,
    DepthConfig,
    ExecutionPlan,
    FilterConfig,
    Node,
    PerformanceConfig,
    TraversalConfig,
    TraversalStrategy,
    DepthFirstPreOrderTraverser,
)
from nodetreelib.testing import build_sample_tree


class TestTraversalConfig(unittest.TestCase):
    """Configuration validation."""

    def test_default_config_is_valid(self):
        self.assertEqual(TraversalConfig().validate(), [])

    def test_negative_depths(self):
        config = TraversalConfig(depth=DepthConfig(min_depth=-1, max_depth=-2))
        errors = config.validate()
        self.assertIn("min_depth cannot be negative", errors)
        self.assertIn("max_depth cannot be negative", errors)

    def test_max_below_min(self):
        config = TraversalConfig(depth=DepthConfig(min_depth=3, max_depth=1))
        self.assertIn("max_depth cannot be less than min_depth", config.validate())

    def test_non_positive_limits(self):
        config = TraversalConfig(performance=PerformanceConfig(max_nodes=0), progress_interval=0)
        errors = config.validate()
        self.assertIn("max_nodes must be positive", errors)
        self.assertIn("progress_interval must be positive", errors)

    def test_custom_components_required(self):
        config = TraversalConfig(
            strategy=TraversalStrategy.CUSTOM,
            data_requirements=DataRequirement.CUSTOM,
        )
        errors = config.validate()
        self.assertEqual(len(errors), 2)

    def test_convenience_constructors(self):
        shallow = TraversalConfig.shallow_scan()
        self.assertEqual(shallow.depth.max_depth, 1)

        deep = TraversalConfig.deep_scan()
        self.assertEqual(deep.strategy, TraversalStrategy.DEPTH_FIRST_POST)

        values = TraversalConfig.values_only()
        self.assertEqual(values.data_requirements, DataRequirement.VALUE)

    def test_specific_depths(self):
        depth = DepthConfig(specific_depths={0, 2})
        self.assertTrue(depth.should_yield(0))
        self.assertFalse(depth.should_yield(1))
        self.assertEqual(depth.effective_max_depth(), 2)

    def test_should_explore(self):
        self.assertTrue(DepthConfig().should_explore(10))
        self.assertFalse(DepthConfig(max_depth=1).should_explore(1))
        self.assertTrue(DepthConfig(max_depth=1).should_explore(0))
        self.assertTrue(DepthConfig(specific_depths={0, 2}).should_explore(1))
        self.assertFalse(DepthConfig(specific_depths={0, 2}).should_explore(2))

    def test_filter_pruning_needs_exclusion(self):
        exclude_b = lambda n: n.value == "B"
        self.assertTrue(FilterConfig(exclude_filter=exclude_b).should_explore_children(Node("B")))
        pruning = FilterConfig(exclude_filter=exclude_b, prune_on_exclude=True)
        self.assertFalse(pruning.should_explore_children(Node("B")))
        self.assertTrue(pruning.should_explore_children(Node("C")))
        self.assertTrue(FilterConfig(prune_on_exclude=True).should_explore_children(Node("B")))


class TestExecutionPlan(unittest.TestCase):
    """Plan construction and execution."""

    def setUp(self):
        self.root = build_sample_tree()

    def test_invalid_config_raises(self):
        config = TraversalConfig(depth=DepthConfig(min_depth=-1))
        with self.assertRaises(ConfigurationError):
            ExecutionPlan(config)
        self.assertTrue(issubclass(ConfigurationError, ValueError))

    def test_values_only_plan(self):
        plan = ExecutionPlan(TraversalConfig.values_only())
        self.assertEqual([data for _, data in plan.execute(self.root)], ["A", "B", "D", "C", "E"])
        self.assertEqual(plan.nodes_processed, 5)

    def test_specific_depths_plan(self):
        config = TraversalConfig(
            depth=DepthConfig(specific_depths={0, 2}),
            data_requirements=DataRequirement.VALUE,
        )
        plan = ExecutionPlan(config)
        self.assertEqual([data for _, data in plan.execute(self.root)], ["A", "D", "E"])

    def test_custom_traverser_and_collector(self):
        config = TraversalConfig(
            strategy=TraversalStrategy.CUSTOM,
            custom_traverser=DepthFirstPreOrderTraverser(),
            data_requirements=DataRequirement.CUSTOM,
            custom_collector=CustomCollector(lambda node, depth: f"{node.value}@{depth}"),
        )
        plan = ExecutionPlan(config)
        self.assertEqual(
            [data for _, data in plan.execute(self.root)],
            ["A@0", "B@1", "D@2", "C@1", "E@2"],
        )

    def test_progress_callback(self):
        reports = []
        config = TraversalConfig(progress_callback=reports.append, progress_interval=2)
        list(ExecutionPlan(config).execute(self.root))
        self.assertEqual(reports, [2, 4])

    def test_errors_recorded_when_skipped(self):
        def broken(node, depth):
            if node.value == "B":
                raise KeyError("bad")
            return node.value

        config = TraversalConfig(
            data_requirements=DataRequirement.CUSTOM,
            custom_collector=CustomCollector(broken),
            skip_errors=True,
        )
        plan = ExecutionPlan(config)
        self.assertEqual([data for _, data in plan.execute(self.root)], ["A", "C", "D", "E"])
        self.assertEqual(len(plan.errors_encountered), 1)
        self.assertEqual(plan.errors_encountered[0][0], "B")

    def test_node_limit_stops_before_collecting(self):
        seen = []

        def record(node, depth):
            seen.append(node.value)
            return node.value

        config = TraversalConfig(
            data_requirements=DataRequirement.CUSTOM,
            custom_collector=CustomCollector(record),
            performance=PerformanceConfig(max_nodes=2),
        )
        plan = ExecutionPlan(config)
        self.assertEqual([data for _, data in plan.execute(self.root)], ["A", "B"])
        self.assertEqual(seen, ["A", "B"])
        self.assertEqual(plan.nodes_processed, 2)

    def test_exclude_without_prune_keeps_descendants(self):
        config = TraversalConfig(
            filter=FilterConfig(exclude_filter=lambda n: n.value == "B"),
            data_requirements=DataRequirement.VALUE,
        )
        plan = ExecutionPlan(config)
        self.assertEqual([data for _, data in plan.execute(self.root)], ["A", "C", "D", "E"])

    def test_prune_on_exclude_skips_subtree(self):
        for strategy in TraversalStrategy:
            if strategy == TraversalStrategy.CUSTOM:
                continue
            with self.subTest(strategy=strategy):
                config = TraversalConfig(
                    strategy=strategy,
                    filter=FilterConfig(
                        exclude_filter=lambda n: n.value == "B",
                        prune_on_exclude=True,
                    ),
                    data_requirements=DataRequirement.VALUE,
                )
                values = [data for _, data in ExecutionPlan(config).execute(self.root)]
                self.assertEqual(sorted(values), ["A", "C", "E"])

    def test_summary(self):
        plan = ExecutionPlan(TraversalConfig.shallow_scan(max_depth=2))
        summary = plan.get_summary()
        self.assertEqual(summary['strategy'], "bfs")
        self.assertEqual(summary['max_depth'], 2)
        self.assertEqual(summary['traverser'], "BreadthFirstTraverser")
        self.assertEqual(summary['collector'], "NodeCollector")


if __name__ == "__main__":
    unittest.main()
