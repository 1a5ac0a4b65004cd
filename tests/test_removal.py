"""Tests for shallow and recursive removal by value."""

import unittest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from nodetreelib import Node
from nodetreelib.testing import (
    build_chain,
    build_sample_tree,
    values_of,
    TreeSnapshot,
)


class TestRemove(unittest.TestCase):
    """Direct-children removal."""

    def test_remove_all_matching_children(self):
        root = Node("r")
        for value in ["x", "y", "x", "z", "x"]:
            root.append(value)

        self.assertEqual(root.remove("x"), 3)
        self.assertEqual(values_of(root), ["y", "z"])

    def test_remove_does_not_descend(self):
        root = build_sample_tree()
        self.assertEqual(root.remove("D"), 0)
        self.assertTrue(root.contains_recursive("D"))

    def test_remove_takes_subtree_with_it(self):
        root = build_sample_tree()
        self.assertEqual(root.remove("B"), 1)
        self.assertEqual(values_of(root.dfs()), ["A", "C", "E"])


class TestRemoveRecursive(unittest.TestCase):
    """Removal at every depth."""

    def test_value_at_two_depths(self):
        root = Node("root")
        root.append("X")
        root.append("keep").append("X")

        self.assertEqual(root.remove_recursive("X"), 2)
        self.assertFalse(root.contains_recursive("X"))
        self.assertEqual(values_of(root.dfs()), ["root", "keep"])

    def test_absent_value_is_noop(self):
        root = build_sample_tree()
        before = TreeSnapshot(root)
        bfs_before = values_of(root.bfs())

        self.assertEqual(root.remove_recursive("missing"), 0)

        self.assertEqual(TreeSnapshot(root), before)
        self.assertEqual(values_of(root.bfs()), bfs_before)

    def test_root_itself_is_never_removed(self):
        root = Node("X")
        root.append("X")
        root.append("Y")

        self.assertEqual(root.remove_recursive("X"), 1)
        self.assertEqual(root.value, "X")
        self.assertEqual(values_of(root), ["Y"])
        self.assertTrue(root.contains_recursive("X"))

    def test_matches_nested_under_removed_node_are_counted(self):
        # X -> X -> X under the root: all three match
        root = Node("root")
        root.append("X").append("X").append("X")

        self.assertEqual(root.remove_recursive("X"), 3)
        self.assertTrue(root.is_leaf())

    def test_nested_matches_under_removed_sibling(self):
        root = Node("root")
        first = root.append("X")
        first.append("keep").append("X")
        second = root.append("X")
        second.append("X")
        root.append("other").append("X")

        self.assertEqual(root.remove_recursive("X"), 5)
        self.assertEqual(values_of(root.dfs()), ["root", "other"])

    def test_removed_nodes_are_detached(self):
        root = Node("root")
        doomed = root.append("X")
        root.remove_recursive("X")
        self.assertFalse(doomed.is_owned)

    def test_call_on_subtree_limits_scope(self):
        root = build_sample_tree()
        root.append("D")
        b = root[0]

        self.assertEqual(b.remove_recursive("D"), 1)
        self.assertTrue(root.contains("D"))
        self.assertFalse(b.contains_recursive("D"))

    def test_remove_by_node_argument(self):
        root = build_sample_tree()
        self.assertEqual(root.remove_recursive(Node("E")), 1)
        self.assertEqual(values_of(root.dfs()), ["A", "B", "D", "C"])

    def test_deep_chain_removal_does_not_recurse(self):
        depth = sys.getrecursionlimit() * 3
        root = build_chain(depth, value="same")

        self.assertEqual(root.remove_recursive("same"), depth - 1)
        self.assertTrue(root.is_leaf())


if __name__ == "__main__":
    unittest.main()
