"""Test fixtures for NodeTreeLib consumers.

Builders for the small trees that show up in almost every test, plus a
snapshot helper for checking that an operation left a structure alone.
"""

from typing import Any, Iterable, List, Tuple

from ..core.node import Node
from ..core.traverser import DepthFirstPreOrderTraverser


def build_sample_tree() -> Node:
    """Build the canonical five-node tree.

    Structure:
    A
    ├── B
    │   └── D
    └── C
        └── E

    Pre-order is A, B, D, C, E; level order is A, B, C, D, E.
    """
    root = Node("A")
    root.append("B").append("D")
    root.append("C").append("E")
    return root


def build_chain(length: int, value: Any = None) -> Node:
    """Build a single path of ``length`` nodes.

    Values default to the node's depth (0 for the root). Pass ``value`` to
    give every node the same payload.
    """
    root = Node(0 if value is None else value)
    tail = root
    for depth in range(1, length):
        tail = tail.append(depth if value is None else value)
    return root


def build_complete_tree(branching: int, depth: int) -> Node:
    """Build a complete tree; values are level-order positions from 0.

    A tree of depth 0 is a single node.
    """
    counter = 0
    root = Node(counter)
    level = [root]
    for _ in range(depth):
        next_level = []
        for parent in level:
            for _ in range(branching):
                counter += 1
                next_level.append(parent.append(counter))
        level = next_level
    return root


def values_of(nodes: Iterable[Node]) -> List[Any]:
    """Return the values of ``nodes`` in order."""
    return [node.value for node in nodes]


class TreeSnapshot:
    """Records the shape of a subtree for later comparison.

    The shape is the pre-order list of (value, depth) pairs, which fully
    determines an ordered tree.

    Example:
        before = TreeSnapshot(root)
        root.remove_recursive("missing")
        assert TreeSnapshot(root) == before
    """

    def __init__(self, root: Node):
        self.shape: List[Tuple[Any, int]] = [
            (node.value, depth)
            for node, depth in DepthFirstPreOrderTraverser().traverse(root)
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TreeSnapshot):
            return NotImplemented
        return self.shape == other.shape

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return len(self.shape)

    def __repr__(self) -> str:
        return f"TreeSnapshot({self.shape!r})"
