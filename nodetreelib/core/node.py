"""Node abstraction for NodeTreeLib.

A Node is a value plus an ordered sequence of child nodes that it owns
exclusively. A Node is already a valid rooted tree; the Tree and Graph
wrappers in ``nodetreelib.tree`` only give it a different name.

Equality and ordering look at the value only. Two nodes holding equal
values compare equal even when their subtrees differ, which is what lets
``contains`` and ``remove_recursive`` search by value.

Every whole-subtree operation here is iterative, so tree depth is bounded
by memory rather than by the interpreter's recursion limit. None of them
detect cycles: a node appended beneath its own descendant makes them run
forever.
"""

import logging
from functools import total_ordering
from typing import Any, Iterator, List, Optional, Tuple, Union

from ..exceptions import OwnershipError
from .iterators import BreadthFirstIterator, DepthFirstIterator

logger = logging.getLogger(__name__)


@total_ordering
class Node:
    """A value with an ordered list of exclusively-owned children.

    Example:
        >>> root = Node("A")
        >>> root.append("B").append("D")
        Node('D', children=0)
        >>> root.append("C").append("E")
        Node('E', children=0)
        >>> [n.value for n in root.dfs()]
        ['A', 'B', 'D', 'C', 'E']
    """

    __slots__ = ("_value", "_children", "_owned")

    def __init__(self, value: Any):
        """Create a childless node.

        Args:
            value: Payload stored in the node
        """
        self._value = value
        self._children: List["Node"] = []
        self._owned = False

    # Value access

    @property
    def value(self) -> Any:
        """The payload; assignable in place."""
        return self._value

    @value.setter
    def value(self, value: Any) -> None:
        self._value = value

    def data(self) -> Any:
        return self._value

    def const_data(self) -> Any:
        return self._value

    # Children access

    @property
    def children(self) -> Tuple["Node", ...]:
        """Direct children in insertion order (read-only view)."""
        return tuple(self._children)

    @property
    def is_owned(self) -> bool:
        """True while this node is attached beneath a parent."""
        return self._owned

    def is_leaf(self) -> bool:
        return not self._children

    def __len__(self) -> int:
        return len(self._children)

    def __bool__(self) -> bool:
        # Truthy even when childless; len() counts children only.
        return True

    def __iter__(self) -> Iterator["Node"]:
        return iter(tuple(self._children))

    def __getitem__(self, index: int) -> "Node":
        return self._children[index]

    # Mutation

    def append(self, item: Union["Node", Any]) -> "Node":
        """Append a child and return it.

        A plain value is wrapped in a new Node. An existing Node is adopted
        as a whole subtree; it must not already belong to another parent.

        The returned reference is the new child, so chained calls build
        downward: ``root.append("x").append("y")`` makes ``y`` a grandchild.

        A Tree or Graph is adopted through its root node.

        Args:
            item: A value, an unattached Node, or a Tree/Graph

        Returns:
            The appended child node

        Raises:
            OwnershipError: If ``item`` is a node that already has a parent,
                or is this node itself
        """
        # Imported here; tree.py depends on this module
        from ..tree import as_node

        item = as_node(item)
        if isinstance(item, Node):
            if item is self:
                raise OwnershipError("A node cannot be appended to itself")
            child = item
        else:
            child = self.__class__(item)

        child._attach()
        self._children.append(child)
        return child

    def __rshift__(self, item: Union["Node", Any]) -> "Node":
        """``parent >> item`` is shorthand for ``parent.append(item)``."""
        return self.append(item)

    def remove(self, value: Any) -> int:
        """Remove every direct child equal to ``value``.

        Returns:
            Number of children removed
        """
        kept = []
        removed = 0
        for child in self._children:
            if child == value:
                child._detach()
                removed += 1
            else:
                kept.append(child)
        if removed:
            self._children = kept
        return removed

    def remove_recursive(self, value: Any) -> int:
        """Remove every node equal to ``value`` anywhere below this node.

        This node itself is never removed. Each node's subtree is processed
        before the node's own children are tested, so matches nested inside
        a removed child are found and counted too.

        Args:
            value: Value (or Node) to compare against

        Returns:
            Total number of nodes removed; 0 if the value does not occur
        """
        # Pre-order puts every node before its descendants, so walking it
        # backwards handles children before parents without recursion.
        order: List[Node] = []
        stack: List[Node] = [self]
        while stack:
            node = stack.pop()
            order.append(node)
            stack.extend(node._children)

        removed = 0
        for node in reversed(order):
            removed += node.remove(value)

        if removed:
            logger.debug("Removed %d node(s) matching %r below %r", removed, value, self)
        return removed

    def clear(self) -> None:
        """Detach all direct children."""
        for child in self._children:
            child._detach()
        self._children = []

    def _attach(self) -> None:
        if self._owned:
            raise OwnershipError(
                f"{self!r} already belongs to a parent; remove it there first"
            )
        self._owned = True

    def _detach(self) -> None:
        self._owned = False

    # Queries

    def contains(self, value: Any) -> bool:
        """Check whether a direct child equals ``value`` (not recursive)."""
        return any(child == value for child in self._children)

    def contains_recursive(self, value: Any) -> bool:
        """Check whether this node or any descendant equals ``value``."""
        return any(node == value for node in self.bfs())

    def size(self) -> int:
        """Number of nodes in this subtree, including this one."""
        return sum(1 for _ in self.dfs())

    def height(self) -> int:
        """Number of edges on the longest downward path (0 for a leaf)."""
        height = 0
        level = self._children
        while level:
            height += 1
            level = [grandchild for child in level for grandchild in child._children]
        return height

    def copy(self) -> "Node":
        """Return a structural copy of this subtree.

        The copy is unattached. Values are shared with the original, not
        copied.
        """
        clone = self.__class__(self._value)
        pending = [(self, clone)]
        while pending:
            source, target = pending.pop()
            for child in source._children:
                twin = child.__class__(child._value)
                twin._owned = True
                target._children.append(twin)
                pending.append((child, twin))
        return clone

    # Iteration

    def dfs_begin(self) -> DepthFirstIterator:
        """Pre-order iterator positioned on this node."""
        return DepthFirstIterator(self)

    def dfs_end(self) -> DepthFirstIterator:
        """Exhausted pre-order iterator used as the loop sentinel."""
        return DepthFirstIterator()

    def bfs_begin(self) -> BreadthFirstIterator:
        """Level-order iterator positioned on this node."""
        return BreadthFirstIterator(self)

    def bfs_end(self) -> BreadthFirstIterator:
        """Exhausted level-order iterator used as the loop sentinel."""
        return BreadthFirstIterator()

    def dfs(self) -> DepthFirstIterator:
        return self.dfs_begin()

    def bfs(self) -> BreadthFirstIterator:
        return self.bfs_begin()

    # Comparison

    def __eq__(self, other: object) -> bool:
        """Nodes are equal when their values are equal; children are ignored.

        Comparing against a non-Node compares the value directly, so
        ``Node(3) == 3`` holds.
        """
        if isinstance(other, Node):
            return self._value == other._value
        return self._value == other

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Node):
            return self._value < other._value
        return self._value < other

    # Value-based equality over a mutable payload
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r}, children={len(self._children)})"

    def __str__(self) -> str:
        return str(self._value)


def find_first(root: Node, value: Any) -> Optional[Node]:
    """Return the first node in level order equal to ``value``, or None."""
    for node in root.bfs():
        if node == value:
            return node
    return None
