"""Tree and Graph wrappers around a root Node.

Neither type adds state to the node it wraps. They hold a root Node and
forward the node operations to it, so a Tree can be handed to anything
that works on nodes via ``tree.root``, and the functional API accepts
either form.

Graph keeps the strict ownership rules of Node: its vertex list and its
adjacency entries are both owned exactly once. Vertices cannot be shared
between adjacency entries and there are no back edges.
"""

from functools import total_ordering
from typing import Any, Iterator, Tuple, Union

from .core.iterators import BreadthFirstIterator, DepthFirstIterator
from .core.node import Node
from .exceptions import OwnershipError


def as_node(item: Any) -> Any:
    """Return the root Node of a Tree or Graph, or ``item`` unchanged."""
    if isinstance(item, NodeWrapper):
        return item.root
    return item


@total_ordering
class NodeWrapper:
    """Forwards the Node operation set to ``self.root``."""

    def __init__(self, root: Node):
        self.root = root

    @property
    def value(self) -> Any:
        return self.root.value

    @value.setter
    def value(self, value: Any) -> None:
        self.root.value = value

    @property
    def children(self):
        return self.root.children

    def append(self, item: Union[Node, "NodeWrapper", Any]) -> Node:
        return self.root.append(as_node(item))

    def __rshift__(self, item: Union[Node, "NodeWrapper", Any]) -> Node:
        return self.append(item)

    def remove(self, value: Any) -> int:
        return self.root.remove(as_node(value))

    def remove_recursive(self, value: Any) -> int:
        return self.root.remove_recursive(as_node(value))

    def contains(self, value: Any) -> bool:
        return self.root.contains(as_node(value))

    def contains_recursive(self, value: Any) -> bool:
        return self.root.contains_recursive(as_node(value))

    def clear(self) -> None:
        self.root.clear()

    def is_leaf(self) -> bool:
        return self.root.is_leaf()

    def size(self) -> int:
        return self.root.size()

    def height(self) -> int:
        return self.root.height()

    def dfs_begin(self) -> DepthFirstIterator:
        return self.root.dfs_begin()

    def dfs_end(self) -> DepthFirstIterator:
        return self.root.dfs_end()

    def bfs_begin(self) -> BreadthFirstIterator:
        return self.root.bfs_begin()

    def bfs_end(self) -> BreadthFirstIterator:
        return self.root.bfs_end()

    def dfs(self) -> DepthFirstIterator:
        return self.root.dfs()

    def bfs(self) -> BreadthFirstIterator:
        return self.root.bfs()

    def __len__(self) -> int:
        return len(self.root)

    def __bool__(self) -> bool:
        return True

    def __iter__(self) -> Iterator[Node]:
        return iter(self.root)

    def __getitem__(self, index: int) -> Node:
        return self.root[index]

    def __eq__(self, other: object) -> bool:
        return self.root == as_node(other)

    def __lt__(self, other: object) -> bool:
        return self.root < as_node(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.root.value!r}, children={len(self.root)})"


class Tree(NodeWrapper):
    """A Node used as the root of a tree.

    Example:
        >>> tree = Tree("root")
        >>> tree.append("a").append("a1")
        Node('a1', children=0)
        >>> tree.contains_recursive("a1")
        True
    """

    def __init__(self, value: Any):
        super().__init__(Node(value))

    @classmethod
    def from_node(cls, node: Node) -> "Tree":
        """Wrap an existing, unattached node.

        Raises:
            OwnershipError: If ``node`` already has a parent
        """
        if node.is_owned:
            raise OwnershipError(
                f"{node!r} already belongs to a parent; remove it there first"
            )
        tree = cls.__new__(cls)
        NodeWrapper.__init__(tree, node)
        return tree

    def copy(self) -> "Tree":
        return Tree.from_node(self.root.copy())


class Graph(NodeWrapper):
    """Adjacency-list shaped hierarchy.

    The root's value is the ordered list of vertex nodes. Adjacency entries
    are appended beneath the root like any other children; each entry's own
    value is typically a list of vertex values it connects to.

    Example:
        >>> graph = Graph()
        >>> a = graph.add_vertex("a")
        >>> b = graph.add_vertex("b")
        >>> entry = graph.append(["a", "b"])
        >>> graph.vertex_count()
        2
    """

    def __init__(self):
        super().__init__(Node([]))

    @property
    def vertices(self) -> Tuple[Node, ...]:
        """Vertex nodes in insertion order (read-only view)."""
        return tuple(self.root.value)

    def add_vertex(self, item: Union[Node, NodeWrapper, Any]) -> Node:
        """Add a vertex and return its node.

        A Tree is added through its root node.

        Raises:
            OwnershipError: If ``item`` is a node that already has a parent
        """
        item = as_node(item)
        vertex = item if isinstance(item, Node) else Node(item)
        vertex._attach()
        self.root.value.append(vertex)
        return vertex

    def has_vertex(self, value: Any) -> bool:
        return any(vertex == value for vertex in self.root.value)

    def remove_vertex(self, value: Any) -> int:
        """Remove every vertex equal to ``value``; returns how many."""
        kept = []
        removed = 0
        for vertex in self.root.value:
            if vertex == value:
                vertex._detach()
                removed += 1
            else:
                kept.append(vertex)
        self.root.value[:] = kept
        return removed

    def vertex_count(self) -> int:
        return len(self.root.value)

    def copy(self) -> "Graph":
        """Copy every vertex subtree and adjacency entry.

        Entry values are shared with the original, as in ``Node.copy``.
        """
        graph = Graph()
        for vertex in self.root.value:
            graph.add_vertex(vertex.copy())
        for entry in self.root.children:
            graph.root.append(entry.copy())
        return graph
