"""Single-pass traversal iterators over a Node subtree.

Both iterators follow the begin/end sentinel style as well as the Python
iterator protocol:

    it, end = root.dfs_begin(), root.dfs_end()
    while it != end:
        visit(it.current)
        it.advance()

    for node in root.bfs():
        visit(node)

An iterator holds plain references into the live structure. Appending to
or removing from a subtree while an iterator over it is in use leaves the
iterator in an unspecified state; build a fresh one after mutating.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import TYPE_CHECKING, Deque, List, Optional

if TYPE_CHECKING:
    from .node import Node


class NodeIterator(ABC):
    """Base class for the stack- and queue-driven iterators.

    ``current`` is the node the iterator is positioned on, or None once the
    walk is exhausted. That exhausted state is also what the ``*_end()``
    sentinels start in, so any two exhausted iterators of the same kind
    compare equal.
    """

    def __init__(self, root: Optional["Node"] = None):
        if root is not None:
            self._push_root(root)

    @abstractmethod
    def _push_root(self, root: "Node") -> None:
        pass

    @property
    @abstractmethod
    def current(self) -> Optional["Node"]:
        """Node at the cursor, or None when exhausted."""
        pass

    @abstractmethod
    def advance(self) -> "NodeIterator":
        """Move past the current node. A no-op once exhausted."""
        pass

    @property
    def exhausted(self) -> bool:
        return self.current is None

    def __iter__(self) -> "NodeIterator":
        return self

    def __next__(self) -> "Node":
        node = self.current
        if node is None:
            raise StopIteration
        self.advance()
        return node

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.current is other.current

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(current={self.current!r})"


class DepthFirstIterator(NodeIterator):
    """Pre-order, left-to-right iterator driven by an explicit stack."""

    def __init__(self, root: Optional["Node"] = None):
        self._stack: List["Node"] = []
        super().__init__(root)

    def _push_root(self, root: "Node") -> None:
        self._stack.append(root)

    @property
    def current(self) -> Optional["Node"]:
        return self._stack[-1] if self._stack else None

    def advance(self) -> "DepthFirstIterator":
        if self._stack:
            node = self._stack.pop()
            # Reversed so the leftmost child ends up on top
            self._stack.extend(reversed(node._children))
        return self


class BreadthFirstIterator(NodeIterator):
    """Level-order iterator driven by a FIFO queue."""

    def __init__(self, root: Optional["Node"] = None):
        self._queue: Deque["Node"] = deque()
        super().__init__(root)

    def _push_root(self, root: "Node") -> None:
        self._queue.append(root)

    @property
    def current(self) -> Optional["Node"]:
        return self._queue[0] if self._queue else None

    def advance(self) -> "BreadthFirstIterator":
        if self._queue:
            node = self._queue.popleft()
            self._queue.extend(node._children)
        return self
