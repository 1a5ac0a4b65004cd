"""Data collection strategies for NodeTreeLib.

DataCollectors define what information to extract from nodes during traversal.
This allows the same traversal to collect different data based on requirements.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional

from .node import Node


class DataCollector(ABC):
    """Abstract base class for data collection strategies.

    DataCollectors determine what information is extracted from each node
    during traversal. This separation allows the same traversal algorithm
    to be used for different purposes (e.g., collecting just values vs.
    root-to-node paths vs. child counts).
    """

    def start(self, root: Node) -> None:
        """Prepare for a traversal rooted at ``root``.

        Called by ExecutionPlan before the first node is collected. The
        default does nothing.
        """
        pass

    @abstractmethod
    def collect(self, node: Node, depth: int) -> Any:
        """Collect data from a node.

        Args:
            node: The node to collect data from
            depth: Current depth in traversal

        Returns:
            Collected data (type depends on collector)
        """
        pass


class NodeCollector(DataCollector):
    """Collects the node object itself."""

    def collect(self, node: Node, depth: int) -> Node:
        return node


class ValueCollector(DataCollector):
    """Collects only node values."""

    def collect(self, node: Node, depth: int) -> Any:
        return node.value


class DepthCollector(DataCollector):
    """Collects the depth at which each node was visited."""

    def collect(self, node: Node, depth: int) -> int:
        return depth


class ChildCountCollector(DataCollector):
    """Collects the number of direct children of each node."""

    def collect(self, node: Node, depth: int) -> int:
        return len(node)


class PathCollector(DataCollector):
    """Collects the list of values from the traversal root to each node.

    Nodes carry no parent link, so ``start`` records each node's parent
    for the whole subtree up front. That keeps the result correct for every
    strategy, post-order included.
    """

    def __init__(self):
        self._root: Optional[Node] = None
        self._parents: Dict[int, Node] = {}

    def start(self, root: Node) -> None:
        self._root = root
        self._parents = {}
        stack = [root]
        while stack:
            parent = stack.pop()
            for child in parent.children:
                self._parents[id(child)] = parent
                stack.append(child)

    def collect(self, node: Node, depth: int) -> List[Any]:
        if self._root is None:
            self.start(node)

        path = [node.value]
        current = node
        while current is not self._root:
            current = self._parents[id(current)]
            path.append(current.value)
        path.reverse()
        return path


class CustomCollector(DataCollector):
    """Wraps a plain function as a collector.

    Example:
        >>> collector = CustomCollector(lambda node, depth: (node.value, depth))
    """

    def __init__(self, collect_func: Callable[[Node, int], Any]):
        self.collect_func = collect_func

    def collect(self, node: Node, depth: int) -> Any:
        return self.collect_func(node, depth)
