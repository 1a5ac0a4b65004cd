"""Exception types for NodeTreeLib.

Most failure modes in the library are not exceptional: an exhausted
iterator dereferences to ``None`` and searching for an absent value
returns ``False`` or ``0``. The classes here cover the few cases where
the caller asked for something the structure cannot honour.
"""


class NodeTreeError(Exception):
    """Base class for all NodeTreeLib errors."""
    pass


class OwnershipError(NodeTreeError):
    """Raised when a node would end up with more than one parent."""
    pass


class ConfigurationError(NodeTreeError, ValueError):
    """Raised when a TraversalConfig fails validation."""
    pass
