"""Testing utilities for NodeTreeLib consumers."""

from .fixtures import (
    build_sample_tree,
    build_chain,
    build_complete_tree,
    values_of,
    TreeSnapshot,
)

__all__ = [
    'build_sample_tree',
    'build_chain',
    'build_complete_tree',
    'values_of',
    'TreeSnapshot',
]
