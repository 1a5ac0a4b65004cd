#!/usr/bin/env python3
"""
Basic NodeTreeLib usage.

This example demonstrates:
- Building a tree with chained appends
- Walking it with begin/end iterators and with for loops
- Shallow vs recursive membership
- Recursive removal
- Depth-aware traversal through the functional API
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from nodetreelib import Node, Tree, get_tree_paths, get_tree_stats, setup_logging


def build_org_chart() -> Tree:
    """Build a small organisation chart."""
    org = Tree("CEO")
    cto = org.append("CTO")
    cto.append("Platform").append("SRE")
    cto.append("Product")
    org.append("CFO").append("Accounting")
    return org


def main():
    logging.basicConfig(format="%(name)s: %(message)s")
    setup_logging(logging.DEBUG)

    org = build_org_chart()

    print("Pre-order (explicit iterator):")
    it, end = org.dfs_begin(), org.dfs_end()
    while it != end:
        print(f"  {it.current.value}")
        it.advance()

    print("\nLevel order:")
    print("  " + ", ".join(node.value for node in org.bfs()))

    print("\nPaths (max depth 2):")
    for path in get_tree_paths(org, strategy="dfs_pre", max_depth=2):
        print("  " + " -> ".join(path))

    print(f"\nDirect report 'SRE'?      {org.contains('SRE')}")
    print(f"Anyone called 'SRE'?      {org.contains_recursive('SRE')}")

    # Equality ignores children
    print(f"Node('CTO') == org[0]?    {Node('CTO') == org[0]}")

    removed = org.remove_recursive("Platform")
    print(f"\nRemoved {removed} node(s); 'SRE' still present: {org.contains_recursive('SRE')}")

    stats = get_tree_stats(org)
    print(f"Nodes: {stats['total_nodes']}, leaves: {stats['leaf_nodes']}, depth: {stats['max_depth']}")


if __name__ == "__main__":
    main()
