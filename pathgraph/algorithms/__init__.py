"""Traversal algorithms over adjacency mappings."""

from pathgraph.algorithms.dfs import all_simple_paths, iter_simple_paths

__all__ = ["all_simple_paths", "iter_simple_paths"]
