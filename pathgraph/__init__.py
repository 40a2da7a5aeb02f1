"""pathgraph: generic graph with simple-path enumeration.

Primary API:
    Graph - adjacency-set graph over any hashable node key
    Graph.find_all_paths() - every simple path between two nodes
    Graph.find_paths_with_max_steps() - the same, limited by node count
    PathSearchConfig - traversal options (neighbor ordering, path logging)
    from_networkx() / to_networkx() - NetworkX conversion

Example:
    from pathgraph import Graph

    g = Graph()
    g.add_edge(1, 2)
    g.add_edge(2, 3)
    g.find_all_paths(1, 3)  # [[1, 2, 3]]
"""

from __future__ import annotations

from pathgraph import logging
from pathgraph.algorithms.dfs import all_simple_paths, iter_simple_paths
from pathgraph.config import SEARCH_CONFIG, PathSearchConfig
from pathgraph.graph import Graph
from pathgraph.lib.nx import from_networkx, to_networkx

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Graph",
    "PathSearchConfig",
    "SEARCH_CONFIG",
    "all_simple_paths",
    "iter_simple_paths",
    "from_networkx",
    "to_networkx",
    "logging",
]
