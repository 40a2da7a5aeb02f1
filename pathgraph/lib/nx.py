"""NetworkX graph conversion utilities.

This module converts between NetworkX graphs and :class:`pathgraph.graph.Graph`.

Example:
    >>> import networkx as nx
    >>> from pathgraph.lib.nx import from_networkx, to_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B")
    >>> G.add_edge("B", "C")
    >>>
    >>> graph = from_networkx(G)
    >>> graph.find_all_paths("A", "C")
    [['A', 'B', 'C']]
    >>>
    >>> G_out = to_networkx(graph)
"""

from __future__ import annotations

from typing import Union

import networkx as nx

from pathgraph.graph import Graph

NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]


def from_networkx(G: NxGraph) -> Graph:
    """Convert a NetworkX graph to a pathgraph Graph.

    Directedness follows ``G.is_directed()``. Parallel edges of multigraphs
    collapse into one adjacency entry, and edge/node attributes are dropped.
    Isolated nodes have no edges, so they do not appear in the result.

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph)

    Returns:
        A new Graph holding every edge of G.

    Raises:
        TypeError: If G is not a NetworkX graph
    """
    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )

    return Graph.from_edges(G.edges(), directed=G.is_directed())


def to_networkx(graph: Graph) -> Union[nx.Graph, nx.DiGraph]:
    """Convert a pathgraph Graph to a NetworkX graph.

    Directed graphs become ``nx.DiGraph`` and undirected ones ``nx.Graph``.
    Nodes that only appear as neighbors are included.

    Args:
        graph: Graph to convert

    Returns:
        A new NetworkX graph with the same nodes and edges.
    """
    G = nx.DiGraph() if graph.is_directed else nx.Graph()
    G.add_nodes_from(graph.nodes())
    G.add_edges_from(graph.edges())
    return G
