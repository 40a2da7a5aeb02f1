from __future__ import annotations

from pickle import dumps, loads
from typing import Dict, Hashable, Iterable, Iterator, List, Optional, Set, Tuple

from pathgraph.algorithms.dfs import iter_simple_paths
from pathgraph.config import SEARCH_CONFIG, PathSearchConfig
from pathgraph.logging import get_logger

NodeID = Hashable
EdgeTuple = Tuple[NodeID, NodeID]
PathList = List[List[NodeID]]

logger = get_logger(__name__)


class Graph:
    """
    A generic graph over hashable node keys, kept as an adjacency mapping.

    The adjacency structure is a dictionary of sets:
        {node: {neighbor, ...}}
    Membership of a neighbor in a node's set means the edge exists. Only nodes
    with at least one recorded outgoing edge are keys; in a directed graph a
    node that is only ever a target shows up solely as a neighbor value.

    An undirected graph records every inserted edge in both directions. Edges
    can only be added; there is no removal.

    Attributes:
        _is_directed: whether add_edge records a single direction
        _adjacency: dictionary of neighbor sets
        _config: traversal configuration, or None to use the global SEARCH_CONFIG
    """

    def __init__(
        self,
        directed: Optional[bool] = None,
        config: Optional[PathSearchConfig] = None,
    ) -> None:
        """
        Create an empty graph.
        Args:
            directed: True for a directed graph. None or False gives an undirected one.
            config: optional traversal configuration for this graph.
        """
        self._is_directed: bool = bool(directed)
        self._adjacency: Dict[NodeID, Set[NodeID]] = {}
        self._config: Optional[PathSearchConfig] = config

    @classmethod
    def from_edges(
        cls, edges: Iterable[EdgeTuple], directed: Optional[bool] = None
    ) -> Graph:
        """
        Build a graph by inserting every (x, y) pair from edges.
        """
        graph = cls(directed)
        for src_node, dst_node in edges:
            graph.add_edge(src_node, dst_node)
        return graph

    @property
    def is_directed(self) -> bool:
        return self._is_directed

    @property
    def config(self) -> PathSearchConfig:
        return self._config if self._config is not None else SEARCH_CONFIG

    def __contains__(self, node: NodeID) -> bool:
        """
        Enables expressions like "node" in graph.
        Returns:
            True if the node has an adjacency entry and False otherwise.
        """
        return node in self._adjacency

    def __iter__(self) -> Iterator[NodeID]:
        return iter(self._adjacency)

    def __len__(self) -> int:
        """
        Return the number of nodes with an adjacency entry.
        """
        return len(self._adjacency)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return (
            self._is_directed == other._is_directed
            and self._adjacency == other._adjacency
        )

    def __repr__(self) -> str:
        kind = "directed" if self._is_directed else "undirected"
        return f"Graph({kind}, nodes={len(self.nodes())}, edges={len(self.edges())})"

    def copy(self) -> Graph:
        """
        Make a deep copy of the graph and return it.
        Pickle is used for performance reasons.
        """
        return loads(dumps(self))

    def add_edge(self, src_node: NodeID, dst_node: NodeID) -> None:
        """
        Record an edge from src_node to dst_node, and the reverse one if the
        graph is undirected. Neither node has to exist beforehand. Inserting
        the same edge again changes nothing.
        Args:
            src_node: source node identifier. Can be any hashable Python object.
            dst_node: destination node identifier.
        """
        self._adjacency.setdefault(src_node, set()).add(dst_node)
        if not self._is_directed:
            self._adjacency.setdefault(dst_node, set()).add(src_node)

    def neighbors(self, node: NodeID) -> Set[NodeID]:
        """
        Return a copy of the neighbor set of node, empty if it has no entry.
        """
        return set(self._adjacency.get(node, ()))

    def get_adjacency(self) -> Dict[NodeID, Set[NodeID]]:
        """
        Return the adjacency mapping itself (not a copy).
        """
        return self._adjacency

    def nodes(self) -> Set[NodeID]:
        """
        Return every node that appears either as a key or as a neighbor.
        """
        found: Set[NodeID] = set(self._adjacency)
        for neighbors in self._adjacency.values():
            found.update(neighbors)
        return found

    def edges(self) -> List[EdgeTuple]:
        """
        Return every recorded (src, dst) pair. An undirected edge appears once
        per direction.
        """
        return [
            (src_node, dst_node)
            for src_node, neighbors in self._adjacency.items()
            for dst_node in neighbors
        ]

    def find_all_paths(self, start: NodeID, end: NodeID) -> PathList:
        """
        Find every simple path from start to end with a depth-first search.

        The order of the returned paths follows neighbor-set iteration and is
        unspecified unless config.sort_neighbors is set.

        Args:
            start: first node of every path.
            end: last node of every path.

        Returns:
            A list of paths, each a list of nodes including both endpoints.
            [[start]] when start == end, and [] when end is unreachable.
        """
        return self._collect(start, end, None)

    def find_paths_with_max_steps(
        self, start: NodeID, end: NodeID, max_steps: int
    ) -> PathList:
        """
        Find every simple path from start to end holding at most max_steps nodes.

        max_steps counts nodes, not edges: a path of k nodes has k - 1 edges.
        A branch stops growing once its path holds max_steps nodes, but the
        end check runs first, so [[start]] is returned for start == end
        whatever max_steps is.

        Args:
            start: first node of every path.
            end: last node of every path.
            max_steps: maximum number of nodes in a returned path.

        Returns:
            A list of paths, each a list of nodes including both endpoints.

        Raises:
            ValueError: If max_steps is negative.
        """
        if max_steps < 0:
            raise ValueError(f"max_steps must be non-negative, got {max_steps}.")
        return self._collect(start, end, max_steps)

    def _collect(
        self, start: NodeID, end: NodeID, max_steps: Optional[int]
    ) -> PathList:
        config = self.config
        logger.debug(
            "Searching paths %r -> %r (max_steps=%s, sort_neighbors=%s)",
            start,
            end,
            max_steps,
            config.sort_neighbors,
        )

        paths: PathList = []
        for path in iter_simple_paths(
            self._adjacency,
            start,
            end,
            max_steps=max_steps,
            sort_neighbors=config.sort_neighbors,
        ):
            if config.log_paths:
                logger.debug("Found path %r", path)
            paths.append(path)

        logger.debug("Found %d path(s) %r -> %r", len(paths), start, end)
        return paths
