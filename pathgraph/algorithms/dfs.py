"""Backtracking depth-first enumeration of simple paths.

Both path queries on :class:`pathgraph.graph.Graph` run the same walk; the only
difference between them is the optional node-count limit checked here before a
node is expanded.
"""

from __future__ import annotations

from typing import Dict, Hashable, Iterator, List, Optional, Set

NodeID = Hashable
Adjacency = Dict[NodeID, Set[NodeID]]

_EXHAUSTED = object()  # sentinel for a spent neighbor iterator


def _expand(
    adjacency: Adjacency, node: NodeID, sort_neighbors: bool
) -> Iterator[NodeID]:
    neighbors = adjacency.get(node, ())
    if sort_neighbors:
        return iter(sorted(neighbors))
    return iter(neighbors)


def iter_simple_paths(
    adjacency: Adjacency,
    start: NodeID,
    end: NodeID,
    max_steps: Optional[int] = None,
    sort_neighbors: bool = False,
) -> Iterator[List[NodeID]]:
    """
    Enumerate every simple path from start to end.

    The walk keeps one neighbor iterator per node on the current path instead
    of recursing, so its depth is bounded by the node count rather than by the
    interpreter's recursion limit. A node is marked visited and appended to the
    path before it is explored, and unmarked and popped when the walk backs out
    of it, which leaves sibling branches with exactly the state their parent saw.

    The end node is never expanded: reaching it records the path and the walk
    backs out. When max_steps is given, a node whose path already holds
    max_steps nodes is not expanded either. The end check comes first, so a
    path landing on end with exactly max_steps nodes is still recorded, and
    start == end always yields [start].

    Args:
        adjacency: Mapping of node to the set of its neighbors.
        start: First node of every path.
        end: Last node of every path.
        max_steps: Maximum number of nodes in a path, or None for no limit.
        sort_neighbors: If True, expand neighbors in sorted order.

    Yields:
        Each path as a fresh list of nodes, start and end included.
    """
    path: List[NodeID] = [start]
    visited: Set[NodeID] = {start}

    if start == end:
        yield list(path)
        return
    if max_steps is not None and len(path) >= max_steps:
        return

    stack: List[Iterator[NodeID]] = [_expand(adjacency, start, sort_neighbors)]

    while stack:
        neighbor = next(stack[-1], _EXHAUSTED)

        if neighbor is _EXHAUSTED:
            # backtrack out of the node on top of the path
            stack.pop()
            visited.discard(path.pop())
            continue

        if neighbor in visited:
            continue

        visited.add(neighbor)
        path.append(neighbor)

        if neighbor == end:
            yield list(path)
        elif max_steps is None or len(path) < max_steps:
            stack.append(_expand(adjacency, neighbor, sort_neighbors))
            continue

        # leaf: either end was reached or the step limit stops expansion
        path.pop()
        visited.discard(neighbor)


def all_simple_paths(
    adjacency: Adjacency,
    start: NodeID,
    end: NodeID,
    max_steps: Optional[int] = None,
    sort_neighbors: bool = False,
) -> List[List[NodeID]]:
    """Materialize :func:`iter_simple_paths` into a list."""
    return list(
        iter_simple_paths(
            adjacency,
            start,
            end,
            max_steps=max_steps,
            sort_neighbors=sort_neighbors,
        )
    )
