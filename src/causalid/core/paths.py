"""
Path enumeration over causal graphs.

Paths are lists of distinct node ids. Undirected paths may traverse an
edge against its direction (needed for d-separation); directed paths
follow edges forward only. Enumeration uses NetworkX's simple-path
generator, which is iterative, so deep graphs do not hit the recursion
limit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

import networkx as nx

from causalid.core.validation import validate_node_indices

if TYPE_CHECKING:
    from causalid.core.graph import CausalGraph

Path = list[int]


def _simple_paths(graph: nx.Graph | nx.DiGraph, source: int, target: int) -> Iterator[Path]:
    # A node has no path to itself.
    if source == target:
        return iter(())
    return nx.all_simple_paths(graph, source, target)


def iter_undirected_paths(graph: CausalGraph, source: int, target: int) -> Iterator[Path]:
    """Unvalidated undirected path enumeration used by d-separation."""
    return _simple_paths(graph._graph.to_undirected(as_view=True), source, target)


def all_simple_paths(graph: CausalGraph, source: int, target: int) -> Iterator[Path]:
    """Enumerate all simple paths between two nodes, ignoring edge direction.

    Each node is visited at most once per path. A node has no path to
    itself, so ``source == target`` yields nothing.

    Args:
        graph: Directed acyclic graph
        source: Start node
        target: End node

    Returns:
        A lazy iterator of paths (lists of node ids)

    Raises:
        InputError: If either id is out of range (raised immediately)
    """
    validate_node_indices(graph, source=source, target=target)
    return iter_undirected_paths(graph, source, target)


def find_directed_paths(graph: CausalGraph, X: int, Y: int) -> list[Path]:
    """Find all directed paths from X to Y, in sorted order.

    Example:
        >>> g = CausalGraph.from_edges([(1, 2), (1, 3), (2, 4), (3, 4)])
        >>> find_directed_paths(g, 1, 4)
        [[1, 2, 4], [1, 3, 4]]
    """
    validate_node_indices(graph, X=X, Y=Y)
    return sorted(_simple_paths(graph._graph, X, Y))


def find_backdoor_paths(graph: CausalGraph, X: int, Y: int) -> list[Path]:
    """Find all backdoor paths from X to Y.

    A backdoor path starts with an edge pointing into X: for each parent
    of X, every simple path from that parent to Y (never re-entering X)
    is returned with X prepended, so every path starts with X.

    Args:
        graph: Directed acyclic graph
        X: Treatment node
        Y: Outcome node

    Returns:
        List of backdoor paths, grouped by parent in ascending order

    Example:
        >>> g = CausalGraph.from_edges([(1, 2), (1, 3), (2, 3)])  # Z → X, Z → Y, X → Y
        >>> find_backdoor_paths(g, 2, 3)
        [[2, 1, 3]]
    """
    validate_node_indices(graph, X=X, Y=Y)
    if X == Y:
        return []

    # Backdoor paths can run in any direction once they leave X.
    undirected = graph._graph.to_undirected(as_view=True)
    without_x = nx.restricted_view(undirected, [X], [])

    backdoor_paths: list[Path] = []
    for parent in graph.in_neighbors(X):
        if parent == Y:
            backdoor_paths.append([X, Y])
            continue
        for path in sorted(_simple_paths(without_x, parent, Y)):
            backdoor_paths.append([X, *path])

    return backdoor_paths


def has_path(graph: CausalGraph, source: int, target: int) -> bool:
    """Check whether a directed path from source to target exists.

    Returns False when source == target.
    """
    validate_node_indices(graph, source=source, target=target)
    if source == target:
        return False
    return nx.has_path(graph._graph, source, target)
