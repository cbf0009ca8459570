"""
Node-set primitives: ancestors, descendants, parents, children and the
Markov boundary.

All functions accept either a single node id or any iterable of ids and
return a plain ``set[int]``. The queried nodes themselves are never
reported as their own ancestors or descendants.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Union

import networkx as nx

from causalid.core.validation import validate_node_indices

if TYPE_CHECKING:
    from causalid.core.graph import CausalGraph

NodeOrNodes = Union[int, Iterable[int], None]


def as_node_set(nodes: NodeOrNodes) -> set[int]:
    """Normalise a node id, an iterable of ids, or None to a set."""
    if nodes is None:
        return set()
    if isinstance(nodes, int):
        return {nodes}
    return set(nodes)


def _reachable(graph: CausalGraph, nodes: NodeOrNodes, forward: bool) -> set[int]:
    step = nx.descendants if forward else nx.ancestors
    reached: set[int] = set()

    # Union per start node: a start node reachable from another start
    # node is still reported.
    for start in as_node_set(nodes):
        reached.update(step(graph._graph, start))

    return reached


def ancestors(graph: CausalGraph, nodes: NodeOrNodes) -> set[int]:
    """Get all ancestors of the given node(s).

    An ancestor of X is any node with a directed path to X.

    Example:
        >>> g = CausalGraph.from_edges([(1, 3), (2, 3), (3, 4)])
        >>> ancestors(g, 4)
        {1, 2, 3}
    """
    return _reachable(graph, nodes, forward=False)


def descendants(graph: CausalGraph, nodes: NodeOrNodes) -> set[int]:
    """Get all descendants of the given node(s).

    A descendant of X is any node reachable from X by a directed path.
    """
    return _reachable(graph, nodes, forward=True)


def parents(graph: CausalGraph, nodes: NodeOrNodes) -> set[int]:
    """Get the direct parents of the given node(s)."""
    result: set[int] = set()
    for node in as_node_set(nodes):
        result.update(graph.in_neighbors(node))
    return result


def children(graph: CausalGraph, nodes: NodeOrNodes) -> set[int]:
    """Get the direct children of the given node(s)."""
    result: set[int] = set()
    for node in as_node_set(nodes):
        result.update(graph.out_neighbors(node))
    return result


def markov_boundary(graph: CausalGraph, node: int) -> set[int]:
    """Compute the Markov boundary of a node.

    The Markov boundary of Y is the minimal set that renders Y
    independent of every other node: its parents, its children, and the
    other parents of its children.

    Args:
        graph: Directed acyclic graph
        node: Target node

    Returns:
        Set of nodes in the Markov boundary

    Raises:
        InputError: If the node id is out of range

    Example:
        >>> g = CausalGraph.from_edges([(1, 2), (3, 2), (2, 4), (5, 4)])
        >>> markov_boundary(g, 2)
        {1, 3, 4, 5}
    """
    validate_node_indices(graph, Y=node)

    boundary = parents(graph, node)
    node_children = children(graph, node)
    boundary |= node_children
    boundary |= parents(graph, node_children)
    boundary.discard(node)

    return boundary
