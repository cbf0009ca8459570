"""
Graph and argument validation.

Causal graphs must be directed acyclic graphs. Every public
identification entry point calls into this module before doing any
work so that malformed input fails fast with a descriptive error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import networkx as nx

from causalid.exceptions import InputError, StructureError

if TYPE_CHECKING:
    from causalid.core.graph import CausalGraph


def is_dag(graph: CausalGraph) -> bool:
    """Check if the graph is a directed acyclic graph.

    Uses a topological sort; the empty graph and single-node graphs are
    trivially acyclic.

    Args:
        graph: Graph to test

    Returns:
        True if the graph has no directed cycle
    """
    return nx.is_directed_acyclic_graph(graph._graph)


def validate_causal_graph(graph: CausalGraph) -> bool:
    """Validate that the graph is a DAG.

    Args:
        graph: Graph to validate

    Returns:
        True (always; failures raise)

    Raises:
        StructureError: If the graph contains a directed cycle
    """
    if not is_dag(graph):
        raise StructureError("Graph must be a directed acyclic graph (DAG)")
    return True


def is_node_id(value: Any) -> bool:
    """True for ints that are not bools."""
    return isinstance(value, int) and not isinstance(value, bool)


def validate_node_indices(graph: CausalGraph, **nodes: Any) -> None:
    """Check that every named node id lies in ``[1, node_count]``.

    Args:
        graph: Graph the ids refer to
        **nodes: Node ids keyed by the argument name used in messages

    Raises:
        InputError: Naming every offending value and the valid range

    Example:
        >>> validate_node_indices(g, X=10, Y=3)
        Traceback (most recent call last):
        InputError: Node index X=10 must be in range [1, 3]. Graph has 3 nodes.
    """
    n = graph.node_count
    offending = [
        f"{name}={value!r}"
        for name, value in nodes.items()
        if not is_node_id(value) or not 1 <= value <= n
    ]
    if offending:
        label = "Node index" if len(offending) == 1 else "Node indices"
        raise InputError(
            f"{label} {', '.join(offending)} must be in range [1, {n}]. "
            f"Graph has {n} nodes."
        )


def validate_node_set(graph: CausalGraph, name: str, nodes: set[int]) -> None:
    """Validate every id of a node set, labelling them ``name[i]``."""
    validate_node_indices(
        graph,
        **{f"{name}[{i}]": node for i, node in enumerate(sorted(nodes, key=repr))},
    )
