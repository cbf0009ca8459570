"""
Frontdoor criterion.

A set M satisfies the frontdoor criterion relative to (X, Y) if:
1. M intercepts all directed paths from X to Y
2. There is no unblocked backdoor path from X to M
3. All backdoor paths from M to Y are blocked by X

Reference: Pearl, J. (2009). Causality (2nd ed.), Chapter 3.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from causalid.causal.dseparation import is_path_blocked
from causalid.core.paths import find_backdoor_paths, find_directed_paths
from causalid.core.sets import NodeOrNodes, as_node_set
from causalid.core.validation import (
    validate_causal_graph,
    validate_node_indices,
    validate_node_set,
)

if TYPE_CHECKING:
    from causalid.core.graph import CausalGraph


def frontdoor_adjustment_set(graph: CausalGraph, X: int, Y: int, M: NodeOrNodes) -> bool:
    """Check if M is a valid frontdoor adjustment set for X → Y.

    Conditions are checked in order and the first failure returns False.

    Args:
        graph: Directed acyclic graph
        X: Treatment node
        Y: Outcome node
        M: Candidate mediator node or node set

    Returns:
        True if M satisfies all three frontdoor conditions

    Example:
        >>> # U → X, U → Y, X → M, M → Y
        >>> g = create_causal_graph([(1, 2), (1, 4), (2, 3), (3, 4)])
        >>> frontdoor_adjustment_set(g, 2, 4, {3})
        True
    """
    validate_causal_graph(graph)
    validate_node_indices(graph, X=X, Y=Y)
    mediators = as_node_set(M)
    validate_node_set(graph, "M", mediators)

    # 1. M intercepts every directed X → Y path
    for path in find_directed_paths(graph, X, Y):
        if mediators.isdisjoint(path) and not is_path_blocked(graph, path, mediators):
            return False

    # 2. every backdoor path from X into M is already blocked (by a collider)
    for m in sorted(mediators):
        for path in find_backdoor_paths(graph, X, m):
            if not is_path_blocked(graph, path, set()):
                return False

    # 3. X blocks every backdoor path from M to Y
    for m in sorted(mediators):
        for path in find_backdoor_paths(graph, m, Y):
            if not is_path_blocked(graph, path, {X}):
                return False

    return True


def find_frontdoor_mediators(graph: CausalGraph, X: int, Y: int) -> list[set[int]]:
    """Find single-node frontdoor mediators between X and Y.

    Candidates are the nodes lying on some directed X → Y path. Only
    singletons are searched; pass larger sets to
    ``frontdoor_adjustment_set`` directly.

    Returns:
        List of ``{node}`` sets, ordered by node id
    """
    validate_causal_graph(graph)
    validate_node_indices(graph, X=X, Y=Y)

    on_paths: set[int] = set()
    for path in find_directed_paths(graph, X, Y):
        on_paths.update(path)
    on_paths -= {X, Y}

    return [
        {node}
        for node in sorted(on_paths)
        if frontdoor_adjustment_set(graph, X, Y, {node})
    ]
