"""
Backdoor criterion.

A set Z satisfies the backdoor criterion relative to (X, Y) if it
blocks every path from X to Y that starts with an arrow into X and
contains no descendant of X.

Reference: Pearl, J. (2009). Causality (2nd ed.), Chapter 3.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from causalid.causal.dseparation import blocks_all_paths
from causalid.core.paths import find_backdoor_paths
from causalid.core.sets import descendants, parents
from causalid.core.validation import validate_causal_graph, validate_node_indices

if TYPE_CHECKING:
    from causalid.core.graph import CausalGraph

logger = logging.getLogger(__name__)


def backdoor_adjustment_set(graph: CausalGraph, X: int, Y: int) -> set[int]:
    """Find a backdoor adjustment set for the effect of X on Y.

    If X has no backdoor paths to Y the empty set is returned. Otherwise
    the parents of X (minus descendants of X) are proposed. This is a
    fast heuristic, not a complete search: it is right whenever the
    parents of the treatment suffice. Use ``minimal_adjustment_set`` or
    ``find_all_adjustment_sets`` when completeness matters.

    Args:
        graph: Directed acyclic graph
        X: Treatment node
        Y: Outcome node

    Returns:
        Set of nodes to adjust for

    Raises:
        StructureError: If the graph is cyclic
        InputError: If X or Y is out of range

    Example:
        >>> g = create_causal_graph([(1, 2), (1, 3), (2, 3)])  # Z → X, Z → Y, X → Y
        >>> backdoor_adjustment_set(g, 2, 3)
        {1}
    """
    validate_causal_graph(graph)
    validate_node_indices(graph, X=X, Y=Y)

    backdoor_paths = find_backdoor_paths(graph, X, Y)
    if not backdoor_paths:
        return set()

    candidate = parents(graph, X) - descendants(graph, X)

    if not blocks_all_paths(graph, candidate, backdoor_paths):
        logger.debug(
            "Parents of %d do not block all %d backdoor paths to %d; returning them anyway",
            X,
            len(backdoor_paths),
            Y,
        )

    return candidate


def is_backdoor_adjustable(graph: CausalGraph, X: int, Y: int) -> bool:
    """Check if the effect of X on Y is identifiable by backdoor adjustment.

    True when a non-empty adjustment set is found or when there are no
    backdoor paths at all (no confounding).
    """
    if backdoor_adjustment_set(graph, X, Y):
        return True
    return not find_backdoor_paths(graph, X, Y)
