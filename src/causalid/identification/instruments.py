"""
Instrumental variables.

An instrument Z for the effect of X on Y must satisfy:
1. Relevance: Z has a causal effect on X
2. Exclusion: Z affects Y only through X
3. Independence: Z shares no confounders with Y

Reference: Angrist, J. D., & Pischke, J. S. (2009). Mostly Harmless
Econometrics, Chapter 4.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from causalid.core.paths import find_backdoor_paths, find_directed_paths, has_path
from causalid.core.sets import ancestors
from causalid.core.validation import validate_causal_graph, validate_node_indices

if TYPE_CHECKING:
    from causalid.core.graph import CausalGraph


def is_valid_instrument(graph: CausalGraph, Z: int, X: int, Y: int) -> bool:
    """Check if Z is a valid instrumental variable for X → Y.

    The independence check is conservative: any backdoor path between Z
    and Y rejects Z, even if that path would be blocked.

    Args:
        graph: Directed acyclic graph
        Z: Candidate instrument
        X: Treatment node
        Y: Outcome node

    Returns:
        True if Z passes relevance, exclusion and independence

    Example:
        >>> # Z → X → Y, U → X, U → Y
        >>> g = create_causal_graph([(1, 2), (2, 3), (4, 2), (4, 3)])
        >>> is_valid_instrument(g, 1, 2, 3)
        True
    """
    validate_causal_graph(graph)
    validate_node_indices(graph, Z=Z, X=X, Y=Y)

    if not has_path(graph, Z, X):
        return False

    if any(X not in path for path in find_directed_paths(graph, Z, Y)):
        return False

    # Any backdoor path rejects Z, blocked or not.
    if find_backdoor_paths(graph, Z, Y):
        return False

    return True


def find_instruments(graph: CausalGraph, X: int, Y: int) -> list[int]:
    """Find instrumental variables for the effect of X on Y.

    Candidates are the ancestors of X.

    Returns:
        Valid instruments, ordered by node id
    """
    validate_causal_graph(graph)
    validate_node_indices(graph, X=X, Y=Y)

    return [
        z
        for z in sorted(ancestors(graph, X) - {X})
        if is_valid_instrument(graph, z, X, Y)
    ]
