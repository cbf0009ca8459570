"""
Exhaustive adjustment-set search.

These functions enumerate candidate subsets and keep those satisfying
the backdoor criterion. The search is exponential in the number of
candidate nodes and is intended for small graphs.
"""

from __future__ import annotations

import logging
from itertools import chain, combinations
from typing import TYPE_CHECKING, Iterable, Iterator, TypeVar

from causalid.causal.dseparation import blocks_all_paths
from causalid.core.paths import find_backdoor_paths
from causalid.core.sets import NodeOrNodes, as_node_set, descendants
from causalid.core.validation import (
    validate_causal_graph,
    validate_node_indices,
    validate_node_set,
)

if TYPE_CHECKING:
    from causalid.core.graph import CausalGraph

logger = logging.getLogger(__name__)

T = TypeVar("T")

MAX_ADJUSTMENT_SET_SIZE = 5


def powerset(items: Iterable[T], max_size: int | None = None) -> Iterator[tuple[T, ...]]:
    """Yield subsets of ``items`` in order of increasing size.

    Example:
        >>> list(powerset([1, 2, 3], max_size=2))
        [(), (1,), (2,), (3,), (1, 2), (1, 3), (2, 3)]
    """
    elements = list(items)
    top = len(elements) if max_size is None else min(max_size, len(elements))
    return chain.from_iterable(combinations(elements, size) for size in range(top + 1))


def is_valid_adjustment_set(graph: CausalGraph, X: int, Y: int, Z: NodeOrNodes) -> bool:
    """Check if Z is a valid adjustment set for X → Y.

    Z must not contain X, Y, or any descendant of X, and must block
    every backdoor path from X to Y.

    Example:
        >>> g = create_causal_graph([(1, 2), (1, 3), (2, 3)])
        >>> is_valid_adjustment_set(g, 2, 3, {1})
        True
        >>> is_valid_adjustment_set(g, 2, 3, {2})
        False
    """
    validate_causal_graph(graph)
    validate_node_indices(graph, X=X, Y=Y)

    z = as_node_set(Z)
    validate_node_set(graph, "Z", z)
    if X in z or Y in z or not z.isdisjoint(descendants(graph, X)):
        return False

    return blocks_all_paths(graph, z, find_backdoor_paths(graph, X, Y))


def find_all_adjustment_sets(
    graph: CausalGraph,
    X: int,
    Y: int,
    max_size: int = MAX_ADJUSTMENT_SET_SIZE,
) -> list[set[int]]:
    """Find all valid adjustment sets for X → Y up to ``max_size`` nodes.

    Candidates are all nodes except X, Y and descendants of X. Subsets
    are tried smallest first, so the result is ordered by size.

    Args:
        graph: Directed acyclic graph
        X: Treatment node
        Y: Outcome node
        max_size: Largest set size to consider

    Returns:
        List of valid adjustment sets
    """
    validate_causal_graph(graph)
    validate_node_indices(graph, X=X, Y=Y)

    candidates = sorted(set(graph.nodes()) - {X, Y} - descendants(graph, X))
    backdoor_paths = find_backdoor_paths(graph, X, Y)
    logger.debug(
        "Searching adjustment sets for %d -> %d over %d candidates (%d backdoor paths)",
        X,
        Y,
        len(candidates),
        len(backdoor_paths),
    )

    return [
        set(subset)
        for subset in powerset(candidates, max_size=max_size)
        if blocks_all_paths(graph, subset, backdoor_paths)
    ]


def minimal_adjustment_set(graph: CausalGraph, X: int, Y: int) -> set[int] | None:
    """Find a smallest valid adjustment set, or None if none exists.

    Ties go to the set that sorts first.
    """
    all_sets = find_all_adjustment_sets(graph, X, Y)
    if not all_sets:
        return None
    return min(all_sets, key=len)
