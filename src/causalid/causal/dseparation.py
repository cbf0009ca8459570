"""
D-separation algorithms for conditional independence testing.

D-separation (directed separation) is a criterion for determining
conditional independence relationships in directed acyclic graphs.
It is fundamental to Pearl's causal inference framework.
"""

from __future__ import annotations

from itertools import combinations
from typing import TYPE_CHECKING, Iterator, Sequence

from pydantic import BaseModel, ConfigDict

from causalid.core.paths import Path, iter_undirected_paths
from causalid.core.sets import NodeOrNodes, ancestors, as_node_set, descendants

if TYPE_CHECKING:
    from causalid.core.graph import CausalGraph


def is_collider(graph: CausalGraph, prev: int, node: int, next_: int) -> bool:
    """True if both path edges around ``node`` point into it."""
    return graph.has_edge(prev, node) and graph.has_edge(next_, node)


def has_descendant_in_set(graph: CausalGraph, node: int, z: set[int]) -> bool:
    """True if some descendant of ``node`` is in ``z`` (collider activation)."""
    return not descendants(graph, node).isdisjoint(z)


def is_path_blocked(graph: CausalGraph, path: Sequence[int], z: NodeOrNodes) -> bool:
    """Check if a path is blocked by the conditioning set Z.

    A path is blocked if some interior node is either:
    1. A collider (A→B←C) where B is NOT in Z and no descendant of B is in Z
    2. A non-collider (chain or fork) that is in Z

    Args:
        graph: Directed acyclic graph
        path: Sequence of node ids
        z: Conditioning set

    Returns:
        True if the path is blocked
    """
    if len(path) < 2:
        return True

    z = as_node_set(z)
    for i in range(1, len(path) - 1):
        prev, node, next_ = path[i - 1], path[i], path[i + 1]

        if is_collider(graph, prev, node, next_):
            if node not in z and not has_descendant_in_set(graph, node, z):
                return True
        elif node in z:
            return True

    return False


def blocks_all_paths(graph: CausalGraph, z: NodeOrNodes, paths: Sequence[Path]) -> bool:
    """True if ``z`` blocks every path in ``paths``."""
    z = as_node_set(z)
    return all(is_path_blocked(graph, path, z) for path in paths)


def find_all_paths(graph: CausalGraph, x: NodeOrNodes, y: NodeOrNodes) -> Iterator[Path]:
    """Yield undirected simple paths from any node in X to any node in Y.

    Pairs with x == y are skipped.
    """
    y = as_node_set(y)
    for source in sorted(as_node_set(x)):
        for target in sorted(y):
            if source != target:
                yield from iter_undirected_paths(graph, source, target)


def d_separated(
    graph: CausalGraph,
    x: NodeOrNodes,
    y: NodeOrNodes,
    z: NodeOrNodes = None,
) -> bool:
    """Test if X and Y are d-separated given Z.

    Two sets of nodes X and Y are d-separated by Z if every path
    between any node in X and any node in Y is blocked by Z. A node is
    trivially d-separated from itself, and nodes in disconnected
    components are always d-separated.

    Node ids are not range-checked here; callers validate first.

    Args:
        graph: Directed acyclic graph
        x: Source node or node set
        y: Target node or node set
        z: Conditioning set (optional, defaults to the empty set)

    Returns:
        True if X and Y are d-separated given Z

    Example:
        >>> g = CausalGraph.from_edges([(1, 2), (2, 3)])  # A → B → C
        >>> d_separated(g, 1, 3)
        False
        >>> d_separated(g, 1, 3, {2})
        True
    """
    z = as_node_set(z)
    # Stops at the first unblocked path.
    return all(is_path_blocked(graph, path, z) for path in find_all_paths(graph, x, y))


def d_connected(
    graph: CausalGraph,
    x: NodeOrNodes,
    y: NodeOrNodes,
    z: NodeOrNodes = None,
) -> bool:
    """Test if X and Y are d-connected (not d-separated) given Z."""
    return not d_separated(graph, x, y, z)


class ConditionalIndependenceResult(BaseModel):
    """Detailed answer to a conditional independence query."""

    model_config = ConfigDict(frozen=True)

    x: int
    y: int
    given: frozenset[int]
    is_independent: bool
    explanation: str


class DSeparationAnalyzer:
    """Implements d-separation queries bound to a single graph.

    D-separation is the key graphical criterion for determining when
    variables are conditionally independent given a set of observed variables.

    Two nodes X and Y are d-separated by a set Z if all paths between X and Y
    are "blocked" by Z. A path is blocked if it contains:
    1. A chain (A→B→C) where B is in Z
    2. A fork (A←B→C) where B is in Z
    3. A collider (A→B←C) where B is NOT in Z and no descendant of B is in Z

    Example:
        >>> analyzer = DSeparationAnalyzer(graph)
        >>> is_indep = analyzer.is_d_separated({x}, {y}, {z})
    """

    def __init__(self, graph: CausalGraph):
        """Initialize the analyzer with a graph.

        Args:
            graph: The CausalGraph to analyze
        """
        self.graph = graph

    def is_d_separated(self, x: NodeOrNodes, y: NodeOrNodes, z: NodeOrNodes = None) -> bool:
        """Test if X and Y are d-separated given Z."""
        return d_separated(self.graph, x, y, z)

    def is_d_connected(self, x: NodeOrNodes, y: NodeOrNodes, z: NodeOrNodes = None) -> bool:
        """Test if X and Y are d-connected given Z."""
        return d_connected(self.graph, x, y, z)

    def check_conditional_independence(
        self,
        x: int,
        y: int,
        given: NodeOrNodes = None,
    ) -> ConditionalIndependenceResult:
        """Check conditional independence and return detailed results.

        Args:
            x: First node
            y: Second node
            given: Conditioning set

        Returns:
            ConditionalIndependenceResult with the verdict and an explanation
        """
        given = as_node_set(given)
        is_sep = self.is_d_separated(x, y, given)

        if is_sep:
            explanation = (
                f"{x} and {y} are conditionally independent given {sorted(given)}. "
                "All paths between them are blocked."
            )
        else:
            explanation = (
                f"{x} and {y} are NOT conditionally independent given {sorted(given)}. "
                "There exists at least one unblocked (d-connected) path."
            )

        return ConditionalIndependenceResult(
            x=x,
            y=y,
            given=frozenset(given),
            is_independent=is_sep,
            explanation=explanation,
        )

    def get_all_d_separators(
        self,
        x: NodeOrNodes,
        y: NodeOrNodes,
        max_size: int | None = None,
    ) -> list[set[int]]:
        """Find all d-separators between X and Y up to a maximum size.

        Candidates are ancestors of X ∪ Y, excluding X and Y themselves.
        If the empty set separates, it is the only separator returned.

        Args:
            x: Source node set
            y: Target node set
            max_size: Maximum size of separator sets to consider

        Returns:
            List of d-separator sets, smallest first
        """
        x, y = as_node_set(x), as_node_set(y)

        if self.is_d_separated(x, y, set()):
            return [set()]

        candidates = sorted(ancestors(self.graph, x | y) - x - y)
        max_size = len(candidates) if max_size is None else min(max_size, len(candidates))

        separators: list[set[int]] = []
        for size in range(1, max_size + 1):
            for subset in combinations(candidates, size):
                z = set(subset)
                if self.is_d_separated(x, y, z):
                    separators.append(z)

        return separators
