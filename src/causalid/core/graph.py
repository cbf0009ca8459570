"""
Causal graph storage.

This module provides the CausalGraph class which wraps NetworkX and
exposes the small adjacency interface the identification algorithms
rely on, plus the graph surgery used by do-calculus.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Mapping

import networkx as nx

from causalid.core.validation import is_node_id, validate_causal_graph, validate_node_indices
from causalid.exceptions import InputError, StructureError


class CausalGraph:
    """A directed graph over densely packed node ids ``1..N``.

    This class wraps a NetworkX DiGraph and provides:
    - Neighbour queries (in/out neighbours, edge tests)
    - Construction from edge lists or adjacency mappings
    - Optional display names per node
    - Graph surgery for do-calculus (mutilated graphs)

    Acyclicity is not enforced on every mutation; identification
    functions call ``validate_causal_graph`` before doing any work.

    Example:
        >>> g = CausalGraph(3)
        >>> g.add_edge(1, 2)  # Z → X
        >>> g.add_edge(1, 3)  # Z → Y
        >>> g.add_edge(2, 3)  # X → Y
        >>> g.in_neighbors(3)
        [1, 2]
    """

    def __init__(self, n: int = 0):
        """Initialize a graph with nodes ``1..n`` and no edges.

        Args:
            n: Number of nodes

        Raises:
            InputError: If n is negative
        """
        if not isinstance(n, int) or isinstance(n, bool) or n < 0:
            raise InputError(f"Node count must be a non-negative integer, got {n!r}")
        self._graph: nx.DiGraph = nx.DiGraph()
        self._graph.add_nodes_from(range(1, n + 1))

    # --- Construction ---

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[int, int]], n: int | None = None) -> CausalGraph:
        """Build a graph from ``(source, target)`` pairs.

        Args:
            edges: Iterable of edge pairs
            n: Node count. Defaults to the largest id mentioned in ``edges``.

        Returns:
            A new CausalGraph (not checked for cycles)
        """
        edge_list = [_as_edge(edge) for edge in edges]
        max_node = max((max(src, tgt) for src, tgt in edge_list), default=0)
        graph = cls(max_node if n is None else n)
        for src, tgt in edge_list:
            graph.add_edge(src, tgt)
        return graph

    @classmethod
    def from_adjacency(
        cls,
        adjacency: Mapping[int, Iterable[int]],
        n: int | None = None,
    ) -> CausalGraph:
        """Build a graph from a mapping ``source -> targets``.

        Raises:
            InputError: If a key or target is not an integer id
        """
        sources = [_as_node_id(src) for src in adjacency]
        edges = [_as_edge((src, tgt)) for src, targets in adjacency.items() for tgt in targets]
        if n is None:
            n = max([0, *sources, *(max(e) for e in edges)])
        return cls.from_edges(edges, n=n)

    @classmethod
    def from_networkx(cls, digraph: nx.DiGraph) -> CausalGraph:
        """Wrap a NetworkX DiGraph whose nodes are exactly ``1..N``.

        Node attribute ``name`` is carried over as the display name.

        Raises:
            InputError: If the node labels are not ``1..N``
        """
        n = digraph.number_of_nodes()
        if set(digraph.nodes) != set(range(1, n + 1)):
            raise InputError(
                f"NetworkX graph nodes must be the integers 1..{n}, "
                f"got {sorted(digraph.nodes, key=str)[:10]}"
            )
        graph = cls(n)
        graph._graph.add_edges_from(digraph.edges)
        for node, name in digraph.nodes(data="name"):
            if name is not None:
                graph.set_node_name(node, name)
        return graph

    # --- Node Operations ---

    @property
    def node_count(self) -> int:
        """Get the number of nodes in the graph."""
        return self._graph.number_of_nodes()

    def nodes(self) -> list[int]:
        """Get all node ids in ascending order."""
        return list(range(1, self.node_count + 1))

    def add_node(self, name: Any = None) -> int:
        """Append a new node with id ``N + 1``.

        Args:
            name: Optional display name

        Returns:
            The id of the new node
        """
        node = self.node_count + 1
        self._graph.add_node(node)
        if name is not None:
            self.set_node_name(node, name)
        return node

    def has_node(self, node: int) -> bool:
        """Check if a node id exists in the graph."""
        return node in self._graph

    def set_node_name(self, node: int, name: Any) -> None:
        """Attach a display name to a node."""
        validate_node_indices(self, node=node)
        self._graph.nodes[node]["name"] = name

    def node_name(self, node: int) -> Any | None:
        """Get the display name of a node, or None if it has none."""
        validate_node_indices(self, node=node)
        return self._graph.nodes[node].get("name")

    def node_names(self) -> dict[int, Any]:
        """Get the mapping of node id to display name for named nodes."""
        return {
            node: name
            for node, name in self._graph.nodes(data="name")
            if name is not None
        }

    # --- Edge Operations ---

    @property
    def edge_count(self) -> int:
        """Get the number of edges in the graph."""
        return self._graph.number_of_edges()

    def edges(self) -> list[tuple[int, int]]:
        """Get all edges sorted by (source, target)."""
        return sorted(self._graph.edges)

    def add_edge(self, source: int, target: int) -> None:
        """Add a directed edge ``source → target``.

        Repeated edges are de-duplicated.

        Raises:
            InputError: If either node id is out of range
            StructureError: If source == target (self-loop)
        """
        validate_node_indices(self, source=source, target=target)
        if source == target:
            raise StructureError(f"Self-loop on node {source} is not allowed in a causal graph")
        self._graph.add_edge(source, target)

    def remove_edge(self, source: int, target: int) -> bool:
        """Remove an edge.

        Returns:
            True if the edge was removed, False if it didn't exist
        """
        if self._graph.has_edge(source, target):
            self._graph.remove_edge(source, target)
            return True
        return False

    def has_edge(self, source: int, target: int) -> bool:
        """Check if the edge ``source → target`` exists."""
        return self._graph.has_edge(source, target)

    def in_neighbors(self, node: int) -> list[int]:
        """Direct parents of a node, sorted."""
        return sorted(self._graph.predecessors(node))

    def out_neighbors(self, node: int) -> list[int]:
        """Direct children of a node, sorted."""
        return sorted(self._graph.successors(node))

    # --- Structural Properties ---

    def topological_order(self) -> list[int]:
        """Get nodes in topological order.

        Raises:
            StructureError: If the graph has cycles
        """
        try:
            return list(nx.lexicographical_topological_sort(self._graph))
        except nx.NetworkXUnfeasible as e:
            raise StructureError("Graph must be a directed acyclic graph (DAG)") from e

    def roots(self) -> list[int]:
        """Get all nodes with no incoming edges."""
        return [n for n in self.nodes() if self._graph.in_degree(n) == 0]

    def leaves(self) -> list[int]:
        """Get all nodes with no outgoing edges."""
        return [n for n in self.nodes() if self._graph.out_degree(n) == 0]

    # --- Graph Surgery for Do-Calculus ---

    def mutilated(self, intervention_nodes: Iterable[int]) -> CausalGraph:
        """Create G_X̄: incoming edges to the intervention nodes removed.

        This simulates do(X) by removing all arrows into X.
        """
        mutilated = self.copy()
        for node in set(intervention_nodes):
            if node in mutilated._graph:
                for parent in list(mutilated._graph.predecessors(node)):
                    mutilated._graph.remove_edge(parent, node)
        return mutilated

    def edge_deleted(self, observation_nodes: Iterable[int]) -> CausalGraph:
        """Create G_Z̲: outgoing edges from the observation nodes removed."""
        edge_deleted = self.copy()
        for node in set(observation_nodes):
            if node in edge_deleted._graph:
                for child in list(edge_deleted._graph.successors(node)):
                    edge_deleted._graph.remove_edge(node, child)
        return edge_deleted

    def double_mutilated(
        self,
        intervention_nodes: Iterable[int],
        observation_nodes: Iterable[int],
    ) -> CausalGraph:
        """Create G_X̄,Z̲: incoming to X and outgoing from Z removed.

        Used for Rule 2 of do-calculus.
        """
        return self.mutilated(intervention_nodes).edge_deleted(observation_nodes)

    def rule_3_graph(
        self,
        intervention_nodes: Iterable[int],
        z_nodes: Iterable[int],
        w_nodes: Iterable[int],
    ) -> CausalGraph:
        """Create G_X̄,Z̄(W) for Rule 3 of do-calculus.

        Starting from G_X̄, every Z node that is not an ancestor of some W
        node loses all of its incoming edges. Node ids stay ``1..N``.
        """
        modified = self.mutilated(intervention_nodes)

        w_ancestors: set[int] = set()
        for w_node in set(w_nodes):
            if w_node in modified._graph:
                w_ancestors.update(nx.ancestors(modified._graph, w_node))

        return modified.mutilated(set(z_nodes) - w_ancestors)

    # --- Serialization ---

    def copy(self) -> CausalGraph:
        """Get an independent copy of this graph."""
        clone = CausalGraph.__new__(CausalGraph)
        clone._graph = self._graph.copy()
        return clone

    def to_networkx(self) -> nx.DiGraph:
        """Get a copy of the underlying NetworkX graph."""
        return self._graph.copy()

    def to_dict(self) -> dict[str, Any]:
        """Serialize the graph to a dictionary."""
        return {
            "node_count": self.node_count,
            "edges": [list(edge) for edge in self.edges()],
            "names": {str(k): v for k, v in self.node_names().items()},
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CausalGraph:
        """Create a CausalGraph from the output of ``to_dict``."""
        graph = cls.from_edges((tuple(e) for e in data.get("edges", [])), n=data["node_count"])
        for node, name in data.get("names", {}).items():
            graph.set_node_name(int(node), name)
        return graph

    def __len__(self) -> int:
        """Return the number of nodes in the graph."""
        return self.node_count

    def __contains__(self, node: object) -> bool:
        """Check if a node id is in the graph."""
        return node in self._graph

    def __iter__(self) -> Iterator[int]:
        """Iterate over node ids in ascending order."""
        return iter(self.nodes())

    def __eq__(self, other: object) -> bool:
        """Graphs are equal when node counts and edge sets match."""
        if not isinstance(other, CausalGraph):
            return NotImplemented
        return self.node_count == other.node_count and set(self._graph.edges) == set(other._graph.edges)

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        """String representation of the graph."""
        return f"CausalGraph(nodes={self.node_count}, edges={self.edge_count})"


def _as_edge(edge: Any) -> tuple[int, int]:
    try:
        src, tgt = edge
    except (TypeError, ValueError) as e:
        raise InputError(f"Edge must be a (source, target) pair, got {edge!r}") from e
    return _as_node_id(src), _as_node_id(tgt)


def _as_node_id(node: Any) -> int:
    if not is_node_id(node):
        raise InputError(f"Node ids must be integers, got {node!r}")
    return node


def create_causal_graph(
    edges: Iterable[tuple[int, int]] | Mapping[int, Iterable[int]],
) -> CausalGraph:
    """Create a validated causal graph from an edge specification.

    The node count is the largest id mentioned in the specification.

    Args:
        edges: Either a list of ``(source, target)`` pairs or a mapping
            from source id to a sequence of target ids

    Returns:
        A CausalGraph that is guaranteed to be acyclic

    Raises:
        StructureError: If the resulting graph contains a cycle
        InputError: If an id is not a positive integer

    Example:
        >>> g = create_causal_graph([(1, 2), (1, 3), (2, 3)])
        >>> g = create_causal_graph({1: [2, 3], 2: [3]})  # same graph
    """
    if isinstance(edges, Mapping):
        graph = CausalGraph.from_adjacency(edges)
    else:
        graph = CausalGraph.from_edges(edges)

    validate_causal_graph(graph)
    return graph
