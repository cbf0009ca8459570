"""Unit tests for CausalGraph and graph validation."""

import networkx as nx
import pytest

from causalid.core.graph import CausalGraph, create_causal_graph
from causalid.core.validation import (
    is_dag,
    validate_causal_graph,
    validate_node_indices,
)
from causalid.exceptions import CausalIdError, InputError, StructureError


class TestCausalGraphBasics:
    """Basic tests for CausalGraph."""

    def test_create_empty_graph(self):
        """Create an empty graph."""
        graph = CausalGraph()

        assert graph.node_count == 0
        assert graph.edge_count == 0
        assert graph.nodes() == []

    def test_create_with_nodes(self):
        """Nodes are numbered 1..n."""
        graph = CausalGraph(4)

        assert graph.node_count == 4
        assert graph.nodes() == [1, 2, 3, 4]
        assert len(graph) == 4
        assert 4 in graph
        assert 5 not in graph

    def test_negative_node_count(self):
        """A negative node count is rejected."""
        with pytest.raises(InputError):
            CausalGraph(-1)

    def test_add_node(self):
        """New nodes get the next id."""
        graph = CausalGraph(2)

        node = graph.add_node(name="Age")

        assert node == 3
        assert graph.node_count == 3
        assert graph.node_name(3) == "Age"

    def test_node_names(self):
        """Display names are optional per node."""
        graph = CausalGraph(3)
        graph.set_node_name(1, "Smoking")

        assert graph.node_name(1) == "Smoking"
        assert graph.node_name(2) is None
        assert graph.node_names() == {1: "Smoking"}

    def test_set_name_out_of_range(self):
        """Naming a missing node fails."""
        graph = CausalGraph(2)

        with pytest.raises(InputError):
            graph.set_node_name(3, "Missing")


class TestCausalGraphEdges:
    """Tests for edge operations."""

    def test_add_edge(self):
        """Add an edge between nodes."""
        graph = CausalGraph(2)
        graph.add_edge(1, 2)

        assert graph.edge_count == 1
        assert graph.has_edge(1, 2)
        assert not graph.has_edge(2, 1)

    def test_duplicate_edges_are_merged(self):
        """Adding the same edge twice keeps one edge."""
        graph = CausalGraph(2)
        graph.add_edge(1, 2)
        graph.add_edge(1, 2)

        assert graph.edge_count == 1

    def test_self_loop_rejected(self):
        """Self-loops are structural errors."""
        graph = CausalGraph(2)

        with pytest.raises(StructureError):
            graph.add_edge(1, 1)

    def test_edge_out_of_range(self):
        """Edges must connect existing nodes."""
        graph = CausalGraph(2)

        with pytest.raises(InputError, match="target=3"):
            graph.add_edge(1, 3)

    def test_remove_edge(self):
        """Remove an edge, and report missing edges."""
        graph = CausalGraph.from_edges([(1, 2)])

        assert graph.remove_edge(1, 2) is True
        assert graph.remove_edge(1, 2) is False
        assert graph.edge_count == 0

    def test_neighbors_are_sorted(self):
        """In/out neighbours come back in ascending order."""
        graph = CausalGraph.from_edges([(3, 4), (1, 4), (2, 4), (4, 6), (4, 5)])

        assert graph.in_neighbors(4) == [1, 2, 3]
        assert graph.out_neighbors(4) == [5, 6]

    def test_edge_round_trip(self):
        """Neighbour queries reproduce the de-duplicated edge set."""
        edges = [(1, 2), (1, 3), (2, 3), (1, 2), (3, 5)]
        graph = CausalGraph.from_edges(edges)

        rebuilt = {
            (parent, node)
            for node in graph.nodes()
            for parent in graph.in_neighbors(node)
        }
        assert rebuilt == set(edges)
        assert graph.edges() == sorted(set(edges))
        assert graph.node_count == 5


class TestConstruction:
    """Tests for the alternative constructors."""

    def test_create_from_edge_list(self):
        """The node count defaults to the largest id."""
        graph = create_causal_graph([(1, 2), (2, 3)])

        assert graph.node_count == 3
        assert graph.edges() == [(1, 2), (2, 3)]

    def test_create_from_mapping(self):
        """An adjacency mapping builds the same graph as an edge list."""
        from_mapping = create_causal_graph({1: [2, 3], 2: [3]})
        from_list = create_causal_graph([(1, 2), (1, 3), (2, 3)])

        assert from_mapping == from_list

    def test_mapping_with_isolated_source(self):
        """Keys without targets still count towards the node total."""
        graph = CausalGraph.from_adjacency({1: [2], 4: []})

        assert graph.node_count == 4
        assert graph.edges() == [(1, 2)]

    def test_create_rejects_cycle(self):
        """create_causal_graph refuses cyclic input."""
        with pytest.raises(StructureError, match="DAG"):
            create_causal_graph([(1, 2), (2, 3), (3, 1)])

    def test_create_rejects_bad_ids(self):
        """Ids below 1 are input errors."""
        with pytest.raises(InputError):
            create_causal_graph([(0, 1)])

    def test_non_integer_ids(self):
        """String or float ids are input errors, not TypeErrors."""
        with pytest.raises(InputError, match="'a'"):
            CausalGraph.from_adjacency({"a": [2]})
        with pytest.raises(InputError):
            CausalGraph.from_adjacency({1: ["2"]})
        with pytest.raises(InputError):
            create_causal_graph({1: [2], "3": []})
        with pytest.raises(InputError):
            create_causal_graph([(1, 2), ("2", 3)])
        with pytest.raises(InputError):
            CausalGraph.from_edges([(1, 2.0)])

    def test_malformed_edge(self):
        """Edges must be pairs."""
        with pytest.raises(InputError):
            CausalGraph.from_edges([(1, 2, 3)])

    def test_from_networkx(self):
        """Wrap a NetworkX DiGraph, keeping node names."""
        digraph = nx.DiGraph()
        digraph.add_node(1, name="Z")
        digraph.add_nodes_from([2, 3])
        digraph.add_edges_from([(1, 2), (1, 3), (2, 3)])

        graph = CausalGraph.from_networkx(digraph)

        assert graph.edges() == [(1, 2), (1, 3), (2, 3)]
        assert graph.node_name(1) == "Z"

    def test_from_networkx_rejects_labels(self):
        """NetworkX graphs must be labelled 1..N."""
        digraph = nx.DiGraph([("a", "b")])

        with pytest.raises(InputError):
            CausalGraph.from_networkx(digraph)

    def test_to_networkx_is_a_copy(self):
        """Mutating the exported graph leaves the original alone."""
        graph = CausalGraph.from_edges([(1, 2)])

        exported = graph.to_networkx()
        exported.add_edge(2, 1)

        assert not graph.has_edge(2, 1)


class TestSerialization:
    """Tests for dictionary serialization."""

    def test_round_trip(self, sprinkler_graph):
        """to_dict and from_dict preserve structure and names."""
        graph, _ = sprinkler_graph

        data = graph.to_dict()
        restored = CausalGraph.from_dict(data)

        assert restored == graph
        assert restored.node_names() == graph.node_names()
        assert data["node_count"] == 4

    def test_repr(self, confounding_graph):
        """The repr summarises size."""
        graph, _ = confounding_graph

        assert repr(graph) == "CausalGraph(nodes=3, edges=3)"


class TestStructure:
    """Tests for structural queries."""

    def test_topological_order(self, confounding_graph):
        """Parents come before children."""
        graph, _ = confounding_graph

        assert graph.topological_order() == [1, 2, 3]

    def test_topological_order_cycle(self, cyclic_graph):
        """Cycles make topological order undefined."""
        with pytest.raises(StructureError):
            cyclic_graph.topological_order()

    def test_roots_and_leaves(self, frontdoor_graph):
        """Roots have no parents, leaves no children."""
        graph, ids = frontdoor_graph

        assert graph.roots() == [ids["u"]]
        assert graph.leaves() == [ids["y"]]


class TestGraphSurgery:
    """Tests for the mutilated graphs used by do-calculus."""

    def test_mutilated(self, confounding_graph):
        """G_X̄ drops edges into X."""
        graph, ids = confounding_graph

        mutilated = graph.mutilated({ids["x"]})

        assert mutilated.edges() == [(1, 3), (2, 3)]
        assert mutilated.node_count == graph.node_count
        assert graph.edge_count == 3

    def test_edge_deleted(self, confounding_graph):
        """G_Z̲ drops edges out of Z."""
        graph, ids = confounding_graph

        assert graph.edge_deleted({ids["x"]}).edges() == [(1, 2), (1, 3)]

    def test_double_mutilated(self, frontdoor_graph):
        """G_X̄,Z̲ combines both removals."""
        graph, ids = frontdoor_graph

        modified = graph.double_mutilated({ids["x"]}, {ids["m"]})

        assert modified.edges() == [(1, 4), (2, 3)]

    def test_rule_3_graph_keeps_node_ids(self, chain_graph):
        """Z nodes outside An(W) lose their parents but stay in the graph."""
        graph, ids = chain_graph

        modified = graph.rule_3_graph(set(), {ids["b"]}, set())

        assert modified.node_count == 3
        assert modified.edges() == [(2, 3)]

    def test_rule_3_graph_spares_ancestors_of_w(self, chain_graph):
        """Z nodes that are ancestors of W keep their incoming edges."""
        graph, ids = chain_graph

        modified = graph.rule_3_graph(set(), {ids["b"]}, {ids["c"]})

        assert modified == graph


class TestValidation:
    """Tests for DAG and index validation."""

    def test_empty_graph_is_dag(self, empty_graph):
        """The empty graph is trivially acyclic."""
        assert is_dag(empty_graph)
        assert is_dag(CausalGraph(1))

    def test_cycle_is_not_dag(self, cyclic_graph):
        """A directed cycle fails the DAG check."""
        assert not is_dag(cyclic_graph)

        with pytest.raises(StructureError, match="directed acyclic graph"):
            validate_causal_graph(cyclic_graph)

    def test_valid_graph(self, chain_graph):
        """validate_causal_graph returns True for DAGs."""
        graph, _ = chain_graph

        assert validate_causal_graph(graph) is True

    def test_index_message(self, chain_graph):
        """The message names the argument, the value and the range."""
        graph, _ = chain_graph

        with pytest.raises(InputError) as exc_info:
            validate_node_indices(graph, X=10, Y=3)

        message = str(exc_info.value)
        assert "X=10" in message
        assert "[1, 3]" in message
        assert "Y=3" not in message

    def test_index_lists_all_offenders(self, chain_graph):
        """Every bad index is reported at once."""
        graph, _ = chain_graph

        with pytest.raises(InputError, match="X=0, Y=4"):
            validate_node_indices(graph, X=0, Y=4)

    def test_non_integer_ids(self, chain_graph):
        """Strings and booleans are not node ids."""
        graph, _ = chain_graph

        with pytest.raises(InputError):
            validate_node_indices(graph, X="1")
        with pytest.raises(InputError):
            validate_node_indices(graph, X=True)

    def test_errors_share_base_class(self):
        """All library errors derive from CausalIdError and ValueError."""
        assert issubclass(StructureError, CausalIdError)
        assert issubclass(InputError, ValueError)
