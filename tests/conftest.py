"""Pytest configuration and fixtures for causalid tests."""

import pytest

from causalid.core.graph import CausalGraph, create_causal_graph


@pytest.fixture
def empty_graph():
    """Create a graph with no nodes."""
    return CausalGraph()


@pytest.fixture
def chain_graph():
    """Create a simple chain: A → B → C.

    This is useful for testing basic d-separation in chains.
    """
    graph = create_causal_graph([(1, 2), (2, 3)])
    return graph, {"a": 1, "b": 2, "c": 3}


@pytest.fixture
def fork_graph():
    """Create a fork: A ← B → C.

    This is useful for testing d-separation with common causes.
    """
    graph = create_causal_graph([(2, 1), (2, 3)])
    return graph, {"a": 1, "b": 2, "c": 3}


@pytest.fixture
def collider_graph():
    """Create a collider: A → B ← C.

    This is useful for testing the 'explaining away' phenomenon.
    """
    graph = create_causal_graph([(1, 2), (3, 2)])
    return graph, {"a": 1, "b": 2, "c": 3}


@pytest.fixture
def confounding_graph():
    """Create the classic confounding graph: Z → X, Z → Y, X → Y."""
    graph = create_causal_graph([(1, 2), (1, 3), (2, 3)])
    return graph, {"z": 1, "x": 2, "y": 3}


@pytest.fixture
def frontdoor_graph():
    """Create a front-door graph: U → X, U → Y, X → M, M → Y.

    U is an unobserved confounder; M mediates the whole effect of X.
    """
    graph = create_causal_graph([(1, 2), (1, 4), (2, 3), (3, 4)])
    return graph, {"u": 1, "x": 2, "m": 3, "y": 4}


@pytest.fixture
def instrument_graph():
    """Create an instrumental-variable graph: Z → X → Y, U → X, U → Y."""
    graph = create_causal_graph([(1, 2), (2, 3), (4, 2), (4, 3)])
    return graph, {"z": 1, "x": 2, "y": 3, "u": 4}


@pytest.fixture
def multi_confounder_graph():
    """Create a graph with two confounders: Z1 → X, Z2 → X, Z1 → Y, Z2 → Y, X → Y."""
    graph = create_causal_graph([(1, 2), (3, 2), (1, 4), (3, 4), (2, 4)])
    return graph, {"z1": 1, "x": 2, "z2": 3, "y": 4}


@pytest.fixture
def sprinkler_graph():
    """Create the sprinkler graph.

    Cloudy → Sprinkler, Cloudy → Rain, Sprinkler → WetGrass, Rain → WetGrass
    """
    graph = create_causal_graph([(1, 2), (1, 3), (2, 4), (3, 4)])
    for node, name in {1: "Cloudy", 2: "Sprinkler", 3: "Rain", 4: "WetGrass"}.items():
        graph.set_node_name(node, name)
    return graph, {"cloudy": 1, "sprinkler": 2, "rain": 3, "wet": 4}


@pytest.fixture
def cyclic_graph():
    """Create a graph with a directed cycle: 1 → 2 → 3 → 1."""
    return CausalGraph.from_edges([(1, 2), (2, 3), (3, 1)])
