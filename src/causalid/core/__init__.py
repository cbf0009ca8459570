"""Graph storage, validation, node-set primitives and path enumeration."""

from causalid.core.graph import CausalGraph, create_causal_graph
from causalid.core.validation import is_dag, validate_causal_graph, validate_node_indices
from causalid.core.sets import ancestors, as_node_set, children, descendants, markov_boundary, parents
from causalid.core.paths import all_simple_paths, find_backdoor_paths, find_directed_paths, has_path

__all__ = [
    "CausalGraph",
    "create_causal_graph",
    "is_dag",
    "validate_causal_graph",
    "validate_node_indices",
    "ancestors",
    "as_node_set",
    "children",
    "descendants",
    "markov_boundary",
    "parents",
    "all_simple_paths",
    "find_backdoor_paths",
    "find_directed_paths",
    "has_path",
]
