"""
Structural causal model containers.

An SCM pairs a causal DAG with structural equations and a set of
exogenous (noise) variables. Two representations exist:

- GraphSCM: equations are plain Python callables keyed by node id
- SymbolicSCM: equations live in a symbolic system (not yet supported)

Both are immutable after construction. No identification algorithm
reads or mutates them; they are inputs to the intervention and
counterfactual placeholders.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Mapping

from causalid.core.graph import CausalGraph
from causalid.core.validation import validate_causal_graph, validate_node_set
from causalid.exceptions import InputError, StructureError, UnsupportedOperationError

StructuralEquation = Callable[[Mapping[int, Any], Mapping[int, Any]], Any]


class StructuralCausalModel(ABC):
    """Abstract base class for structural causal models."""

    graph: CausalGraph
    exogenous: frozenset

    @abstractmethod
    def endogenous(self) -> frozenset:
        """Variables determined by structural equations."""
        pass


@dataclass(frozen=True, eq=False)
class GraphSCM(StructuralCausalModel):
    """A structural causal model with function-based equations.

    Each endogenous variable X is defined by ``X = f_X(Pa(X), U)`` where
    ``f_X`` receives the values of X's parents and of the exogenous
    variables, each keyed by node id.

    Attributes:
        graph: Directed acyclic graph (copied on construction)
        equations: Mapping from node id to its structural equation
        exogenous: Node ids of exogenous variables; they must have no parents

    Example:
        >>> g = create_causal_graph([(2, 1), (1, 3), (4, 3)])
        >>> scm = GraphSCM(
        ...     g,
        ...     equations={1: lambda pa, ex: ex[2], 3: lambda pa, ex: pa[1] + ex[4]},
        ...     exogenous={2, 4},
        ... )
    """

    graph: CausalGraph
    equations: Mapping[int, StructuralEquation] = field(default_factory=dict)
    exogenous: frozenset = frozenset()

    def __post_init__(self) -> None:
        if not isinstance(self.graph, CausalGraph):
            raise InputError(f"graph must be a CausalGraph, got {type(self.graph).__name__}")
        validate_causal_graph(self.graph)

        exogenous = frozenset(self.exogenous)
        validate_node_set(self.graph, "exogenous", exogenous)
        validate_node_set(self.graph, "equations", set(self.equations))

        for node in sorted(exogenous):
            node_parents = self.graph.in_neighbors(node)
            if node_parents:
                raise StructureError(
                    f"Exogenous node {node} must have no incoming edges, "
                    f"but has parents {node_parents}"
                )

        for node, equation in self.equations.items():
            if not callable(equation):
                raise InputError(f"Equation for node {node} must be callable")

        object.__setattr__(self, "graph", self.graph.copy())
        object.__setattr__(self, "equations", MappingProxyType(dict(self.equations)))
        object.__setattr__(self, "exogenous", exogenous)

    def endogenous(self) -> frozenset:
        """Node ids that are not exogenous."""
        return frozenset(self.graph.nodes()) - self.exogenous


@dataclass(frozen=True, eq=False)
class SymbolicSCM(StructuralCausalModel):
    """A structural causal model backed by a symbolic equation system.

    Only a holder: build it with ``create_symbolic_scm`` once symbolic
    support exists.
    """

    graph: CausalGraph
    system: Any = None
    exogenous: frozenset = frozenset()

    def endogenous(self) -> frozenset:
        """Not available until symbolic systems are supported."""
        raise UnsupportedOperationError(
            "Symbolic SCMs are not yet implemented. Use GraphSCM with function-based equations."
        )


def create_symbolic_scm(graph: CausalGraph, equations: Mapping[Any, Any]) -> SymbolicSCM:
    """Create a symbolic SCM from a graph and symbolic equations.

    Raises:
        UnsupportedOperationError: Always; symbolic SCMs are not yet implemented
    """
    raise UnsupportedOperationError(
        "Symbolic SCM creation is not yet implemented. Use GraphSCM with "
        "function-based equations instead."
    )
