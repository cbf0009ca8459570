"""
Pearl's do-calculus rules.

The do-calculus consists of three rules that allow transforming
interventional distributions P(Y|do(X),Z) into observational
distributions P(Y|X,Z) under certain graphical conditions. Each rule
reduces to a d-separation test in a surgically modified graph.

Automatic identification (searching for a sequence of rule
applications) is not implemented; ``is_identifiable`` and
``identify_formula`` raise UnsupportedOperationError.

Reference: Pearl, J. (2009). Causality (2nd ed.). Cambridge University Press.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from causalid.causal.dseparation import d_separated
from causalid.core.sets import NodeOrNodes, as_node_set
from causalid.core.validation import validate_causal_graph, validate_node_set
from causalid.exceptions import UnsupportedOperationError

if TYPE_CHECKING:
    from causalid.core.graph import CausalGraph


class DoCalculusRule(Enum):
    """The three rules of do-calculus."""

    RULE_1 = "insertion_deletion_observations"
    RULE_2 = "action_observation_exchange"
    RULE_3 = "insertion_deletion_interventions"


@dataclass
class RuleApplicationResult:
    """Result of attempting to apply a do-calculus rule.

    Attributes:
        rule: Which rule was attempted
        applicable: Whether the required d-separation holds
        original_expression: The original probabilistic expression
        transformed_expression: The transformed expression (if applicable)
        modified_graph_type: Description of the graph modification used
    """

    rule: DoCalculusRule
    applicable: bool
    original_expression: str
    transformed_expression: str | None
    modified_graph_type: str

    def __str__(self) -> str:
        """String representation of the result."""
        if self.applicable:
            return (
                f"{self.rule.value}: APPLICABLE\n"
                f"  {self.original_expression} = {self.transformed_expression}"
            )
        return f"{self.rule.value}: NOT APPLICABLE\n  {self.original_expression}"


class DoCalculusEngine:
    """Applies the three rules of do-calculus to a causal graph.

    - Rule 1: P(y | do(x), z, w) = P(y | do(x), w)        if Y ⊥ Z | X, W in G_X̄
    - Rule 2: P(y | do(x), do(z), w) = P(y | do(x), z, w) if Y ⊥ Z | X, W in G_X̄,Z̲
    - Rule 3: P(y | do(x), do(z), w) = P(y | do(x), w)    if Y ⊥ Z | X, W in G_X̄,Z̄(W)

    Example:
        >>> engine = DoCalculusEngine(graph)
        >>> result = engine.apply_rule_1(y={3}, x={1}, z={2})
        >>> result.applicable
        False
    """

    def __init__(self, graph: CausalGraph):
        """Initialize the engine with a graph.

        Raises:
            StructureError: If the graph is cyclic
        """
        validate_causal_graph(graph)
        self.graph = graph

    def apply_rule_1(
        self,
        y: NodeOrNodes,
        x: NodeOrNodes,
        z: NodeOrNodes,
        w: NodeOrNodes = None,
    ) -> RuleApplicationResult:
        """Rule 1: insertion/deletion of observations."""
        y, x, z, w = self._normalise(y, x, z, w)

        holds = d_separated(self.graph.mutilated(x), y, z, x | w)

        return RuleApplicationResult(
            rule=DoCalculusRule.RULE_1,
            applicable=holds,
            original_expression=self._expression(y, do=[x], given=[z, w]),
            transformed_expression=self._expression(y, do=[x], given=[w]) if holds else None,
            modified_graph_type="G_X̄ (incoming edges to X removed)",
        )

    def apply_rule_2(
        self,
        y: NodeOrNodes,
        x: NodeOrNodes,
        z: NodeOrNodes,
        w: NodeOrNodes = None,
    ) -> RuleApplicationResult:
        """Rule 2: action/observation exchange."""
        y, x, z, w = self._normalise(y, x, z, w)

        holds = d_separated(self.graph.double_mutilated(x, z), y, z, x | w)

        return RuleApplicationResult(
            rule=DoCalculusRule.RULE_2,
            applicable=holds,
            original_expression=self._expression(y, do=[x, z], given=[w]),
            transformed_expression=self._expression(y, do=[x], given=[z, w]) if holds else None,
            modified_graph_type="G_X̄,Z̲ (incoming to X and outgoing from Z removed)",
        )

    def apply_rule_3(
        self,
        y: NodeOrNodes,
        x: NodeOrNodes,
        z: NodeOrNodes,
        w: NodeOrNodes = None,
    ) -> RuleApplicationResult:
        """Rule 3: insertion/deletion of interventions."""
        y, x, z, w = self._normalise(y, x, z, w)

        holds = d_separated(self.graph.rule_3_graph(x, z, w), y, z, x | w)

        return RuleApplicationResult(
            rule=DoCalculusRule.RULE_3,
            applicable=holds,
            original_expression=self._expression(y, do=[x, z], given=[w]),
            transformed_expression=self._expression(y, do=[x], given=[w]) if holds else None,
            modified_graph_type="G_X̄,Z̄(W) (X incoming removed, Z(W) incoming removed)",
        )

    def _normalise(self, *node_sets: NodeOrNodes) -> list[set[int]]:
        normalised = [as_node_set(nodes) for nodes in node_sets]
        for name, nodes in zip("yxzw", normalised):
            validate_node_set(self.graph, name, nodes)
        return normalised

    def _format_vars(self, nodes: set[int]) -> str:
        names = self.graph.node_names()
        return ", ".join(str(names.get(node, node)) for node in sorted(nodes))

    def _expression(self, y: set[int], do: list[set[int]], given: list[set[int]]) -> str:
        terms = [f"do({self._format_vars(nodes)})" for nodes in do if nodes]
        terms += [self._format_vars(nodes) for nodes in given if nodes]
        if not terms:
            return f"P({self._format_vars(y)})"
        return f"P({self._format_vars(y)} | {', '.join(terms)})"


def is_identifiable(graph: CausalGraph, query: Any) -> bool:
    """Check if a causal query is identifiable via symbolic do-calculus.

    Raises:
        UnsupportedOperationError: Always; symbolic do-calculus is not implemented
    """
    raise UnsupportedOperationError(
        "Symbolic do-calculus is not yet implemented. Use template-based methods "
        "instead: backdoor_adjustment_set(graph, X, Y), "
        "frontdoor_adjustment_set(graph, X, Y, M), or find_instruments(graph, X, Y)."
    )


def identify_formula(graph: CausalGraph, query: Any) -> str:
    """Generate an identification formula for a causal query.

    Raises:
        UnsupportedOperationError: Always; symbolic formula generation is not implemented
    """
    raise UnsupportedOperationError(
        "Symbolic formula generation is not yet implemented. Use "
        "backdoor_adjustment_set or frontdoor_adjustment_set to find an adjustment "
        "set, then apply the standard adjustment formula."
    )
