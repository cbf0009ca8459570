"""
Intervention operations for the do() operator.

An intervention do(X=x) fixes variable X to value x, breaking all
causal influences on X while preserving X's influence on descendants.
Applying interventions to an SCM and generating counterfactuals are
placeholders; use the graph-based identification functions instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable

from causalid.core.validation import validate_node_indices
from causalid.exceptions import InputError, UnsupportedOperationError
from causalid.scm.models import StructuralCausalModel


@dataclass(frozen=True)
class Intervention:
    """Represents a do() intervention.

    Attributes:
        variable: The node id or variable name being intervened upon
        value: The value being set
    """

    variable: Hashable
    value: Any

    def __str__(self) -> str:
        """String representation of the intervention."""
        return f"do({self.variable} = {self.value})"


def do_intervention(variable: Hashable, value: Any) -> Intervention:
    """Create the intervention ``do(variable = value)``."""
    return Intervention(variable=variable, value=value)


def _check_arguments(scm: Any, intervention: Any) -> None:
    if not isinstance(scm, StructuralCausalModel):
        raise InputError(f"Expected a StructuralCausalModel, got {type(scm).__name__}")
    if not isinstance(intervention, Intervention):
        raise InputError(f"Expected an Intervention, got {type(intervention).__name__}")
    if isinstance(intervention.variable, int):
        validate_node_indices(scm.graph, variable=intervention.variable)


def apply_intervention(scm: StructuralCausalModel, intervention: Intervention) -> StructuralCausalModel:
    """Apply a do() intervention to an SCM.

    Raises:
        InputError: If the arguments are of the wrong type or the variable is out of range
        UnsupportedOperationError: Always, once the arguments are valid
    """
    _check_arguments(scm, intervention)
    raise UnsupportedOperationError(
        "Intervention application is not yet implemented. For identification use "
        "graph-based methods instead (backdoor_adjustment_set, frontdoor_adjustment_set)."
    )


def counterfactual_graph(scm: StructuralCausalModel, intervention: Intervention) -> StructuralCausalModel:
    """Generate the counterfactual model for an intervention.

    Raises:
        InputError: If the arguments are of the wrong type or the variable is out of range
        UnsupportedOperationError: Always, once the arguments are valid
    """
    _check_arguments(scm, intervention)
    raise UnsupportedOperationError(
        "Counterfactual graph generation is not yet implemented; it requires shared "
        "exogenous noise across worlds. Use backdoor_adjustment_set for identification instead."
    )
