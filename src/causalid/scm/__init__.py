"""Structural causal models and do() interventions."""

from causalid.scm.models import GraphSCM, StructuralCausalModel, SymbolicSCM, create_symbolic_scm
from causalid.scm.interventions import (
    Intervention,
    apply_intervention,
    counterfactual_graph,
    do_intervention,
)

__all__ = [
    "StructuralCausalModel",
    "GraphSCM",
    "SymbolicSCM",
    "create_symbolic_scm",
    "Intervention",
    "do_intervention",
    "apply_intervention",
    "counterfactual_graph",
]
