"""
causalid: graphical causal identification on DAGs

Decides which variables to adjust for when estimating the effect of one
variable on another (backdoor, frontdoor, instrumental variables) and
answers conditional-independence queries implied by a causal graph
(d-separation).
"""

__version__ = "0.1.0"

from causalid.exceptions import (
    CausalIdError,
    DependencyMissingError,
    InputError,
    StructureError,
    UnsupportedOperationError,
)
from causalid.core.graph import CausalGraph, create_causal_graph
from causalid.core.validation import is_dag, validate_causal_graph
from causalid.core.sets import ancestors, children, descendants, markov_boundary, parents
from causalid.core.paths import (
    all_simple_paths,
    find_backdoor_paths,
    find_directed_paths,
    has_path,
)
from causalid.causal.dseparation import DSeparationAnalyzer, d_connected, d_separated
from causalid.causal.docalculus import DoCalculusEngine, identify_formula, is_identifiable
from causalid.identification.backdoor import backdoor_adjustment_set, is_backdoor_adjustable
from causalid.identification.frontdoor import find_frontdoor_mediators, frontdoor_adjustment_set
from causalid.identification.instruments import find_instruments, is_valid_instrument
from causalid.identification.adjustment import (
    find_all_adjustment_sets,
    is_valid_adjustment_set,
    minimal_adjustment_set,
)
from causalid.scm.models import GraphSCM, StructuralCausalModel, SymbolicSCM, create_symbolic_scm
from causalid.scm.interventions import (
    Intervention,
    apply_intervention,
    counterfactual_graph,
    do_intervention,
)
from causalid.integration.estimation import (
    EffectEstimator,
    EstimationInputs,
    estimate_effect,
    get_confounders,
    prepare_for_estimation,
)

__all__ = [
    "CausalIdError",
    "StructureError",
    "InputError",
    "UnsupportedOperationError",
    "DependencyMissingError",
    "CausalGraph",
    "create_causal_graph",
    "is_dag",
    "validate_causal_graph",
    "ancestors",
    "descendants",
    "parents",
    "children",
    "markov_boundary",
    "all_simple_paths",
    "find_directed_paths",
    "find_backdoor_paths",
    "has_path",
    "d_separated",
    "d_connected",
    "DSeparationAnalyzer",
    "DoCalculusEngine",
    "is_identifiable",
    "identify_formula",
    "backdoor_adjustment_set",
    "is_backdoor_adjustable",
    "frontdoor_adjustment_set",
    "find_frontdoor_mediators",
    "is_valid_instrument",
    "find_instruments",
    "find_all_adjustment_sets",
    "is_valid_adjustment_set",
    "minimal_adjustment_set",
    "StructuralCausalModel",
    "GraphSCM",
    "SymbolicSCM",
    "create_symbolic_scm",
    "Intervention",
    "do_intervention",
    "apply_intervention",
    "counterfactual_graph",
    "EffectEstimator",
    "EstimationInputs",
    "prepare_for_estimation",
    "get_confounders",
    "estimate_effect",
]
