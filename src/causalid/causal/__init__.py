"""D-separation and do-calculus."""

from causalid.causal.dseparation import (
    ConditionalIndependenceResult,
    DSeparationAnalyzer,
    d_connected,
    d_separated,
    is_path_blocked,
)
from causalid.causal.docalculus import (
    DoCalculusEngine,
    DoCalculusRule,
    RuleApplicationResult,
    identify_formula,
    is_identifiable,
)

__all__ = [
    "ConditionalIndependenceResult",
    "DSeparationAnalyzer",
    "d_connected",
    "d_separated",
    "is_path_blocked",
    "DoCalculusEngine",
    "DoCalculusRule",
    "RuleApplicationResult",
    "identify_formula",
    "is_identifiable",
]
