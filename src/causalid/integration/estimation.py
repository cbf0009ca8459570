"""
Bridge between identification and effect estimation.

causalid decides *what* to adjust for; estimating the effect from data
is delegated to an external estimator supplied by the caller. This
module prepares the (confounders, identifiable) pair such estimators
need and hands it over.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Hashable, Mapping

from pydantic import BaseModel, ConfigDict

from causalid.core.validation import validate_node_indices
from causalid.exceptions import DependencyMissingError, InputError
from causalid.identification.backdoor import backdoor_adjustment_set, is_backdoor_adjustable

if TYPE_CHECKING:
    from causalid.core.graph import CausalGraph

logger = logging.getLogger(__name__)


class EffectEstimator(ABC):
    """Abstract base class for effect-estimation backends."""

    @abstractmethod
    def estimate(
        self,
        data: Any,
        treatment: Hashable,
        outcome: Hashable,
        confounders: list[Hashable],
        **kwargs: Any,
    ) -> Any:
        """Estimate the effect of ``treatment`` on ``outcome`` adjusting for ``confounders``."""
        pass


class EstimationInputs(BaseModel):
    """Identification result handed to an estimator.

    Attributes:
        treatment: Treatment id, or its name when a name mapping was used
        outcome: Outcome id or name
        confounders: Variables to adjust for, sorted by node id
        is_identifiable: Whether backdoor adjustment identifies the effect
    """

    model_config = ConfigDict(frozen=True)

    treatment: Hashable
    outcome: Hashable
    confounders: list[Hashable]
    is_identifiable: bool


def _label(node: int, node_names: Mapping[int, Hashable] | None) -> Hashable:
    if node_names is None:
        return node
    try:
        return node_names[node]
    except KeyError:
        raise InputError(f"No name given for node {node} in node_names") from None


def prepare_for_estimation(
    graph: CausalGraph,
    X: int,
    Y: int,
    node_names: Mapping[int, Hashable] | None = None,
) -> EstimationInputs:
    """Prepare the adjustment set for an external estimator.

    Args:
        graph: Directed acyclic graph
        X: Treatment node
        Y: Outcome node
        node_names: Optional mapping from node id to name. When given,
            ids are translated; otherwise raw ids are returned.

    Returns:
        EstimationInputs with the confounders and the identifiability flag

    Example:
        >>> g = create_causal_graph([(1, 2), (1, 3), (2, 3)])
        >>> prepare_for_estimation(g, 2, 3, node_names={1: "Z", 2: "X", 3: "Y"})
        EstimationInputs(treatment='X', outcome='Y', confounders=['Z'], is_identifiable=True)
    """
    adjustment = backdoor_adjustment_set(graph, X, Y)
    identifiable = bool(adjustment) or is_backdoor_adjustable(graph, X, Y)

    return EstimationInputs(
        treatment=_label(X, node_names),
        outcome=_label(Y, node_names),
        confounders=[_label(node, node_names) for node in sorted(adjustment)],
        is_identifiable=identifiable,
    )


def get_confounders(
    graph: CausalGraph,
    X: int,
    Y: int,
    node_names: Mapping[int, Hashable] | None = None,
) -> list[Hashable]:
    """Get just the confounders, without the identifiability flag."""
    return prepare_for_estimation(graph, X, Y, node_names=node_names).confounders


def estimate_effect(
    graph: CausalGraph,
    data: Any,
    X: int,
    Y: int,
    estimator: EffectEstimator | None = None,
    node_names: Mapping[int, Hashable] | None = None,
    **kwargs: Any,
) -> Any:
    """Identify the adjustment set and delegate estimation to ``estimator``.

    Node ids are validated before the estimator is checked, so bad
    input is reported first.

    Args:
        graph: Directed acyclic graph
        data: Observational data in whatever form the estimator accepts
        X: Treatment node
        Y: Outcome node
        estimator: Estimation backend
        node_names: Optional mapping from node id to column name
        **kwargs: Passed through to ``estimator.estimate``

    Returns:
        Whatever the estimator returns

    Raises:
        InputError: If X or Y is out of range
        DependencyMissingError: If no estimator is supplied
    """
    validate_node_indices(graph, X=X, Y=Y)

    if estimator is None:
        raise DependencyMissingError(
            "An effect estimator",
            "Pass estimator=<EffectEstimator> to estimate_effect.",
        )

    inputs = prepare_for_estimation(graph, X, Y, node_names=node_names)

    if not inputs.is_identifiable or not inputs.confounders:
        logger.warning(
            "No backdoor adjustment set found for %s -> %s. The effect may not be "
            "identifiable via backdoor adjustment; consider find_frontdoor_mediators "
            "or find_instruments. Proceeding with estimation anyway.",
            inputs.treatment,
            inputs.outcome,
        )

    return estimator.estimate(
        data,
        treatment=inputs.treatment,
        outcome=inputs.outcome,
        confounders=inputs.confounders,
        **kwargs,
    )
