"""Hand-off of identification results to external effect estimators."""

from causalid.integration.estimation import (
    EffectEstimator,
    EstimationInputs,
    estimate_effect,
    get_confounders,
    prepare_for_estimation,
)

__all__ = [
    "EffectEstimator",
    "EstimationInputs",
    "estimate_effect",
    "get_confounders",
    "prepare_for_estimation",
]
