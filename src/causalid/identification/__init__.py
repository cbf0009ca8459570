"""Identification strategies: backdoor, frontdoor, instruments, adjustment-set search."""

from causalid.identification.backdoor import backdoor_adjustment_set, is_backdoor_adjustable
from causalid.identification.frontdoor import find_frontdoor_mediators, frontdoor_adjustment_set
from causalid.identification.instruments import find_instruments, is_valid_instrument
from causalid.identification.adjustment import (
    MAX_ADJUSTMENT_SET_SIZE,
    find_all_adjustment_sets,
    is_valid_adjustment_set,
    minimal_adjustment_set,
    powerset,
)

__all__ = [
    "backdoor_adjustment_set",
    "is_backdoor_adjustable",
    "find_frontdoor_mediators",
    "frontdoor_adjustment_set",
    "find_instruments",
    "is_valid_instrument",
    "MAX_ADJUSTMENT_SET_SIZE",
    "find_all_adjustment_sets",
    "is_valid_adjustment_set",
    "minimal_adjustment_set",
    "powerset",
]
