"""Optimization module for order quantity decisions."""

from .profit import (
    PricingParameters,
    newsvendor_profit,
    calculate_profit,
)
from .matrix import build_profit_matrix
from .expectation import (
    validate_probabilities,
    weight,
    reduce_rows,
    compute_expected_profits,
)
from .optimizer import (
    OptimalDecision,
    optimize,
)

__all__ = [
    "PricingParameters",
    "newsvendor_profit",
    "calculate_profit",
    "build_profit_matrix",
    "validate_probabilities",
    "weight",
    "reduce_rows",
    "compute_expected_profits",
    "OptimalDecision",
    "optimize",
]
