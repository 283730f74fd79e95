"""
Evaluation metrics for order quantity decisions.

This module provides:
- Decision metrics (expected demand, EVPI, value of information)
- Critical-ratio cross-check of the enumerated optimum
- Results summary table
"""

import numpy as np
import pandas as pd
from scipy import stats
from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Any
import logging
import math

from ..core.grid import ArrayLike, as_probability_array, as_quantity_array
from ..core.exceptions import DimensionMismatchError
from ..optimization.expectation import reduce_rows
from ..optimization.optimizer import OptimalDecision
from ..optimization.profit import PricingParameters, newsvendor_profit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecisionMetrics:
    """Container for decision quality metrics."""
    critical_ratio: float
    expected_demand: Optional[float] = None
    expected_value_perfect_information: Optional[float] = None
    value_of_perfect_information: Optional[float] = None
    critical_ratio_order: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "critical_ratio": self.critical_ratio,
            "expected_demand": self.expected_demand,
            "expected_value_perfect_information": self.expected_value_perfect_information,
            "value_of_perfect_information": self.value_of_perfect_information,
            "critical_ratio_order": self.critical_ratio_order,
        }


def _weighted_sum(values: np.ndarray, probs: np.ndarray) -> float:
    return float(reduce_rows((values * probs)[np.newaxis, :])[0])


def critical_ratio_order(
    demands: Sequence[int],
    probabilities: ArrayLike,
    critical_ratio: float
) -> Optional[int]:
    """
    Smallest demand level whose cumulative probability reaches the critical ratio.

    This is the classical newsvendor optimum for a discrete demand
    distribution. Probabilities are normalised first, and duplicate demand
    levels are merged.

    Returns
    -------
    int or None
        The critical-ratio order, or None when there are no demands, the
        probabilities sum to zero, or the ratio is undefined.
    """
    demands = as_quantity_array(demands, "demands")
    probs = as_probability_array(probabilities)
    if len(demands) != len(probs):
        raise DimensionMismatchError(
            f"Got {len(probs)} probabilities for {len(demands)} demand scenarios"
        )

    total = math.fsum(probs)
    if len(demands) == 0 or total <= 0 or not 0 <= critical_ratio <= 1:
        return None

    levels, inverse = np.unique(demands, return_inverse=True)
    pk = np.bincount(inverse, weights=probs) / total

    if critical_ratio == 0:
        return int(levels[0])

    distribution = stats.rv_discrete(values=(levels, pk))
    return int(distribution.ppf(critical_ratio))


def compute_decision_metrics(
    demands: Sequence[int],
    probabilities: ArrayLike,
    decision: Optional[OptimalDecision] = None,
    pricing: Optional[PricingParameters] = None
) -> DecisionMetrics:
    """
    Compute decision metrics for a set of demand scenarios.

    Parameters
    ----------
    demands : Sequence[int]
        Demand levels.
    probabilities : ArrayLike
        Scenario probabilities, index-aligned with ``demands``.
    decision : OptimalDecision, optional
        Enumerated optimum, used for the value of perfect information.
    pricing : PricingParameters, optional
        Prices and unit cost.

    Returns
    -------
    DecisionMetrics
        Computed metrics.
    """
    pricing = pricing or PricingParameters()
    demands = as_quantity_array(demands, "demands")
    probs = as_probability_array(probabilities)
    if len(demands) != len(probs):
        raise DimensionMismatchError(
            f"Got {len(probs)} probabilities for {len(demands)} demand scenarios"
        )

    if len(demands) == 0:
        return DecisionMetrics(critical_ratio=pricing.critical_ratio)

    expected_demand = _weighted_sum(demands.astype(float), probs)

    # With perfect information the order always equals the realised demand
    perfect_profits = newsvendor_profit(demands, demands, pricing)
    evpi = _weighted_sum(perfect_profits, probs)

    value_of_information = None
    if decision is not None:
        value_of_information = evpi - decision.expected_profit

    cr_order = critical_ratio_order(demands, probs, pricing.critical_ratio)
    if decision is not None and cr_order is not None and cr_order != decision.order:
        logger.info(
            f"Critical-ratio order {cr_order} differs from "
            f"enumerated optimum {decision.order} (candidate orders may not cover it)"
        )

    return DecisionMetrics(
        critical_ratio=pricing.critical_ratio,
        expected_demand=expected_demand,
        expected_value_perfect_information=evpi,
        value_of_perfect_information=value_of_information,
        critical_ratio_order=cr_order,
    )


def create_results_summary(
    orders: Sequence[int],
    expected_profits: ArrayLike,
    decision: OptimalDecision
) -> pd.DataFrame:
    """
    Create a summary DataFrame of expected profit per order quantity.

    Parameters
    ----------
    orders : Sequence[int]
        Candidate order quantities.
    expected_profits : ArrayLike
        Expected profit per order.
    decision : OptimalDecision
        Selected optimum.

    Returns
    -------
    pd.DataFrame
        Columns ``order, expected_profit, regret, rank, is_optimal``,
        sorted by rank (1 = best, ties ranked by first occurrence).
    """
    orders = as_quantity_array(orders, "orders")
    profits = np.asarray(expected_profits, dtype=float)
    if len(orders) != len(profits):
        raise DimensionMismatchError(
            f"Got {len(orders)} orders but {len(profits)} expected profits"
        )

    df = pd.DataFrame({
        "order": orders,
        "expected_profit": profits,
    })
    df["regret"] = decision.expected_profit - df["expected_profit"]
    # Stable sort keeps equal profits in their original order
    ranks = np.empty(len(profits), dtype=int)
    ranks[np.argsort(-profits, kind="stable")] = np.arange(1, len(profits) + 1)
    df["rank"] = ranks
    df["is_optimal"] = df.index == decision.index

    return df.sort_values("rank").reset_index(drop=True)
