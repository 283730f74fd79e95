"""
End-to-end profit analysis.

Runs the profit matrix builder, the expectation aggregator and the
optimizer on a CalculatorConfig and bundles the results.
"""

from dataclasses import dataclass
from typing import Optional
import logging
import numpy as np

from configs import CalculatorConfig, get_default_config

from .core.grid import ProfitGrid
from .evaluation.metrics import DecisionMetrics, compute_decision_metrics
from .optimization import (
    OptimalDecision,
    PricingParameters,
    build_profit_matrix,
    compute_expected_profits,
    optimize,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class ProfitAnalysis:
    """Complete results of one analysis run."""
    pricing: PricingParameters
    profit_matrix: ProfitGrid
    expected_values: ProfitGrid
    expected_profits: np.ndarray
    decision: OptimalDecision
    metrics: DecisionMetrics

    @property
    def orders(self) -> np.ndarray:
        return self.profit_matrix.orders

    @property
    def demands(self) -> np.ndarray:
        return self.profit_matrix.demands


def run_profit_analysis(config: Optional[CalculatorConfig] = None) -> ProfitAnalysis:
    """
    Run the full analysis.

    Parameters
    ----------
    config : CalculatorConfig, optional
        Pricing, scenarios and analysis options. Defaults to
        ``get_default_config()``.

    Returns
    -------
    ProfitAnalysis
        Profit matrix, expected value matrix, expected profits, optimal
        decision and decision metrics.

    Raises
    ------
    ProfitCalculatorError
        If any input violates its precondition.
    """
    config = config or get_default_config()
    scenario = config.scenario

    pricing = config.pricing.to_parameters()

    if config.verbose:
        logger.info(
            f"Analysing {len(scenario.orders)} order quantities against "
            f"{len(scenario.demands)} demand scenarios"
        )

    profit_matrix = build_profit_matrix(scenario.orders, scenario.demands, pricing)

    expected_values, expected_profits = compute_expected_profits(
        profit_matrix,
        scenario.probabilities,
        strict=config.analysis.strict_probabilities,
        tolerance=config.analysis.probability_tolerance,
    )
    expected_profits.setflags(write=False)

    decision = optimize(profit_matrix.orders, expected_profits)

    metrics = compute_decision_metrics(
        profit_matrix.demands, scenario.probabilities, decision, pricing
    )

    if config.verbose:
        logger.info(
            f"Optimal order {decision.order} with expected profit "
            f"{decision.expected_profit:.2f}"
        )

    return ProfitAnalysis(
        pricing=pricing,
        profit_matrix=profit_matrix,
        expected_values=expected_values,
        expected_profits=expected_profits,
        decision=decision,
        metrics=metrics,
    )
