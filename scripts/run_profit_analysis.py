#!/usr/bin/env python
"""
Newsvendor Profit Matrix Calculator

Builds the profit matrix for every (order, demand) pair, weights it by the
demand scenario probabilities and reports the order quantity with the
highest expected profit.

Usage:
    python run_profit_analysis.py [--orders Q ...] [--demands D ...]
                                  [--probabilities P ...] [--summary]
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from newsvendor_profit import run_profit_analysis, ProfitAnalysis
from newsvendor_profit.core import ProfitCalculatorError
from newsvendor_profit.evaluation import create_results_summary
from newsvendor_profit.reporting import format_report
from configs import get_default_config, CalculatorConfig


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    defaults = get_default_config()
    parser = argparse.ArgumentParser(description="Newsvendor expected profit analysis")
    parser.add_argument("--orders", type=int, nargs="*", default=defaults.scenario.orders,
                        help="Candidate order quantities")
    parser.add_argument("--demands", type=int, nargs="*", default=defaults.scenario.demands,
                        help="Demand levels")
    parser.add_argument("--probabilities", type=float, nargs="*",
                        default=defaults.scenario.probabilities,
                        help="Probability of each demand level")
    parser.add_argument("--primary-price", type=float, default=defaults.pricing.primary_price,
                        help="Sale price of units that meet demand")
    parser.add_argument("--secondary-price", type=float, default=defaults.pricing.secondary_price,
                        help="Clearance price of surplus units")
    parser.add_argument("--unit-cost", type=float, default=defaults.pricing.unit_cost,
                        help="Purchase cost per ordered unit")
    parser.add_argument("--strict-probabilities", action="store_true",
                        help="Reject probabilities that do not sum to 1")
    parser.add_argument("--summary", action="store_true",
                        help="Also print the ranked summary and decision metrics")
    parser.add_argument("--plot-dir", type=str, default=None,
                        help="Save profit matrix and expected profit figures here")
    parser.add_argument("--verbose", action="store_true", help="Log progress to stderr")
    return parser


def config_from_args(args: argparse.Namespace) -> CalculatorConfig:
    """Create config with command line overrides."""
    config = get_default_config()
    config.scenario.orders = list(args.orders)
    config.scenario.demands = list(args.demands)
    config.scenario.probabilities = list(args.probabilities)
    config.pricing.primary_price = args.primary_price
    config.pricing.secondary_price = args.secondary_price
    config.pricing.unit_cost = args.unit_cost
    config.analysis.strict_probabilities = args.strict_probabilities
    config.plot_dir = args.plot_dir
    config.verbose = args.verbose
    return config


def print_summary(analysis: ProfitAnalysis) -> None:
    summary_df = create_results_summary(
        analysis.orders, analysis.expected_profits, analysis.decision
    )
    print("\n", summary_df.to_string(index=False))

    print("\nDecision metrics:")
    for name, value in analysis.metrics.to_dict().items():
        print(f"  {name}: {value}")


def save_plots(analysis: ProfitAnalysis, plot_dir: str) -> None:
    # Imported lazily so the console report never needs a plotting backend
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt
    from newsvendor_profit.visualization import plot_profit_matrix, plot_expected_profits

    os.makedirs(plot_dir, exist_ok=True)
    figures = [
        plot_profit_matrix(
            analysis.profit_matrix,
            save_path=os.path.join(plot_dir, "profit_matrix.png"),
        ),
        plot_expected_profits(
            analysis.orders, analysis.expected_profits, analysis.decision,
            save_path=os.path.join(plot_dir, "expected_profits.png"),
        ),
    ]
    for fig in figures:
        plt.close(fig)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    config = config_from_args(args)
    try:
        analysis = run_profit_analysis(config)
    except ProfitCalculatorError as e:
        parser.error(str(e))

    print(format_report(analysis), end="")

    if args.summary:
        print_summary(analysis)

    if config.plot_dir:
        save_plots(analysis, config.plot_dir)

    return 0


if __name__ == "__main__":
    sys.exit(main())
