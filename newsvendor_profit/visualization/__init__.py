"""Visualization module."""

from .plots import (
    plot_profit_matrix,
    plot_expected_profits,
)

__all__ = [
    "plot_profit_matrix",
    "plot_expected_profits",
]
