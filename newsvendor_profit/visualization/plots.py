"""
Visualization module for profit analysis results.

This module provides:
- Profit matrix heatmaps
- Expected profit bar charts with the optimum highlighted
"""

import numpy as np
import matplotlib.pyplot as plt
from typing import Optional, Sequence, Tuple
import logging

from ..core.grid import ProfitGrid
from ..optimization.optimizer import OptimalDecision

logger = logging.getLogger(__name__)


def _save(fig: plt.Figure, save_path: Optional[str]) -> None:
    if save_path:
        fig.savefig(save_path, dpi=300, bbox_inches='tight')
        logger.info(f"Saved: {save_path}")


def plot_profit_matrix(
    grid: ProfitGrid,
    title: str = "Profit Matrix",
    figsize: Tuple[int, int] = (8, 6),
    annotate: bool = True,
    save_path: Optional[str] = None
) -> plt.Figure:
    """
    Plot a profit (or expected value) matrix as a heatmap.

    Parameters
    ----------
    grid : ProfitGrid
        Matrix to plot; rows are orders, columns are demands.
    title : str
        Plot title.
    figsize : Tuple[int, int]
        Figure size.
    annotate : bool
        Write the value of each cell.
    save_path : str, optional
        Path to save the figure.

    Returns
    -------
    plt.Figure
        The figure object.
    """
    fig, ax = plt.subplots(figsize=figsize)

    image = ax.imshow(grid.values, cmap='RdYlGn', aspect='auto')
    fig.colorbar(image, ax=ax, label='Profit')

    ax.set_xticks(np.arange(grid.n_cols))
    ax.set_xticklabels([str(d) for d in grid.demands])
    ax.set_yticks(np.arange(grid.n_rows))
    ax.set_yticklabels([str(q) for q in grid.orders])
    ax.set_xlabel('Demand', fontsize=12)
    ax.set_ylabel('Order Quantity', fontsize=12)
    ax.set_title(title, fontsize=14)

    if annotate:
        for i in range(grid.n_rows):
            for j in range(grid.n_cols):
                ax.text(j, i, f"{grid.values[i, j]:,.0f}", ha='center', va='center', fontsize=8)

    fig.tight_layout()
    _save(fig, save_path)
    return fig


def plot_expected_profits(
    orders: Sequence[int],
    expected_profits: Sequence[float],
    decision: Optional[OptimalDecision] = None,
    title: str = "Expected Profit by Order Quantity",
    figsize: Tuple[int, int] = (8, 5),
    save_path: Optional[str] = None
) -> plt.Figure:
    """
    Bar chart of expected profit per order quantity.

    The optimal order, when given, is drawn in a contrasting colour.
    """
    fig, ax = plt.subplots(figsize=figsize)

    x = np.arange(len(orders))
    colors = ['steelblue'] * len(orders)
    if decision is not None:
        colors[decision.index] = 'darkorange'

    ax.bar(x, expected_profits, color=colors, alpha=0.8)
    ax.set_xticks(x)
    ax.set_xticklabels([str(q) for q in orders])
    ax.axhline(0, color='black', linewidth=0.8)
    ax.set_xlabel('Order Quantity', fontsize=12)
    ax.set_ylabel('Expected Profit', fontsize=12)
    ax.set_title(title, fontsize=14)
    ax.grid(alpha=0.3, axis='y')

    fig.tight_layout()
    _save(fig, save_path)
    return fig
