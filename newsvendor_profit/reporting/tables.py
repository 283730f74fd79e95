"""
Console report formatting.

Fixed-width tables with a 12-character label column and 11-character
right-aligned numeric columns, values to two decimals.
"""

from typing import List, Sequence, TYPE_CHECKING
import numpy as np

from ..core.grid import ProfitGrid

if TYPE_CHECKING:
    from ..pipeline import ProfitAnalysis


LABEL_WIDTH = 12
CELL_WIDTH = 11
CORNER_LABEL = "Order\\Demand"

PROFIT_MATRIX_TITLE = "Profit Matrix"
EXPECTED_VALUES_TITLE = "Expected Values (eij*qj)"


def format_table(
    orders: Sequence[int],
    demands: Sequence[int],
    matrix,
    title: str
) -> str:
    """
    Format a matrix as a table with one row per order and one column per demand.

    Parameters
    ----------
    orders : Sequence[int]
        Row labels.
    demands : Sequence[int]
        Column labels.
    matrix : ProfitGrid or array-like
        Values, one row per order.
    title : str
        Line printed above the table.

    Returns
    -------
    str
        The table, newline-terminated.
    """
    values = matrix.values if isinstance(matrix, ProfitGrid) else np.asarray(matrix, dtype=float)

    lines = [title]
    header = f"{CORNER_LABEL:<{LABEL_WIDTH}}"
    header += "".join(f"{int(demand):>{CELL_WIDTH}}" for demand in demands)
    lines.append(header)

    for order, row in zip(orders, values):
        label = f"Order {int(order)}"
        line = f"{label:<{LABEL_WIDTH}}"
        line += "".join(f"{value:>{CELL_WIDTH}.2f}" for value in row)
        lines.append(line)

    return "\n".join(lines) + "\n"


def format_expected_profits(orders: Sequence[int], expected_profits: Sequence[float]) -> str:
    """One ``For Order ...`` line per order quantity."""
    lines = ["Expected Profits:"]
    for order, profit in zip(orders, expected_profits):
        lines.append(f"For Order {int(order)}: Expected Profit = {profit:.2f} dollars")
    return "\n".join(lines) + "\n"


def format_report(analysis: "ProfitAnalysis") -> str:
    """Full console report for a completed analysis."""
    orders = analysis.profit_matrix.orders
    demands = analysis.profit_matrix.demands
    decision = analysis.decision

    sections: List[str] = [
        format_table(orders, demands, analysis.profit_matrix, PROFIT_MATRIX_TITLE),
        format_table(orders, demands, analysis.expected_values, EXPECTED_VALUES_TITLE),
        format_expected_profits(orders, analysis.expected_profits),
        (
            f"Optimal order quantity: {decision.order}\n"
            f"Optimal expected profit: {decision.expected_profit:.2f} dollars\n"
        ),
    ]
    return "\n".join(sections)
