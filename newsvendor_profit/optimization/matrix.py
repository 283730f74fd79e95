"""Profit matrix over the cross product of order quantities and demands."""

from typing import Optional, Sequence
import logging
import numpy as np

from ..core.grid import ProfitGrid, as_quantity_array
from .profit import PricingParameters, newsvendor_profit

logger = logging.getLogger(__name__)


def build_profit_matrix(
    orders: Sequence[int],
    demands: Sequence[int],
    pricing: Optional[PricingParameters] = None
) -> ProfitGrid:
    """
    Create a profit matrix for every combination of orders and demands.

    Parameters
    ----------
    orders : Sequence[int]
        Candidate order quantities (rows). Duplicates are kept as separate rows.
    demands : Sequence[int]
        Demand levels (columns).
    pricing : PricingParameters, optional
        Prices and unit cost.

    Returns
    -------
    ProfitGrid
        Grid of shape ``(len(orders), len(demands))`` where cell ``[i, j]``
        is the profit of ordering ``orders[i]`` when demand is ``demands[j]``.
        Empty orders or demands give an empty grid.
    """
    orders = as_quantity_array(orders, "orders")
    demands = as_quantity_array(demands, "demands")

    # (n, 1) against (1, m) broadcasts to (n, m), including n == 0 or m == 0
    values = newsvendor_profit(orders[:, np.newaxis], demands[np.newaxis, :], pricing)

    logger.debug(f"Built profit matrix of shape {values.shape}")
    return ProfitGrid(values=values, orders=orders, demands=demands)
