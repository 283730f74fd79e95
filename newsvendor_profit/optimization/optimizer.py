"""Selection of the order quantity with the highest expected profit."""

from dataclasses import dataclass
from typing import Iterator, Sequence
import logging
import numpy as np

from ..core.exceptions import DimensionMismatchError, EmptyInputError, InvalidArgumentError
from ..core.grid import ArrayLike, as_quantity_array

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OptimalDecision:
    """Winning order quantity and its expected profit."""
    order: int
    expected_profit: float
    index: int

    def __iter__(self) -> Iterator:
        # Unpacks as (order, expected_profit)
        return iter((self.order, self.expected_profit))


def optimize(orders: Sequence[int], expected_profits: ArrayLike) -> OptimalDecision:
    """
    Pick the order quantity with the maximum expected profit.

    Linear scan; a candidate replaces the incumbent only when its expected
    profit is strictly greater, so among equal maxima the first one wins.

    Parameters
    ----------
    orders : Sequence[int]
        Candidate order quantities.
    expected_profits : ArrayLike
        Expected profit of each order, index-aligned with ``orders``.

    Returns
    -------
    OptimalDecision
        The first order quantity achieving the maximum.

    Raises
    ------
    EmptyInputError
        If either sequence is empty.
    DimensionMismatchError
        If the sequences have different lengths.
    InvalidArgumentError
        If an expected profit is NaN.
    """
    orders = as_quantity_array(orders, "orders")
    profits = np.asarray(expected_profits, dtype=float)

    if len(orders) == 0 or profits.size == 0:
        raise EmptyInputError("optimize needs at least one order quantity")
    if profits.ndim != 1 or len(orders) != len(profits):
        raise DimensionMismatchError(
            f"Got {len(orders)} orders but {profits.size} expected profits"
        )
    if np.any(np.isnan(profits)):
        raise InvalidArgumentError("Expected profits must not contain NaN")

    best_index = 0
    best_profit = profits[0]
    for i in range(1, len(profits)):
        if profits[i] > best_profit:
            best_profit = profits[i]
            best_index = i

    decision = OptimalDecision(
        order=int(orders[best_index]),
        expected_profit=float(best_profit),
        index=best_index,
    )
    logger.debug(
        f"Optimal order quantity {decision.order} "
        f"(expected profit {decision.expected_profit:.2f})"
    )
    return decision
