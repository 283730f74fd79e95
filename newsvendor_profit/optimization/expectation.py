"""
Expectation aggregation over demand scenarios.

This module implements:
- Probability vector validation
- Weighting of a profit matrix by scenario probabilities
- Row reduction into one expected profit per order quantity
"""

from typing import Tuple, Union
import logging
import math
import numpy as np

from ..core.exceptions import DimensionMismatchError, InvalidArgumentError
from ..core.grid import ArrayLike, ProfitGrid, as_probability_array

logger = logging.getLogger(__name__)

DEFAULT_PROBABILITY_TOLERANCE = 1e-9


def validate_probabilities(
    probabilities: ArrayLike,
    strict: bool = False,
    tolerance: float = DEFAULT_PROBABILITY_TOLERANCE
) -> np.ndarray:
    """
    Validate a probability vector.

    Every entry must be finite and lie in [0, 1]. A vector whose sum is not
    1.0 (within ``tolerance``) still produces a probability-weighted sum,
    just not a true expectation; that case is logged as a warning, or
    raised when ``strict`` is set.

    Parameters
    ----------
    probabilities : ArrayLike
        One probability per demand scenario.
    strict : bool
        Raise instead of warning when the vector is not normalised.
    tolerance : float
        Allowed absolute deviation of the sum from 1.0.

    Returns
    -------
    np.ndarray
        The probabilities as a fresh float64 array.

    Raises
    ------
    InvalidArgumentError
        If an entry is non-finite or outside [0, 1], or if ``strict`` is set
        and the vector does not sum to 1.0.
    """
    probs = as_probability_array(probabilities)

    if not np.all(np.isfinite(probs)):
        raise InvalidArgumentError("Probabilities must be finite")
    if np.any((probs < 0) | (probs > 1)):
        raise InvalidArgumentError(
            f"Probabilities must lie in [0, 1], got {probs.tolist()}"
        )

    if probs.size > 0:
        total = math.fsum(probs)
        if abs(total - 1.0) > tolerance:
            message = f"Probabilities sum to {total:.12g}, not 1.0; result is a weighted sum"
            if strict:
                raise InvalidArgumentError(message)
            logger.warning(message)

    return probs


def weight(matrix: ProfitGrid, probabilities: ArrayLike) -> ProfitGrid:
    """
    Multiply each column of the matrix by its scenario probability.

    Parameters
    ----------
    matrix : ProfitGrid
        Profit matrix.
    probabilities : ArrayLike
        One probability per column.

    Returns
    -------
    ProfitGrid
        Expected value matrix, ``cell[i, j] = matrix[i, j] * probabilities[j]``.

    Raises
    ------
    DimensionMismatchError
        If the number of probabilities differs from the column count.
    """
    probs = as_probability_array(probabilities)
    if len(probs) != matrix.n_cols:
        raise DimensionMismatchError(
            f"Got {len(probs)} probabilities for {matrix.n_cols} demand scenarios"
        )

    return ProfitGrid(
        values=matrix.values * probs[np.newaxis, :],
        orders=matrix.orders,
        demands=matrix.demands,
    )


def reduce_rows(weighted: Union[ProfitGrid, np.ndarray]) -> np.ndarray:
    """
    Sum each row of a weighted matrix.

    Columns are accumulated strictly left to right starting from 0.0, so
    ``reduce_rows(w)[i] == sum(w[i])`` holds exactly. A row with no
    columns sums to 0.0.
    """
    values = weighted.values if isinstance(weighted, ProfitGrid) else np.asarray(weighted, dtype=float)
    if values.ndim != 2:
        raise DimensionMismatchError("reduce_rows expects a two-dimensional matrix")

    totals = np.zeros(values.shape[0])
    # np.sum uses pairwise summation; accumulate column by column instead
    for j in range(values.shape[1]):
        totals = totals + values[:, j]
    return totals


def compute_expected_profits(
    matrix: ProfitGrid,
    probabilities: ArrayLike,
    strict: bool = False,
    tolerance: float = DEFAULT_PROBABILITY_TOLERANCE
) -> Tuple[ProfitGrid, np.ndarray]:
    """
    Compute the expected value matrix and the expected profit per order.

    Returns
    -------
    Tuple[ProfitGrid, np.ndarray]
        Expected value matrix and expected profits (one per row).
    """
    probs = validate_probabilities(probabilities, strict=strict, tolerance=tolerance)
    expected_values = weight(matrix, probs)
    expected_profits = reduce_rows(expected_values)

    logger.info(f"Computed expected profits for {len(expected_profits)} order quantities")
    return expected_values, expected_profits
