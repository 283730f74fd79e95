"""
Two-tier newsvendor profit function.

Units that meet demand sell at the primary price, surplus units are
liquidated at the secondary (discount) price, and every ordered unit is
bought at the unit cost:

    profit(q, d) = primary * min(q, d) + secondary * max(0, q - d) - cost * q
"""

from dataclasses import dataclass
from typing import Optional, Union
from numbers import Real
import math
import numpy as np

from ..core.exceptions import InvalidArgumentError
from ..core.grid import as_quantity_array, validate_quantity


DEFAULT_PRIMARY_PRICE = 49_000.00
DEFAULT_SECONDARY_PRICE = 15_000.00
DEFAULT_UNIT_COST = 25_000.00


@dataclass(frozen=True)
class PricingParameters:
    """Two-tier pricing parameters."""
    primary_price: float = DEFAULT_PRIMARY_PRICE
    secondary_price: float = DEFAULT_SECONDARY_PRICE
    unit_cost: float = DEFAULT_UNIT_COST

    def __post_init__(self):
        for name in ("primary_price", "secondary_price", "unit_cost"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Real):
                raise InvalidArgumentError(f"{name} must be a real number, got {value!r}")
            try:
                price = float(value)
            except OverflowError as e:
                raise InvalidArgumentError(f"{name} is too large: {value}") from e
            if not math.isfinite(price) or price <= 0:
                raise InvalidArgumentError(f"{name} must be positive and finite, got {value}")
            # Integer prices would turn the profit arithmetic into int64
            object.__setattr__(self, name, price)

    @property
    def underage_cost(self) -> float:
        """Margin lost per unit of unmet demand: primary - cost."""
        return self.primary_price - self.unit_cost

    @property
    def overage_cost(self) -> float:
        """Loss per surplus unit: cost - secondary."""
        return self.unit_cost - self.secondary_price

    @property
    def critical_ratio(self) -> float:
        """Critical ratio for newsvendor problem: cu / (cu + co)"""
        denominator = self.underage_cost + self.overage_cost
        if denominator == 0:
            return math.nan
        return self.underage_cost / denominator


def _as_quantities(values, name: str) -> np.ndarray:
    arr = np.asarray(values)
    if arr.ndim == 0:
        return np.asarray(validate_quantity(arr.item(), name), dtype=np.int64)
    return as_quantity_array(arr.ravel(), name).reshape(arr.shape)


def newsvendor_profit(
    q: Union[int, np.ndarray],
    d: Union[int, np.ndarray],
    pricing: Optional[PricingParameters] = None
) -> np.ndarray:
    """
    Compute two-tier profit for given order quantities and demands.

    Inputs broadcast against each other like any numpy operation, so an
    ``(n, 1)`` order column and an ``(m,)`` demand row give an ``(n, m)``
    profit matrix.

    Parameters
    ----------
    q : int or np.ndarray
        Order quantities (non-negative integers).
    d : int or np.ndarray
        Demand levels (non-negative integers).
    pricing : PricingParameters, optional
        Prices and unit cost. Defaults to ``PricingParameters()``.

    Returns
    -------
    np.ndarray
        Profit values (float64).

    Raises
    ------
    InvalidArgumentError
        If any order or demand is negative or non-integral.
    """
    pricing = pricing or PricingParameters()
    q = _as_quantities(q, "order")
    d = _as_quantities(d, "demand")

    sold_primary = np.minimum(q, d)
    sold_secondary = np.maximum(0, q - d)
    revenue = (
        pricing.primary_price * sold_primary
        + pricing.secondary_price * sold_secondary
    )
    total_cost = pricing.unit_cost * q
    return revenue - total_cost


def calculate_profit(
    order: int,
    demand: int,
    pricing: Optional[PricingParameters] = None
) -> float:
    """
    Profit of a single (order, demand) pair.

    Returns exactly the same float as the matching cell of
    ``newsvendor_profit`` evaluated on arrays.
    """
    order = validate_quantity(order, "order")
    demand = validate_quantity(demand, "demand")
    return float(newsvendor_profit(order, demand, pricing))
