"""
Shared numeric types and input validation.

This module provides:
- Coercion of order/demand sequences into validated integer arrays
- Coercion of probability vectors into float arrays
- ProfitGrid, the immutable rectangular grid used for the profit and
  expected value matrices
"""

from dataclasses import dataclass
from numbers import Integral, Real
from typing import Iterator, List, Sequence, Union
import numpy as np
import pandas as pd

from .exceptions import DimensionMismatchError, InvalidArgumentError


ArrayLike = Union[Sequence[float], np.ndarray]


INT64_MAX = np.iinfo(np.int64).max


def validate_quantity(value, name: str = "quantity") -> int:
    """
    Validate a single order or demand quantity.

    Parameters
    ----------
    value : int
        Candidate quantity. Integral floats (e.g. ``100.0``) are accepted.
    name : str
        Name used in error messages.

    Returns
    -------
    int
        The quantity as a Python int.

    Raises
    ------
    InvalidArgumentError
        If the value is not a non-negative integer that fits in int64.
    """
    if isinstance(value, (bool, np.bool_)):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")

    if isinstance(value, Integral):
        quantity = int(value)
    elif isinstance(value, Real) and float(value).is_integer():
        quantity = int(value)
    else:
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")

    if quantity < 0:
        raise InvalidArgumentError(f"{name} must be non-negative, got {quantity}")
    if quantity > INT64_MAX:
        raise InvalidArgumentError(f"{name} must not exceed {INT64_MAX}, got {quantity}")
    return quantity


def as_quantity_array(values: ArrayLike, name: str = "quantities") -> np.ndarray:
    """
    Convert a sequence of order or demand quantities to a 1-D int64 array.

    The input is never modified; a fresh array is always returned.

    Raises
    ------
    InvalidArgumentError
        If the sequence is not one-dimensional, holds non-integral values,
        negative values or values outside the int64 range.
    """
    try:
        arr = np.asarray(values)
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidArgumentError(f"{name} must be a one-dimensional sequence: {e}") from e

    if arr.ndim != 1:
        raise InvalidArgumentError(f"{name} must be a one-dimensional sequence")
    if arr.size == 0:
        return np.empty(0, dtype=np.int64)

    if arr.dtype.kind == "O":
        # Python ints beyond int64 land here; check each one individually
        return np.array([validate_quantity(v, name) for v in arr], dtype=np.int64)

    if arr.dtype.kind == "u":
        if np.any(arr > INT64_MAX):
            raise InvalidArgumentError(f"{name} must not exceed {INT64_MAX}")
        result = arr.astype(np.int64)
    elif arr.dtype.kind == "i":
        result = arr.astype(np.int64)
    elif arr.dtype.kind == "f":
        if not np.all(np.isfinite(arr)) or not np.all(arr == np.floor(arr)):
            raise InvalidArgumentError(f"{name} must contain integers only")
        if np.any(np.abs(arr) >= 2.0 ** 63):
            raise InvalidArgumentError(f"{name} must not exceed {INT64_MAX}")
        result = arr.astype(np.int64)
    else:
        raise InvalidArgumentError(
            f"{name} must contain integers only, got dtype {arr.dtype}"
        )

    if np.any(result < 0):
        negative = result[result < 0].tolist()
        raise InvalidArgumentError(f"{name} must be non-negative, got {negative}")
    return result


def as_probability_array(values: ArrayLike) -> np.ndarray:
    """Convert a probability vector to a fresh 1-D float64 array."""
    try:
        raw = np.asarray(values)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"Probabilities must be numeric: {e}") from e

    # np.array(["0.5"], dtype=float) parses strings, so reject them up front
    non_numeric = raw.dtype.kind in "USb" or (
        raw.dtype.kind == "O"
        and any(isinstance(v, bool) or not isinstance(v, Real) for v in raw.ravel())
    )
    if non_numeric:
        raise InvalidArgumentError(f"Probabilities must be numeric, got {raw.tolist()!r}")

    arr = np.array(raw, dtype=float)
    if arr.ndim != 1:
        raise InvalidArgumentError("Probabilities must be a one-dimensional sequence")
    return arr


@dataclass(frozen=True, eq=False)
class ProfitGrid:
    """
    Immutable rectangular grid of monetary values.

    Rows are indexed by order quantity, columns by demand scenario. The
    values live in a read-only 2-D array, so equal row lengths are
    guaranteed by construction rather than checked after the fact.
    """
    values: np.ndarray
    orders: np.ndarray
    demands: np.ndarray

    def __post_init__(self):
        values = np.array(self.values, dtype=float)
        orders = as_quantity_array(self.orders, "orders")
        demands = as_quantity_array(self.demands, "demands")

        if values.ndim != 2:
            raise DimensionMismatchError(
                f"Grid values must be two-dimensional, got {values.ndim} dimension(s)"
            )
        if values.shape != (len(orders), len(demands)):
            raise DimensionMismatchError(
                f"Grid shape {values.shape} does not match "
                f"{len(orders)} orders x {len(demands)} demands"
            )

        for arr in (values, orders, demands):
            arr.setflags(write=False)

        object.__setattr__(self, "values", values)
        object.__setattr__(self, "orders", orders)
        object.__setattr__(self, "demands", demands)

    @property
    def shape(self) -> tuple:
        return self.values.shape

    @property
    def n_rows(self) -> int:
        return self.values.shape[0]

    @property
    def n_cols(self) -> int:
        return self.values.shape[1]

    def row(self, i: int) -> np.ndarray:
        """Values of row ``i`` (read-only view)."""
        return self.values[i]

    def column(self, j: int) -> np.ndarray:
        """Values of column ``j`` (read-only view)."""
        return self.values[:, j]

    def __len__(self) -> int:
        return self.n_rows

    def __iter__(self) -> Iterator[np.ndarray]:
        return iter(self.values)

    def __getitem__(self, key):
        return self.values[key]

    def tolist(self) -> List[List[float]]:
        return self.values.tolist()

    def to_frame(self) -> pd.DataFrame:
        """Grid as a DataFrame indexed by order, with one column per demand."""
        return pd.DataFrame(
            self.values,
            index=pd.Index(self.orders, name="order"),
            columns=pd.Index(self.demands, name="demand"),
        )
