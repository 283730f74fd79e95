"""Shared numeric types, validation and exceptions."""

from .exceptions import (
    ProfitCalculatorError,
    InvalidArgumentError,
    DimensionMismatchError,
    EmptyInputError,
)
from .grid import (
    ProfitGrid,
    validate_quantity,
    as_quantity_array,
    as_probability_array,
)

__all__ = [
    "ProfitCalculatorError",
    "InvalidArgumentError",
    "DimensionMismatchError",
    "EmptyInputError",
    "ProfitGrid",
    "validate_quantity",
    "as_quantity_array",
    "as_probability_array",
]
