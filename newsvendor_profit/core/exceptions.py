"""
Exceptions raised by the profit calculator.

All errors are precondition violations detected at the boundary of the
function that owns the invariant. They subclass ValueError so callers that
already guard numeric code with ``except ValueError`` keep working.
"""


class ProfitCalculatorError(ValueError):
    """Base class for all calculator errors."""


class InvalidArgumentError(ProfitCalculatorError):
    """A value is outside its allowed domain (e.g. a negative order quantity)."""


class DimensionMismatchError(ProfitCalculatorError):
    """Two index-aligned sequences have different lengths."""


class EmptyInputError(ProfitCalculatorError):
    """A sequence that needs at least one element is empty."""
