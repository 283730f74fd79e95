"""Console reporting module."""

from .tables import (
    format_table,
    format_expected_profits,
    format_report,
)

__all__ = [
    "format_table",
    "format_expected_profits",
    "format_report",
]
