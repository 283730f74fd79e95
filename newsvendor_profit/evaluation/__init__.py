"""Evaluation metrics module."""

from .metrics import (
    DecisionMetrics,
    critical_ratio_order,
    compute_decision_metrics,
    create_results_summary,
)

__all__ = [
    "DecisionMetrics",
    "critical_ratio_order",
    "compute_decision_metrics",
    "create_results_summary",
]
