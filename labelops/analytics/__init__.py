"""Dashboard metrics computed from persisted labels."""

from .metrics import (
    EdgeCase,
    Overview,
    PerformanceTotals,
    accuracy_chart,
    agreement_rate,
    edge_cases,
    labeler_performance,
    labels_frame,
    overview,
    performance_totals,
)

__all__ = [
    "EdgeCase",
    "Overview",
    "PerformanceTotals",
    "accuracy_chart",
    "agreement_rate",
    "edge_cases",
    "labeler_performance",
    "labels_frame",
    "overview",
    "performance_totals",
]
