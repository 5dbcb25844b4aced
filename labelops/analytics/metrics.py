"""Accuracy, cost and agreement metrics shown on the operations dashboard."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence

import pandas as pd

from labelops.models.label import LabelRecord
from labelops.models.labeler import LabelerRoster
from labelops.models.sample import SampleCatalog

LABEL_COLUMNS = [
    "sample_id",
    "labeler_id",
    "predicted_sentiment",
    "confidence_score",
    "time_spent_seconds",
    "is_correct",
    "labeled_at",
]

PERFORMANCE_COLUMNS = [
    "labeler_id",
    "name",
    "experience_level",
    "total_labels",
    "accuracy",
    "avg_time_seconds",
    "labels_per_hour",
    "hourly_rate",
    "total_cost",
]


@dataclass(frozen=True)
class Overview:
    total_labels: int
    total_samples: int
    total_labelers: int
    overall_accuracy: float


@dataclass(frozen=True)
class PerformanceTotals:
    total_labels: int
    accuracy: float
    avg_time_seconds: int
    labels_per_hour: float
    avg_hourly_rate: float
    total_cost: float


@dataclass(frozen=True)
class EdgeCase:
    """A sample whose labelers disagree."""

    sample_id: int
    text: Optional[str]
    true_sentiment: Optional[str]
    total_labels: int
    agreement_rate: float
    label_counts: Dict[str, int] = field(default_factory=dict)


def labels_frame(labels: Iterable[LabelRecord]) -> pd.DataFrame:
    records = [label.to_dict() for label in labels]
    frame = pd.DataFrame.from_records(records, columns=LABEL_COLUMNS)
    return frame.astype(
        {
            "sample_id": "int64",
            "labeler_id": "int64",
            "confidence_score": "float64",
            "time_spent_seconds": "int64",
            "is_correct": "bool",
        }
    )


def percentage(part: int, whole: int) -> float:
    return round(part / whole * 100, 1) if whole else 0.0


def overview(labels: Sequence[LabelRecord], total_samples: int, total_labelers: int) -> Overview:
    correct = sum(1 for label in labels if label.is_correct)
    return Overview(
        total_labels=len(labels),
        total_samples=total_samples,
        total_labelers=total_labelers,
        overall_accuracy=percentage(correct, len(labels)),
    )


def labeler_performance(roster: LabelerRoster, labels: Sequence[LabelRecord]) -> pd.DataFrame:
    """One row per labeler in roster order, including labelers without labels.

    ``total_cost`` bills the hours implied by the labeler's nominal
    throughput: labels / labels_per_hour * hourly_rate.
    """

    frame = labels_frame(labels)
    grouped = frame.groupby("labeler_id").agg(
        total_labels=("is_correct", "size"),
        correct=("is_correct", "sum"),
        avg_time=("time_spent_seconds", "mean"),
    )

    rows = []
    for labeler in roster:
        if labeler.id in grouped.index:
            stats = grouped.loc[labeler.id]
            total = int(stats["total_labels"])
            correct = int(stats["correct"])
            avg_time = int(round(float(stats["avg_time"])))
        else:
            total, correct, avg_time = 0, 0, 0
        cost = total / labeler.labels_per_hour * labeler.hourly_rate if labeler.labels_per_hour > 0 else 0.0
        rows.append(
            {
                "labeler_id": labeler.id,
                "name": labeler.name,
                "experience_level": labeler.experience_level.value,
                "total_labels": total,
                "accuracy": percentage(correct, total),
                "avg_time_seconds": avg_time,
                "labels_per_hour": labeler.labels_per_hour,
                "hourly_rate": labeler.hourly_rate,
                "total_cost": round(cost, 2),
            }
        )
    return pd.DataFrame(rows, columns=PERFORMANCE_COLUMNS)


def performance_totals(performance: pd.DataFrame) -> PerformanceTotals:
    """Footer row of the performance table.

    Accuracy and time are weighted by each labeler's label count; the hourly
    rate is a plain mean over labelers.
    """

    total = int(performance["total_labels"].sum())
    if total:
        weights = performance["total_labels"]
        accuracy = round(float((performance["accuracy"] * weights).sum()) / total, 1)
        avg_time = int(round(float((performance["avg_time_seconds"] * weights).sum()) / total))
    else:
        accuracy, avg_time = 0.0, 0
    avg_rate = round(float(performance["hourly_rate"].mean()), 2) if len(performance) else 0.0
    return PerformanceTotals(
        total_labels=total,
        accuracy=accuracy,
        avg_time_seconds=avg_time,
        labels_per_hour=float(performance["labels_per_hour"].sum()),
        avg_hourly_rate=avg_rate,
        total_cost=round(float(performance["total_cost"].sum()), 2),
    )


def accuracy_chart(roster: LabelerRoster, labels: Sequence[LabelRecord]) -> pd.DataFrame:
    """Bar-chart series: accuracy per labeler grouped by experience level."""

    performance = labeler_performance(roster, labels)
    chart = pd.DataFrame(
        {
            "name": performance["name"].str.replace("_", " ", n=1, regex=False),
            "accuracy": performance["accuracy"],
            "level": performance["experience_level"],
            "total_labels": performance["total_labels"],
        }
    )
    return chart.sort_values("level", ascending=False, kind="stable").reset_index(drop=True)


def agreement_rate(predictions: Sequence[str]) -> float:
    """Share of predictions matching the most common one, as a percentage."""

    if not predictions:
        return 0.0
    _, top = Counter(predictions).most_common(1)[0]
    return percentage(top, len(predictions))


def edge_cases(
    labels: Sequence[LabelRecord],
    catalog: Optional[SampleCatalog] = None,
    limit: int = 20,
    min_labels: int = 3,
) -> List[EdgeCase]:
    """Most contentious samples first: lowest agreement rate wins."""

    frame = labels_frame(labels)
    cases: List[EdgeCase] = []
    for sample_id, predictions in frame.groupby("sample_id", sort=False)["predicted_sentiment"]:
        values = list(predictions)
        if len(values) < min_labels or len(set(values)) < 2:
            continue
        sample = catalog.get(int(sample_id)) if catalog is not None else None
        cases.append(
            EdgeCase(
                sample_id=int(sample_id),
                text=sample.text if sample else None,
                true_sentiment=sample.true_sentiment.value if sample else None,
                total_labels=len(values),
                agreement_rate=agreement_rate(values),
                label_counts=dict(Counter(values)),
            )
        )
    cases.sort(key=lambda case: case.agreement_rate)
    return cases[:limit]


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
