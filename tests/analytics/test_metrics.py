from datetime import datetime, timezone
from typing import List

import pandas as pd
import pytest

from labelops.analytics import (
    accuracy_chart,
    agreement_rate,
    edge_cases,
    labeler_performance,
    overview,
    performance_totals,
)
from labelops.models import LabelRecord, SampleCatalog, Sentiment, TextSample

NOW = datetime(2024, 6, 1, tzinfo=timezone.utc)
POS, NEG, NEU = Sentiment.POSITIVE, Sentiment.NEGATIVE, Sentiment.NEUTRAL


def make_label(sample_id: int, labeler_id: int, predicted: Sentiment, truth: Sentiment, seconds: int = 60) -> LabelRecord:
    return LabelRecord(
        sample_id=sample_id,
        labeler_id=labeler_id,
        predicted_sentiment=predicted,
        confidence_score=0.8,
        time_spent_seconds=seconds,
        is_correct=predicted == truth,
        labeled_at=NOW,
    )


def disputed_labels() -> List[LabelRecord]:
    return [
        # sample 1: two of three agree
        make_label(1, 1, POS, POS),
        make_label(1, 2, POS, POS),
        make_label(1, 3, NEG, POS),
        # sample 2: three-way split
        make_label(2, 1, POS, NEG),
        make_label(2, 2, NEG, NEG),
        make_label(2, 3, NEU, NEG),
        # sample 3: unanimous
        make_label(3, 1, NEG, NEG),
        make_label(3, 2, NEG, NEG),
        make_label(3, 3, NEG, NEG),
        # sample 4: disagreement but too few labels
        make_label(4, 1, POS, POS),
        make_label(4, 2, NEG, POS),
    ]


def test_labeler_performance_accuracy_time_and_cost(roster) -> None:
    labels = [
        make_label(1, 1, POS, POS, seconds=30),
        make_label(2, 1, NEG, NEG, seconds=60),
        make_label(3, 1, NEU, POS, seconds=90),
    ]

    frame = labeler_performance(roster, labels)
    alice = frame[frame["name"] == "Expert_Alice"].iloc[0]
    jack = frame[frame["name"] == "Novice_Jack"].iloc[0]

    assert list(frame["name"])[:2] == ["Expert_Alice", "Expert_Bob"]
    assert alice["total_labels"] == 3
    assert alice["accuracy"] == pytest.approx(66.7)
    assert alice["avg_time_seconds"] == 60
    assert alice["total_cost"] == pytest.approx(3 / 10.0 * 25.0)
    assert jack["total_labels"] == 0
    assert jack["accuracy"] == 0.0
    assert jack["total_cost"] == 0.0


def test_accuracy_chart_groups_by_level_and_renames(roster) -> None:
    chart = accuracy_chart(roster, [make_label(1, 1, POS, POS)])

    assert list(chart["level"].unique()) == ["novice", "intermediate", "expert"]
    assert "Expert Alice" in set(chart["name"])
    assert chart.loc[chart["name"] == "Expert Alice", "accuracy"].iloc[0] == 100.0


def test_agreement_rate() -> None:
    assert agreement_rate(["positive", "positive", "negative"]) == pytest.approx(66.7)
    assert agreement_rate(["positive"]) == 100.0
    assert agreement_rate([]) == 0.0


def test_edge_cases_ranked_by_lowest_agreement() -> None:
    catalog = SampleCatalog.from_records(
        [
            TextSample(id=1, text="fine I guess", true_sentiment=POS, complexity_score=2),
            TextSample(id=2, text="hard to say", true_sentiment=NEG, complexity_score=7),
        ]
    )

    cases = edge_cases(disputed_labels(), catalog)

    assert [case.sample_id for case in cases] == [2, 1]
    assert cases[0].agreement_rate == pytest.approx(33.3)
    assert cases[0].label_counts == {"positive": 1, "negative": 1, "neutral": 1}
    assert cases[0].text == "hard to say"
    assert cases[1].agreement_rate == pytest.approx(66.7)
    assert cases[1].true_sentiment == "positive"


def test_edge_cases_limit_and_missing_catalog() -> None:
    cases = edge_cases(disputed_labels(), limit=1)

    assert len(cases) == 1
    assert cases[0].text is None


def test_overview_and_empty_inputs(roster) -> None:
    summary = overview(disputed_labels(), total_samples=4, total_labelers=3)

    assert summary.total_labels == 11
    assert summary.overall_accuracy == pytest.approx(round(7 / 11 * 100, 1))
    assert overview([], 0, 0).overall_accuracy == 0.0
    assert labeler_performance(roster, [])["total_labels"].sum() == 0
    assert edge_cases([]) == []


def test_performance_totals_weight_by_label_count() -> None:
    performance = pd.DataFrame(
        [
            {"total_labels": 10, "accuracy": 90.0, "avg_time_seconds": 40, "labels_per_hour": 10.0, "hourly_rate": 25.0, "total_cost": 25.0},
            {"total_labels": 30, "accuracy": 70.0, "avg_time_seconds": 80, "labels_per_hour": 5.0, "hourly_rate": 10.0, "total_cost": 60.0},
            {"total_labels": 0, "accuracy": 0.0, "avg_time_seconds": 0, "labels_per_hour": 8.0, "hourly_rate": 15.0, "total_cost": 0.0},
        ]
    )

    totals = performance_totals(performance)

    assert totals.total_labels == 40
    assert totals.accuracy == 75.0
    assert totals.avg_time_seconds == 70
    assert totals.labels_per_hour == 23.0
    assert totals.avg_hourly_rate == pytest.approx(16.67)
    assert totals.total_cost == 85.0


def test_performance_totals_without_labels(roster) -> None:
    totals = performance_totals(labeler_performance(roster, []))

    assert totals.total_labels == 0
    assert totals.accuracy == 0.0
    assert totals.avg_time_seconds == 0
    assert totals.total_cost == 0.0
