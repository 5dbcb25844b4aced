import random

import pytest

from config import SimulationSettings
from labelops.errors import SimulationError
from labelops.models import LabelerRoster, SampleCatalog, Sentiment, TextSample
from labelops.simulation import LabelingSimulator
from labelops.simulation.noise import adjusted_accuracy


def test_each_sample_gets_five_to_seven_distinct_labelers(roster, catalog, clock) -> None:
    simulator = LabelingSimulator(rng=random.Random(42), clock=clock)
    result = simulator.run(roster, catalog)

    assert set(result.assignments) == {sample.id for sample in catalog}
    for labeler_ids in result.assignments.values():
        assert 5 <= len(labeler_ids) <= 7
        assert len(set(labeler_ids)) == len(labeler_ids)
        assert all(labeler_id in roster for labeler_id in labeler_ids)

    per_sample = {}
    for label in result.labels:
        per_sample.setdefault(label.sample_id, []).append(label.labeler_id)
    assert per_sample == result.assignments


def test_generated_labels_respect_invariants(roster, catalog, clock) -> None:
    result = LabelingSimulator(rng=random.Random(1), clock=clock).run(roster, catalog)

    for label in result.labels:
        truth = catalog.get(label.sample_id).true_sentiment
        assert label.is_correct == (label.predicted_sentiment == truth)
        assert 0.50 <= label.confidence_score <= 0.95
        assert round(label.confidence_score, 2) == label.confidence_score
        assert isinstance(label.time_spent_seconds, int)
        assert label.time_spent_seconds > 0
        assert label.labeled_at < clock()


def test_seeded_runs_are_reproducible(roster, catalog, clock) -> None:
    first = LabelingSimulator(rng=random.Random(99), clock=clock).run(roster, catalog)
    second = LabelingSimulator(rng=random.Random(99), clock=clock).run(roster, catalog)

    assert [label.to_dict() for label in first.labels] == [label.to_dict() for label in second.labels]


def test_per_labeler_accuracy_converges_to_adjusted_accuracy(roster, clock) -> None:
    samples = [
        TextSample(id=idx, text="plot twist", true_sentiment=Sentiment.NEGATIVE, complexity_score=5)
        for idx in range(1, 2001)
    ]
    result = LabelingSimulator(rng=random.Random(2024), clock=clock).run(
        roster, SampleCatalog.from_records(samples)
    )

    for stats in result.labeler_stats(roster):
        labeler = roster.get(stats.labeler_id)
        assert stats.total > 800
        assert stats.accuracy == pytest.approx(adjusted_accuracy(labeler.base_accuracy, 5), abs=0.06)


def test_summary_counts_add_up(roster, catalog, clock) -> None:
    result = LabelingSimulator(rng=random.Random(8), clock=clock).run(roster, catalog)

    assert result.correct_count + result.incorrect_count == len(result.labels)
    assert result.sample_count == len(catalog)
    assert 5 <= result.average_labels_per_sample <= 7
    assert sum(stats.total for stats in result.labeler_stats(roster)) == len(result.labels)


def test_custom_assignment_bounds(roster, catalog, clock) -> None:
    settings = SimulationSettings(min_labels_per_sample=2, max_labels_per_sample=3)
    result = LabelingSimulator(settings, rng=random.Random(4), clock=clock).run(roster, catalog)

    assert all(2 <= len(ids) <= 3 for ids in result.assignments.values())


def test_roster_smaller_than_minimum_is_rejected(roster, catalog, clock) -> None:
    small = LabelerRoster.from_records(list(roster)[:4])

    with pytest.raises(SimulationError):
        LabelingSimulator(rng=random.Random(0), clock=clock).run(small, catalog)
