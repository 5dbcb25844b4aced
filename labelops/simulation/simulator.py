"""Monte-Carlo generator for per-sample, per-labeler label records."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from config import SimulationSettings
from labelops.errors import SimulationError
from labelops.models.label import LabelRecord
from labelops.models.labeler import Labeler, LabelerRoster
from labelops.models.sample import SampleCatalog, TextSample

from .noise import (
    confidence_score,
    predict_sentiment,
    should_make_error,
    synthesize_timestamp,
    time_spent_seconds,
)
from .random_source import RandomSource, make_random

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SampleAssignment:
    """Labelers drawn for one sample, in draw order."""

    sample: TextSample
    labelers: List[Labeler]


@dataclass(slots=True, frozen=True)
class LabelerStats:
    labeler_id: int
    name: str
    total: int
    correct: int

    @property
    def accuracy(self) -> float:
        return self.correct / self.total if self.total else 0.0


@dataclass
class SimulationResult:
    labels: List[LabelRecord]
    sample_count: int
    assignments: Dict[int, List[int]] = field(default_factory=dict)

    @property
    def correct_count(self) -> int:
        return sum(1 for label in self.labels if label.is_correct)

    @property
    def incorrect_count(self) -> int:
        return len(self.labels) - self.correct_count

    @property
    def accuracy(self) -> float:
        return self.correct_count / len(self.labels) if self.labels else 0.0

    @property
    def average_labels_per_sample(self) -> float:
        return len(self.labels) / self.sample_count if self.sample_count else 0.0

    def labeler_stats(self, roster: LabelerRoster) -> List[LabelerStats]:
        """Per-labeler totals in roster order, including labelers with no labels."""

        totals: Counter = Counter()
        correct: Counter = Counter()
        for label in self.labels:
            totals[label.labeler_id] += 1
            if label.is_correct:
                correct[label.labeler_id] += 1
        return [
            LabelerStats(
                labeler_id=labeler.id,
                name=labeler.name,
                total=totals[labeler.id],
                correct=correct[labeler.id],
            )
            for labeler in roster
        ]


class LabelingSimulator:
    """Assigns labelers to samples and fabricates their annotations."""

    def __init__(
        self,
        settings: Optional[SimulationSettings] = None,
        rng: Optional[RandomSource] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.settings = settings or SimulationSettings()
        self.rng = rng if rng is not None else make_random()
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    def assign(self, roster: LabelerRoster) -> List[Labeler]:
        """Random prefix of a random permutation of the roster."""

        count = self.rng.randint(
            self.settings.min_labels_per_sample, self.settings.max_labels_per_sample
        )
        count = min(count, len(roster))
        return self.rng.sample(list(roster), count)

    def plan(self, roster: LabelerRoster, catalog: SampleCatalog) -> List[SampleAssignment]:
        self._check_roster(roster)
        return [SampleAssignment(sample=sample, labelers=self.assign(roster)) for sample in catalog]

    def label(
        self,
        sample: TextSample,
        labeler: Labeler,
        position: int,
        label_index: int,
        total_labels: int,
        base_time: datetime,
    ) -> LabelRecord:
        settings = self.settings
        make_error = should_make_error(
            labeler.base_accuracy,
            sample.complexity_score,
            self.rng,
            penalty=settings.complexity_penalty,
        )
        predicted = predict_sentiment(sample.true_sentiment, make_error, self.rng)
        time_spent = time_spent_seconds(
            labeler.labels_per_hour,
            self.rng,
            settings.base_time_range,
            settings.reference_throughput,
        )
        confidence = confidence_score(
            not make_error,
            labeler.experience_level,
            self.rng,
            settings.error_confidence_range,
            settings.correct_confidence_floors,
            settings.correct_confidence_ceiling,
        )
        labeled_at = synthesize_timestamp(
            base_time,
            position,
            label_index,
            total_labels,
            self.rng,
            window_days=settings.timestamp_window_days,
            hour_spacing=settings.labeler_hour_spacing,
            max_jitter_minutes=settings.max_jitter_minutes,
        )
        return LabelRecord(
            sample_id=sample.id,
            labeler_id=labeler.id,
            predicted_sentiment=predicted,
            confidence_score=confidence,
            time_spent_seconds=time_spent,
            is_correct=predicted == sample.true_sentiment,
            labeled_at=labeled_at,
        )

    def run(self, roster: LabelerRoster, catalog: SampleCatalog) -> SimulationResult:
        """Generate the full in-memory label set; nothing is written here."""

        assignments = self.plan(roster, catalog)
        total_labels = sum(len(item.labelers) for item in assignments)
        base_time = self.clock()
        logger.info(
            "Generating %d labels for %d samples with %d labelers",
            total_labels,
            len(catalog),
            len(roster),
        )

        labels: List[LabelRecord] = []
        for sample_number, assignment in enumerate(assignments, start=1):
            for position, labeler in enumerate(assignment.labelers):
                labels.append(
                    self.label(
                        assignment.sample,
                        labeler,
                        position,
                        len(labels),
                        total_labels,
                        base_time,
                    )
                )
            if sample_number % self.settings.progress_every == 0:
                logger.info(
                    "Processed %d/%d samples (%d labels generated)",
                    sample_number,
                    len(assignments),
                    len(labels),
                )

        return SimulationResult(
            labels=labels,
            sample_count=len(catalog),
            assignments={
                item.sample.id: [labeler.id for labeler in item.labelers] for item in assignments
            },
        )

    def _check_roster(self, roster: LabelerRoster) -> None:
        minimum = self.settings.min_labels_per_sample
        if len(roster) < minimum:
            raise SimulationError(
                f"need at least {minimum} labelers to assign {minimum} per sample, got {len(roster)}"
            )


__all__ = [
    "LabelerStats",
    "LabelingSimulator",
    "SampleAssignment",
    "SimulationResult",
]
