import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

import pandas as pd

from config import Settings
from labelops.analytics import (
    EdgeCase,
    Overview,
    accuracy_chart,
    edge_cases,
    labeler_performance,
    overview,
)
from labelops.models.labeler import Labeler, LabelerRoster
from labelops.models.sample import Sentiment
from labelops.roster import default_labelers, tier_breakdown
from labelops.samples import SampleIngestionResult, SampleManager
from labelops.simulation import LabelingSimulator, RandomSource, SimulationResult
from labelops.storage import BatchWriteResult, LabelingRepository

logger = logging.getLogger(__name__)


@dataclass
class SampleLoadReport:
    ingestion: SampleIngestionResult
    write: BatchWriteResult
    sentiment_counts: Dict[Sentiment, int] = field(default_factory=dict)


@dataclass
class SimulationReport:
    roster: LabelerRoster
    result: SimulationResult
    write: Optional[BatchWriteResult] = None

    @property
    def inserted(self) -> int:
        return self.write.inserted if self.write else 0


@dataclass
class DashboardReport:
    overview: Overview
    performance: pd.DataFrame
    chart: pd.DataFrame
    edge_cases: List[EdgeCase]


class SeedingPipeline:
    """End-to-end seeding: labelers -> samples -> simulated labels -> report."""

    def __init__(
        self,
        repository: LabelingRepository,
        settings: Optional[Settings] = None,
        rng: Optional[RandomSource] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.repository = repository
        self.settings = settings or Settings()
        self.rng = rng
        self.clock = clock

    def create_labelers(self, labelers: Optional[Sequence[Labeler]] = None) -> List[Labeler]:
        """Insert the roster in one call. Store errors propagate and end the run."""

        profiles = list(labelers) if labelers is not None else default_labelers()
        logger.info("Creating %d labelers", len(profiles))
        for labeler in profiles:
            logger.info(
                "  %s: level=%s accuracy=%.1f%% speed=%s/h rate=$%.2f/h",
                labeler.name,
                labeler.experience_level.value,
                labeler.base_accuracy * 100,
                labeler.labels_per_hour,
                labeler.hourly_rate,
            )

        created = self.repository.insert_labelers(profiles)
        logger.info("Successfully created %d labelers", len(created))
        for level, tier in tier_breakdown(profiles).items():
            logger.info(
                "  %s: %d (%.0f-%.0f%% accuracy)",
                level.value,
                tier.count,
                tier.min_accuracy * 100,
                tier.max_accuracy * 100,
            )
        return created

    def load_samples(self, csv_path: Path, limit: Optional[int] = None) -> SampleLoadReport:
        """Read review CSV and upload samples in batches; failed batches are skipped."""

        manager = SampleManager(self.settings.samples)
        ingestion = manager.ingest_from_csv(csv_path, limit=limit)
        logger.info(
            "Prepared %d samples from %d rows (%d skipped)",
            len(ingestion.samples),
            ingestion.total_rows,
            ingestion.skipped_count,
        )

        write = self.repository.insert_samples(ingestion.samples, self.settings.samples.batch_size)
        logger.info("Loaded %d/%d text samples", write.inserted, write.attempted)

        counts = self.repository.sentiment_counts()
        for sentiment, count in counts.items():
            logger.info("  %s: %d", sentiment.value, count)
        return SampleLoadReport(ingestion=ingestion, write=write, sentiment_counts=counts)

    def simulate(self, dry_run: bool = False) -> SimulationReport:
        """Generate labels for every stored sample and upload them.

        Source reads raise :class:`SourceReadError`; upload failures only
        drop the affected batch.
        """

        catalog = self.repository.fetch_samples()
        logger.info("Found %d text samples", len(catalog))
        roster = self.repository.fetch_labelers()
        logger.info("Found %d labelers", len(roster))

        simulator = LabelingSimulator(self.settings.simulation, rng=self.rng, clock=self.clock)
        result = simulator.run(roster, catalog)
        logger.info("Generated %d labels", len(result.labels))

        write: Optional[BatchWriteResult] = None
        if dry_run:
            logger.info("Dry run: skipping upload")
        else:
            write = self.repository.insert_labels(result.labels, self.settings.simulation.batch_size)
            logger.info("Successfully inserted %d/%d labels", write.inserted, write.attempted)
            if write.failures:
                logger.warning(
                    "Failed batches: %s",
                    ", ".join(str(failure.batch_number) for failure in write.failures),
                )

        report = SimulationReport(roster=roster, result=result, write=write)
        self._log_statistics(report)
        return report

    def report(self, edge_case_limit: int = 20) -> DashboardReport:
        """Recompute dashboard metrics from what is stored."""

        roster = self.repository.fetch_labelers()
        catalog = self.repository.fetch_samples()
        labels = self.repository.fetch_labels()
        return DashboardReport(
            overview=overview(labels, total_samples=len(catalog), total_labelers=len(roster)),
            performance=labeler_performance(roster, labels),
            chart=accuracy_chart(roster, labels),
            edge_cases=edge_cases(labels, catalog, limit=edge_case_limit),
        )

    def _log_statistics(self, report: SimulationReport) -> None:
        result = report.result
        logger.info(
            "Labeling statistics: total=%d correct=%d incorrect=%d accuracy=%.1f%% avg/sample=%.1f",
            len(result.labels),
            result.correct_count,
            result.incorrect_count,
            result.accuracy * 100,
            result.average_labels_per_sample,
        )
        for stats in result.labeler_stats(report.roster):
            logger.info("  %s: %d labels, %.1f%% accurate", stats.name, stats.total, stats.accuracy * 100)
