"""Typed reads and writes for labelers, samples and labels."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from config import TableSettings
from labelops.errors import SourceReadError, StoreError
from labelops.models.label import LabelRecord
from labelops.models.labeler import Labeler, LabelerRoster
from labelops.models.sample import SampleCatalog, Sentiment, TextSample

from .base import BatchWriteResult, BatchWriter, LabelStore

logger = logging.getLogger(__name__)


class LabelingRepository:
    """Maps store rows onto domain models.

    Read failures are fatal and surface as :class:`SourceReadError`; label
    writes go through a best-effort :class:`BatchWriter`.
    """

    def __init__(self, store: LabelStore, tables: Optional[TableSettings] = None) -> None:
        self.store = store
        self.tables = tables or TableSettings()

    def fetch_labelers(self) -> LabelerRoster:
        rows = self._fetch(self.tables.labelers, order_by="base_accuracy", descending=True)
        try:
            return LabelerRoster.from_records(Labeler.from_dict(row) for row in rows)
        except (KeyError, ValueError) as exc:
            raise SourceReadError(f"invalid labeler row: {exc}") from exc

    def fetch_samples(self) -> SampleCatalog:
        rows = self._fetch(self.tables.samples, order_by="id")
        try:
            return SampleCatalog.from_records(TextSample.from_dict(row) for row in rows)
        except (KeyError, ValueError) as exc:
            raise SourceReadError(f"invalid sample row: {exc}") from exc

    def fetch_labels(self) -> List[LabelRecord]:
        rows = self._fetch(self.tables.labels, order_by="labeled_at")
        try:
            return [LabelRecord.from_dict(row) for row in rows]
        except (KeyError, ValueError) as exc:
            raise SourceReadError(f"invalid label row: {exc}") from exc

    def insert_labelers(self, labelers: Sequence[Labeler]) -> List[Labeler]:
        """Insert the whole roster in one call; a failure here is fatal."""

        rows = [labeler.to_dict() for labeler in labelers]
        returned = self.store.insert_rows(self.tables.labelers, rows, returning=True)
        return [Labeler.from_dict(row) for row in returned]

    def insert_samples(self, samples: Sequence[TextSample], batch_size: int) -> BatchWriteResult:
        writer = BatchWriter(self.store, self.tables.samples, batch_size, returning=True)
        return writer.write([sample.to_dict() for sample in samples])

    def insert_labels(self, labels: Sequence[LabelRecord], batch_size: int) -> BatchWriteResult:
        writer = BatchWriter(self.store, self.tables.labels, batch_size)
        return writer.write([label.to_dict() for label in labels])

    def count(self, table: str) -> int:
        return self.store.count_rows(table)

    def sentiment_counts(self) -> Dict[Sentiment, int]:
        return {
            sentiment: self.store.count_rows(self.tables.samples, {"true_sentiment": sentiment.value})
            for sentiment in (Sentiment.POSITIVE, Sentiment.NEGATIVE)
        }

    def _fetch(self, table: str, order_by: str, descending: bool = False) -> List[Dict]:
        try:
            rows = self.store.fetch_rows(table, order_by=order_by, descending=descending)
        except StoreError as exc:
            raise SourceReadError(f"could not read {table}: {exc.message}") from exc
        logger.debug("Fetched %d rows from %s", len(rows), table)
        return rows
