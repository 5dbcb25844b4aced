"""Ingestion of sentiment-labeled review text from CSV exports."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

import pandas as pd

from config import SampleSettings
from labelops.errors import SampleFormatError
from labelops.models.sample import MAX_COMPLEXITY, MIN_COMPLEXITY, Sentiment, TextSample


@dataclass(slots=True)
class SampleIngestionResult:
    """Outcome of a sample ingestion run."""

    samples: List[TextSample]
    total_rows: int
    skipped_count: int
    errors: List[str] = field(default_factory=list)


class SampleManager:
    """Turns IMDB-style review CSVs into :class:`TextSample` records.

    Only the first ``limit`` rows are considered; empty reviews among them
    are dropped, so fewer than ``limit`` samples may come back.
    """

    TEXT_COLUMNS = ("review", "Review", "text")
    SENTIMENT_COLUMNS = ("sentiment", "Sentiment")

    def __init__(self, settings: Optional[SampleSettings] = None) -> None:
        self.settings = settings or SampleSettings()

    def ingest_from_csv(self, path: Path, limit: Optional[int] = None) -> SampleIngestionResult:
        """Load samples from a CSV file."""

        df = self._read_csv(path)
        rows = df.to_dict(orient="records")
        selected = rows[: limit or self.settings.limit]

        samples: List[TextSample] = []
        errors: List[str] = []
        skipped = 0
        for idx, row in enumerate(selected, start=1):
            text = self._first_value(row, self.TEXT_COLUMNS).strip()
            if not text:
                errors.append(f"row {idx}: empty review text")
                skipped += 1
                continue
            samples.append(self._row_to_sample(text, row))

        return SampleIngestionResult(
            samples=samples,
            total_rows=len(rows),
            skipped_count=skipped,
            errors=errors,
        )

    def complexity_score(self, word_count: int) -> int:
        """Difficulty proxy: one point per ``words_per_complexity_point`` words, clamped to 1-10."""

        return min(MAX_COMPLEXITY, max(MIN_COMPLEXITY, word_count // self.settings.words_per_complexity_point))

    def _read_csv(self, path: Path) -> pd.DataFrame:
        if not path.exists():
            raise FileNotFoundError(f"Sample CSV not found: {path}")

        df = pd.read_csv(path, dtype=str, keep_default_na=False)
        if not any(column in df.columns for column in self.TEXT_COLUMNS):
            raise SampleFormatError(f"missing text column, expected one of: {', '.join(self.TEXT_COLUMNS)}")
        return df

    def _row_to_sample(self, text: str, row: dict) -> TextSample:
        word_count = len(text.split())
        raw_sentiment = self._first_value(row, self.SENTIMENT_COLUMNS).strip().lower()
        sentiment = Sentiment.POSITIVE if raw_sentiment == Sentiment.POSITIVE.value else Sentiment.NEGATIVE
        return TextSample(
            text=text,
            true_sentiment=sentiment,
            complexity_score=self.complexity_score(word_count),
            word_count=word_count,
            source=self.settings.source,
        )

    @staticmethod
    def _first_value(row: dict, columns: Sequence[str]) -> str:
        for column in columns:
            value = row.get(column)
            if not SampleManager._is_missing(value):
                return str(value)
        return ""

    @staticmethod
    def _is_missing(value: object) -> bool:
        if value is None:
            return True
        if isinstance(value, float) and pd.isna(value):
            return True
        if isinstance(value, str) and not value.strip():
            return True
        return False
