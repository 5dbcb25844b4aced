from pathlib import Path

import pandas as pd
import pytest

from config import SampleSettings
from labelops.errors import SampleFormatError
from labelops.models import Sentiment
from labelops.samples.manager import SampleManager


def write_review_csv(path: Path, rows: list) -> None:
    pd.DataFrame(rows).to_csv(path, index=False)


def test_ingest_from_csv(tmp_path: Path) -> None:
    csv_path = tmp_path / "reviews.csv"
    long_review = " ".join(["great"] * 120)
    write_review_csv(
        csv_path,
        [
            {"review": long_review, "sentiment": "positive"},
            {"review": "  Not for me.  ", "sentiment": "NEGATIVE"},
            {"review": "", "sentiment": "positive"},
            {"review": "Okay-ish", "sentiment": "neutral"},
            {"review": "never read", "sentiment": "positive"},
        ],
    )

    result = SampleManager().ingest_from_csv(csv_path, limit=4)

    assert result.total_rows == 5
    assert result.skipped_count == 1
    assert len(result.samples) == 3

    first, second, third = result.samples
    assert first.word_count == 120
    assert first.complexity_score == 2
    assert first.true_sentiment is Sentiment.POSITIVE
    assert first.source == "imdb"
    assert second.text == "Not for me."
    assert second.true_sentiment is Sentiment.NEGATIVE
    assert second.complexity_score == 1
    # anything that is not "positive" is folded into negative
    assert third.true_sentiment is Sentiment.NEGATIVE


def test_alternate_column_names_and_complexity_cap(tmp_path: Path) -> None:
    csv_path = tmp_path / "reviews.csv"
    write_review_csv(csv_path, [{"text": " ".join(["word"] * 900), "Sentiment": "Positive"}])

    result = SampleManager(SampleSettings(source="upload")).ingest_from_csv(csv_path)

    sample = result.samples[0]
    assert sample.complexity_score == 10
    assert sample.true_sentiment is Sentiment.POSITIVE
    assert sample.source == "upload"


def test_missing_file_and_missing_column(tmp_path: Path) -> None:
    manager = SampleManager()
    with pytest.raises(FileNotFoundError):
        manager.ingest_from_csv(tmp_path / "absent.csv")

    csv_path = tmp_path / "bad.csv"
    write_review_csv(csv_path, [{"body": "hello", "sentiment": "positive"}])
    with pytest.raises(SampleFormatError):
        manager.ingest_from_csv(csv_path)
