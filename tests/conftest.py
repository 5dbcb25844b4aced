from dataclasses import replace
from datetime import datetime, timezone
from typing import List

import pytest

from labelops.models import LabelerRoster, SampleCatalog, Sentiment, TextSample
from labelops.roster import default_labelers

FIXED_NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def roster() -> LabelerRoster:
    labelers = [replace(labeler, id=idx) for idx, labeler in enumerate(default_labelers(), start=1)]
    return LabelerRoster.from_records(labelers)


@pytest.fixture
def catalog() -> SampleCatalog:
    sentiments = [Sentiment.POSITIVE, Sentiment.NEGATIVE]
    samples: List[TextSample] = [
        TextSample(
            id=idx,
            text=f"review number {idx}",
            true_sentiment=sentiments[idx % 2],
            complexity_score=idx % 10 + 1,
        )
        for idx in range(1, 201)
    ]
    return SampleCatalog.from_records(samples)


@pytest.fixture
def clock():
    return lambda: FIXED_NOW
