"""Dataclasses for text samples awaiting annotation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, Optional


class Sentiment(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


MIN_COMPLEXITY = 1
MAX_COMPLEXITY = 10


@dataclass(frozen=True)
class TextSample:
    """Single text with its ground-truth sentiment."""

    text: str
    true_sentiment: Sentiment
    complexity_score: int
    word_count: Optional[int] = None
    source: Optional[str] = None
    id: Optional[int] = None

    def __post_init__(self) -> None:
        if not MIN_COMPLEXITY <= self.complexity_score <= MAX_COMPLEXITY:
            raise ValueError(
                f"complexity_score must be between {MIN_COMPLEXITY} and {MAX_COMPLEXITY}: "
                f"{self.complexity_score}"
            )

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "text": self.text,
            "true_sentiment": self.true_sentiment.value,
            "complexity_score": self.complexity_score,
            "word_count": self.word_count,
            "source": self.source,
        }
        if self.id is not None:
            payload["id"] = self.id
        return payload

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TextSample":
        word_count = data.get("word_count")
        return cls(
            id=data.get("id"),
            text=str(data.get("text") or ""),
            true_sentiment=Sentiment(str(data["true_sentiment"]).lower()),
            complexity_score=int(data["complexity_score"]),
            word_count=int(word_count) if word_count is not None else None,
            source=data.get("source"),
        )


@dataclass(frozen=True)
class SampleCatalog:
    """Samples keyed by id."""

    samples: Dict[int, TextSample]

    def __iter__(self) -> Iterator[TextSample]:
        return iter(self.samples.values())

    def __len__(self) -> int:
        return len(self.samples)

    def get(self, sample_id: int) -> Optional[TextSample]:
        return self.samples.get(sample_id)

    @classmethod
    def from_records(cls, records: Iterable[TextSample]) -> "SampleCatalog":
        mapping: Dict[int, TextSample] = {}
        for record in records:
            if record.id is None:
                raise ValueError("sample has no id; insert it before simulating")
            mapping[record.id] = record
        return cls(samples=mapping)
