"""Dataclasses describing generated label records."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict

from .sample import Sentiment


@dataclass(slots=True, frozen=True)
class LabelRecord:
    """One annotation produced by one labeler for one sample."""

    sample_id: int
    labeler_id: int
    predicted_sentiment: Sentiment
    confidence_score: float
    time_spent_seconds: int
    is_correct: bool
    labeled_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sample_id": self.sample_id,
            "labeler_id": self.labeler_id,
            "predicted_sentiment": self.predicted_sentiment.value,
            "confidence_score": self.confidence_score,
            "time_spent_seconds": self.time_spent_seconds,
            "is_correct": self.is_correct,
            "labeled_at": self.labeled_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LabelRecord":
        labeled_at = data.get("labeled_at")
        if isinstance(labeled_at, str):
            labeled_at = datetime.fromisoformat(labeled_at.replace("Z", "+00:00"))
        return cls(
            sample_id=int(data["sample_id"]),
            labeler_id=int(data["labeler_id"]),
            predicted_sentiment=Sentiment(str(data["predicted_sentiment"]).lower()),
            confidence_score=float(data["confidence_score"]),
            time_spent_seconds=int(data["time_spent_seconds"]),
            is_correct=bool(data["is_correct"]),
            labeled_at=labeled_at,
        )
