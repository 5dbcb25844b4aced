"""Dataclasses describing simulated labelers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, Optional


class ExperienceLevel(str, Enum):
    EXPERT = "expert"
    INTERMEDIATE = "intermediate"
    NOVICE = "novice"


@dataclass(frozen=True)
class Labeler:
    """Simulated annotator profile.

    ``id`` is assigned by the store and stays ``None`` until the profile has
    been inserted.
    """

    name: str
    experience_level: ExperienceLevel
    base_accuracy: float
    labels_per_hour: float
    hourly_rate: float
    id: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "name": self.name,
            "experience_level": self.experience_level.value,
            "base_accuracy": self.base_accuracy,
            "labels_per_hour": self.labels_per_hour,
            "hourly_rate": self.hourly_rate,
        }
        if self.id is not None:
            payload["id"] = self.id
        return payload

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Labeler":
        base_accuracy = float(data["base_accuracy"])
        if not 0.0 <= base_accuracy <= 1.0:
            raise ValueError(f"base_accuracy must be between 0 and 1: {base_accuracy}")
        return cls(
            id=data.get("id"),
            name=str(data["name"]),
            experience_level=ExperienceLevel(str(data["experience_level"]).lower()),
            base_accuracy=base_accuracy,
            labels_per_hour=float(data["labels_per_hour"]),
            hourly_rate=float(data.get("hourly_rate") or 0.0),
        )


@dataclass(frozen=True)
class LabelerRoster:
    """Labelers keyed by id, in the order they were loaded."""

    labelers: Dict[int, Labeler]

    def __iter__(self) -> Iterator[Labeler]:
        return iter(self.labelers.values())

    def __len__(self) -> int:
        return len(self.labelers)

    def __contains__(self, labeler_id: object) -> bool:
        return labeler_id in self.labelers

    def get(self, labeler_id: int) -> Optional[Labeler]:
        return self.labelers.get(labeler_id)

    @classmethod
    def from_records(cls, records: Iterable[Labeler]) -> "LabelerRoster":
        mapping: Dict[int, Labeler] = {}
        for record in records:
            if record.id is None:
                raise ValueError(f"labeler {record.name} has no id; insert it before simulating")
            if record.id in mapping:
                raise ValueError(f"duplicate labeler id: {record.id}")
            mapping[record.id] = record
        return cls(labelers=mapping)
