"""Configuration loader for the labeling-ops seeder."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml
from pydantic import BaseModel, Field, PositiveFloat, PositiveInt, field_validator, model_validator


CONFIG_PATH = Path(__file__).resolve().parent / "settings.yaml"

EXPERIENCE_LEVELS = ("expert", "intermediate", "novice")


class SimulationSettings(BaseModel):
    """Knobs for the labeling simulation.

    batch_size: label records per write call.
    min_labels_per_sample / max_labels_per_sample: inclusive bounds on how
        many distinct labelers annotate one sample.
    base_time_range: [min, max) handling time in seconds before the speed
        adjustment.
    error_confidence_range: [min, max) confidence drawn for incorrect labels.
    correct_confidence_floors: lower confidence bound for correct labels, by
        experience level; the upper bound is correct_confidence_ceiling.
    complexity_penalty: relative accuracy loss at complexity 10.
    reference_throughput: labels/hour that maps to a speed factor of 1.0.
    timestamp_window_days: how far back synthetic timestamps reach.
    """

    batch_size: PositiveInt = 500
    min_labels_per_sample: PositiveInt = 5
    max_labels_per_sample: PositiveInt = 7
    base_time_range: Tuple[PositiveFloat, PositiveFloat] = (30.0, 180.0)
    error_confidence_range: Tuple[float, float] = (0.50, 0.75)
    correct_confidence_floors: Dict[str, float] = Field(
        default_factory=lambda: {"expert": 0.85, "intermediate": 0.75, "novice": 0.65}
    )
    correct_confidence_ceiling: float = 0.95
    complexity_penalty: float = 0.15
    reference_throughput: PositiveFloat = 10.0
    timestamp_window_days: PositiveInt = 7
    labeler_hour_spacing: int = Field(default=2, ge=0)
    max_jitter_minutes: float = Field(default=120.0, ge=0)
    progress_every: PositiveInt = 100

    @field_validator("base_time_range")
    @classmethod
    def validate_time_range(cls, value: Tuple[float, float]) -> Tuple[float, float]:
        low, high = value
        if low > high:
            raise ValueError("base_time_range must be ordered [min, max]")
        return value

    @field_validator("error_confidence_range")
    @classmethod
    def validate_confidence_range(cls, value: Tuple[float, float]) -> Tuple[float, float]:
        low, high = value
        if not 0.0 <= low <= high <= 1.0:
            raise ValueError("error_confidence_range must be ordered and within [0, 1]")
        return value

    @field_validator("correct_confidence_floors")
    @classmethod
    def validate_floors(cls, value: Dict[str, float]) -> Dict[str, float]:
        missing = set(EXPERIENCE_LEVELS).difference(value)
        if missing:
            raise ValueError(f"missing confidence floors for: {', '.join(sorted(missing))}")
        for level, floor in value.items():
            if not 0.0 <= floor <= 1.0:
                raise ValueError(f"confidence floor for {level} must be between 0 and 1")
        return value

    @field_validator("correct_confidence_ceiling", "complexity_penalty")
    @classmethod
    def validate_probability(cls, value: float) -> float:
        if not 0.0 <= value <= 1.0:
            raise ValueError("value must be between 0 and 1")
        return value

    @model_validator(mode="after")
    def validate_bounds(self) -> "SimulationSettings":
        if self.min_labels_per_sample > self.max_labels_per_sample:
            raise ValueError("min_labels_per_sample cannot exceed max_labels_per_sample")
        if any(floor > self.correct_confidence_ceiling for floor in self.correct_confidence_floors.values()):
            raise ValueError("confidence floors cannot exceed correct_confidence_ceiling")
        return self


class SampleSettings(BaseModel):
    batch_size: PositiveInt = 100
    limit: PositiveInt = 1000
    words_per_complexity_point: PositiveInt = 50
    source: str = "imdb"


class TableSettings(BaseModel):
    labelers: str = "labelers"
    samples: str = "text_samples"
    labels: str = "labels"


class ClientSettings(BaseModel):
    timeout_seconds: PositiveFloat = 30.0
    page_size: PositiveInt = 1000


class Settings(BaseModel):
    simulation: SimulationSettings = Field(default_factory=SimulationSettings)
    samples: SampleSettings = Field(default_factory=SampleSettings)
    tables: TableSettings = Field(default_factory=TableSettings)
    client: ClientSettings = Field(default_factory=ClientSettings)


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


@lru_cache(maxsize=1)
def get_settings(path: Optional[Path] = None) -> Settings:
    """Load and cache application settings."""

    target_path = path or CONFIG_PATH
    raw = _load_yaml(target_path)
    return Settings.model_validate(raw)
