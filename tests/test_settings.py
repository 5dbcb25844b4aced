from pathlib import Path

import pytest
from pydantic import ValidationError

from config import Settings, SimulationSettings, get_settings


def test_bundled_settings_match_defaults() -> None:
    settings = get_settings()

    assert settings == Settings()
    assert settings.simulation.batch_size == 500
    assert settings.samples.batch_size == 100
    assert settings.simulation.correct_confidence_floors["novice"] == 0.65
    assert settings.tables.samples == "text_samples"


def test_partial_file_falls_back_to_defaults(tmp_path: Path) -> None:
    path = tmp_path / "settings.yaml"
    path.write_text("simulation:\n  batch_size: 250\n", encoding="utf-8")

    settings = get_settings(path)

    assert settings.simulation.batch_size == 250
    assert settings.simulation.max_labels_per_sample == 7


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        get_settings(tmp_path / "absent.yaml")


@pytest.mark.parametrize(
    "overrides",
    [
        {"min_labels_per_sample": 8, "max_labels_per_sample": 7},
        {"base_time_range": (180, 30)},
        {"error_confidence_range": (0.5, 1.5)},
        {"correct_confidence_floors": {"expert": 0.85, "intermediate": 0.75}},
        {"correct_confidence_floors": {"expert": 0.99, "intermediate": 0.75, "novice": 0.65}},
        {"complexity_penalty": 1.2},
        {"batch_size": 0},
    ],
)
def test_invalid_simulation_settings(overrides) -> None:
    with pytest.raises(ValidationError):
        SimulationSettings(**overrides)
