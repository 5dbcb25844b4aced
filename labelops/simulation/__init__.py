"""Labeling simulation entry points."""

from .random_source import RandomSource, make_random
from .simulator import LabelerStats, LabelingSimulator, SampleAssignment, SimulationResult

__all__ = [
    "LabelerStats",
    "LabelingSimulator",
    "RandomSource",
    "SampleAssignment",
    "SimulationResult",
    "make_random",
]
