"""Shared dataclasses and type definitions for the labeling-ops seeder."""

from .label import LabelRecord
from .labeler import ExperienceLevel, Labeler, LabelerRoster
from .sample import SampleCatalog, Sentiment, TextSample

__all__ = [
    "ExperienceLevel",
    "LabelRecord",
    "Labeler",
    "LabelerRoster",
    "SampleCatalog",
    "Sentiment",
    "TextSample",
]
