"""Storage backends and batch persistence."""

from .base import BatchFailure, BatchWriteResult, BatchWriter, LabelStore, chunked
from .memory import InMemoryStore
from .repository import LabelingRepository

__all__ = [
    "BatchFailure",
    "BatchWriteResult",
    "BatchWriter",
    "InMemoryStore",
    "LabelStore",
    "LabelingRepository",
    "chunked",
]
