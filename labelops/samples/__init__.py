"""Utilities for loading text samples."""

from .manager import SampleIngestionResult, SampleManager

__all__ = ["SampleManager", "SampleIngestionResult"]
