"""Exception hierarchy shared by the seeding commands."""

from __future__ import annotations

from typing import Optional


class LabelOpsError(Exception):
    """Base class for labeling-ops failures."""


class ConfigurationError(LabelOpsError, ValueError):
    """Credentials or settings are missing or invalid."""


class StoreError(LabelOpsError):
    """A read or write against the backing store failed."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class SourceReadError(LabelOpsError):
    """Labelers or samples could not be loaded; the run cannot continue."""


class SampleFormatError(LabelOpsError, ValueError):
    """A sample file is readable but lacks the expected columns."""


class SimulationError(LabelOpsError):
    """Simulation inputs violate a precondition."""


__all__ = [
    "ConfigurationError",
    "LabelOpsError",
    "SampleFormatError",
    "SimulationError",
    "SourceReadError",
    "StoreError",
]
