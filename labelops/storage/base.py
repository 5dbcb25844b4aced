"""Store protocol and sequential batch writer."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Protocol, Sequence, TypeVar

from labelops.errors import StoreError

logger = logging.getLogger(__name__)

Row = Dict[str, Any]
T = TypeVar("T")


class LabelStore(Protocol):
    """Table-oriented operations the seeder needs from a backend.

    Implementations raise :class:`labelops.errors.StoreError` on failure.
    """

    def fetch_rows(self, table: str, order_by: str, descending: bool = False) -> List[Row]:
        ...

    def insert_rows(self, table: str, rows: Sequence[Row], returning: bool = False) -> List[Row]:
        ...

    def count_rows(self, table: str, filters: Optional[Dict[str, Any]] = None) -> int:
        ...


@dataclass(slots=True, frozen=True)
class BatchFailure:
    batch_number: int
    size: int
    message: str


@dataclass
class BatchWriteResult:
    """Outcome of a best-effort bulk load."""

    attempted: int = 0
    inserted: int = 0
    failures: List[BatchFailure] = field(default_factory=list)
    rows: List[Row] = field(default_factory=list)

    @property
    def failed(self) -> int:
        return self.attempted - self.inserted

    @property
    def ok(self) -> bool:
        return not self.failures


def chunked(items: Sequence[T], size: int) -> Iterator[Sequence[T]]:
    if size <= 0:
        raise ValueError(f"batch size must be positive: {size}")
    for start in range(0, len(items), size):
        yield items[start : start + size]


class BatchWriter:
    """Writes rows in fixed-size batches, one request at a time.

    A failed batch is logged and dropped; later batches still run. Nothing
    is retried.
    """

    def __init__(self, store: LabelStore, table: str, batch_size: int, returning: bool = False) -> None:
        if batch_size <= 0:
            raise ValueError(f"batch size must be positive: {batch_size}")
        self.store = store
        self.table = table
        self.batch_size = batch_size
        self.returning = returning

    def write(self, rows: Sequence[Row]) -> BatchWriteResult:
        result = BatchWriteResult(attempted=len(rows))
        for batch_number, batch in enumerate(chunked(rows, self.batch_size), start=1):
            try:
                returned = self.store.insert_rows(self.table, batch, returning=self.returning)
            except StoreError as exc:
                logger.error("Error inserting batch %d into %s: %s", batch_number, self.table, exc.message)
                result.failures.append(
                    BatchFailure(batch_number=batch_number, size=len(batch), message=exc.message)
                )
                continue

            result.inserted += len(batch)
            if self.returning:
                result.rows.extend(returned)
            logger.info(
                "Uploaded batch %d: %d/%d rows into %s",
                batch_number,
                result.inserted,
                result.attempted,
                self.table,
            )
        return result


__all__ = [
    "BatchFailure",
    "BatchWriteResult",
    "BatchWriter",
    "LabelStore",
    "Row",
    "chunked",
]
