"""Minimal in-memory store for dry runs and tests."""

from __future__ import annotations

from itertools import count
from typing import Any, Dict, List, Optional, Sequence

from labelops.errors import StoreError

from .base import Row


class InMemoryStore:
    """A lightweight table store that assigns integer ids on insert."""

    def __init__(self) -> None:
        self._tables: Dict[str, List[Row]] = {}
        self._ids: Dict[str, count] = {}

    def fetch_rows(self, table: str, order_by: str, descending: bool = False) -> List[Row]:
        rows = [dict(row) for row in self._tables.get(table, [])]
        try:
            return sorted(rows, key=lambda row: row[order_by], reverse=descending)
        except KeyError as exc:
            raise StoreError(f"column {order_by} does not exist on {table}") from exc

    def insert_rows(self, table: str, rows: Sequence[Row], returning: bool = False) -> List[Row]:
        target = self._tables.setdefault(table, [])
        ids = self._ids.setdefault(table, count(1))
        stored: List[Row] = []
        for row in rows:
            record = dict(row)
            record.setdefault("id", next(ids))
            stored.append(record)
        target.extend(stored)
        return [dict(record) for record in stored] if returning else []

    def count_rows(self, table: str, filters: Optional[Dict[str, Any]] = None) -> int:
        rows = self._tables.get(table, [])
        if not filters:
            return len(rows)
        return sum(1 for row in rows if all(row.get(key) == value for key, value in filters.items()))
