import logging
from typing import Any, Dict, List, Optional, Sequence

import requests

from config import ClientSettings
from labelops.errors import StoreError

from .config import SupabaseConfig

logger = logging.getLogger(__name__)


class SupabaseClient:
    """Thin HTTP client for the Supabase REST interface.

    Implements the :class:`labelops.storage.LabelStore` protocol. Every call
    is a single blocking request; failures raise :class:`StoreError` and are
    never retried.
    """

    def __init__(
        self,
        config: SupabaseConfig,
        settings: Optional[ClientSettings] = None,
        session: Optional[requests.Session] = None,
    ):
        config.validate()
        self.config = config
        self.settings = settings or ClientSettings()
        self.session = session or requests.Session()

    def _headers(self, **extra: str) -> Dict[str, str]:
        headers = {
            "apikey": self.config.key,
            "Authorization": f"Bearer {self.config.key}",
            "Accept": "application/json",
        }
        headers.update(extra)
        return headers

    def _endpoint(self, table: str) -> str:
        return f"{self.config.rest_url}/{table}"

    def _request(self, method: str, table: str, **kwargs: Any) -> requests.Response:
        try:
            res = self.session.request(
                method,
                self._endpoint(table),
                timeout=self.settings.timeout_seconds,
                **kwargs,
            )
        except requests.RequestException as exc:
            raise StoreError(f"{method} {table} failed: {exc}") from exc
        if res.status_code >= 400:
            raise StoreError(self._error_message(res), status_code=res.status_code)
        return res

    @staticmethod
    def _error_message(res: requests.Response) -> str:
        try:
            payload = res.json()
        except ValueError:
            return res.text or f"HTTP {res.status_code}"
        if isinstance(payload, dict):
            return str(payload.get("message") or payload.get("error") or payload)
        return str(payload)

    def fetch_rows(self, table: str, order_by: str, descending: bool = False) -> List[Dict[str, Any]]:
        direction = "desc" if descending else "asc"
        order = f"{order_by}.{direction}"
        if order_by != "id":
            # offset paging needs a total order
            order += ",id.asc"
        page_size = self.settings.page_size
        rows: List[Dict[str, Any]] = []
        offset = 0
        while True:
            params = {
                "select": "*",
                "order": order,
                "limit": page_size,
                "offset": offset,
            }
            res = self._request("GET", table, headers=self._headers(), params=params)
            chunk = res.json() or []
            rows.extend(chunk)
            logger.debug("Fetched %d rows from %s at offset %d", len(chunk), table, offset)
            if len(chunk) < page_size:
                break
            offset += page_size
        return rows

    def insert_rows(
        self, table: str, rows: Sequence[Dict[str, Any]], returning: bool = False
    ) -> List[Dict[str, Any]]:
        prefer = "return=representation" if returning else "return=minimal"
        headers = self._headers(**{"Content-Type": "application/json", "Prefer": prefer})
        res = self._request("POST", table, headers=headers, json=list(rows))
        logger.debug("Inserted %d rows into %s", len(rows), table)
        return (res.json() or []) if returning else []

    def count_rows(self, table: str, filters: Optional[Dict[str, Any]] = None) -> int:
        params = {"select": "id"}
        for column, value in (filters or {}).items():
            params[column] = f"eq.{value}"
        headers = self._headers(Prefer="count=exact")
        res = self._request("HEAD", table, headers=headers, params=params)
        content_range = res.headers.get("Content-Range", "")
        _, _, total = content_range.partition("/")
        if not total or total == "*":
            raise StoreError(f"count unavailable for {table}: Content-Range={content_range!r}")
        return int(total)
