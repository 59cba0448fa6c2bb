from __future__ import annotations

import logging
from datetime import date
from typing import Optional

import requests

from ..core.constants import API_DATE_FORMAT, DEFAULT_LOGS_API_TIMEOUT
from ..core.exceptions import LogsUnavailableError
from .model import LogPage
from .payload import parse_log_page

logger = logging.getLogger(__name__)


class HttpLogRepository:
    """Reads work sessions from the external Logs REST API (``GET /logs``).

    Note: No retries. A failed call surfaces as LogsUnavailableError and the
    caller decides what to show.
    """

    def __init__(self, base_url: str, *, token: Optional[str] = None, timeout: float = DEFAULT_LOGS_API_TIMEOUT):
        self._base_url = base_url.rstrip("/")
        self._token = token
        self._timeout = timeout

    def _headers(self) -> dict:
        headers = {"Accept": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def list_logs(
        self,
        *,
        user_id: str,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None,
        page: int = 1,
        limit: int = 200,
    ) -> LogPage:
        params = {"userId": user_id, "page": page, "limit": limit}
        if from_date and to_date:
            # Dates are civil dates; the backend interprets them in the same timezone.
            params["fromDate"] = from_date.strftime(API_DATE_FORMAT)
            params["toDate"] = to_date.strftime(API_DATE_FORMAT)

        url = f"{self._base_url}/logs"
        try:
            resp = requests.get(url, headers=self._headers(), params=params, timeout=self._timeout)
            resp.raise_for_status()
            payload = resp.json()
        except requests.RequestException as exc:
            logger.error("Logs API request failed (user=%s, page=%s): %s", user_id, page, exc)
            raise LogsUnavailableError("Failed to fetch logs") from exc
        except ValueError as exc:
            logger.error("Logs API returned a non-JSON body (user=%s): %s", user_id, exc)
            raise LogsUnavailableError("Failed to fetch logs") from exc

        return parse_log_page(payload, page=page)
