from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from .model import LogPage


class LogRepository(Protocol):
    def list_logs(
        self,
        *,
        user_id: str,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None,
        page: int = 1,
        limit: int = 200,
    ) -> LogPage:
        """Work sessions of a user whose civil work date falls in [from_date, to_date]."""

        raise NotImplementedError
