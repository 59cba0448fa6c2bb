from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime

from ..common.datetime_utils import format_civil
from ..common.validators import require_date_range
from ..core.constants import BREAK_TIME_FORMAT, CLOCK_TIME_FORMAT, DEFAULT_PAGE_LIMIT, WORK_DATE_FORMAT
from ..core.exceptions import LogsUnavailableError
from ..logs.model import LogPage
from ..logs.repository import LogRepository
from ..timeledger.ledger import TimeLedger, format_hours_minutes
from ..timeledger.model import WorkSession

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: dict
    page: int = 1
    total_pages: int = 1
    errors: list[str] = field(default_factory=list)


class AttendanceReportService:
    def __init__(self, logs: LogRepository, ledger: TimeLedger):
        self._logs = logs
        self._ledger = ledger

    def build_attendance_report(
        self,
        *,
        user_id: str,
        start: date,
        end: date,
        now: datetime,
        page: int = 1,
        limit: int = DEFAULT_PAGE_LIMIT,
    ) -> ReportData:
        require_date_range(start, end)

        errors: list[str] = []
        try:
            log_page = self._logs.list_logs(user_id=user_id, from_date=start, to_date=end, page=page, limit=limit)
        except LogsUnavailableError as e:
            # Logs API down: show an empty table rather than failing the page.
            logger.error("Attendance report for user %s is empty: %s", user_id, e)
            log_page = LogPage(page=page)
            errors.append(str(e))

        out_rows: list[dict] = []
        total_seconds = 0
        for s in log_page.sessions:
            if s.clock_in is None:
                continue
            row = self._to_row(s, now=now)
            total_seconds += row["net_seconds"]
            out_rows.append(row)

        summary = {
            "user_id": user_id,
            "sessions": len(out_rows),
            "total_seconds": total_seconds,
            "total_duration": self._ledger.format_duration(total_seconds),
            "total_hours": format_hours_minutes(total_seconds // 60),
        }
        return ReportData(
            rows=out_rows,
            summary=summary,
            page=log_page.page,
            total_pages=log_page.total_pages,
            errors=errors,
        )

    def _to_row(self, s: WorkSession, *, now: datetime) -> dict:
        tz = self._ledger.timezone_name
        net_seconds = self._ledger.compute_net_working_seconds(s, now)

        return {
            "session_id": s.session_id,
            "work_date": format_civil(s.created_at or s.clock_in, tz, WORK_DATE_FORMAT),
            "clock_in": format_civil(s.clock_in, tz, CLOCK_TIME_FORMAT),
            "clock_out": format_civil(s.clock_out, tz, CLOCK_TIME_FORMAT),
            "breaks": [
                {
                    "break": format_civil(b.break_start, tz, BREAK_TIME_FORMAT),
                    "return": format_civil(b.break_end, tz, BREAK_TIME_FORMAT),
                }
                for b in s.breaks
            ],
            "net_seconds": net_seconds,
            "hours_worked": self._ledger.format_duration(net_seconds),
            "status": self._ledger.derive_status(s, now).value,
        }
