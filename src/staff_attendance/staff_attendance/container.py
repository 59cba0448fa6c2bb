from __future__ import annotations

from dataclasses import dataclass

from .core.constants import DEFAULT_LOGS_API_TIMEOUT, DEFAULT_PAGE_LIMIT, DEFAULT_REFRESH_SECONDS, DEFAULT_TIMEZONE
from .logs.http_log_repository import HttpLogRepository
from .logs.repository import LogRepository
from .report.service import AttendanceReportService
from .sessions.service import SessionService
from .timeledger.ledger import TimeLedger


@dataclass(frozen=True)
class Container:
    logs_repo: LogRepository
    ledger: TimeLedger

    report_service: AttendanceReportService
    session_service: SessionService

    page_limit: int = DEFAULT_PAGE_LIMIT


def build_container(
    *,
    logs_api: dict,
    timezone_name: str = DEFAULT_TIMEZONE,
    refresh_seconds: int = DEFAULT_REFRESH_SECONDS,
    page_limit: int = DEFAULT_PAGE_LIMIT,
    logs_repo: LogRepository | None = None,
) -> Container:
    if logs_repo is None:
        logs_repo = HttpLogRepository(
            str(logs_api["base_url"]),
            token=logs_api.get("token") or None,
            timeout=float(logs_api.get("timeout", DEFAULT_LOGS_API_TIMEOUT)),
        )

    ledger = TimeLedger(timezone_name)
    report_service = AttendanceReportService(logs_repo, ledger)
    session_service = SessionService(logs_repo, ledger, refresh_seconds=refresh_seconds)

    return Container(
        logs_repo=logs_repo,
        ledger=ledger,
        report_service=report_service,
        session_service=session_service,
        page_limit=int(page_limit),
    )
