"""Mapping of Logs API JSON into domain sessions.

The API wraps list responses as ``{"data": {"result": [...], "meta": {...}}}``.
Malformed timestamps are filtered here, so the ledger only ever sees valid instants.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from ..common.datetime_utils import parse_instant
from ..core.exceptions import ValidationError
from ..timeledger.model import BreakInterval, WorkSession
from .model import LogPage

logger = logging.getLogger(__name__)


def _owner_id(value: Any) -> Optional[str]:
    if isinstance(value, dict):
        value = value.get("_id")
    return str(value) if value else None


def parse_break(raw: dict) -> BreakInterval:
    if not isinstance(raw, dict):
        raise ValidationError(f"Invalid break entry: {raw!r}")
    return BreakInterval(
        break_start=parse_instant(raw.get("breakStart")),
        break_end=parse_instant(raw.get("breakEnd")),
        break_id=raw.get("_id"),
    )


def _break_list(value: Any) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValidationError(f"Invalid breaks list: {value!r}")
    return value


def parse_session(raw: dict) -> WorkSession:
    return WorkSession(
        session_id=str(raw.get("_id", "")),
        owner_id=_owner_id(raw.get("userId")),
        clock_in=parse_instant(raw.get("clockIn")),
        clock_out=parse_instant(raw.get("clockOut")),
        breaks=tuple(parse_break(b) for b in _break_list(raw.get("breaks"))),
        created_at=parse_instant(raw.get("createdAt")),
    )


def parse_log_page(payload: Any, *, page: int = 1) -> LogPage:
    data = payload.get("data") if isinstance(payload, dict) else None
    if not isinstance(data, dict):
        data = {}

    sessions = []
    for raw in data.get("result") or []:
        if not isinstance(raw, dict):
            logger.warning("Skipping log record that is not an object: %r", raw)
            continue
        try:
            sessions.append(parse_session(raw))
        except ValidationError as exc:
            logger.warning("Skipping malformed log record %s: %s", raw.get("_id"), exc)

    meta = data.get("meta") or {}
    try:
        total_pages = max(int(meta.get("totalPage") or 1), 1)
    except (TypeError, ValueError):
        total_pages = 1

    return LogPage(sessions=tuple(sessions), page=page, total_pages=total_pages)
