from __future__ import annotations

from dataclasses import dataclass, field

from ..timeledger.model import WorkSession


@dataclass(frozen=True)
class LogPage:
    """Một trang kết quả từ Logs API."""

    sessions: tuple[WorkSession, ...] = field(default_factory=tuple)
    page: int = 1
    total_pages: int = 1
