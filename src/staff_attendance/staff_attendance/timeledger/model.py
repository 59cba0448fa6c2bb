from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class BreakInterval:
    """Một lần nghỉ giữa ca. ``break_end`` trống nghĩa là đang nghỉ."""

    break_start: Optional[datetime]
    break_end: Optional[datetime] = None
    break_id: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.break_start is not None and self.break_end is None


@dataclass(frozen=True)
class WorkSession:
    """Thực thể miền (domain): Phiên làm việc lấy từ Logs API (chỉ đọc)."""

    session_id: str
    owner_id: Optional[str]
    clock_in: Optional[datetime]
    clock_out: Optional[datetime] = None
    breaks: tuple[BreakInterval, ...] = field(default_factory=tuple)
    created_at: Optional[datetime] = None

    @property
    def is_open(self) -> bool:
        return self.clock_in is not None and self.clock_out is None


@dataclass(frozen=True)
class WorkingTime:
    """Breakdown of a session: elapsed wall-clock time, break time and net time, in seconds."""

    elapsed_seconds: int
    break_seconds: int
    net_seconds: int
