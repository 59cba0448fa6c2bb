from __future__ import annotations

from datetime import datetime
from functools import lru_cache
from typing import Optional

from ..core.constants import DEFAULT_TIMEZONE
from ..core.enums import SessionState
from .calculator.base import WorkingTimeCalculator
from .calculator.standard_calculator import StandardWorkingTimeCalculator
from .model import WorkingTime, WorkSession


class TimeLedger:
    """Net working time and status of a work session, in one civil timezone.

    Stateless: every call is a pure computation over the session snapshot and the
    ``now`` given by the caller, so it is safe to call on every display tick.
    Malformed intervals are clamped to zero instead of raising.
    """

    def __init__(
        self,
        timezone_name: str = DEFAULT_TIMEZONE,
        *,
        calculator: Optional[WorkingTimeCalculator] = None,
    ):
        self.timezone_name = timezone_name
        self._calculator = calculator or StandardWorkingTimeCalculator(timezone_name)

    def compute_working_time(self, session: WorkSession, now: datetime) -> WorkingTime:
        return self._calculator.working_time(session, now=now)

    def compute_net_working_seconds(self, session: WorkSession, now: datetime) -> int:
        return self.compute_working_time(session, now).net_seconds

    def format_duration(self, total_seconds: int) -> str:
        return format_duration(total_seconds)

    def derive_status(self, session: WorkSession, now: Optional[datetime] = None) -> SessionState:
        return derive_status(session, now)


@lru_cache(maxsize=32)
def ledger_for(timezone_name: str) -> TimeLedger:
    """Shared ledger per timezone name. An unknown name raises ValidationError here."""
    return TimeLedger(timezone_name)


def compute_net_working_seconds(session: WorkSession, timezone_name: str, now: datetime) -> int:
    """Functional form of ``TimeLedger.compute_net_working_seconds``.

    ``timezone_name`` must be a valid zone (normally the configured ``TIMEZONE``). It is
    resolved before any arithmetic, so an unknown name fails as a configuration error;
    the computation itself never raises.
    """
    return ledger_for(timezone_name).compute_net_working_seconds(session, now)


def format_duration(total_seconds: int) -> str:
    """Compact duration such as ``1h 1m 1s``; zero renders as ``0s``."""
    total_seconds = max(int(total_seconds), 0)

    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60
    seconds = total_seconds % 60

    parts = []
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")
    if seconds > 0 or not parts:
        parts.append(f"{seconds}s")
    return " ".join(parts)


def format_hours_minutes(total_minutes: int) -> str:
    """Report-style duration: ``8h 0m``."""
    total_minutes = max(int(total_minutes), 0)
    return f"{total_minutes // 60}h {total_minutes % 60}m"


def derive_status(session: WorkSession, now: Optional[datetime] = None) -> SessionState:
    """Classify a session as CLOCKED_OUT, ON_BREAK or WORKING.

    ``now`` is accepted for symmetry with the duration calls; classification only
    looks at which timestamps are present.
    """
    if session.clock_out is not None:
        return SessionState.CLOCKED_OUT
    if any(brk.is_open for brk in session.breaks):
        return SessionState.ON_BREAK
    return SessionState.WORKING
