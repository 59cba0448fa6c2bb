from __future__ import annotations

from datetime import datetime, timedelta

from ...common.datetime_utils import ensure_utc, get_timezone
from ...core.constants import DEFAULT_TIMEZONE
from ..model import WorkingTime, WorkSession
from .base import WorkingTimeCalculator

_ZERO = timedelta(0)
_ONE_SECOND = timedelta(seconds=1)


class StandardWorkingTimeCalculator(WorkingTimeCalculator):
    """Standard rule: ((out or now) - in) - breaks, not below 0.

    A break still running counts up to ``now``. Breaks are summed one by one,
    overlapping breaks are not merged.
    """

    def __init__(self, timezone_name: str = DEFAULT_TIMEZONE):
        self._tz = get_timezone(timezone_name)

    @staticmethod
    def _span(start: datetime, end: datetime) -> timedelta:
        # Subtract UTC instants, never civil wall-clock values: those drift by an hour across DST.
        return ensure_utc(end) - ensure_utc(start)

    def break_time(self, session: WorkSession, *, now: datetime) -> timedelta:
        total = _ZERO
        for brk in session.breaks:
            if brk.break_start is None:
                continue
            end = brk.break_end or now
            total += max(self._span(brk.break_start, end), _ZERO)
        return total

    def working_time(self, session: WorkSession, *, now: datetime) -> WorkingTime:
        if session.clock_in is None:
            return WorkingTime(elapsed_seconds=0, break_seconds=0, net_seconds=0)

        effective_end = session.clock_out or now
        elapsed = self._span(session.clock_in, effective_end)
        breaks = self.break_time(session, now=now)
        net = max(elapsed - breaks, _ZERO)

        return WorkingTime(
            elapsed_seconds=max(elapsed, _ZERO) // _ONE_SECOND,
            break_seconds=breaks // _ONE_SECOND,
            net_seconds=net // _ONE_SECOND,
        )
