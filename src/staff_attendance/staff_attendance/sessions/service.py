from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Optional

from ..common.datetime_utils import civil_date, ensure_utc
from ..core.constants import DEFAULT_REFRESH_SECONDS
from ..core.enums import SessionAction, SessionState
from ..core.exceptions import LogsUnavailableError
from ..logs.repository import LogRepository
from ..timeledger.ledger import TimeLedger
from ..timeledger.model import WorkSession
from ..timeledger.transitions import allowed_actions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionView:
    state: SessionState
    session: Optional[WorkSession] = None
    net_seconds: int = 0
    display: str = "0s"
    allowed_actions: list[SessionAction] = field(default_factory=list)
    refresh_seconds: Optional[int] = None
    error: Optional[str] = None

    def to_dict(self) -> dict:
        s = self.session
        return {
            "state": self.state.value,
            "session_id": s.session_id if s else None,
            "clock_in": s.clock_in.isoformat() if s and s.clock_in else None,
            "clock_out": s.clock_out.isoformat() if s and s.clock_out else None,
            "net_seconds": self.net_seconds,
            "display": self.display,
            "allowed_actions": [a.value for a in self.allowed_actions],
            "refresh_seconds": self.refresh_seconds,
            "error": self.error,
        }


class SessionService:
    """Live view of a user's current session, polled by the display on a fixed interval."""

    def __init__(self, logs: LogRepository, ledger: TimeLedger, *, refresh_seconds: int = DEFAULT_REFRESH_SECONDS):
        self._logs = logs
        self._ledger = ledger
        self._refresh_seconds = int(refresh_seconds)

    def pick_current(self, sessions, *, today: date) -> Optional[WorkSession]:
        """Latest open session (it may have started yesterday), else the latest session of today."""
        candidates = [s for s in sessions if s.clock_in is not None]

        def key(s: WorkSession):
            return ensure_utc(s.clock_in)

        open_sessions = [s for s in candidates if s.is_open]
        if open_sessions:
            return max(open_sessions, key=key)

        tz = self._ledger.timezone_name
        todays = [s for s in candidates if civil_date(s.clock_in, tz) == today]
        if todays:
            return max(todays, key=key)
        return None

    def current_session(self, *, user_id: str, now: datetime) -> SessionView:
        today = civil_date(now, self._ledger.timezone_name)
        try:
            # Yesterday too: a session clocked in before midnight is still open after it.
            log_page = self._logs.list_logs(user_id=user_id, from_date=today - timedelta(days=1), to_date=today)
        except LogsUnavailableError as e:
            logger.error("Session state for user %s unavailable: %s", user_id, e)
            return self._no_session(error=str(e))

        session = self.pick_current(log_page.sessions, today=today)
        if session is None:
            return self._no_session()

        state = self._ledger.derive_status(session, now)
        net_seconds = self._ledger.compute_net_working_seconds(session, now)
        return SessionView(
            state=state,
            session=session,
            net_seconds=net_seconds,
            display=self._ledger.format_duration(net_seconds),
            allowed_actions=allowed_actions(state),
            refresh_seconds=self._refresh_seconds if session.is_open else None,
        )

    @staticmethod
    def _no_session(*, error: Optional[str] = None) -> SessionView:
        state = SessionState.NO_ACTIVE_SESSION
        return SessionView(state=state, allowed_actions=allowed_actions(state), error=error)
