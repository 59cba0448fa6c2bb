from __future__ import annotations

from enum import Enum


class SessionState(str, Enum):
    """Trạng thái hiện tại của một phiên làm việc."""

    NO_ACTIVE_SESSION = "NO_ACTIVE_SESSION"
    WORKING = "WORKING"
    ON_BREAK = "ON_BREAK"
    CLOCKED_OUT = "CLOCKED_OUT"


class SessionAction(str, Enum):
    """Các thao tác chấm công người dùng có thể thực hiện."""

    CLOCK_IN = "CLOCK_IN"
    START_BREAK = "START_BREAK"
    END_BREAK = "END_BREAK"
    CLOCK_OUT = "CLOCK_OUT"
