from __future__ import annotations

from ..core.enums import SessionAction, SessionState
from ..core.exceptions import ValidationError

_TRANSITIONS: dict[SessionState, dict[SessionAction, SessionState]] = {
    SessionState.NO_ACTIVE_SESSION: {SessionAction.CLOCK_IN: SessionState.WORKING},
    SessionState.WORKING: {
        SessionAction.START_BREAK: SessionState.ON_BREAK,
        SessionAction.CLOCK_OUT: SessionState.CLOCKED_OUT,
    },
    SessionState.ON_BREAK: {SessionAction.END_BREAK: SessionState.WORKING},
    # Closed session: the next one starts with a fresh clock-in.
    SessionState.CLOCKED_OUT: {SessionAction.CLOCK_IN: SessionState.WORKING},
}


def allowed_actions(state: SessionState) -> list[SessionAction]:
    return list(_TRANSITIONS.get(state, {}))


def apply_action(state: SessionState, action: SessionAction) -> SessionState:
    """Next state after ``action``, or ValidationError when the action is not allowed."""
    next_state = _TRANSITIONS.get(state, {}).get(action)
    if next_state is not None:
        return next_state

    if state == SessionState.ON_BREAK and action == SessionAction.CLOCK_OUT:
        raise ValidationError("End the current break before clocking out")
    raise ValidationError(f"Cannot {action.value} while {state.value}")
