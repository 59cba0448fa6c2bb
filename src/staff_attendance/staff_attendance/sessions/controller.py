from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_utc
from ..common.validators import require_non_empty
from ..container import Container
from ..core.enums import SessionAction
from ..core.exceptions import ValidationError
from ..timeledger.transitions import apply_action


def register(app: Flask, container: Container) -> None:
    @app.route("/api/users/<user_id>/session", methods=["GET"], endpoint="current_session")
    def current_session(user_id: str):
        """Current session snapshot; the display re-polls every ``refresh_seconds`` while it is open."""
        try:
            user_id = require_non_empty(user_id, "userId")
        except ValidationError as e:
            return jsonify({"message": str(e)}), 400

        view = container.session_service.current_session(user_id=user_id, now=now_utc())
        return jsonify({"data": view.to_dict()}), 200

    @app.route("/api/users/<user_id>/session/check", methods=["POST"], endpoint="check_session_action")
    def check_session_action(user_id: str):
        """Check whether a clock action is allowed right now, without performing it."""
        data = request.get_json(silent=True) or {}
        try:
            if not isinstance(data, dict):
                raise ValidationError("Request body must be a JSON object")
            user_id = require_non_empty(user_id, "userId")
            action_s = require_non_empty(str(data.get("action") or ""), "action")
            try:
                action = SessionAction(action_s.upper())
            except ValueError:
                raise ValidationError(f"Unknown action: {action_s}")

            view = container.session_service.current_session(user_id=user_id, now=now_utc())
            next_state = apply_action(view.state, action)
        except ValidationError as e:
            return jsonify({"allowed": False, "message": str(e)}), 400

        return jsonify({"allowed": True, "state": view.state.value, "next_state": next_state.value}), 200
