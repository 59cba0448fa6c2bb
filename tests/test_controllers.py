from __future__ import annotations

from datetime import date, datetime

import pytest
import pytz

from src.staff_attendance.staff_attendance.container import build_container
from src.staff_attendance.staff_attendance.logs.model import LogPage
from src.staff_attendance.staff_attendance.main import create_app
from src.staff_attendance.staff_attendance.report import controller as report_controller
from src.staff_attendance.staff_attendance.sessions import controller as session_controller
from src.staff_attendance.staff_attendance.timeledger.model import BreakInterval, WorkSession

UTC = pytz.utc
NOW = datetime(2025, 7, 15, 9, 0, tzinfo=UTC)


class FakeLogsRepo:
    def __init__(self, sessions=()):
        self._sessions = tuple(sessions)
        self.calls = []

    def list_logs(self, *, user_id, from_date=None, to_date=None, page=1, limit=200):
        self.calls.append({"user_id": user_id, "from_date": from_date, "to_date": to_date, "page": page, "limit": limit})
        return LogPage(sessions=self._sessions, page=page)


@pytest.fixture
def repo():
    return FakeLogsRepo(
        [
            WorkSession(
                session_id="l1",
                owner_id="u1",
                clock_in=datetime(2025, 7, 15, 7, 0, tzinfo=UTC),
                breaks=(BreakInterval(datetime(2025, 7, 15, 8, 30, tzinfo=UTC)),),
            )
        ]
    )


@pytest.fixture
def client(monkeypatch, repo):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setattr(report_controller, "now_utc", lambda: NOW)
    monkeypatch.setattr(session_controller, "now_utc", lambda: NOW)

    container = build_container(logs_api={}, timezone_name="Europe/London", logs_repo=repo, page_limit=100)
    app = create_app(container=container)
    return app.test_client()


def test_report_defaults_to_current_month(client, repo):
    resp = client.get("/api/users/u1/attendance")

    assert resp.status_code == 200
    body = resp.get_json()
    assert repo.calls[0]["from_date"] == date(2025, 7, 1)
    assert repo.calls[0]["to_date"] == date(2025, 7, 31)
    assert repo.calls[0]["limit"] == 100
    assert body["data"]["meta"]["start"] == "2025-07-01"
    row = body["data"]["result"][0]
    assert row["clock_in"] == "08:00:00"
    assert row["hours_worked"] == "1h 30m"
    assert row["status"] == "ON_BREAK"
    assert body["data"]["meta"]["summary"]["total_seconds"] == 5400


def test_report_with_explicit_range_and_paging(client, repo):
    resp = client.get("/api/users/u1/attendance?start=2025-07-01&end=2025-07-10&page=2&limit=20")

    assert resp.status_code == 200
    assert repo.calls[0] == {
        "user_id": "u1",
        "from_date": date(2025, 7, 1),
        "to_date": date(2025, 7, 10),
        "page": 2,
        "limit": 20,
    }


@pytest.mark.parametrize(
    "query",
    ["start=01-07-2025", "start=2025-07-10&end=2025-07-01", "page=0", "limit=abc"],
)
def test_report_bad_query_is_400(client, query):
    resp = client.get(f"/api/users/u1/attendance?{query}")

    assert resp.status_code == 400
    assert resp.get_json()["message"]


def test_session_endpoint(client):
    resp = client.get("/api/users/u1/session")

    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["state"] == "ON_BREAK"
    assert data["display"] == "1h 30m"
    assert data["allowed_actions"] == ["END_BREAK"]
    assert data["refresh_seconds"] == 1


def test_check_action_refuses_clock_out_on_break(client):
    resp = client.post("/api/users/u1/session/check", json={"action": "clock_out"})

    assert resp.status_code == 400
    assert resp.get_json() == {"allowed": False, "message": "End the current break before clocking out"}


def test_check_action_allows_end_break(client):
    resp = client.post("/api/users/u1/session/check", json={"action": "END_BREAK"})

    assert resp.status_code == 200
    assert resp.get_json() == {"allowed": True, "state": "ON_BREAK", "next_state": "WORKING"}


def test_check_action_unknown(client):
    resp = client.post("/api/users/u1/session/check", json={"action": "teleport"})

    assert resp.status_code == 400


@pytest.mark.parametrize("body", [[1], "x", 5])
def test_check_action_non_object_body_is_400(client, body):
    resp = client.post("/api/users/u1/session/check", json=body)

    assert resp.status_code == 400
    assert resp.get_json() == {"allowed": False, "message": "Request body must be a JSON object"}
