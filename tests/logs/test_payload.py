from __future__ import annotations

import logging
from datetime import datetime

import pytz

from src.staff_attendance.staff_attendance.logs.payload import parse_log_page, parse_session

UTC = pytz.utc


def _record(**overrides):
    rec = {
        "_id": "log-1",
        "userId": {"_id": "u1", "name": "Ann", "email": "ann@example.com"},
        "action": "clockIn",
        "clockIn": "2025-01-06T08:00:00.000Z",
        "clockOut": "2025-01-06T16:30:00.000Z",
        "breaks": [
            {"_id": "b1", "breakStart": "2025-01-06T12:00:00.000Z", "breakEnd": "2025-01-06T12:30:00.000Z"},
            {"_id": "b2", "breakStart": "2025-01-06T15:00:00.000Z"},
        ],
        "createdAt": "2025-01-06T08:00:01.000Z",
    }
    rec.update(overrides)
    return rec


def test_parse_session_maps_fields():
    s = parse_session(_record())

    assert s.session_id == "log-1"
    assert s.owner_id == "u1"
    assert s.clock_in == datetime(2025, 1, 6, 8, 0, tzinfo=UTC)
    assert s.clock_out == datetime(2025, 1, 6, 16, 30, tzinfo=UTC)
    assert [b.break_id for b in s.breaks] == ["b1", "b2"]
    assert s.breaks[1].break_end is None
    assert s.breaks[1].is_open


def test_parse_session_open_and_plain_user_id():
    s = parse_session(_record(userId="u9", clockOut=None, breaks=None))

    assert s.owner_id == "u9"
    assert s.clock_out is None
    assert s.breaks == ()
    assert s.is_open


def test_parse_log_page_reads_envelope():
    payload = {"data": {"result": [_record(), _record(_id="log-2")], "meta": {"totalPage": 3}}}

    page = parse_log_page(payload, page=2)

    assert [s.session_id for s in page.sessions] == ["log-1", "log-2"]
    assert page.page == 2
    assert page.total_pages == 3


def test_parse_log_page_drops_malformed_records(caplog):
    payload = {"data": {"result": [_record(_id="bad", clockIn="not-a-date"), _record(), "junk"]}}

    with caplog.at_level(logging.WARNING):
        page = parse_log_page(payload)

    assert [s.session_id for s in page.sessions] == ["log-1"]
    assert "bad" in caplog.text


def test_parse_log_page_tolerates_missing_data():
    page = parse_log_page({})

    assert page.sessions == ()
    assert page.total_pages == 1


def test_parse_log_page_drops_records_with_bad_breaks(caplog):
    payload = {
        "data": {
            "result": [
                _record(_id="junk-entry", breaks=["junk"]),
                _record(_id="junk-list", breaks="junk"),
                _record(),
            ]
        }
    }

    with caplog.at_level(logging.WARNING):
        page = parse_log_page(payload)

    assert [s.session_id for s in page.sessions] == ["log-1"]
    assert "junk-entry" in caplog.text
    assert "junk-list" in caplog.text
