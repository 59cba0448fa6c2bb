import pytest

from src.staff_attendance.staff_attendance.timeledger.ledger import TimeLedger, format_duration, format_hours_minutes


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "0s"),
        (45, "45s"),
        (59, "59s"),
        (60, "1m"),
        (3599, "59m 59s"),
        (3600, "1h"),
        (3601, "1h 1s"),
        (3661, "1h 1m 1s"),
        (27000, "7h 30m"),
    ],
)
def test_format_duration(seconds, expected):
    assert format_duration(seconds) == expected


def test_format_duration_clamps_negative_input():
    assert format_duration(-5) == "0s"


def test_ledger_exposes_format_duration():
    assert TimeLedger().format_duration(90) == "1m 30s"


def test_format_hours_minutes():
    assert format_hours_minutes(480) == "8h 0m"
    assert format_hours_minutes(61) == "1h 1m"
    assert format_hours_minutes(0) == "0h 0m"
