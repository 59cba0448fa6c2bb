from __future__ import annotations

import calendar
from datetime import date, datetime
from typing import Optional, Union

import pytz

from ..core.constants import EMPTY_PLACEHOLDER
from ..core.exceptions import ValidationError

UTC = pytz.utc


def get_timezone(name: str):
    """Resolve a civil timezone name (e.g. ``Europe/London``)."""
    try:
        return pytz.timezone(name)
    except pytz.UnknownTimeZoneError:
        raise ValidationError(f"Unknown timezone: {name!r}")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date (expected YYYY-MM-DD): {value!r}")


def ensure_utc(instant: datetime) -> datetime:
    """Anchor an instant to UTC. Naive values are taken as UTC already."""
    if instant.tzinfo is None:
        return UTC.localize(instant)
    return instant.astimezone(UTC)


def parse_instant(value: Union[str, datetime, None]) -> Optional[datetime]:
    """Parse an ISO-8601 instant coming from the Logs API into an aware UTC datetime."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return ensure_utc(value)
    if not isinstance(value, str):
        raise ValidationError(f"Invalid timestamp: {value!r}")

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        raise ValidationError(f"Invalid timestamp: {value!r}")
    return ensure_utc(parsed)


def to_civil(instant: datetime, timezone_name: str) -> datetime:
    return ensure_utc(instant).astimezone(get_timezone(timezone_name))


def format_civil(instant: Optional[datetime], timezone_name: str, fmt: str) -> str:
    """Render an instant in the civil timezone, or a dash when it is missing."""
    if instant is None:
        return EMPTY_PLACEHOLDER
    return to_civil(instant, timezone_name).strftime(fmt)


def civil_date(instant: datetime, timezone_name: str) -> date:
    return to_civil(instant, timezone_name).date()


def month_bounds(now: datetime, timezone_name: str) -> tuple[date, date]:
    """First and last civil day of the month containing ``now``."""
    today = civil_date(now, timezone_name)
    last_day = calendar.monthrange(today.year, today.month)[1]
    return today.replace(day=1), today.replace(day=last_day)


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(UTC)
