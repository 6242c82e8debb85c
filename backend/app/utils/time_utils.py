"""Timestamp and reporting-window helpers.

Timestamps are stored as naive UTC in the database. Everything handed to or
returned from these helpers is either aware UTC or explicitly converted.
"""

import math
from datetime import datetime, timedelta, timezone
from decimal import Decimal, ROUND_HALF_UP
from zoneinfo import ZoneInfo

from app.config import settings

WEEK_WINDOW = timedelta(days=7)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_db(value: datetime) -> datetime:
    """Convert an aware datetime to the naive UTC form stored in the database."""
    return as_utc(value).replace(tzinfo=None)


def local_zone() -> ZoneInfo:
    return ZoneInfo(settings.TIMEZONE)


def week_window_start(now: datetime) -> datetime:
    # Rolling 7x24h window ending at `now`.
    return as_utc(now) - WEEK_WINDOW


def month_window_start(now: datetime, tz: ZoneInfo | None = None) -> datetime:
    """Midnight on the first day of `now`'s calendar month in `tz`, as UTC."""
    zone = tz or local_zone()
    local_now = as_utc(now).astimezone(zone)
    start = datetime(local_now.year, local_now.month, 1, tzinfo=zone)
    return start.astimezone(timezone.utc)


def elapsed_minutes(start: datetime, end: datetime) -> int:
    """Whole minutes between two instants, rounded half up, never negative."""
    seconds = (as_utc(end) - as_utc(start)).total_seconds()
    return max(0, int(math.floor(seconds / 60 + 0.5)))


def minutes_to_hours(minutes: int | float | None) -> float:
    value = Decimal(str(minutes or 0)) / Decimal(60)
    return float(value.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def iso_utc(value: datetime) -> str:
    """ISO-8601 in UTC with a ``Z`` suffix, the same form the JSON API emits."""
    return as_utc(value).isoformat().replace("+00:00", "Z")
