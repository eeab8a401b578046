# app/utils/timeutils.py
"""
Timestamp helpers. The database stores naive UTC datetimes; the API
speaks ISO-8601 with a trailing Z.
"""

from datetime import date, datetime, time, timedelta, timezone
from typing import Optional
from zoneinfo import ZoneInfo

from app.config import settings


def utcnow() -> datetime:
    """Current time as naive UTC, the storage convention."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Aware datetimes are converted to UTC; naive ones are assumed UTC already."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def format_utc(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    value = to_naive_utc(value)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def local_zone():
    if settings.TIMEZONE.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(settings.TIMEZONE)


def day_bounds(day: date) -> tuple[datetime, datetime]:
    """
    Half-open range [start, end) of a calendar day in the configured
    timezone, as naive UTC. end is midnight of the following day.
    """
    tz = local_zone()
    start = datetime.combine(day, time.min, tzinfo=tz)
    end = datetime.combine(day + timedelta(days=1), time.min, tzinfo=tz)
    return to_naive_utc(start), to_naive_utc(end)


def today_bounds() -> tuple[datetime, datetime]:
    return day_bounds(datetime.now(local_zone()).date())


def end_of_day(day: date) -> datetime:
    """Exclusive upper bound: the first instant of the next day."""
    return day_bounds(day)[1]


def start_of_day(day: date) -> datetime:
    return day_bounds(day)[0]
