from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone
from typing import Iterator

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime((value or "").strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Invalid date: {value!r} (expected YYYY-MM-DD)")


def local_date_range(start: date, end: date) -> Iterator[date]:
    """Yield every calendar day from start to end, both inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def as_naive_utc(value: datetime) -> datetime:
    """Punch timestamps are compared as naive UTC; aware values are converted first."""
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def utc_to_local(value: datetime, offset_minutes: int) -> datetime:
    """Convert a UTC instant to local wall-clock time.

    The offset follows the browser convention: UTC = local + offset,
    so UTC+02:00 is passed as -120.
    """

    return as_naive_utc(value) - timedelta(minutes=int(offset_minutes))


def local_to_utc(value: datetime, offset_minutes: int) -> datetime:
    return value + timedelta(minutes=int(offset_minutes))


def seconds_since_local_midnight(value: datetime, day: date) -> int:
    """Seconds between `day` 00:00 and a local datetime (may exceed 86400 or be negative)."""
    return int((value - datetime.combine(day, time.min)).total_seconds())


def local_instant(day: date, seconds: int) -> datetime:
    return datetime.combine(day, time.min) + timedelta(seconds=int(seconds))


def parse_iso_datetime(value) -> datetime:
    """Parse an ISO-8601 timestamp (a trailing "Z" is accepted) into naive UTC."""
    if isinstance(value, datetime):
        return as_naive_utc(value)
    text = (value or "").strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return as_naive_utc(datetime.fromisoformat(text))
    except ValueError:
        raise ValidationError(f"Invalid timestamp: {value!r}")
