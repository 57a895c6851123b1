"""Map UTC punches onto the employee's local calendar day.

Punch timestamps carry no reliable zone; the caller supplies the offset
(UTC = local + offset, minutes). Server timezone plays no part.
"""

from __future__ import annotations

from collections import defaultdict
from datetime import date, datetime, time, timedelta
from typing import Iterable

from ..common.datetime_utils import as_naive_utc, local_to_utc, utc_to_local
from ..core.constants import PUNCH_FETCH_PADDING_HOURS
from .model import Punch

DayKey = tuple[str, date]


def local_day(punch_datetime: datetime, offset_minutes: int) -> date:
    return utc_to_local(punch_datetime, offset_minutes).date()


def punch_fetch_window(start: date, end: date, offset_minutes: int) -> tuple[datetime, datetime]:
    """UTC bounds for fetching raw punches of local days [start, end].

    Padded on both sides so punches near the boundaries (and post-midnight
    punches that may be linked back to `end`) are not missed.
    """

    padding = timedelta(hours=PUNCH_FETCH_PADDING_HOURS)
    utc_start = local_to_utc(datetime.combine(start, time.min), offset_minutes) - padding
    utc_end = local_to_utc(datetime.combine(end, time.max), offset_minutes) + padding
    return utc_start, utc_end


def bucket_punches(punches: Iterable[Punch], offset_minutes: int) -> dict[DayKey, list[datetime]]:
    """Group punches by (employee_code, local date); each list is sorted and holds UTC datetimes."""

    buckets: dict[DayKey, list[datetime]] = defaultdict(list)
    for p in punches:
        ts = as_naive_utc(p.punch_datetime)
        buckets[(p.employee_code, local_day(ts, offset_minutes))].append(ts)
    for values in buckets.values():
        values.sort()
    return dict(buckets)
