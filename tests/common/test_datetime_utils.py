from datetime import date, datetime, timedelta, timezone

import pytest

from src.hr_attendance.hr_attendance.common.datetime_utils import (
    local_date_range,
    local_instant,
    local_to_utc,
    parse_iso_date,
    parse_iso_datetime,
    seconds_since_local_midnight,
    utc_to_local,
)
from src.hr_attendance.hr_attendance.core.exceptions import ValidationError


def test_local_date_range_is_inclusive_and_restartable():
    days = local_date_range(date(2025, 1, 30), date(2025, 2, 2))
    assert list(days) == [date(2025, 1, 30), date(2025, 1, 31), date(2025, 2, 1), date(2025, 2, 2)]
    assert list(local_date_range(date(2025, 1, 30), date(2025, 1, 30))) == [date(2025, 1, 30)]
    assert list(local_date_range(date(2025, 2, 1), date(2025, 1, 30))) == []


def test_offset_convention_utc_equals_local_plus_offset():
    # UTC+02:00 is passed as -120.
    assert utc_to_local(datetime(2025, 1, 24, 22, 30), -120) == datetime(2025, 1, 25, 0, 30)
    assert local_to_utc(datetime(2025, 1, 25, 0, 30), -120) == datetime(2025, 1, 24, 22, 30)
    assert utc_to_local(datetime(2025, 1, 24, 3, 0), 300) == datetime(2025, 1, 23, 22, 0)


def test_utc_to_local_accepts_aware_datetimes():
    aware = datetime(2025, 1, 24, 22, 30, tzinfo=timezone(timedelta(hours=1)))
    assert utc_to_local(aware, 0) == datetime(2025, 1, 24, 21, 30)


def test_seconds_since_local_midnight_runs_past_one_day():
    day = date(2025, 1, 24)
    assert seconds_since_local_midnight(datetime(2025, 1, 24, 9, 0), day) == 9 * 3600
    assert seconds_since_local_midnight(datetime(2025, 1, 25, 1, 30), day) == 25 * 3600 + 30 * 60
    assert local_instant(day, 25 * 3600) == datetime(2025, 1, 25, 1, 0)


def test_parse_iso_datetime():
    assert parse_iso_datetime("2025-01-24T23:30:00Z") == datetime(2025, 1, 24, 23, 30)
    assert parse_iso_datetime("2025-01-25T01:30:00+02:00") == datetime(2025, 1, 24, 23, 30)
    assert parse_iso_datetime(datetime(2025, 1, 24, 23, 30)) == datetime(2025, 1, 24, 23, 30)
    with pytest.raises(ValidationError):
        parse_iso_datetime("yesterday")


def test_parse_iso_date():
    assert parse_iso_date("2025-01-24") == date(2025, 1, 24)
    with pytest.raises(ValidationError):
        parse_iso_date("2025-13-01")
