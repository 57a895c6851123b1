from datetime import date

import pytest

from src.hr_attendance.hr_attendance.attendance.model import AttendanceRecord, Penalty
from src.hr_attendance.hr_attendance.core.enums import AttendanceStatus, PenaltyType
from src.hr_attendance.hr_attendance.core.exceptions import ValidationError
from src.hr_attendance.hr_attendance.payroll.service import AttendanceSummaryService
from tests.fakes import InMemoryAttendance


def rec(code, day, status, *, hours=0.0, overtime=0.0, penalties=()):
    return AttendanceRecord(
        employee_code=code,
        work_date=day,
        check_in=None,
        check_out=None,
        total_hours=hours,
        overtime_hours=overtime,
        status=status,
        penalties=tuple(penalties),
    )


@pytest.fixture()
def service():
    repo = InMemoryAttendance(
        [
            rec("E1", date(2025, 1, 6), AttendanceStatus.PRESENT, hours=9.5, overtime=1),
            rec("E1", date(2025, 1, 7), AttendanceStatus.PRESENT, hours=8.25),
            rec("E2", date(2025, 1, 6), AttendanceStatus.ABSENT, penalties=[Penalty(PenaltyType.ABSENCE, 1.0)]),
            rec(
                "E2",
                date(2025, 1, 7),
                AttendanceStatus.LATE,
                hours=7.0,
                penalties=[Penalty(PenaltyType.LATE_ARRIVAL, 0.25, 20), Penalty(PenaltyType.MISSING_STAMP, 0.5)],
            ),
            rec("E1", date(2025, 2, 1), AttendanceStatus.ABSENT, penalties=[Penalty(PenaltyType.ABSENCE, 1.0)]),
        ]
    )
    return AttendanceSummaryService(repo)


def test_summary_aggregates_per_employee(service):
    data = service.build_summary(start=date(2025, 1, 1), end=date(2025, 1, 31))

    assert len(data.rows) == 4
    assert [s["employee_code"] for s in data.summary] == ["E2", "E1"]

    e2, e1 = data.summary
    assert e2["days"] == 2
    assert e2["Absent"] == 1 and e2["Late"] == 1 and e2["Present"] == 0
    assert e2["penalty_total"] == 1.75
    assert e1["total_hours"] == 17.75
    assert e1["overtime_hours"] == 1
    assert e1["penalty_total"] == 0


def test_rows_serialize_penalties(service):
    data = service.build_summary(start=date(2025, 1, 7), end=date(2025, 1, 7), employee_code="E2")

    assert len(data.rows) == 1
    row = data.rows[0]
    assert row["work_date"] == "2025-01-07"
    assert row["status"] == "Late"
    assert row["penalties"] == [
        {"type": "late_arrival", "value": 0.25, "minutes": 20},
        {"type": "missing_stamp", "value": 0.5},
    ]
    assert row["check_in"] is None


def test_rejects_reversed_range(service):
    with pytest.raises(ValidationError):
        service.build_summary(start=date(2025, 2, 1), end=date(2025, 1, 1))
