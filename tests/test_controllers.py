from __future__ import annotations

from datetime import date, datetime
from types import SimpleNamespace

import pytest
from flask import Flask

from src.hr_attendance.hr_attendance.adjustments.controller import register as register_adjustments
from src.hr_attendance.hr_attendance.adjustments.service import AdjustmentService
from src.hr_attendance.hr_attendance.attendance.controller import register as register_attendance
from src.hr_attendance.hr_attendance.attendance.service import ProcessResult
from src.hr_attendance.hr_attendance.core.exceptions import ProcessingError
from src.hr_attendance.hr_attendance.employees.model import Employee
from src.hr_attendance.hr_attendance.payroll.service import ReportData
from src.hr_attendance.hr_attendance.punches.controller import register as register_punches
from src.hr_attendance.hr_attendance.punches.model import Punch
from src.hr_attendance.hr_attendance.punches.service import PunchLinkService
from src.hr_attendance.hr_attendance.rules.controller import register as register_rules
from src.hr_attendance.hr_attendance.rules.service import RuleService
from tests.fakes import InMemoryAdjustments, InMemoryEmployees, InMemoryLinks, InMemoryPunches, InMemoryRules


class FakeAttendanceService:
    def __init__(self):
        self.calls = []
        self.error = None

    def process_attendance(self, start, end, offset_minutes=0, *, should_cancel=None):
        self.calls.append((start, end, offset_minutes))
        if self.error:
            raise self.error
        return ProcessResult(processed_count=62)


class FakeSummaryService:
    def build_summary(self, *, start, end, employee_code=None):
        return ReportData(
            rows=[{"employee_code": employee_code or "E1", "work_date": start.isoformat()}],
            summary=[{"employee_code": employee_code or "E1", "days": 1}],
        )


@pytest.fixture()
def ctx():
    links = InMemoryLinks()
    rules = InMemoryRules()
    adjustments = InMemoryAdjustments()
    container = SimpleNamespace(
        attendance_service=FakeAttendanceService(),
        summary_service=FakeSummaryService(),
        punch_link_service=PunchLinkService(
            InMemoryPunches([Punch("E1", datetime(2025, 1, 24, 23, 30))]),
            links,
            InMemoryEmployees([Employee("E1", "Amal")]),
        ),
        rule_service=RuleService(rules),
        adjustment_service=AdjustmentService(adjustments),
        default_offset_minutes=-120,
    )

    app = Flask(__name__)
    app.config["TESTING"] = True
    register_attendance(app, container)
    register_punches(app, container)
    register_rules(app, container)
    register_adjustments(app, container)

    return SimpleNamespace(
        client=app.test_client(),
        container=container,
        links=links,
        rules=rules,
        adjustments=adjustments,
    )


def test_process_uses_default_offset(ctx):
    resp = ctx.client.post("/api/attendance/process", json={"startDate": "2025-01-01", "endDate": "2025-01-31"})

    assert resp.status_code == 200
    assert resp.get_json() == {"message": "Processing completed", "processedCount": 62}
    assert ctx.container.attendance_service.calls == [(date(2025, 1, 1), date(2025, 1, 31), -120)]


def test_process_with_explicit_offset(ctx):
    resp = ctx.client.post(
        "/api/attendance/process",
        json={"startDate": "2025-01-01", "endDate": "2025-01-01", "timezoneOffsetMinutes": 0},
    )
    assert resp.status_code == 200
    assert ctx.container.attendance_service.calls[-1][2] == 0


def test_process_validation_errors_are_400(ctx):
    resp = ctx.client.post("/api/attendance/process", json={"endDate": "2025-01-31"})
    assert resp.status_code == 400
    assert "startDate" in resp.get_json()["message"]

    resp = ctx.client.post(
        "/api/attendance/process",
        json={"startDate": "2025-01-01", "endDate": "2025-01-31", "timezoneOffsetMinutes": "UTC+2"},
    )
    assert resp.status_code == 400


def test_process_failure_reports_processed_count(ctx):
    try:
        raise RuntimeError("db down")
    except RuntimeError as cause:
        error = ProcessingError("Failed to process attendance: db down", processed_count=7)
        error.__cause__ = cause
    ctx.container.attendance_service.error = error

    resp = ctx.client.post("/api/attendance/process", json={"startDate": "2025-01-01", "endDate": "2025-01-31"})

    assert resp.status_code == 500
    body = resp.get_json()
    assert body["processedCount"] == 7
    assert body["error"] == "db down"


def test_summary(ctx):
    resp = ctx.client.get("/api/attendance/summary?startDate=2025-01-01&endDate=2025-01-31&employeeCode=E9")
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["rows"][0]["employee_code"] == "E9"
    assert body["summary"][0]["days"] == 1


def test_midnight_review_flow(ctx):
    resp = ctx.client.get("/api/midnight-punches?startDate=2025-01-25&endDate=2025-01-25")
    assert resp.status_code == 200
    [item] = resp.get_json()
    assert item["employeeName"] == "Amal"
    assert item["punchDateTime"] == "2025-01-24T23:30:00Z"
    assert item["punchTime"] == "01:30:00"
    assert item["suggestedPreviousDate"] == "2025-01-24"
    assert item["status"] == "pending"

    resp = ctx.client.post(
        "/api/midnight-links/action",
        json={"employeeCode": "E1", "punchDateTime": item["punchDateTime"], "action": "previous_day_checkout"},
    )
    assert resp.status_code == 200
    [decision] = ctx.links.list_decisions()
    assert decision.target_base_date == date(2025, 1, 24)

    resp = ctx.client.get("/api/midnight-punches?startDate=2025-01-25&endDate=2025-01-25")
    assert resp.get_json()[0]["status"] == "previous_day_checkout"


def test_midnight_action_rejects_unknown_action(ctx):
    resp = ctx.client.post(
        "/api/midnight-links/action",
        json={"employeeCode": "E1", "punchDateTime": "2025-01-24T23:30:00Z", "action": "merge"},
    )
    assert resp.status_code == 400


def test_midnight_import(ctx):
    resp = ctx.client.post(
        "/api/midnight-links/import",
        json={
            "rows": [
                {"employeeCode": "E1", "punchDate": "2025-01-25", "punchTime": "01:30", "linkToPreviousDay": 1},
                {"employeeCode": "E1", "punchDate": "bad", "punchTime": "01:30"},
            ]
        },
    )
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["inserted"] == 1
    assert body["invalid"][0]["row"] == 2

    resp = ctx.client.post("/api/midnight-links/import", json={"rows": "nope"})
    assert resp.status_code == 400


def test_rules_create_and_delete(ctx):
    resp = ctx.client.post(
        "/api/rules",
        json={
            "name": "Ramadan",
            "scope": "all",
            "startDate": "2025-03-01",
            "endDate": "2025-03-30",
            "ruleType": "custom_shift",
            "priority": 2,
            "params": {"shiftStart": "10:00", "shiftEnd": "15:00"},
        },
    )
    assert resp.status_code == 201
    rule_id = resp.get_json()["id"]
    assert ctx.rules.rules[0].params["shiftEnd"] == "15:00:00"

    assert ctx.client.delete(f"/api/rules/{rule_id}").status_code == 204
    assert ctx.client.delete(f"/api/rules/{rule_id}").status_code == 400


def test_adjustment_create_and_bad_time(ctx):
    resp = ctx.client.post(
        "/api/adjustments",
        json={"employeeCode": "E1", "date": "2025-01-06", "type": "مأمورية", "fromTime": "09:00", "toTime": "17:00"},
    )
    assert resp.status_code == 201
    assert resp.get_json() == {"id": 1}

    resp = ctx.client.post(
        "/api/adjustments",
        json={"employeeCode": "E1", "date": "2025-01-06", "type": "business_trip", "fromTime": "9h", "toTime": "17:00"},
    )
    assert resp.status_code == 400
    assert ctx.adjustments.adjustments[0].from_time == "09:00:00"
    assert len(ctx.adjustments.adjustments) == 1
