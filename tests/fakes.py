"""In-memory repositories used across the test suite."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Optional

from src.hr_attendance.hr_attendance.adjustments.model import Adjustment
from src.hr_attendance.hr_attendance.attendance.model import AttendanceRecord
from src.hr_attendance.hr_attendance.employees.model import Employee
from src.hr_attendance.hr_attendance.punches.links import punch_key
from src.hr_attendance.hr_attendance.punches.model import Punch, PunchLinkDecision
from src.hr_attendance.hr_attendance.rules.model import Rule


@dataclass
class InMemoryEmployees:
    employees: list[Employee] = field(default_factory=list)

    def list_employees(self):
        return list(self.employees)

    def get_by_code(self, code: str) -> Optional[Employee]:
        return next((e for e in self.employees if e.code == code), None)


@dataclass
class InMemoryRules:
    rules: list[Rule] = field(default_factory=list)
    _next_id: int = 1

    def list_rules(self):
        return list(self.rules)

    def create(self, rule: Rule) -> int:
        rule_id = self._next_id
        self._next_id += 1
        self.rules.append(replace(rule, rule_id=rule_id))
        return rule_id

    def delete(self, *, rule_id: int) -> bool:
        before = len(self.rules)
        self.rules = [r for r in self.rules if r.rule_id != rule_id]
        return len(self.rules) != before


@dataclass
class InMemoryAdjustments:
    adjustments: list[Adjustment] = field(default_factory=list)

    def list_for_range(self, *, start: date, end: date):
        return [a for a in self.adjustments if start <= a.work_date <= end]

    def create(self, adjustment: Adjustment) -> int:
        self.adjustments.append(replace(adjustment, adjustment_id=len(self.adjustments) + 1))
        return len(self.adjustments)


@dataclass
class InMemoryPunches:
    punches: list[Punch] = field(default_factory=list)
    list_calls: int = 0

    def list_punches(self, *, utc_start: datetime, utc_end: datetime):
        self.list_calls += 1
        return sorted(
            (p for p in self.punches if utc_start <= p.punch_datetime <= utc_end),
            key=lambda p: p.punch_datetime,
        )

    def add_many(self, punches) -> int:
        punches = list(punches)
        self.punches.extend(punches)
        return len(punches)


class InMemoryLinks:
    def __init__(self, decisions=()):
        self._by_key: dict = {}
        for d in decisions:
            self.save(d)

    def list_decisions(self):
        return list(self._by_key.values())

    def save(self, decision: PunchLinkDecision) -> None:
        key = punch_key(decision.employee_code, decision.punch_datetime)
        # Re-inserting moves the key to the end, like ORDER BY updated_at.
        self._by_key.pop(key, None)
        self._by_key[key] = decision


class InMemoryAttendance:
    def __init__(self, records=()):
        self._by_key: dict[tuple[str, date], AttendanceRecord] = {}
        self.upserts = 0
        for r in records:
            self._by_key[(r.employee_code, r.work_date)] = r

    def get_for_employee_and_date(self, employee_code: str, work_date: date) -> Optional[AttendanceRecord]:
        return self._by_key.get((employee_code, work_date))

    def upsert_record(self, record: AttendanceRecord) -> None:
        self.upserts += 1
        self._by_key[(record.employee_code, record.work_date)] = record

    def list_range(self, *, start_date: date, end_date: date, employee_code: Optional[str] = None):
        items = [
            r
            for r in self._by_key.values()
            if start_date <= r.work_date <= end_date and (employee_code is None or r.employee_code == employee_code)
        ]
        items.sort(key=lambda r: (r.work_date, r.employee_code))
        return items

    def snapshot(self) -> dict:
        return dict(self._by_key)
