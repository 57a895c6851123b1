from __future__ import annotations

import json
from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_time
from .model import AttendanceRecord, Penalty
from .repository import AttendanceRepository

_COLUMNS = """
    employee_code, work_date, check_in, check_out, total_hours, overtime_hours,
    status, penalties, is_overnight, notes, mission_start, mission_end, half_day_excused
"""


def _fmt_time(value) -> Optional[str]:
    t = normalize_mysql_time(value)
    return t.strftime("%H:%M:%S") if t else None


def _to_record(r: dict) -> AttendanceRecord:
    penalties = json.loads(r["penalties"]) if r.get("penalties") else []
    return AttendanceRecord(
        employee_code=str(r["employee_code"]),
        work_date=r["work_date"],
        check_in=r.get("check_in"),
        check_out=r.get("check_out"),
        total_hours=float(r.get("total_hours") or 0),
        overtime_hours=float(r.get("overtime_hours") or 0),
        status=AttendanceStatus(r["status"]),
        penalties=tuple(Penalty.from_dict(p) for p in penalties),
        is_overnight=bool(r.get("is_overnight")),
        notes=r.get("notes"),
        mission_start=_fmt_time(r.get("mission_start")),
        mission_end=_fmt_time(r.get("mission_end")),
        half_day_excused=bool(r.get("half_day_excused")),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_employee_and_date(self, employee_code: str, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE employee_code=%s AND work_date=%s
                """,
                (employee_code, work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def upsert_record(self, record: AttendanceRecord) -> None:
        # UNIQUE(employee_code, work_date) makes this a single atomic upsert.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO attendance_records({_COLUMNS})
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    check_in=VALUES(check_in),
                    check_out=VALUES(check_out),
                    total_hours=VALUES(total_hours),
                    overtime_hours=VALUES(overtime_hours),
                    status=VALUES(status),
                    penalties=VALUES(penalties),
                    is_overnight=VALUES(is_overnight),
                    notes=VALUES(notes),
                    mission_start=VALUES(mission_start),
                    mission_end=VALUES(mission_end),
                    half_day_excused=VALUES(half_day_excused)
                """,
                (
                    record.employee_code,
                    record.work_date,
                    record.check_in,
                    record.check_out,
                    record.total_hours,
                    record.overtime_hours,
                    record.status.value,
                    json.dumps([p.to_dict() for p in record.penalties], ensure_ascii=False),
                    int(record.is_overnight),
                    record.notes,
                    record.mission_start,
                    record.mission_end,
                    int(record.half_day_excused),
                ),
            )

    def list_range(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_code: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        clauses = ["work_date BETWEEN %s AND %s"]
        params: list[object] = [start_date, end_date]
        if employee_code:
            clauses.append("employee_code=%s")
            params.append(employee_code)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE {where}
                ORDER BY work_date ASC, employee_code ASC
                """,
                tuple(params),
            )
            return [_to_record(r) for r in fetchall(cur)]
