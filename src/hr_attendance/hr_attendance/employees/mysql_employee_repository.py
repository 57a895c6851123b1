from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import DEFAULT_SHIFT_START
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_time
from .model import Employee
from .repository import EmployeeRepository


def _to_employee(row: dict) -> Employee:
    shift_start = normalize_mysql_time(row.get("shift_start"))
    return Employee(
        code=str(row["code"]),
        name=row.get("name") or "",
        sector=row.get("sector"),
        department=row.get("department"),
        shift_start=shift_start.strftime("%H:%M") if shift_start else DEFAULT_SHIFT_START,
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_employees(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT code, name, sector, department, shift_start
                FROM employees
                ORDER BY code
                """
            )
            return [_to_employee(r) for r in fetchall(cur)]

    def get_by_code(self, code: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT code, name, sector, department, shift_start
                FROM employees
                WHERE code=%s
                """,
                (code,),
            )
            row = fetchone(cur)
            return _to_employee(row) if row else None
