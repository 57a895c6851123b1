from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.enums import AdjustmentType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_time
from .model import Adjustment
from .repository import AdjustmentRepository


class MySQLAdjustmentRepository(AdjustmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_range(self, *, start: date, end: date) -> Sequence[Adjustment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT adjustment_id, employee_code, work_date, type, from_time, to_time, source, note
                FROM adjustments
                WHERE work_date BETWEEN %s AND %s
                ORDER BY adjustment_id
                """,
                (start, end),
            )
            rows = fetchall(cur)
            return [
                Adjustment(
                    adjustment_id=int(r["adjustment_id"]),
                    employee_code=str(r["employee_code"]),
                    work_date=r["work_date"],
                    type=AdjustmentType(r["type"]),
                    from_time=normalize_mysql_time(r["from_time"]).strftime("%H:%M:%S"),
                    to_time=normalize_mysql_time(r["to_time"]).strftime("%H:%M:%S"),
                    source=r.get("source"),
                    note=r.get("note"),
                )
                for r in rows
            ]

    def create(self, adjustment: Adjustment) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO adjustments(employee_code, work_date, type, from_time, to_time, source, note)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    adjustment.employee_code,
                    adjustment.work_date,
                    adjustment.type.value,
                    adjustment.from_time,
                    adjustment.to_time,
                    adjustment.source,
                    adjustment.note,
                ),
            )
            return int(cur.lastrowid)
