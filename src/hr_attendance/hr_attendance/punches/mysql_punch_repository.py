from __future__ import annotations

from datetime import datetime
from typing import Iterable, Sequence

from ..common.datetime_utils import as_naive_utc
from ..core.enums import PunchLinkAction
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Punch, PunchLinkDecision
from .repository import PunchLinkRepository, PunchRepository


class MySQLPunchRepository(PunchRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_punches(self, *, utc_start: datetime, utc_end: datetime) -> Sequence[Punch]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_code, punch_datetime
                FROM biometric_punches
                WHERE punch_datetime BETWEEN %s AND %s
                ORDER BY punch_datetime
                """,
                (utc_start, utc_end),
            )
            return [Punch(employee_code=str(r["employee_code"]), punch_datetime=r["punch_datetime"]) for r in fetchall(cur)]

    def add_many(self, punches: Iterable[Punch]) -> int:
        rows = [(p.employee_code, as_naive_utc(p.punch_datetime)) for p in punches]
        if not rows:
            return 0
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                "INSERT INTO biometric_punches(employee_code, punch_datetime) VALUES(%s,%s)",
                rows,
            )
            return len(rows)


class MySQLPunchLinkRepository(PunchLinkRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_decisions(self) -> Sequence[PunchLinkDecision]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_code, punch_datetime, action, target_base_date, note
                FROM punch_link_decisions
                ORDER BY updated_at, decision_id
                """
            )
            return [
                PunchLinkDecision(
                    employee_code=str(r["employee_code"]),
                    punch_datetime=r["punch_datetime"],
                    action=PunchLinkAction(r["action"]),
                    target_base_date=r.get("target_base_date"),
                    note=r.get("note"),
                )
                for r in fetchall(cur)
            ]

    def save(self, decision: PunchLinkDecision) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO punch_link_decisions(employee_code, punch_datetime, action, target_base_date, note)
                VALUES(%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    action=VALUES(action),
                    target_base_date=VALUES(target_base_date),
                    note=VALUES(note),
                    updated_at=CURRENT_TIMESTAMP
                """,
                (
                    decision.employee_code,
                    as_naive_utc(decision.punch_datetime),
                    decision.action.value,
                    decision.target_base_date,
                    decision.note,
                ),
            )
