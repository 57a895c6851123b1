from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_for_employee_and_date(self, employee_code: str, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def upsert_record(self, record: AttendanceRecord) -> None:
        """Insert, or overwrite every computed field of the row with the same
        (employee_code, work_date). Must be atomic per key."""

        raise NotImplementedError

    def list_range(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_code: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
