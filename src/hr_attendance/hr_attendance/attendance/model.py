from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceStatus, PenaltyType


@dataclass(frozen=True)
class Penalty:
    type: PenaltyType
    value: float
    minutes: Optional[int] = None

    def to_dict(self) -> dict:
        out: dict = {"type": self.type.value, "value": self.value}
        if self.minutes is not None:
            out["minutes"] = self.minutes
        return out

    @classmethod
    def from_dict(cls, data: dict) -> "Penalty":
        minutes = data.get("minutes")
        return cls(
            type=PenaltyType(data["type"]),
            value=float(data["value"]),
            minutes=int(minutes) if minutes is not None else None,
        )


@dataclass(frozen=True)
class AttendanceRecord:
    """Computed attendance for one (employee_code, work_date).

    check_in/check_out are the chosen punches, in UTC. mission_start/end are
    local HH:MM:SS.
    """

    employee_code: str
    work_date: date
    check_in: Optional[datetime]
    check_out: Optional[datetime]
    total_hours: float
    overtime_hours: float
    status: AttendanceStatus
    penalties: tuple[Penalty, ...] = ()
    is_overnight: bool = False
    notes: Optional[str] = None
    mission_start: Optional[str] = None
    mission_end: Optional[str] = None
    half_day_excused: bool = False

    @property
    def penalty_total(self) -> float:
        return sum(p.value for p in self.penalties)
