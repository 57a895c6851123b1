from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import PunchLinkAction


@dataclass(frozen=True)
class Punch:
    """Append-only biometric event. `punch_datetime` is naive UTC."""

    employee_code: str
    punch_datetime: datetime


@dataclass(frozen=True)
class PunchLinkDecision:
    """Reviewer decision for one punch, keyed by (employee_code, punch_datetime)."""

    employee_code: str
    punch_datetime: datetime
    action: PunchLinkAction
    target_base_date: Optional[date] = None
    note: Optional[str] = None


@dataclass(frozen=True)
class MidnightPunch:
    """Review-queue row for a punch recorded shortly after local midnight."""

    employee_code: str
    employee_name: Optional[str]
    punch_datetime: datetime
    punch_date: date
    punch_time: str
    suggested_previous_date: date
    status: str
    note: Optional[str] = None
