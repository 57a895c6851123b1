from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import AdjustmentType


@dataclass(frozen=True)
class Adjustment:
    """Partial-day leave, permission or business trip for one employee/day.

    `from_time`/`to_time` are HH:MM:SS strings in local time.
    """

    employee_code: str
    work_date: date
    type: AdjustmentType
    from_time: str
    to_time: str
    source: Optional[str] = None
    note: Optional[str] = None
    adjustment_id: Optional[int] = None
