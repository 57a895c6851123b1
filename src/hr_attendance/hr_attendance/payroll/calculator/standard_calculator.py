from __future__ import annotations

from typing import Optional

from ...common.time_utils import time_to_seconds
from ...core.constants import OVERTIME_BUFFER_SECONDS
from .base import WorkTimeCalculator


def compute_overtime_hours(*, shift_end: str, check_out: Optional[int], buffer_seconds: int = OVERTIME_BUFFER_SECONDS) -> int:
    """Whole hours worked past shift end + buffer; partial hours are dropped."""
    if check_out is None:
        return 0
    overtime_start = time_to_seconds(shift_end) + buffer_seconds
    if check_out <= overtime_start:
        return 0
    eligible_minutes = (check_out - overtime_start) // 60
    return int(eligible_minutes // 60)


class StandardWorkTimeCalculator(WorkTimeCalculator):
    """Standard rule: span between first and last stamp; overtime after a one-hour buffer."""

    def __init__(self, *, buffer_seconds: int = OVERTIME_BUFFER_SECONDS):
        self._buffer_seconds = int(buffer_seconds)

    def worked_hours(self, first_stamp: Optional[int], last_stamp: Optional[int]) -> float:
        if first_stamp is None or last_stamp is None:
            return 0.0
        return round(max(last_stamp - first_stamp, 0) / 3600, 2)

    def overtime_hours(self, *, shift_end: str, check_out: Optional[int]) -> int:
        return compute_overtime_hours(shift_end=shift_end, check_out=check_out, buffer_seconds=self._buffer_seconds)
