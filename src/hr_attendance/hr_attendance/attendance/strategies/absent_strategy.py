from __future__ import annotations

from ...core.constants import ABSENCE_PENALTY
from ...core.enums import AttendanceStatus, PenaltyType
from ..model import Penalty
from .base import AttendanceStrategy, DayFacts, StatusDecision


class AbsentStrategy(AttendanceStrategy):
    """No punches and nothing excusing the day."""

    def decide(self, facts: DayFacts) -> StatusDecision:
        return StatusDecision(
            status=AttendanceStatus.ABSENT,
            penalties=(Penalty(type=PenaltyType.ABSENCE, value=ABSENCE_PENALTY),),
        )
