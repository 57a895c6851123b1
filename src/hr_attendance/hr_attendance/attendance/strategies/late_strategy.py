from __future__ import annotations

from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, DayFacts, StatusDecision, departure_penalties, late_penalty


class LateStrategy(AttendanceStrategy):
    """Late check-in past the grace period."""

    def decide(self, facts: DayFacts) -> StatusDecision:
        penalties = (late_penalty(facts.late_by),) + departure_penalties(facts)
        return StatusDecision(status=AttendanceStatus.LATE, penalties=penalties)
