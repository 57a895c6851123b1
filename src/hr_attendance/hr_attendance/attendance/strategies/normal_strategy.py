from __future__ import annotations

from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, DayFacts, StatusDecision, departure_penalties


class NormalStrategy(AttendanceStrategy):
    """On-time (or check-out only) day; departure penalties still apply."""

    def decide(self, facts: DayFacts) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.PRESENT, penalties=departure_penalties(facts))
