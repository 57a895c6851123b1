from __future__ import annotations

from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, DayFacts, StatusDecision


class ExcusedStrategy(AttendanceStrategy):
    """Half-day leave without punches, business trip, or suppressed penalties.

    Never records penalties. A mission running to the end of the shift counts
    as a present day.
    """

    def decide(self, facts: DayFacts) -> StatusDecision:
        if facts.has_mission and facts.mission_end >= facts.default_shift_end:
            return StatusDecision(status=AttendanceStatus.PRESENT)
        return StatusDecision(status=AttendanceStatus.EXCUSED)
