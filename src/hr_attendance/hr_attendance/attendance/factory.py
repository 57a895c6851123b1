from __future__ import annotations

from dataclasses import dataclass

from .strategies.absent_strategy import AbsentStrategy
from .strategies.base import AttendanceStrategy, DayFacts
from .strategies.excused_strategy import ExcusedStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.normal_strategy import NormalStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    def for_day(self, facts: DayFacts) -> AttendanceStrategy:
        if facts.is_excused:
            return ExcusedStrategy()
        if facts.check_in is None and facts.check_out is None:
            return AbsentStrategy()
        if facts.is_late:
            return LateStrategy()
        return NormalStrategy()
