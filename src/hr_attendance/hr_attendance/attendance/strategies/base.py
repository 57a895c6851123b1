from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from ...core.constants import (
    EARLY_LEAVE_PENALTY,
    LATE_PENALTY_FULL,
    LATE_PENALTY_HALF,
    LATE_PENALTY_QUARTER,
    LATE_TIER_FULL_DAY_MINUTES,
    LATE_TIER_HALF_DAY_MINUTES,
    MISSING_STAMP_PENALTY,
)
from ...core.enums import AttendanceStatus, PenaltyType
from ..model import Penalty


@dataclass(frozen=True)
class DayFacts:
    """Everything the classifier needs for one employee/day, as local datetimes."""

    check_in: Optional[datetime]
    check_out: Optional[datetime]
    shift_start: datetime
    shift_end: datetime
    default_shift_end: datetime
    mission_start: Optional[datetime] = None
    mission_end: Optional[datetime] = None
    suppress_penalties: bool = False
    half_day_excused: bool = False
    grace: timedelta = timedelta(minutes=15)

    @property
    def has_mission(self) -> bool:
        return self.mission_start is not None and self.mission_end is not None

    @property
    def excused_by_half_day(self) -> bool:
        return self.half_day_excused and self.check_in is None and self.check_out is None

    @property
    def is_excused(self) -> bool:
        return self.excused_by_half_day or self.has_mission or self.suppress_penalties

    @property
    def late_by(self) -> Optional[timedelta]:
        if self.check_in is None:
            return None
        return self.check_in - self.shift_start

    @property
    def is_late(self) -> bool:
        late = self.late_by
        return late is not None and late > self.grace

    @property
    def checks_out_early(self) -> bool:
        return self.check_out is not None and self.check_out < self.shift_end - self.grace

    @property
    def missing_checkout(self) -> bool:
        return self.check_in is not None and self.check_out is None and not self.is_excused

    @property
    def early_leave_triggered(self) -> bool:
        return self.checks_out_early and not self.is_excused and not self.missing_checkout


@dataclass(frozen=True)
class StatusDecision:
    status: AttendanceStatus
    penalties: tuple[Penalty, ...] = ()


def late_penalty(late_by: timedelta) -> Penalty:
    minutes = math.ceil(late_by.total_seconds() / 60)
    if minutes > LATE_TIER_FULL_DAY_MINUTES:
        value = LATE_PENALTY_FULL
    elif minutes > LATE_TIER_HALF_DAY_MINUTES:
        value = LATE_PENALTY_HALF
    else:
        value = LATE_PENALTY_QUARTER
    return Penalty(type=PenaltyType.LATE_ARRIVAL, value=value, minutes=minutes)


def departure_penalties(facts: DayFacts) -> tuple[Penalty, ...]:
    """Missing check-out wins over early leave; at most one of them."""
    if facts.missing_checkout:
        return (Penalty(type=PenaltyType.MISSING_STAMP, value=MISSING_STAMP_PENALTY),)
    if facts.early_leave_triggered:
        return (Penalty(type=PenaltyType.EARLY_LEAVE, value=EARLY_LEAVE_PENALTY),)
    return ()


class AttendanceStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide a day's status and penalties."""

    @abstractmethod
    def decide(self, facts: DayFacts) -> StatusDecision:
        raise NotImplementedError
