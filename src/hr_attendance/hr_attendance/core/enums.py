from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Normalized per-day attendance status stored on each record."""

    PRESENT = "Present"
    LATE = "Late"
    ABSENT = "Absent"
    EXCUSED = "Excused"


class PenaltyType(str, Enum):
    LATE_ARRIVAL = "late_arrival"
    ABSENCE = "absence"
    MISSING_STAMP = "missing_stamp"
    EARLY_LEAVE = "early_leave"


class AdjustmentType(str, Enum):
    """Same-day adjustments entered by HR.

    The original data entry used Arabic labels; `from_label` accepts both.
    """

    MORNING_PERMISSION = "morning_permission"
    EVENING_PERMISSION = "evening_permission"
    HALF_DAY_LEAVE = "half_day_leave"
    BUSINESS_TRIP = "business_trip"

    @classmethod
    def from_label(cls, value: str) -> "AdjustmentType":
        v = (value or "").strip()
        alias = _ADJUSTMENT_ALIASES.get(v)
        if alias:
            return alias
        return cls(v.lower().replace(" ", "_").replace("-", "_"))


_ADJUSTMENT_ALIASES = {
    "اذن صباحي": AdjustmentType.MORNING_PERMISSION,
    "اذن مسائي": AdjustmentType.EVENING_PERMISSION,
    "إجازة نص يوم": AdjustmentType.HALF_DAY_LEAVE,
    "مأمورية": AdjustmentType.BUSINESS_TRIP,
}


class RuleType(str, Enum):
    CUSTOM_SHIFT = "custom_shift"
    OVERTIME_OVERNIGHT = "overtime_overnight"
    # Reserved; stored and listed but not consumed by the engine.
    ATTENDANCE_EXEMPT = "attendance_exempt"
    PENALTY_OVERRIDE = "penalty_override"
    IGNORE_BIOMETRIC = "ignore_biometric"


class PunchLinkAction(str, Enum):
    """Reviewer decision for a post-midnight punch."""

    LINK_PREVIOUS_DAY_CHECKOUT = "previous_day_checkout"
    KEEP_CURRENT_DAY_CHECKIN = "current_day_checkin"
    IGNORE = "ignore"
