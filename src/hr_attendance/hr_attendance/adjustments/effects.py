"""Fold same-day adjustments into an effective shift envelope.

All values are seconds since local midnight of the work day.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from ..common.time_utils import time_to_seconds
from ..core.enums import AdjustmentType
from .model import Adjustment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdjustmentEffects:
    effective_shift_start: int
    effective_shift_end: int
    mission_start: Optional[int]
    mission_end: Optional[int]
    suppress_penalties: bool
    half_day_excused: bool
    first_stamp: Optional[int]
    last_stamp: Optional[int]

    @property
    def has_mission(self) -> bool:
        return self.mission_start is not None and self.mission_end is not None


def compute_adjustment_effects(
    *,
    shift_start: str,
    shift_end: str,
    adjustments: Iterable[Adjustment],
    check_in: Optional[int] = None,
    check_out: Optional[int] = None,
) -> AdjustmentEffects:
    default_start = time_to_seconds(shift_start)
    default_end = time_to_seconds(shift_end)
    start = default_start
    end = default_end
    mission_start: Optional[int] = None
    mission_end: Optional[int] = None
    suppress_penalties = False
    half_day_excused = False

    for adj in adjustments:
        frm = time_to_seconds(adj.from_time)
        to = time_to_seconds(adj.to_time)

        if adj.type == AdjustmentType.MORNING_PERMISSION:
            start += max(0, to - frm)
        elif adj.type == AdjustmentType.EVENING_PERMISSION:
            end -= max(0, to - frm)
        elif adj.type == AdjustmentType.HALF_DAY_LEAVE:
            touched = False
            if frm == default_start:
                start = to
                half_day_excused = touched = True
            if to == default_end:
                end = frm
                half_day_excused = touched = True
            if not touched:
                logger.warning(
                    "Half-day leave %s-%s for %s on %s touches neither shift boundary; ignored",
                    adj.from_time, adj.to_time, adj.employee_code, adj.work_date,
                )
        elif adj.type == AdjustmentType.BUSINESS_TRIP:
            mission_start = frm if mission_start is None else min(mission_start, frm)
            mission_end = to if mission_end is None else max(mission_end, to)
            suppress_penalties = True

    if start > end:
        logger.warning("Adjustments produced an inverted shift envelope (%s > %s)", start, end)

    firsts = [v for v in (check_in, mission_start) if v is not None]
    lasts = [v for v in (check_out, mission_end) if v is not None]

    return AdjustmentEffects(
        effective_shift_start=start,
        effective_shift_end=end,
        mission_start=mission_start,
        mission_end=mission_end,
        suppress_penalties=suppress_penalties,
        half_day_excused=half_day_excused,
        first_stamp=min(firsts) if firsts else None,
        last_stamp=max(lasts) if lasts else None,
    )
