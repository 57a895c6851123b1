import logging
from datetime import date

from src.hr_attendance.hr_attendance.adjustments.effects import compute_adjustment_effects
from src.hr_attendance.hr_attendance.adjustments.model import Adjustment
from src.hr_attendance.hr_attendance.common.time_utils import time_to_seconds
from src.hr_attendance.hr_attendance.core.enums import AdjustmentType

DAY = date(2025, 1, 6)


def adj(kind: AdjustmentType, frm: str, to: str) -> Adjustment:
    return Adjustment(employee_code="E1", work_date=DAY, type=kind, from_time=frm, to_time=to)


def effects(*adjustments, check_in=None, check_out=None):
    return compute_adjustment_effects(
        shift_start="09:00:00",
        shift_end="17:00:00",
        adjustments=adjustments,
        check_in=check_in,
        check_out=check_out,
    )


def test_no_adjustments_keeps_default_envelope():
    e = effects()
    assert e.effective_shift_start == time_to_seconds("09:00")
    assert e.effective_shift_end == time_to_seconds("17:00")
    assert not e.suppress_penalties
    assert not e.half_day_excused
    assert e.first_stamp is None and e.last_stamp is None


def test_half_day_leave_first_half_moves_start_to_leave_end():
    e = effects(adj(AdjustmentType.HALF_DAY_LEAVE, "09:00:00", "13:00:00"))
    assert e.effective_shift_start == time_to_seconds("13:00")
    assert e.effective_shift_end == time_to_seconds("17:00")
    assert e.half_day_excused


def test_half_day_leave_second_half_moves_end_to_leave_start():
    e = effects(adj(AdjustmentType.HALF_DAY_LEAVE, "13:00:00", "17:00:00"))
    assert e.effective_shift_start == time_to_seconds("09:00")
    assert e.effective_shift_end == time_to_seconds("13:00")
    assert e.half_day_excused


def test_half_day_leave_in_the_middle_is_ignored_with_warning(caplog):
    with caplog.at_level(logging.WARNING):
        e = effects(adj(AdjustmentType.HALF_DAY_LEAVE, "11:00:00", "12:00:00"))
    assert e.effective_shift_start == time_to_seconds("09:00")
    assert e.effective_shift_end == time_to_seconds("17:00")
    assert not e.half_day_excused
    assert "neither shift boundary" in caplog.text


def test_permissions_shrink_the_envelope_by_their_duration():
    e = effects(
        adj(AdjustmentType.MORNING_PERMISSION, "09:00:00", "10:30:00"),
        adj(AdjustmentType.EVENING_PERMISSION, "16:00:00", "17:00:00"),
    )
    assert e.effective_shift_start == time_to_seconds("10:30")
    assert e.effective_shift_end == time_to_seconds("16:00")
    assert not e.suppress_penalties


def test_business_trip_widens_first_and_last_stamp():
    e = effects(
        adj(AdjustmentType.BUSINESS_TRIP, "09:00:00", "17:00:00"),
        check_in=time_to_seconds("10:00"),
        check_out=time_to_seconds("16:00"),
    )
    assert e.first_stamp == time_to_seconds("09:00")
    assert e.last_stamp == time_to_seconds("17:00")
    assert e.suppress_penalties
    assert e.has_mission


def test_business_trip_fragments_merge_into_one_window():
    e = effects(
        adj(AdjustmentType.BUSINESS_TRIP, "14:00:00", "18:00:00"),
        adj(AdjustmentType.BUSINESS_TRIP, "08:00:00", "10:00:00"),
    )
    assert e.mission_start == time_to_seconds("08:00")
    assert e.mission_end == time_to_seconds("18:00")
    assert e.first_stamp == time_to_seconds("08:00")
    assert e.last_stamp == time_to_seconds("18:00")


def test_punches_outside_the_mission_still_count_as_stamps():
    e = effects(
        adj(AdjustmentType.BUSINESS_TRIP, "10:00:00", "12:00:00"),
        check_in=time_to_seconds("08:45"),
        check_out=time_to_seconds("18:10"),
    )
    assert e.first_stamp == time_to_seconds("08:45")
    assert e.last_stamp == time_to_seconds("18:10")


def test_contradictory_adjustments_fold_and_warn_on_inverted_envelope(caplog):
    with caplog.at_level(logging.WARNING):
        e = effects(
            adj(AdjustmentType.MORNING_PERMISSION, "09:00:00", "15:00:00"),
            adj(AdjustmentType.EVENING_PERMISSION, "11:00:00", "17:00:00"),
        )
    assert e.effective_shift_start == time_to_seconds("15:00")
    assert e.effective_shift_end == time_to_seconds("11:00")
    assert "inverted" in caplog.text
