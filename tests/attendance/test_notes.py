from src.hr_attendance.hr_attendance.attendance.notes import (
    append_notes,
    compute_automatic_notes,
    split_notes,
    strip_automatic_notes,
)


def notes(existing=None, *, check_in=True, check_out=True, excused=False, early=False):
    return compute_automatic_notes(
        existing_notes=existing,
        check_in_exists=check_in,
        check_out_exists=check_out,
        missing_stamp_excused=excused,
        early_leave_excused=excused,
        check_out_before_early_leave=early,
    )


def test_split_notes_handles_both_commas_and_dedups():
    assert split_notes("a، b ,, c,a") == ["a", "b", "c"]
    assert split_notes(None) == []


def test_missing_stamps_and_early_leave():
    assert notes(check_out=False) == "missed check-out stamp"
    assert notes(check_in=False) == "missed check-in stamp"
    assert notes(early=True) == "left early"
    assert notes() is None


def test_excused_days_get_no_automatic_notes():
    assert notes(check_out=False, excused=True) is None
    assert notes(early=True, excused=True) is None


def test_existing_notes_are_kept_in_order():
    assert notes("traffic, bus late", check_out=False) == "traffic، bus late، missed check-out stamp"


def test_running_twice_never_duplicates():
    once = notes("traffic", check_out=False)
    twice = notes(once, check_out=False)
    assert twice == once
    assert append_notes(twice, ["traffic"]) == once


def test_strip_automatic_notes_keeps_human_text():
    assert strip_automatic_notes("traffic، left early، missed check-out stamp") == "traffic"
    assert strip_automatic_notes("left early") is None
