"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SHIFT_START = "09:00"
DEFAULT_SHIFT_END = "17:00"

DEFAULT_GRACE_MINUTES = 15

# Unpaid buffer after shift end before overtime starts counting.
OVERTIME_BUFFER_SECONDS = 60 * 60

# Raw punch fetch window is widened on both sides before local-day filtering.
PUNCH_FETCH_PADDING_HOURS = 12

# Punches in [00:00, MIDNIGHT_WINDOW_END) local time are offered for review.
DEFAULT_MIDNIGHT_WINDOW_END = "06:00"

LATE_TIER_FULL_DAY_MINUTES = 60
LATE_TIER_HALF_DAY_MINUTES = 30

LATE_PENALTY_FULL = 1.0
LATE_PENALTY_HALF = 0.5
LATE_PENALTY_QUARTER = 0.25
ABSENCE_PENALTY = 1.0
MISSING_STAMP_PENALTY = 0.5
EARLY_LEAVE_PENALTY = 0.5

# Existing notes may use the Arabic or the Latin comma.
NOTES_SPLIT_PATTERN = r"[،,]"
NOTES_JOINER = "، "

NOTE_MISSED_CHECKOUT = "missed check-out stamp"
NOTE_MISSED_CHECKIN = "missed check-in stamp"
NOTE_LEFT_EARLY = "left early"
