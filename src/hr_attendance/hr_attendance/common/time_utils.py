from __future__ import annotations

from ..core.exceptions import InvalidTimeFormat


def normalize_time_to_hms(value: str) -> str:
    """Normalize a loose time string ("9:5", "09:05", "09:05:00") to HH:MM:SS.

    Missing minute/second components are treated as 0. Raises InvalidTimeFormat
    for non-numeric components, more than three components, or minutes or
    seconds above 59.
    """

    if value is None:
        raise InvalidTimeFormat(value)

    parts = str(value).strip().split(":")
    if not parts or len(parts) > 3 or not parts[0]:
        raise InvalidTimeFormat(value)

    numbers: list[int] = []
    for part in parts:
        part = part.strip()
        if not part.isdigit():
            raise InvalidTimeFormat(value)
        numbers.append(int(part))
    while len(numbers) < 3:
        numbers.append(0)

    h, m, s = numbers
    if m > 59 or s > 59:
        raise InvalidTimeFormat(value)
    return f"{h:02d}:{m:02d}:{s:02d}"


def time_to_seconds(value: str) -> int:
    """HH:MM[:SS] -> seconds since local midnight."""
    h, m, s = (int(p) for p in normalize_time_to_hms(value).split(":"))
    return h * 3600 + m * 60 + s


def seconds_to_time(value: float) -> str:
    """Seconds -> HH:MM:SS. Negative input is clamped to 00:00:00.

    Values past 24h are not wrapped (an overnight checkout reads as e.g. 26:30:00).
    """

    total = max(0, int(value))
    return f"{total // 3600:02d}:{(total % 3600) // 60:02d}:{total % 60:02d}"
