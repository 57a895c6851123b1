from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date
from .time_utils import normalize_time_to_hms


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_time(value: str, field_name: str) -> str:
    """Return the HH:MM:SS form; InvalidTimeFormat propagates for bad input."""
    require_non_empty(value, field_name)
    return normalize_time_to_hms(value)


def require_date(value, field_name: str) -> date:
    if isinstance(value, date):
        return value
    require_non_empty(value, field_name)
    return parse_iso_date(value)


def optional_text(value: Optional[str]) -> Optional[str]:
    return (value or "").strip() or None


def optional_int(value, field_name: str, *, default: int) -> int:
    if value is None or (isinstance(value, str) and not value.strip()):
        return int(default)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer")
