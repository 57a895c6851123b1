from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import DEFAULT_SHIFT_START


@dataclass(frozen=True)
class Employee:
    """Roster entry. `code` is the stable key used by punches, adjustments and records."""

    code: str
    name: str
    sector: Optional[str] = None
    department: Optional[str] = None
    shift_start: str = DEFAULT_SHIFT_START
