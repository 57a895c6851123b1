from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import Adjustment


class AdjustmentRepository(Protocol):
    def list_for_range(self, *, start: date, end: date) -> Sequence[Adjustment]:
        """Adjustments whose work_date falls in [start, end]."""

        raise NotImplementedError

    def create(self, adjustment: Adjustment) -> int:
        raise NotImplementedError
