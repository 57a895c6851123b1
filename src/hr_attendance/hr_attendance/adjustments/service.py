from __future__ import annotations

from typing import Optional

from ..common.time_utils import time_to_seconds
from ..common.validators import optional_text, require_date, require_non_empty, require_time
from ..core.enums import AdjustmentType
from ..core.exceptions import ValidationError
from .model import Adjustment
from .repository import AdjustmentRepository


class AdjustmentService:
    def __init__(self, adjustments: AdjustmentRepository):
        self._adjustments = adjustments

    @staticmethod
    def build(
        *,
        employee_code: str,
        work_date,
        adjustment_type: str,
        from_time: str,
        to_time: str,
        source: Optional[str] = None,
        note: Optional[str] = None,
    ) -> Adjustment:
        """Validate raw input (form row, import row) into an Adjustment."""

        code = require_non_empty(employee_code, "Employee code")
        day = require_date(work_date, "Date")
        try:
            kind = AdjustmentType.from_label(adjustment_type)
        except ValueError:
            raise ValidationError(f"Unknown adjustment type: {adjustment_type!r}")

        frm = require_time(from_time, "From time")
        to = require_time(to_time, "To time")
        if time_to_seconds(to) < time_to_seconds(frm):
            raise ValidationError("To time must not be before from time")

        return Adjustment(
            employee_code=code,
            work_date=day,
            type=kind,
            from_time=frm,
            to_time=to,
            source=optional_text(source),
            note=optional_text(note),
        )

    def create(self, **fields) -> int:
        return self._adjustments.create(self.build(**fields))
