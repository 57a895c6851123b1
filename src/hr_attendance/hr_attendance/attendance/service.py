from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Callable, Optional

from ..adjustments.effects import compute_adjustment_effects
from ..adjustments.repository import AdjustmentRepository
from ..common.datetime_utils import local_date_range, local_instant, seconds_since_local_midnight, utc_to_local
from ..common.time_utils import seconds_to_time, time_to_seconds
from ..core.constants import DEFAULT_GRACE_MINUTES
from ..core.exceptions import ProcessingCancelled, ProcessingError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..payroll.calculator.base import WorkTimeCalculator
from ..payroll.calculator.standard_calculator import StandardWorkTimeCalculator
from ..punches.bucketer import punch_fetch_window
from ..punches.repository import PunchLinkRepository, PunchRepository
from ..rules.repository import RuleRepository
from ..rules.resolver import resolve_rules
from .context import BatchContext
from .factory import AttendanceStrategyFactory
from .model import AttendanceRecord
from .notes import compute_automatic_notes, strip_automatic_notes
from .repository import AttendanceRepository
from .strategies.base import DayFacts

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessResult:
    processed_count: int


class AttendanceService:
    """Batch driver: employees x local days -> one upserted record per cell."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        rules: RuleRepository,
        adjustments: AdjustmentRepository,
        punches: PunchRepository,
        links: PunchLinkRepository,
        *,
        strategy_factory: AttendanceStrategyFactory | None = None,
        calculator: WorkTimeCalculator | None = None,
        grace_minutes: int = DEFAULT_GRACE_MINUTES,
    ):
        self._attendance = attendance
        self._employees = employees
        self._rules = rules
        self._adjustments = adjustments
        self._punches = punches
        self._links = links
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._calculator = calculator or StandardWorkTimeCalculator()
        self._grace = timedelta(minutes=int(grace_minutes))

    def load_context(self, *, start: date, end: date, offset_minutes: int) -> BatchContext:
        utc_start, utc_end = punch_fetch_window(start, end, offset_minutes)
        return BatchContext.build(
            start=start,
            end=end,
            offset_minutes=offset_minutes,
            employees=self._employees.list_employees(),
            rules=self._rules.list_rules(),
            adjustments=self._adjustments.list_for_range(start=start, end=end),
            punches=self._punches.list_punches(utc_start=utc_start, utc_end=utc_end),
            decisions=self._links.list_decisions(),
        )

    def process_attendance(
        self,
        start: date,
        end: date,
        offset_minutes: int = 0,
        *,
        should_cancel: Optional[Callable[[], bool]] = None,
    ) -> ProcessResult:
        """Recompute records for local days [start, end].

        Safe to re-run: every cell is upserted by (employee_code, work_date).
        On failure, cells already written stay written and ProcessingError
        reports how many there were.
        """

        if end < start:
            raise ValidationError("End date must be on or after start date")

        processed = 0
        try:
            ctx = self.load_context(start=start, end=end, offset_minutes=offset_minutes)
            logger.info(
                "Processing attendance %s..%s (offset=%s min) for %d employees",
                start, end, offset_minutes, len(ctx.employees),
            )

            for employee in ctx.employees:
                if should_cancel is not None and should_cancel():
                    raise ProcessingCancelled("Attendance processing cancelled", processed_count=processed)

                for day in local_date_range(start, end):
                    existing = self._attendance.get_for_employee_and_date(employee.code, day)
                    record = self.compute_record(
                        ctx,
                        employee,
                        day,
                        existing_notes=existing.notes if existing else None,
                    )
                    self._attendance.upsert_record(record)
                    processed += 1
        except ProcessingError:
            raise
        except Exception as e:
            logger.error("Attendance processing failed after %d records", processed, exc_info=True)
            raise ProcessingError(f"Failed to process attendance: {e}", processed_count=processed) from e

        logger.info("Processed %d attendance records", processed)
        return ProcessResult(processed_count=processed)

    def compute_record(
        self,
        ctx: BatchContext,
        employee: Employee,
        day: date,
        *,
        existing_notes: Optional[str] = None,
    ) -> AttendanceRecord:
        """Pure per-cell computation against the batch snapshot."""

        resolution = resolve_rules(ctx.rules, employee, day)
        check_in, check_out = ctx.check_in_out(employee.code, day)

        local_in = utc_to_local(check_in, ctx.offset_minutes) if check_in else None
        local_out = utc_to_local(check_out, ctx.offset_minutes) if check_out else None
        in_seconds = seconds_since_local_midnight(local_in, day) if local_in else None
        out_seconds = seconds_since_local_midnight(local_out, day) if local_out else None

        effects = compute_adjustment_effects(
            shift_start=resolution.shift_start,
            shift_end=resolution.shift_end,
            adjustments=ctx.adjustments_for(employee.code, day),
            check_in=in_seconds,
            check_out=out_seconds,
        )

        facts = DayFacts(
            check_in=local_in,
            check_out=local_out,
            shift_start=local_instant(day, effects.effective_shift_start),
            shift_end=local_instant(day, effects.effective_shift_end),
            default_shift_end=local_instant(day, time_to_seconds(resolution.shift_end)),
            mission_start=local_instant(day, effects.mission_start) if effects.mission_start is not None else None,
            mission_end=local_instant(day, effects.mission_end) if effects.mission_end is not None else None,
            suppress_penalties=effects.suppress_penalties,
            half_day_excused=effects.half_day_excused,
            grace=self._grace,
        )
        decision = self._factory.for_day(facts).decide(facts)

        notes = compute_automatic_notes(
            existing_notes=strip_automatic_notes(existing_notes),
            check_in_exists=local_in is not None,
            check_out_exists=local_out is not None,
            missing_stamp_excused=facts.is_excused,
            early_leave_excused=facts.is_excused,
            check_out_before_early_leave=facts.checks_out_early,
        )

        return AttendanceRecord(
            employee_code=employee.code,
            work_date=day,
            check_in=check_in,
            check_out=check_out,
            total_hours=self._calculator.worked_hours(effects.first_stamp, effects.last_stamp),
            overtime_hours=float(self._calculator.overtime_hours(shift_end=resolution.shift_end, check_out=out_seconds)),
            status=decision.status,
            penalties=decision.penalties,
            is_overnight=resolution.is_overnight,
            notes=notes,
            mission_start=seconds_to_time(effects.mission_start) if effects.mission_start is not None else None,
            mission_end=seconds_to_time(effects.mission_end) if effects.mission_end is not None else None,
            half_day_excused=effects.half_day_excused,
        )
