from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Iterable, Mapping, Optional

from ..common.datetime_utils import (
    local_to_utc,
    parse_iso_datetime,
    seconds_since_local_midnight,
    utc_to_local,
)
from ..common.time_utils import time_to_seconds
from ..common.validators import optional_text, require_date, require_non_empty, require_time
from ..core.constants import DEFAULT_MIDNIGHT_WINDOW_END
from ..core.enums import PunchLinkAction
from ..core.exceptions import ValidationError
from ..employees.repository import EmployeeRepository
from .bucketer import punch_fetch_window
from .links import latest_decisions, punch_key
from .model import MidnightPunch, PunchLinkDecision
from .repository import PunchLinkRepository, PunchRepository

PENDING = "pending"


@dataclass(frozen=True)
class ImportResult:
    inserted: int
    invalid: list[dict] = field(default_factory=list)


class PunchLinkService:
    """Review queue for punches recorded just after local midnight."""

    def __init__(
        self,
        punches: PunchRepository,
        links: PunchLinkRepository,
        employees: EmployeeRepository,
        *,
        midnight_window_end: str = DEFAULT_MIDNIGHT_WINDOW_END,
    ):
        self._punches = punches
        self._links = links
        self._employees = employees
        self._window_end = time_to_seconds(midnight_window_end)

    def list_midnight_punches(
        self,
        *,
        start: date,
        end: date,
        offset_minutes: int,
        employee_code: Optional[str] = None,
    ) -> list[MidnightPunch]:
        if end < start:
            raise ValidationError("End date must be on or after start date")

        utc_start, utc_end = punch_fetch_window(start, end, offset_minutes)
        punches = self._punches.list_punches(utc_start=utc_start, utc_end=utc_end)
        decisions = latest_decisions(self._links.list_decisions())
        names = {e.code: e.name for e in self._employees.list_employees()}

        out: list[MidnightPunch] = []
        for p in punches:
            if employee_code and p.employee_code != employee_code:
                continue
            local = utc_to_local(p.punch_datetime, offset_minutes)
            day = local.date()
            if not (start <= day <= end):
                continue
            if seconds_since_local_midnight(local, day) >= self._window_end:
                continue

            decision = decisions.get(punch_key(p.employee_code, p.punch_datetime))
            out.append(
                MidnightPunch(
                    employee_code=p.employee_code,
                    employee_name=names.get(p.employee_code),
                    punch_datetime=punch_key(p.employee_code, p.punch_datetime)[1],
                    punch_date=day,
                    punch_time=local.strftime("%H:%M:%S"),
                    suggested_previous_date=day - timedelta(days=1),
                    status=decision.action.value if decision else PENDING,
                    note=decision.note if decision else None,
                )
            )
        out.sort(key=lambda m: (m.punch_datetime, m.employee_code))
        return out

    def decide(
        self,
        *,
        employee_code: str,
        punch_datetime,
        action: str,
        offset_minutes: int = 0,
        target_base_date=None,
        note: Optional[str] = None,
    ) -> PunchLinkDecision:
        code = require_non_empty(employee_code, "Employee code")
        ts = parse_iso_datetime(punch_datetime)
        try:
            kind = PunchLinkAction(str(action).strip())
        except ValueError:
            raise ValidationError(f"Unknown action: {action!r}")

        if not self._is_recorded(code, ts):
            raise ValidationError(f"No punch recorded for {code} at {ts.isoformat()}")

        target: Optional[date] = None
        if kind == PunchLinkAction.LINK_PREVIOUS_DAY_CHECKOUT:
            raw_day = utc_to_local(ts, offset_minutes).date()
            if target_base_date:
                target = require_date(target_base_date, "Target date")
                if target >= raw_day:
                    raise ValidationError("Target date must be before the punch's local date")
            else:
                target = raw_day - timedelta(days=1)

        decision = PunchLinkDecision(
            employee_code=code,
            punch_datetime=ts,
            action=kind,
            target_base_date=target,
            note=optional_text(note),
        )
        self._links.save(decision)
        return decision

    def _is_recorded(self, employee_code: str, punch_datetime: datetime) -> bool:
        punches = self._punches.list_punches(utc_start=punch_datetime, utc_end=punch_datetime)
        return any(punch_key(p.employee_code, p.punch_datetime) == (employee_code, punch_datetime) for p in punches)

    def import_rows(self, rows: Iterable[Mapping], *, offset_minutes: int) -> ImportResult:
        """Bulk-apply a reviewer sheet already parsed into dict rows.

        Each row: employeeCode, punchDate (local), punchTime (local),
        linkToPreviousDay (1/0), baseDate (optional), note (optional).
        """

        inserted = 0
        invalid: list[dict] = []
        for index, row in enumerate(rows, start=1):
            try:
                punch_day = require_date(row.get("punchDate"), "Punch date")
                punch_time = require_time(row.get("punchTime"), "Punch time")
                local = datetime.combine(punch_day, datetime.min.time()) + timedelta(
                    seconds=time_to_seconds(punch_time)
                )
                link = str(row.get("linkToPreviousDay", 0)).strip() in {"1", "1.0", "true", "True"}
                self.decide(
                    employee_code=row.get("employeeCode"),
                    punch_datetime=local_to_utc(local, offset_minutes),
                    action=(
                        PunchLinkAction.LINK_PREVIOUS_DAY_CHECKOUT.value
                        if link
                        else PunchLinkAction.KEEP_CURRENT_DAY_CHECKIN.value
                    ),
                    offset_minutes=offset_minutes,
                    target_base_date=(row.get("baseDate") or None) if link else None,
                    note=row.get("note"),
                )
                inserted += 1
            except ValidationError as e:
                invalid.append({"row": index, "reason": str(e)})
        return ImportResult(inserted=inserted, invalid=invalid)
