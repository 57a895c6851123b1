from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: list[dict]


class AttendanceSummaryService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def build_summary(
        self,
        *,
        start: date,
        end: date,
        employee_code: Optional[str] = None,
    ) -> ReportData:
        if end < start:
            raise ValidationError("End date must be on or after start date")

        records = self._attendance.list_range(start_date=start, end_date=end, employee_code=employee_code)

        summary_map: dict[str, dict] = {}
        out_rows: list[dict] = []

        for r in records:
            out_rows.append(
                {
                    "employee_code": r.employee_code,
                    "work_date": r.work_date.strftime("%Y-%m-%d"),
                    "check_in": r.check_in.isoformat() if r.check_in else None,
                    "check_out": r.check_out.isoformat() if r.check_out else None,
                    "total_hours": r.total_hours,
                    "overtime_hours": r.overtime_hours,
                    "status": r.status.value,
                    "penalties": [p.to_dict() for p in r.penalties],
                    "is_overnight": r.is_overnight,
                    "notes": r.notes or "",
                    "mission_start": r.mission_start,
                    "mission_end": r.mission_end,
                    "half_day_excused": r.half_day_excused,
                }
            )

            s = summary_map.get(r.employee_code)
            if not s:
                s = {
                    "employee_code": r.employee_code,
                    "days": 0,
                    "total_hours": 0.0,
                    "overtime_hours": 0.0,
                    "penalty_total": 0.0,
                    **{status.value: 0 for status in AttendanceStatus},
                }
                summary_map[r.employee_code] = s
            s["days"] += 1
            s[r.status.value] += 1
            s["total_hours"] += r.total_hours
            s["overtime_hours"] += r.overtime_hours
            s["penalty_total"] += r.penalty_total

        summary = []
        for s in summary_map.values():
            s["total_hours"] = round(s["total_hours"], 2)
            s["penalty_total"] = round(s["penalty_total"], 2)
            summary.append(s)

        summary.sort(key=lambda x: (-x["penalty_total"], x["employee_code"]))
        return ReportData(rows=out_rows, summary=summary)
