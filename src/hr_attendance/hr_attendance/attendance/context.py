from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Mapping, Sequence

from ..adjustments.model import Adjustment
from ..employees.model import Employee
from ..punches.bucketer import bucket_punches
from ..punches.links import (
    LinkIndex,
    build_link_index,
    check_in_out_with_links,
    filter_linked_punches,
    punch_key,
)
from ..punches.model import Punch, PunchLinkDecision
from ..rules.model import Rule


@dataclass(frozen=True)
class BatchContext:
    """Read-only snapshot for one processing run.

    Built once from storage and passed to every per-cell computation; nothing
    is re-queried mid-run.
    """

    start: date
    end: date
    offset_minutes: int
    employees: tuple[Employee, ...]
    rules: tuple[Rule, ...]
    adjustments: Mapping[tuple[str, date], tuple[Adjustment, ...]] = field(default_factory=dict)
    punches: Mapping[tuple[str, date], tuple[datetime, ...]] = field(default_factory=dict)
    links: LinkIndex = field(default_factory=LinkIndex)

    @classmethod
    def build(
        cls,
        *,
        start: date,
        end: date,
        offset_minutes: int,
        employees: Sequence[Employee],
        rules: Sequence[Rule],
        adjustments: Sequence[Adjustment],
        punches: Sequence[Punch],
        decisions: Sequence[PunchLinkDecision],
    ) -> "BatchContext":
        by_day: dict[tuple[str, date], list[Adjustment]] = defaultdict(list)
        for adj in adjustments:
            by_day[(adj.employee_code, adj.work_date)].append(adj)

        return cls(
            start=start,
            end=end,
            offset_minutes=int(offset_minutes),
            employees=tuple(employees),
            rules=tuple(rules),
            adjustments={k: tuple(v) for k, v in by_day.items()},
            punches={k: tuple(v) for k, v in bucket_punches(punches, offset_minutes).items()},
            links=build_link_index(
                decisions,
                offset_minutes,
                recorded={punch_key(p.employee_code, p.punch_datetime) for p in punches},
            ),
        )

    def adjustments_for(self, employee_code: str, day: date) -> tuple[Adjustment, ...]:
        return self.adjustments.get((employee_code, day), ())

    def check_in_out(self, employee_code: str, day: date) -> tuple[datetime | None, datetime | None]:
        """UTC check-in/check-out after applying midnight links."""
        native = filter_linked_punches(
            self.punches.get((employee_code, day), ()),
            employee_code=employee_code,
            raw_day=day,
            index=self.links,
        )
        return check_in_out_with_links(native, self.links.linked_punches(employee_code, day))
