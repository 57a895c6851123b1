"""Apply reviewer decisions to post-midnight punches.

A punch linked to the previous day's checkout leaves its raw local day and
joins the target day's punches. Any other decision, or no decision, leaves
the punch where it was recorded.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Collection, Iterable, Optional, Sequence

from ..common.datetime_utils import as_naive_utc
from ..core.enums import PunchLinkAction
from .bucketer import local_day
from .model import PunchLinkDecision

PunchKey = tuple[str, datetime]


def punch_key(employee_code: str, punch_datetime: datetime) -> PunchKey:
    return (str(employee_code), as_naive_utc(punch_datetime))


def latest_decisions(decisions: Iterable[PunchLinkDecision]) -> dict[PunchKey, PunchLinkDecision]:
    """One decision per punch; later entries overwrite earlier ones."""
    out: dict[PunchKey, PunchLinkDecision] = {}
    for d in decisions:
        out[punch_key(d.employee_code, d.punch_datetime)] = d
    return out


@dataclass(frozen=True)
class LinkIndex:
    # punch -> the day it was moved to
    moved: dict[PunchKey, date] = field(default_factory=dict)
    # (employee_code, target day) -> punches moved onto it
    injected: dict[tuple[str, date], tuple[datetime, ...]] = field(default_factory=dict)

    def linked_punches(self, employee_code: str, day: date) -> tuple[datetime, ...]:
        return self.injected.get((employee_code, day), ())

    def is_moved_away(self, employee_code: str, punch_datetime: datetime, raw_day: date) -> bool:
        target = self.moved.get(punch_key(employee_code, punch_datetime))
        return target is not None and target != raw_day


def build_link_index(
    decisions: Iterable[PunchLinkDecision],
    offset_minutes: int,
    *,
    recorded: Collection[PunchKey],
) -> LinkIndex:
    """Index link decisions against the punches actually fetched.

    A decision whose punch is not in `recorded` is skipped; linking moves an
    existing punch and never creates one.
    """

    moved: dict[PunchKey, date] = {}
    injected: dict[tuple[str, date], list[datetime]] = defaultdict(list)

    for key, decision in latest_decisions(decisions).items():
        if decision.action != PunchLinkAction.LINK_PREVIOUS_DAY_CHECKOUT or key not in recorded:
            continue
        raw_day = local_day(key[1], offset_minutes)
        target = decision.target_base_date or (raw_day - timedelta(days=1))
        if target >= raw_day:
            continue
        moved[key] = target
        injected[(key[0], target)].append(key[1])

    return LinkIndex(
        moved=moved,
        injected={k: tuple(sorted(v)) for k, v in injected.items()},
    )


def filter_linked_punches(
    day_punches: Sequence[datetime],
    *,
    employee_code: str,
    raw_day: date,
    index: LinkIndex,
) -> list[datetime]:
    return [p for p in day_punches if not index.is_moved_away(employee_code, p, raw_day)]


def check_in_out_with_links(
    day_punches: Sequence[datetime],
    linked_punches: Sequence[datetime] = (),
) -> tuple[Optional[datetime], Optional[datetime]]:
    """First punch is the check-in, last is the check-out; a lone punch has no check-out."""

    combined = sorted(list(day_punches) + list(linked_punches))
    if not combined:
        return None, None
    check_in = combined[0]
    check_out = combined[-1] if len(combined) > 1 else None
    return check_in, check_out
