from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Sequence

from ..common.time_utils import normalize_time_to_hms
from ..core.constants import DEFAULT_SHIFT_END
from ..core.enums import RuleType
from ..employees.model import Employee
from .model import Rule
from .scope import scope_matches


@dataclass(frozen=True)
class RuleResolution:
    shift_start: str
    shift_end: str
    is_overnight: bool
    matched: tuple[Rule, ...] = ()


def matching_rules(rules: Sequence[Rule], employee: Employee, day: date) -> list[Rule]:
    """Rules in force for this employee/day, highest priority first.

    Ties keep their original (insertion) order since `sorted` is stable.
    """

    matches = [r for r in rules if r.is_valid_on(day) and scope_matches(r.scope, employee)]
    return sorted(matches, key=lambda r: r.priority, reverse=True)


def resolve_rules(rules: Sequence[Rule], employee: Employee, day: date) -> RuleResolution:
    matched = matching_rules(rules, employee, day)

    shift_start = normalize_time_to_hms(employee.shift_start)
    shift_end = normalize_time_to_hms(DEFAULT_SHIFT_END)

    shift_rule = next((r for r in matched if r.rule_type == RuleType.CUSTOM_SHIFT), None)
    if shift_rule:
        if shift_rule.params.get("shiftStart"):
            shift_start = normalize_time_to_hms(shift_rule.params["shiftStart"])
        if shift_rule.params.get("shiftEnd"):
            shift_end = normalize_time_to_hms(shift_rule.params["shiftEnd"])

    # Flags are OR'd over every match, not only the top one.
    is_overnight = any(r.rule_type == RuleType.OVERTIME_OVERNIGHT for r in matched)

    return RuleResolution(
        shift_start=shift_start,
        shift_end=shift_end,
        is_overnight=is_overnight,
        matched=tuple(matched),
    )
