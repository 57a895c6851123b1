from __future__ import annotations

from typing import Any, Mapping, Optional

from ..common.validators import require_date, require_non_empty, require_time
from ..core.enums import RuleType
from ..core.exceptions import ValidationError
from .model import Rule
from .repository import RuleRepository
from .scope import parse_scope


class RuleService:
    def __init__(self, rules: RuleRepository):
        self._rules = rules

    def create(
        self,
        *,
        name: str,
        scope: str,
        valid_from,
        valid_to,
        rule_type: str,
        priority: int = 0,
        params: Optional[Mapping[str, Any]] = None,
    ) -> int:
        name = require_non_empty(name, "Rule name")
        parsed_scope = parse_scope(scope)
        start = require_date(valid_from, "Valid from")
        end = require_date(valid_to, "Valid to")
        if end < start:
            raise ValidationError("Valid to must be on or after valid from")

        try:
            kind = RuleType(str(rule_type).strip())
        except ValueError:
            raise ValidationError(f"Unknown rule type: {rule_type!r}")

        try:
            priority = int(priority)
        except (TypeError, ValueError):
            raise ValidationError("Priority must be an integer")

        clean_params = dict(params or {})
        if kind == RuleType.CUSTOM_SHIFT:
            for key in ("shiftStart", "shiftEnd"):
                if clean_params.get(key):
                    clean_params[key] = require_time(clean_params[key], key)
            if not clean_params.get("shiftStart") and not clean_params.get("shiftEnd"):
                raise ValidationError("custom_shift needs shiftStart and/or shiftEnd")

        return self._rules.create(
            Rule(
                name=name,
                priority=priority,
                scope=parsed_scope,
                valid_from=start,
                valid_to=end,
                rule_type=kind,
                params=clean_params,
            )
        )

    def delete(self, *, rule_id: int) -> None:
        if not self._rules.delete(rule_id=int(rule_id)):
            raise ValidationError("Rule not found")
