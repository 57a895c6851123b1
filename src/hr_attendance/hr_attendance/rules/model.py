from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Mapping, Optional

from ..core.enums import RuleType
from .scope import Scope


@dataclass(frozen=True)
class Rule:
    """Time-bounded business rule. Higher `priority` wins for shift overrides."""

    name: str
    priority: int
    scope: Scope
    valid_from: date
    valid_to: date
    rule_type: RuleType
    params: Mapping[str, Any] = field(default_factory=dict)
    rule_id: Optional[int] = None

    def is_valid_on(self, day: date) -> bool:
        return self.valid_from <= day <= self.valid_to
