from __future__ import annotations

from typing import Protocol, Sequence

from .model import Rule


class RuleRepository(Protocol):
    def list_rules(self) -> Sequence[Rule]:
        """All rules, in insertion order."""

        raise NotImplementedError

    def create(self, rule: Rule) -> int:
        raise NotImplementedError

    def delete(self, *, rule_id: int) -> bool:
        raise NotImplementedError
