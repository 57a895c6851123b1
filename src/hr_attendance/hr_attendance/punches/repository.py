from __future__ import annotations

from datetime import datetime
from typing import Iterable, Protocol, Sequence

from .model import Punch, PunchLinkDecision


class PunchRepository(Protocol):
    def list_punches(self, *, utc_start: datetime, utc_end: datetime) -> Sequence[Punch]:
        """Punches with utc_start <= punch_datetime <= utc_end."""

        raise NotImplementedError

    def add_many(self, punches: Iterable[Punch]) -> int:
        raise NotImplementedError


class PunchLinkRepository(Protocol):
    def list_decisions(self) -> Sequence[PunchLinkDecision]:
        """All decisions, oldest first."""

        raise NotImplementedError

    def save(self, decision: PunchLinkDecision) -> None:
        """Create or replace the decision for (employee_code, punch_datetime)."""

        raise NotImplementedError
