from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class WorkTimeCalculator(ABC):
    """Calculator interface (Strategy Pattern for hours and overtime).

    Inputs are seconds since local midnight of the work day; values past
    86400 mean the punch fell on a later calendar day.
    """

    @abstractmethod
    def worked_hours(self, first_stamp: Optional[int], last_stamp: Optional[int]) -> float:
        raise NotImplementedError

    @abstractmethod
    def overtime_hours(self, *, shift_end: str, check_out: Optional[int]) -> int:
        raise NotImplementedError
