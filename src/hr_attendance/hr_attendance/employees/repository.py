from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Roster read interface.

    Note (DIP): the attendance engine depends on this interface, not on a concrete DB.
    """

    def list_employees(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_code(self, code: str) -> Optional[Employee]:
        raise NotImplementedError
