"""Rule scopes.

Stored as strings (`all`, `sector:<v>`, `dept:<v>`, `emp:<c1,c2>`) and parsed
into one of the variants below so matching is a plain function.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Union

from ..core.exceptions import ValidationError
from ..employees.model import Employee


@dataclass(frozen=True)
class AllScope:
    def to_text(self) -> str:
        return "all"


@dataclass(frozen=True)
class SectorScope:
    sector: str

    def to_text(self) -> str:
        return f"sector:{self.sector}"


@dataclass(frozen=True)
class DepartmentScope:
    department: str

    def to_text(self) -> str:
        return f"dept:{self.department}"


@dataclass(frozen=True)
class EmployeeSetScope:
    codes: FrozenSet[str]

    def to_text(self) -> str:
        return "emp:" + ",".join(sorted(self.codes))


Scope = Union[AllScope, SectorScope, DepartmentScope, EmployeeSetScope]


def parse_scope(value: str) -> Scope:
    text = (value or "").strip()
    if text == "all":
        return AllScope()

    prefix, sep, rest = text.partition(":")
    rest = rest.strip()
    if not sep or not rest:
        raise ValidationError(f"Invalid rule scope: {value!r}")

    if prefix == "sector":
        return SectorScope(rest)
    if prefix == "dept":
        return DepartmentScope(rest)
    if prefix == "emp":
        codes = frozenset(c.strip() for c in rest.split(",") if c.strip())
        if not codes:
            raise ValidationError(f"Invalid rule scope: {value!r}")
        return EmployeeSetScope(codes)
    raise ValidationError(f"Invalid rule scope: {value!r}")


def scope_matches(scope: Scope, employee: Employee) -> bool:
    if isinstance(scope, AllScope):
        return True
    if isinstance(scope, SectorScope):
        return employee.sector == scope.sector
    if isinstance(scope, DepartmentScope):
        return employee.department == scope.department
    if isinstance(scope, EmployeeSetScope):
        return employee.code in scope.codes
    return False
