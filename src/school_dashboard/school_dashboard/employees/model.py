from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..core.enums import EmployeeRole, Gender, Section, Shift


@dataclass(frozen=True)
class Employee:
    """Domain entity: a member of staff (teacher, driver, guard, ...)."""

    id: int
    employee_code: str
    first_name: str
    last_name: str
    gender: Gender
    role: EmployeeRole
    salary: int
    middle_name: Optional[str] = None
    date_of_birth: Optional[date] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    section: Optional[Section] = None
    shift: Optional[Shift] = None
    subjects: list[str] = field(default_factory=list)
    created_at: Optional[datetime] = None

    @property
    def full_name(self) -> str:
        parts = [self.first_name, self.middle_name, self.last_name]
        return " ".join(p for p in parts if p)

    @property
    def is_teacher(self) -> bool:
        return self.role == EmployeeRole.TEACHER
