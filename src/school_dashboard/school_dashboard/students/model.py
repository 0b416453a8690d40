from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import Gender, Section


@dataclass(frozen=True)
class Student:
    """Domain entity: a student enrolled in one section/class.

    `student_code` is the school-issued identifier (wire name `studentId`);
    `id` is the row key other records reference.
    """

    id: int
    student_code: str
    first_name: str
    last_name: str
    gender: Gender
    section: Section
    class_name: str
    middle_name: Optional[str] = None
    date_of_birth: Optional[date] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    father_name: Optional[str] = None
    father_phone: Optional[str] = None
    father_email: Optional[str] = None
    mother_name: Optional[str] = None
    mother_phone: Optional[str] = None
    mother_email: Optional[str] = None
    profile_photo: Optional[str] = None
    created_at: Optional[datetime] = None

    @property
    def full_name(self) -> str:
        parts = [self.first_name, self.middle_name, self.last_name]
        return " ".join(p for p in parts if p)
