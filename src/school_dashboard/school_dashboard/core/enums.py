from __future__ import annotations

from enum import Enum


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class Section(str, Enum):
    """Broad school-level grouping shared by students, employees and classrooms."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    HIGHSCHOOL = "highschool"


class EmployeeRole(str, Enum):
    TEACHER = "teacher"
    DRIVER = "driver"
    CLEANER = "cleaner"
    GUARD = "guard"
    ADMIN = "admin"
    STAFF = "staff"


class Shift(str, Enum):
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"


class AttendanceStatus(str, Enum):
    """Daily attendance mark stored for a student."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"


class PaymentStatus(str, Enum):
    PAID = "paid"
    UNPAID = "unpaid"
    PARTIAL = "partial"
