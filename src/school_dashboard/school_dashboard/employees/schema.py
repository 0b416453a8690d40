from __future__ import annotations

from typing import Any

from ..common.datetime_utils import to_iso
from ..common.validators import (
    PayloadValidator,
    choice,
    non_negative_int,
    optional_text,
    require_date,
    require_email,
    require_non_empty,
    require_text_list,
)
from ..core.enums import EmployeeRole, Gender, Section, Shift
from .model import Employee

COLUMNS = (
    "employee_code",
    "first_name",
    "middle_name",
    "last_name",
    "gender",
    "date_of_birth",
    "phone",
    "email",
    "role",
    "section",
    "salary",
    "shift",
    "subjects",
)


def validate_employee(payload: Any, *, partial: bool = False) -> dict:
    v = PayloadValidator(payload, entity="employee", partial=partial)
    v.field("employeeId", "employee_code", require_non_empty, required=True)
    v.field("firstName", "first_name", require_non_empty, required=True)
    v.field("middleName", "middle_name", optional_text)
    v.field("lastName", "last_name", require_non_empty, required=True)
    v.field("gender", "gender", choice(Gender), required=True)
    v.field("dateOfBirth", "date_of_birth", require_date)
    v.field("phone", "phone", optional_text)
    v.field("email", "email", require_email)
    v.field("role", "role", choice(EmployeeRole), required=True)
    v.field("section", "section", choice(Section))
    v.field("salary", "salary", non_negative_int, required=True)
    v.field("shift", "shift", choice(Shift))
    v.field("subjects", "subjects", require_text_list, default=list)
    return v.result()


def employee_to_json(e: Employee) -> dict:
    return {
        "id": e.id,
        "employeeId": e.employee_code,
        "firstName": e.first_name,
        "middleName": e.middle_name,
        "lastName": e.last_name,
        "gender": e.gender.value,
        "dateOfBirth": e.date_of_birth.isoformat() if e.date_of_birth else None,
        "phone": e.phone,
        "email": e.email,
        "role": e.role.value,
        "section": e.section.value if e.section else None,
        "salary": e.salary,
        "shift": e.shift.value if e.shift else None,
        "subjects": list(e.subjects),
        "createdAt": to_iso(e.created_at),
    }
