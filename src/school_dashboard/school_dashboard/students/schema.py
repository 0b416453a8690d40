"""Wire schema for students: payload validation and JSON serialization.

Shared by the API controllers and the dashboard client forms.
"""
from __future__ import annotations

from typing import Any

from ..common.datetime_utils import to_iso
from ..common.validators import (
    PayloadValidator,
    choice,
    optional_text,
    require_date,
    require_email,
    require_non_empty,
)
from ..core.enums import Gender, Section
from .model import Student

COLUMNS = (
    "student_code",
    "first_name",
    "middle_name",
    "last_name",
    "gender",
    "date_of_birth",
    "phone",
    "email",
    "address",
    "section",
    "class_name",
    "father_name",
    "father_phone",
    "father_email",
    "mother_name",
    "mother_phone",
    "mother_email",
    "profile_photo",
)


def validate_student(payload: Any, *, partial: bool = False) -> dict:
    v = PayloadValidator(payload, entity="student", partial=partial)
    v.field("studentId", "student_code", require_non_empty, required=True)
    v.field("firstName", "first_name", require_non_empty, required=True)
    v.field("middleName", "middle_name", optional_text)
    v.field("lastName", "last_name", require_non_empty, required=True)
    v.field("gender", "gender", choice(Gender), required=True)
    v.field("dateOfBirth", "date_of_birth", require_date)
    v.field("phone", "phone", optional_text)
    v.field("email", "email", require_email)
    v.field("address", "address", optional_text)
    v.field("section", "section", choice(Section), required=True)
    v.field("class", "class_name", require_non_empty, required=True)
    v.field("fatherName", "father_name", optional_text)
    v.field("fatherPhone", "father_phone", optional_text)
    v.field("fatherEmail", "father_email", require_email)
    v.field("motherName", "mother_name", optional_text)
    v.field("motherPhone", "mother_phone", optional_text)
    v.field("motherEmail", "mother_email", require_email)
    v.field("profilePhoto", "profile_photo", optional_text)
    return v.result()


def student_to_json(s: Student) -> dict:
    return {
        "id": s.id,
        "studentId": s.student_code,
        "firstName": s.first_name,
        "middleName": s.middle_name,
        "lastName": s.last_name,
        "gender": s.gender.value,
        "dateOfBirth": s.date_of_birth.isoformat() if s.date_of_birth else None,
        "phone": s.phone,
        "email": s.email,
        "address": s.address,
        "section": s.section.value,
        "class": s.class_name,
        "fatherName": s.father_name,
        "fatherPhone": s.father_phone,
        "fatherEmail": s.father_email,
        "motherName": s.mother_name,
        "motherPhone": s.mother_phone,
        "motherEmail": s.mother_email,
        "profilePhoto": s.profile_photo,
        "createdAt": to_iso(s.created_at),
    }
