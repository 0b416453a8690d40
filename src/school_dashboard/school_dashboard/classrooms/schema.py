from __future__ import annotations

from typing import Any

from ..common.datetime_utils import to_iso
from ..common.validators import PayloadValidator, choice, positive_int, require_non_empty
from ..core.enums import Section
from .model import Classroom

COLUMNS = ("name", "section", "capacity", "teacher_id")


def validate_classroom(payload: Any, *, partial: bool = False) -> dict:
    v = PayloadValidator(payload, entity="classroom", partial=partial)
    v.field("name", "name", require_non_empty, required=True)
    v.field("section", "section", choice(Section), required=True)
    v.field("capacity", "capacity", positive_int, required=True)
    v.field("teacherId", "teacher_id", positive_int)
    return v.result()


def classroom_to_json(c: Classroom) -> dict:
    return {
        "id": c.id,
        "name": c.name,
        "section": c.section.value,
        "capacity": c.capacity,
        "teacherId": c.teacher_id,
        "createdAt": to_iso(c.created_at),
    }
