from __future__ import annotations

from typing import Any

from ..common.datetime_utils import to_iso
from ..common.validators import PayloadValidator, choice, require_datetime, require_non_empty, require_text_list
from ..core.enums import Section
from .model import Exam

COLUMNS = ("name", "section", "class_name", "date", "subjects")


def validate_exam(payload: Any, *, partial: bool = False) -> dict:
    v = PayloadValidator(payload, entity="exam", partial=partial)
    v.field("name", "name", require_non_empty, required=True)
    v.field("section", "section", choice(Section), required=True)
    v.field("class", "class_name", require_non_empty, required=True)
    v.field("date", "date", require_datetime, required=True)
    v.field("subjects", "subjects", require_text_list, default=list)
    return v.result()


def exam_to_json(e: Exam) -> dict:
    return {
        "id": e.id,
        "name": e.name,
        "section": e.section.value,
        "class": e.class_name,
        "date": to_iso(e.date),
        "subjects": list(e.subjects),
        "createdAt": to_iso(e.created_at),
    }
