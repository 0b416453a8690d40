from __future__ import annotations

from typing import Any

from ..common.datetime_utils import now_local, to_iso
from ..common.validators import PayloadValidator, choice, optional_text, positive_int, require_datetime
from ..core.enums import AttendanceStatus
from .model import AttendanceRecord

COLUMNS = ("student_id", "date", "status", "note")


def validate_attendance(payload: Any, *, partial: bool = False) -> dict:
    v = PayloadValidator(payload, entity="attendance", partial=partial)
    v.field("studentId", "student_id", positive_int, required=True)
    v.field("date", "date", require_datetime, default=now_local)
    v.field("status", "status", choice(AttendanceStatus), required=True)
    v.field("note", "note", optional_text)
    return v.result()


def attendance_to_json(a: AttendanceRecord) -> dict:
    return {
        "id": a.id,
        "studentId": a.student_id,
        "date": to_iso(a.date),
        "status": a.status.value,
        "note": a.note,
        "createdAt": to_iso(a.created_at),
    }
