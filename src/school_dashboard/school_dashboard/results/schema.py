"""Wire schema for exam results.

`grade` is not accepted from clients; the service always derives it from score/total.
"""
from __future__ import annotations

from typing import Any

from ..common.datetime_utils import to_iso
from ..common.validators import PayloadValidator, non_negative_int, positive_int, require_non_empty
from ..core.constants import DEFAULT_RESULT_TOTAL
from ..core.exceptions import ValidationError
from .model import Result

COLUMNS = ("exam_id", "student_id", "subject", "score", "total", "grade")


def validate_result(payload: Any, *, partial: bool = False) -> dict:
    v = PayloadValidator(payload, entity="result", partial=partial)
    v.field("examId", "exam_id", positive_int, required=True)
    v.field("studentId", "student_id", positive_int, required=True)
    v.field("subject", "subject", require_non_empty, required=True)
    v.field("score", "score", non_negative_int, required=True)
    v.field("total", "total", positive_int, default=DEFAULT_RESULT_TOTAL)
    data = v.result()
    if "score" in data and "total" in data:
        check_score_within_total(data["score"], data["total"])
    return data


def check_score_within_total(score: int, total: int) -> None:
    if score > total:
        raise ValidationError(
            "Invalid result data",
            [{"field": "score", "message": f"score must not exceed total ({total})"}],
        )


def result_to_json(r: Result) -> dict:
    return {
        "id": r.id,
        "examId": r.exam_id,
        "studentId": r.student_id,
        "subject": r.subject,
        "score": r.score,
        "total": r.total,
        "grade": r.grade,
        "createdAt": to_iso(r.created_at),
    }
