from __future__ import annotations

from typing import Any

from ..common.datetime_utils import now_local, to_iso
from ..common.validators import PayloadValidator, choice, optional_text, positive_int, require_datetime
from ..core.enums import PaymentStatus
from .model import Payment

COLUMNS = ("student_id", "amount", "date", "description", "status")


def validate_payment(payload: Any, *, partial: bool = False) -> dict:
    v = PayloadValidator(payload, entity="payment", partial=partial)
    v.field("studentId", "student_id", positive_int, required=True)
    v.field("amount", "amount", positive_int, required=True)
    v.field("date", "date", require_datetime, default=now_local)
    v.field("description", "description", optional_text)
    v.field("status", "status", choice(PaymentStatus), required=True)
    return v.result()


def payment_to_json(p: Payment) -> dict:
    return {
        "id": p.id,
        "studentId": p.student_id,
        "amount": p.amount,
        "date": to_iso(p.date),
        "description": p.description,
        "status": p.status.value,
        "createdAt": to_iso(p.created_at),
    }
