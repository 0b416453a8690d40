from __future__ import annotations

import logging
from typing import Any, Sequence

from ..core.exceptions import NotFoundError, ValidationError
from ..students.repository import StudentRepository
from .model import Payment
from .repository import PaymentRepository
from .schema import validate_payment

logger = logging.getLogger(__name__)


class PaymentService:
    def __init__(self, payments: PaymentRepository, students: StudentRepository):
        self._payments = payments
        self._students = students

    def list(self) -> Sequence[Payment]:
        return self._payments.list_all()

    def get(self, payment_id: int) -> Payment:
        payment = self._payments.get_by_id(int(payment_id))
        if not payment:
            raise NotFoundError("Payment not found")
        return payment

    def list_for_student(self, student_id: int) -> Sequence[Payment]:
        if not self._students.get_by_id(int(student_id)):
            raise NotFoundError("Student not found")
        return self._payments.list_by_student(int(student_id))

    def create(self, payload: Any) -> Payment:
        data = validate_payment(payload)
        self._ensure_student(data["student_id"])

        new_id = self._payments.create(data=data)
        logger.info(
            "Recorded %s payment of %s for student id=%s (id=%s)",
            data["status"].value,
            data["amount"],
            data["student_id"],
            new_id,
        )
        return self.get(new_id)

    def update(self, payment_id: int, payload: Any) -> Payment:
        current = self.get(payment_id)
        changes = validate_payment(payload, partial=True)
        if not changes:
            return current

        if "student_id" in changes:
            self._ensure_student(changes["student_id"])

        self._payments.update(current.id, changes=changes)
        return self.get(current.id)

    def _ensure_student(self, student_id: int) -> None:
        if not self._students.get_by_id(student_id):
            raise ValidationError(
                "Invalid payment data",
                [{"field": "studentId", "message": "Student does not exist"}],
            )
