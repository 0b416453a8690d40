from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Payment


class PaymentRepository(Protocol):
    def list_all(self) -> Sequence[Payment]:
        raise NotImplementedError

    def get_by_id(self, payment_id: int) -> Optional[Payment]:
        raise NotImplementedError

    def list_by_student(self, student_id: int) -> Sequence[Payment]:
        raise NotImplementedError

    def create(self, *, data: dict) -> int:
        raise NotImplementedError

    def update(self, payment_id: int, *, changes: dict) -> bool:
        raise NotImplementedError

    def delete_for_student(self, student_id: int) -> int:
        raise NotImplementedError
