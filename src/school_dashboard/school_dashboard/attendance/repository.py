from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_by_student(self, student_id: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def create(self, *, data: dict) -> int:
        raise NotImplementedError

    def update(self, record_id: int, *, changes: dict) -> bool:
        raise NotImplementedError

    def delete_for_student(self, student_id: int) -> int:
        raise NotImplementedError
