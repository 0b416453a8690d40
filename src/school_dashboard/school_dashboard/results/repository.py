from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Result


class ResultRepository(Protocol):
    def list_all(self) -> Sequence[Result]:
        raise NotImplementedError

    def get_by_id(self, result_id: int) -> Optional[Result]:
        raise NotImplementedError

    def list_by_student(self, student_id: int) -> Sequence[Result]:
        raise NotImplementedError

    def list_by_exam(self, exam_id: int) -> Sequence[Result]:
        raise NotImplementedError

    def create(self, *, data: dict) -> int:
        raise NotImplementedError

    def update(self, result_id: int, *, changes: dict) -> bool:
        raise NotImplementedError

    def delete(self, result_id: int) -> bool:
        raise NotImplementedError

    def delete_for_student(self, student_id: int) -> int:
        raise NotImplementedError

    def delete_for_exam(self, exam_id: int) -> int:
        raise NotImplementedError
