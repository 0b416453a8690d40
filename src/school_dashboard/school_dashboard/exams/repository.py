from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Exam


class ExamRepository(Protocol):
    def list_all(self) -> Sequence[Exam]:
        raise NotImplementedError

    def get_by_id(self, exam_id: int) -> Optional[Exam]:
        raise NotImplementedError

    def create(self, *, data: dict) -> int:
        raise NotImplementedError

    def update(self, exam_id: int, *, changes: dict) -> bool:
        raise NotImplementedError

    def delete(self, exam_id: int) -> bool:
        raise NotImplementedError
