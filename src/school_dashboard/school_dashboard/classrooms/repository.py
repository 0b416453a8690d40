from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Classroom


class ClassroomRepository(Protocol):
    def list_all(self) -> Sequence[Classroom]:
        raise NotImplementedError

    def get_by_id(self, classroom_id: int) -> Optional[Classroom]:
        raise NotImplementedError

    def list_by_teacher(self, teacher_id: int) -> Sequence[Classroom]:
        raise NotImplementedError

    def create(self, *, data: dict) -> int:
        raise NotImplementedError

    def update(self, classroom_id: int, *, changes: dict) -> bool:
        raise NotImplementedError

    def clear_teacher(self, teacher_id: int) -> int:
        """Unassign a teacher from every classroom; returns rows touched."""

        raise NotImplementedError

    def delete(self, classroom_id: int) -> bool:
        raise NotImplementedError
