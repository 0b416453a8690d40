from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import Classroom
from .repository import ClassroomRepository
from .schema import validate_classroom

logger = logging.getLogger(__name__)


class ClassroomService:
    def __init__(self, classrooms: ClassroomRepository, employees: EmployeeRepository):
        self._classrooms = classrooms
        self._employees = employees

    def list(self) -> Sequence[Classroom]:
        return self._classrooms.list_all()

    def get(self, classroom_id: int) -> Classroom:
        classroom = self._classrooms.get_by_id(int(classroom_id))
        if not classroom:
            raise NotFoundError("Classroom not found")
        return classroom

    def create(self, payload: Any) -> Classroom:
        data = validate_classroom(payload)
        self._ensure_teacher(data.get("teacher_id"))

        new_id = self._classrooms.create(data=data)
        logger.info("Created classroom %r (id=%s)", data["name"], new_id)
        return self.get(new_id)

    def update(self, classroom_id: int, payload: Any) -> Classroom:
        current = self.get(classroom_id)
        changes = validate_classroom(payload, partial=True)
        if not changes:
            return current

        if "teacher_id" in changes:
            self._ensure_teacher(changes["teacher_id"])

        self._classrooms.update(current.id, changes=changes)
        return self.get(current.id)

    def delete(self, classroom_id: int) -> None:
        classroom = self.get(classroom_id)
        if not self._classrooms.delete(classroom.id):
            raise NotFoundError("Classroom not found")
        logger.info("Deleted classroom %r (id=%s)", classroom.name, classroom.id)

    def _ensure_teacher(self, teacher_id: Optional[int]) -> None:
        if teacher_id is None:
            return
        employee = self._employees.get_by_id(teacher_id)
        if not employee:
            message = "Teacher does not exist"
        elif not employee.is_teacher:
            message = "Assigned employee is not a teacher"
        else:
            return
        raise ValidationError("Invalid classroom data", [{"field": "teacherId", "message": message}])
