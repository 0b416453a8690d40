from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from ..core.exceptions import NotFoundError, ValidationError
from .model import Student
from .repository import StudentRepository
from .schema import validate_student

logger = logging.getLogger(__name__)


class StudentService:
    """Use cases: manage the student roster.

    Deleting a student also removes the attendance, payment and result rows that
    reference it, so no record is left pointing at a missing student.
    """

    def __init__(self, students: StudentRepository, *, attendance=None, payments=None, results=None):
        self._students = students
        self._dependents = [r for r in (attendance, payments, results) if r is not None]

    def list(self) -> Sequence[Student]:
        return self._students.list_all()

    def get(self, student_id: int) -> Student:
        student = self._students.get_by_id(int(student_id))
        if not student:
            raise NotFoundError("Student not found")
        return student

    def create(self, payload: Any) -> Student:
        data = validate_student(payload)
        self._ensure_code_free(data["student_code"])

        new_id = self._students.create(data=data)
        logger.info("Created student %s (id=%s)", data["student_code"], new_id)
        return self.get(new_id)

    def update(self, student_id: int, payload: Any) -> Student:
        current = self.get(student_id)
        changes = validate_student(payload, partial=True)
        if not changes:
            return current

        code = changes.get("student_code")
        if code and code != current.student_code:
            self._ensure_code_free(code, exclude_id=current.id)

        self._students.update(current.id, changes=changes)
        return self.get(current.id)

    def delete(self, student_id: int) -> None:
        student = self.get(student_id)
        for repo in self._dependents:
            repo.delete_for_student(student.id)
        if not self._students.delete(student.id):
            raise NotFoundError("Student not found")
        logger.info("Deleted student %s (id=%s)", student.student_code, student.id)

    def _ensure_code_free(self, code: str, *, exclude_id: Optional[int] = None) -> None:
        existing = self._students.get_by_code(code)
        if existing and existing.id != exclude_id:
            raise ValidationError(
                "Invalid student data",
                [{"field": "studentId", "message": "Student ID already exists"}],
            )
