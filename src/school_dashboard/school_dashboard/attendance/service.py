from __future__ import annotations

import logging
from typing import Any, Sequence

from ..core.exceptions import NotFoundError, ValidationError
from ..students.repository import StudentRepository
from .model import AttendanceRecord
from .repository import AttendanceRepository
from .schema import validate_attendance

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use cases: record and correct daily attendance marks.

    Marks are never deduplicated; recording the same student twice on one day
    keeps both rows.
    """

    def __init__(self, attendance: AttendanceRepository, students: StudentRepository):
        self._attendance = attendance
        self._students = students

    def list(self) -> Sequence[AttendanceRecord]:
        return self._attendance.list_all()

    def get(self, record_id: int) -> AttendanceRecord:
        record = self._attendance.get_by_id(int(record_id))
        if not record:
            raise NotFoundError("Attendance record not found")
        return record

    def list_for_student(self, student_id: int) -> Sequence[AttendanceRecord]:
        if not self._students.get_by_id(int(student_id)):
            raise NotFoundError("Student not found")
        return self._attendance.list_by_student(int(student_id))

    def create(self, payload: Any) -> AttendanceRecord:
        data = validate_attendance(payload)
        self._ensure_student(data["student_id"])

        new_id = self._attendance.create(data=data)
        logger.debug("Recorded %s for student id=%s", data["status"].value, data["student_id"])
        return self.get(new_id)

    def update(self, record_id: int, payload: Any) -> AttendanceRecord:
        current = self.get(record_id)
        changes = validate_attendance(payload, partial=True)
        if not changes:
            return current

        if "student_id" in changes:
            self._ensure_student(changes["student_id"])

        self._attendance.update(current.id, changes=changes)
        return self.get(current.id)

    def _ensure_student(self, student_id: int) -> None:
        if not self._students.get_by_id(student_id):
            raise ValidationError(
                "Invalid attendance data",
                [{"field": "studentId", "message": "Student does not exist"}],
            )
