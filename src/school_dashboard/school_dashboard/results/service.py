from __future__ import annotations

import logging
from typing import Any, Sequence

from ..core.exceptions import NotFoundError, ValidationError
from ..exams.repository import ExamRepository
from ..students.repository import StudentRepository
from .grading import calculate_grade
from .model import Result
from .repository import ResultRepository
from .schema import check_score_within_total, validate_result

logger = logging.getLogger(__name__)


class ResultService:
    """Use cases: record exam scores.

    The stored grade is recomputed from score/total on every write.
    """

    def __init__(self, results: ResultRepository, exams: ExamRepository, students: StudentRepository):
        self._results = results
        self._exams = exams
        self._students = students

    def list(self) -> Sequence[Result]:
        return self._results.list_all()

    def get(self, result_id: int) -> Result:
        result = self._results.get_by_id(int(result_id))
        if not result:
            raise NotFoundError("Result not found")
        return result

    def list_for_student(self, student_id: int) -> Sequence[Result]:
        if not self._students.get_by_id(int(student_id)):
            raise NotFoundError("Student not found")
        return self._results.list_by_student(int(student_id))

    def list_for_exam(self, exam_id: int) -> Sequence[Result]:
        if not self._exams.get_by_id(int(exam_id)):
            raise NotFoundError("Exam not found")
        return self._results.list_by_exam(int(exam_id))

    def create(self, payload: Any) -> Result:
        data = validate_result(payload)
        self._ensure_references(data.get("exam_id"), data.get("student_id"))
        data["grade"] = calculate_grade(data["score"], data["total"])

        new_id = self._results.create(data=data)
        logger.info(
            "Recorded %s/%s (%s) in %s for student id=%s",
            data["score"],
            data["total"],
            data["grade"],
            data["subject"],
            data["student_id"],
        )
        return self.get(new_id)

    def update(self, result_id: int, payload: Any) -> Result:
        current = self.get(result_id)
        changes = validate_result(payload, partial=True)
        if not changes:
            return current

        self._ensure_references(changes.get("exam_id"), changes.get("student_id"))
        if "score" in changes or "total" in changes:
            score = changes.get("score", current.score)
            total = changes.get("total", current.total)
            check_score_within_total(score, total)
            changes["grade"] = calculate_grade(score, total)

        self._results.update(current.id, changes=changes)
        return self.get(current.id)

    def delete(self, result_id: int) -> None:
        result = self.get(result_id)
        if not self._results.delete(result.id):
            raise NotFoundError("Result not found")

    def _ensure_references(self, exam_id, student_id) -> None:
        errors = []
        if exam_id is not None and not self._exams.get_by_id(exam_id):
            errors.append({"field": "examId", "message": "Exam does not exist"})
        if student_id is not None and not self._students.get_by_id(student_id):
            errors.append({"field": "studentId", "message": "Student does not exist"})
        if errors:
            raise ValidationError("Invalid result data", errors)
