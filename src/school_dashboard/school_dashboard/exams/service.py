from __future__ import annotations

import logging
from typing import Any, Sequence

from ..core.exceptions import NotFoundError
from .model import Exam
from .repository import ExamRepository
from .schema import validate_exam

logger = logging.getLogger(__name__)


class ExamService:
    def __init__(self, exams: ExamRepository, *, results=None):
        self._exams = exams
        self._results = results

    def list(self) -> Sequence[Exam]:
        return self._exams.list_all()

    def get(self, exam_id: int) -> Exam:
        exam = self._exams.get_by_id(int(exam_id))
        if not exam:
            raise NotFoundError("Exam not found")
        return exam

    def create(self, payload: Any) -> Exam:
        data = validate_exam(payload)
        new_id = self._exams.create(data=data)
        logger.info("Created exam %r for class %s (id=%s)", data["name"], data["class_name"], new_id)
        return self.get(new_id)

    def update(self, exam_id: int, payload: Any) -> Exam:
        current = self.get(exam_id)
        changes = validate_exam(payload, partial=True)
        if not changes:
            return current

        self._exams.update(current.id, changes=changes)
        return self.get(current.id)

    def delete(self, exam_id: int) -> None:
        exam = self.get(exam_id)
        if self._results is not None:
            self._results.delete_for_exam(exam.id)
        if not self._exams.delete(exam.id):
            raise NotFoundError("Exam not found")
        logger.info("Deleted exam %r (id=%s)", exam.name, exam.id)
