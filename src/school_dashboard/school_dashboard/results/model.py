from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Result:
    """Domain entity: one student's score in one subject of one exam."""

    id: int
    exam_id: int
    student_id: int
    subject: str
    score: int
    total: int
    grade: str
    created_at: Optional[datetime] = None
