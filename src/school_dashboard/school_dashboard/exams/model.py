from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..core.enums import Section


@dataclass(frozen=True)
class Exam:
    id: int
    name: str
    section: Section
    class_name: str
    date: datetime
    subjects: list[str] = field(default_factory=list)
    created_at: Optional[datetime] = None
