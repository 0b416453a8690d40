from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import Section


@dataclass(frozen=True)
class Classroom:
    """Domain entity: a room with a capacity and at most one assigned teacher."""

    id: int
    name: str
    section: Section
    capacity: int
    teacher_id: Optional[int] = None
    created_at: Optional[datetime] = None
