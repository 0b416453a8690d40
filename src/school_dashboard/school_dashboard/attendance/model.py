from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance mark for one student at one point in time.

    Several marks for the same student on the same day are allowed.
    """

    id: int
    student_id: int
    date: datetime
    status: AttendanceStatus
    note: Optional[str] = None
    created_at: Optional[datetime] = None
