from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import PaymentStatus


@dataclass(frozen=True)
class Payment:
    """Domain entity: a fee entry for a student. Amounts are whole currency units."""

    id: int
    student_id: int
    amount: int
    date: datetime
    status: PaymentStatus
    description: Optional[str] = None
    created_at: Optional[datetime] = None
