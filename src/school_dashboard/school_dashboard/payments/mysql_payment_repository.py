from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import PaymentStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import build_insert, build_update, db_cursor, fetchall, fetchone
from .model import Payment
from .repository import PaymentRepository
from .schema import COLUMNS

_SELECT = "SELECT id, student_id, amount, date, description, status, created_at FROM payments"


def _to_payment(r: dict) -> Payment:
    return Payment(
        id=int(r["id"]),
        student_id=int(r["student_id"]),
        amount=int(r["amount"]),
        date=r["date"],
        status=PaymentStatus(r["status"]),
        description=r.get("description"),
        created_at=r.get("created_at"),
    )


class MySQLPaymentRepository(PaymentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Payment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} ORDER BY date DESC, id DESC")
            return [_to_payment(r) for r in fetchall(cur)]

    def get_by_id(self, payment_id: int) -> Optional[Payment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE id=%s", (int(payment_id),))
            r = fetchone(cur)
            return _to_payment(r) if r else None

    def list_by_student(self, student_id: int) -> Sequence[Payment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE student_id=%s ORDER BY date DESC, id DESC", (int(student_id),))
            return [_to_payment(r) for r in fetchall(cur)]

    def create(self, *, data: dict) -> int:
        sql, params = build_insert("payments", data, COLUMNS)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return int(cur.lastrowid)

    def update(self, payment_id: int, *, changes: dict) -> bool:
        sql, params = build_update("payments", "id", payment_id, changes, COLUMNS)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return cur.rowcount > 0

    def delete_for_student(self, student_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM payments WHERE student_id=%s", (int(student_id),))
            return int(cur.rowcount)
