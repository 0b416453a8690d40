from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import build_insert, build_update, db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository
from .schema import COLUMNS

_SELECT = "SELECT id, student_id, date, status, note, created_at FROM attendance"


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        id=int(r["id"]),
        student_id=int(r["student_id"]),
        date=r["date"],
        status=AttendanceStatus(r["status"]),
        note=r.get("note"),
        created_at=r.get("created_at"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} ORDER BY date DESC, id DESC")
            return [_to_record(r) for r in fetchall(cur)]

    def get_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE id=%s", (int(record_id),))
            r = fetchone(cur)
            return _to_record(r) if r else None

    def list_by_student(self, student_id: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE student_id=%s ORDER BY date DESC, id DESC", (int(student_id),))
            return [_to_record(r) for r in fetchall(cur)]

    def create(self, *, data: dict) -> int:
        sql, params = build_insert("attendance", data, COLUMNS)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return int(cur.lastrowid)

    def update(self, record_id: int, *, changes: dict) -> bool:
        sql, params = build_update("attendance", "id", record_id, changes, COLUMNS)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return cur.rowcount > 0

    def delete_for_student(self, student_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance WHERE student_id=%s", (int(student_id),))
            return int(cur.rowcount)
