from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Section
from ..database.connection import DatabaseConnection
from ..database.mysql_base import build_insert, build_update, db_cursor, fetchall, fetchone
from .model import Classroom
from .repository import ClassroomRepository
from .schema import COLUMNS

_SELECT = "SELECT id, name, section, capacity, teacher_id, created_at FROM classrooms"


def _to_classroom(r: dict) -> Classroom:
    return Classroom(
        id=int(r["id"]),
        name=r["name"],
        section=Section(r["section"]),
        capacity=int(r["capacity"]),
        teacher_id=int(r["teacher_id"]) if r.get("teacher_id") is not None else None,
        created_at=r.get("created_at"),
    )


class MySQLClassroomRepository(ClassroomRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Classroom]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} ORDER BY id ASC")
            return [_to_classroom(r) for r in fetchall(cur)]

    def get_by_id(self, classroom_id: int) -> Optional[Classroom]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE id=%s", (int(classroom_id),))
            r = fetchone(cur)
            return _to_classroom(r) if r else None

    def list_by_teacher(self, teacher_id: int) -> Sequence[Classroom]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE teacher_id=%s ORDER BY id ASC", (int(teacher_id),))
            return [_to_classroom(r) for r in fetchall(cur)]

    def create(self, *, data: dict) -> int:
        sql, params = build_insert("classrooms", data, COLUMNS)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return int(cur.lastrowid)

    def update(self, classroom_id: int, *, changes: dict) -> bool:
        sql, params = build_update("classrooms", "id", classroom_id, changes, COLUMNS)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return cur.rowcount > 0

    def clear_teacher(self, teacher_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE classrooms SET teacher_id=NULL WHERE teacher_id=%s", (int(teacher_id),))
            return int(cur.rowcount)

    def delete(self, classroom_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM classrooms WHERE id=%s", (int(classroom_id),))
            return cur.rowcount > 0
