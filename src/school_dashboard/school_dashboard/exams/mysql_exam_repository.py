from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Section
from ..database.connection import DatabaseConnection
from ..database.mysql_base import build_insert, build_update, db_cursor, decode_list, fetchall, fetchone
from .model import Exam
from .repository import ExamRepository
from .schema import COLUMNS

_SELECT = "SELECT id, name, section, class_name, date, subjects, created_at FROM exams"


def _to_exam(r: dict) -> Exam:
    return Exam(
        id=int(r["id"]),
        name=r["name"],
        section=Section(r["section"]),
        class_name=r["class_name"],
        date=r["date"],
        subjects=decode_list(r.get("subjects")),
        created_at=r.get("created_at"),
    )


class MySQLExamRepository(ExamRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Exam]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} ORDER BY date DESC, id DESC")
            return [_to_exam(r) for r in fetchall(cur)]

    def get_by_id(self, exam_id: int) -> Optional[Exam]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE id=%s", (int(exam_id),))
            r = fetchone(cur)
            return _to_exam(r) if r else None

    def create(self, *, data: dict) -> int:
        sql, params = build_insert("exams", data, COLUMNS)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return int(cur.lastrowid)

    def update(self, exam_id: int, *, changes: dict) -> bool:
        sql, params = build_update("exams", "id", exam_id, changes, COLUMNS)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return cur.rowcount > 0

    def delete(self, exam_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM exams WHERE id=%s", (int(exam_id),))
            return cur.rowcount > 0
