from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import build_insert, build_update, db_cursor, fetchall, fetchone
from .model import Result
from .repository import ResultRepository
from .schema import COLUMNS

_SELECT = "SELECT id, exam_id, student_id, subject, score, total, grade, created_at FROM results"


def _to_result(r: dict) -> Result:
    return Result(
        id=int(r["id"]),
        exam_id=int(r["exam_id"]),
        student_id=int(r["student_id"]),
        subject=r["subject"],
        score=int(r["score"]),
        total=int(r["total"]),
        grade=r["grade"],
        created_at=r.get("created_at"),
    )


class MySQLResultRepository(ResultRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _select(self, where: str = "", params: tuple = ()) -> list[Result]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} {where} ORDER BY id ASC", params)
            return [_to_result(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[Result]:
        return self._select()

    def get_by_id(self, result_id: int) -> Optional[Result]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE id=%s", (int(result_id),))
            r = fetchone(cur)
            return _to_result(r) if r else None

    def list_by_student(self, student_id: int) -> Sequence[Result]:
        return self._select("WHERE student_id=%s", (int(student_id),))

    def list_by_exam(self, exam_id: int) -> Sequence[Result]:
        return self._select("WHERE exam_id=%s", (int(exam_id),))

    def create(self, *, data: dict) -> int:
        sql, params = build_insert("results", data, COLUMNS)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return int(cur.lastrowid)

    def update(self, result_id: int, *, changes: dict) -> bool:
        sql, params = build_update("results", "id", result_id, changes, COLUMNS)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return cur.rowcount > 0

    def delete(self, result_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM results WHERE id=%s", (int(result_id),))
            return cur.rowcount > 0

    def delete_for_student(self, student_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM results WHERE student_id=%s", (int(student_id),))
            return int(cur.rowcount)

    def delete_for_exam(self, exam_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM results WHERE exam_id=%s", (int(exam_id),))
            return int(cur.rowcount)
