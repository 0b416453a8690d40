from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Gender, Section
from ..database.connection import DatabaseConnection
from ..database.mysql_base import build_insert, build_update, db_cursor, fetchall, fetchone
from .model import Student
from .repository import StudentRepository
from .schema import COLUMNS

_SELECT = f"SELECT id, {', '.join(COLUMNS)}, created_at FROM students"


def _to_student(r: dict) -> Student:
    return Student(
        id=int(r["id"]),
        student_code=r["student_code"],
        first_name=r["first_name"],
        middle_name=r.get("middle_name"),
        last_name=r["last_name"],
        gender=Gender(r["gender"]),
        date_of_birth=r.get("date_of_birth"),
        phone=r.get("phone"),
        email=r.get("email"),
        address=r.get("address"),
        section=Section(r["section"]),
        class_name=r["class_name"],
        father_name=r.get("father_name"),
        father_phone=r.get("father_phone"),
        father_email=r.get("father_email"),
        mother_name=r.get("mother_name"),
        mother_phone=r.get("mother_phone"),
        mother_email=r.get("mother_email"),
        profile_photo=r.get("profile_photo"),
        created_at=r.get("created_at"),
    )


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} ORDER BY id ASC")
            return [_to_student(r) for r in fetchall(cur)]

    def get_by_id(self, student_id: int) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE id=%s", (int(student_id),))
            r = fetchone(cur)
            return _to_student(r) if r else None

    def get_by_code(self, student_code: str) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE student_code=%s", (student_code,))
            r = fetchone(cur)
            return _to_student(r) if r else None

    def create(self, *, data: dict) -> int:
        sql, params = build_insert("students", data, COLUMNS)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return int(cur.lastrowid)

    def update(self, student_id: int, *, changes: dict) -> bool:
        sql, params = build_update("students", "id", student_id, changes, COLUMNS)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return cur.rowcount > 0

    def delete(self, student_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM students WHERE id=%s", (int(student_id),))
            return cur.rowcount > 0
