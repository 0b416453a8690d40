from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import EmployeeRole, Gender, Section, Shift
from ..database.connection import DatabaseConnection
from ..database.mysql_base import build_insert, build_update, db_cursor, decode_list, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository
from .schema import COLUMNS

_SELECT = f"SELECT id, {', '.join(COLUMNS)}, created_at FROM employees"


def _to_employee(r: dict) -> Employee:
    return Employee(
        id=int(r["id"]),
        employee_code=r["employee_code"],
        first_name=r["first_name"],
        middle_name=r.get("middle_name"),
        last_name=r["last_name"],
        gender=Gender(r["gender"]),
        date_of_birth=r.get("date_of_birth"),
        phone=r.get("phone"),
        email=r.get("email"),
        role=EmployeeRole(r["role"]),
        section=Section(r["section"]) if r.get("section") else None,
        salary=int(r["salary"]),
        shift=Shift(r["shift"]) if r.get("shift") else None,
        subjects=decode_list(r.get("subjects")),
        created_at=r.get("created_at"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} ORDER BY id ASC")
            return [_to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE id=%s", (int(employee_id),))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def get_by_code(self, employee_code: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE employee_code=%s", (employee_code,))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def create(self, *, data: dict) -> int:
        sql, params = build_insert("employees", data, COLUMNS)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return int(cur.lastrowid)

    def update(self, employee_id: int, *, changes: dict) -> bool:
        sql, params = build_update("employees", "id", employee_id, changes, COLUMNS)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return cur.rowcount > 0

    def delete(self, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE id=%s", (int(employee_id),))
            return cur.rowcount > 0
