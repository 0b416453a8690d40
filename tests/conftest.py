from __future__ import annotations

import dataclasses
from datetime import datetime

import pytest

from school_dashboard.attendance.model import AttendanceRecord
from school_dashboard.classrooms.model import Classroom
from school_dashboard.container import assemble_container
from school_dashboard.employees.model import Employee
from school_dashboard.exams.model import Exam
from school_dashboard.payments.model import Payment
from school_dashboard.results.model import Result
from school_dashboard.students.model import Student

FIXED_NOW = datetime(2025, 3, 26, 9, 0, 0)


class InMemoryRepo:
    """Dict-backed stand-in for any of the MySQL repositories."""

    def __init__(self, entity_cls, *, code_attr=None):
        self._entity_cls = entity_cls
        self._code_attr = code_attr
        self._rows = {}
        self._next_id = 1

    def list_all(self):
        return [self._rows[k] for k in sorted(self._rows)]

    def get_by_id(self, row_id):
        return self._rows.get(int(row_id))

    def get_by_code(self, code):
        return next((r for r in self._rows.values() if getattr(r, self._code_attr) == code), None)

    def create(self, *, data):
        row_id = self._next_id
        self._next_id += 1
        self._rows[row_id] = self._entity_cls(id=row_id, created_at=FIXED_NOW, **data)
        return row_id

    def update(self, row_id, *, changes):
        row = self._rows.get(int(row_id))
        if not row:
            return False
        self._rows[row.id] = dataclasses.replace(row, **changes)
        return True

    def delete(self, row_id):
        return self._rows.pop(int(row_id), None) is not None

    def _where(self, attr, value):
        return [r for r in self.list_all() if getattr(r, attr) == int(value)]

    def _delete_where(self, attr, value):
        doomed = [r.id for r in self._where(attr, value)]
        for row_id in doomed:
            del self._rows[row_id]
        return len(doomed)

    def list_by_student(self, student_id):
        return self._where("student_id", student_id)

    def list_by_exam(self, exam_id):
        return self._where("exam_id", exam_id)

    def list_by_teacher(self, teacher_id):
        return self._where("teacher_id", teacher_id)

    def delete_for_student(self, student_id):
        return self._delete_where("student_id", student_id)

    def delete_for_exam(self, exam_id):
        return self._delete_where("exam_id", exam_id)

    def clear_teacher(self, teacher_id):
        rows = self._where("teacher_id", teacher_id)
        for r in rows:
            self._rows[r.id] = dataclasses.replace(r, teacher_id=None)
        return len(rows)


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def repos():
    return dict(
        students_repo=InMemoryRepo(Student, code_attr="student_code"),
        employees_repo=InMemoryRepo(Employee, code_attr="employee_code"),
        classrooms_repo=InMemoryRepo(Classroom),
        attendance_repo=InMemoryRepo(AttendanceRecord),
        payments_repo=InMemoryRepo(Payment),
        exams_repo=InMemoryRepo(Exam),
        results_repo=InMemoryRepo(Result),
    )


@pytest.fixture
def container(repos):
    return assemble_container(**repos)


@pytest.fixture
def app(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from school_dashboard.main import create_app

    flask_app = create_app(container)
    flask_app.config.update(TESTING=True)
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def student_payload():
    def build(code="S001", **overrides):
        payload = {
            "studentId": code,
            "firstName": "Amina",
            "lastName": "Yusuf",
            "gender": "female",
            "section": "primary",
            "class": "3",
        }
        payload.update(overrides)
        return payload

    return build


@pytest.fixture
def employee_payload():
    def build(code="E001", **overrides):
        payload = {
            "employeeId": code,
            "firstName": "Omar",
            "lastName": "Hassan",
            "gender": "male",
            "role": "teacher",
            "salary": 1200,
            "subjects": ["Math"],
        }
        payload.update(overrides)
        return payload

    return build
