from __future__ import annotations

import pytest

from school_dashboard.core.exceptions import NotFoundError, ValidationError


def test_create_and_get(container, student_payload):
    svc = container.student_service

    student = svc.create(student_payload(middleName="B."))

    assert svc.get(student.id).full_name == "Amina B. Yusuf"


def test_duplicate_student_code_rejected(container, student_payload):
    svc = container.student_service
    svc.create(student_payload("S001"))

    with pytest.raises(ValidationError) as exc:
        svc.create(student_payload("S001", firstName="Other"))

    assert exc.value.errors == [{"field": "studentId", "message": "Student ID already exists"}]


def test_update_keeps_own_code(container, student_payload):
    svc = container.student_service
    student = svc.create(student_payload("S001"))

    updated = svc.update(student.id, {"studentId": "S001", "class": "4"})

    assert updated.class_name == "4"


def test_empty_patch_returns_current(container, student_payload):
    svc = container.student_service
    student = svc.create(student_payload())

    assert svc.update(student.id, {}) == student


def test_delete_removes_dependent_rows(container, student_payload):
    student = container.student_service.create(student_payload())
    other = container.student_service.create(student_payload("S002"))
    container.attendance_service.create({"studentId": student.id, "status": "present"})
    container.attendance_service.create({"studentId": other.id, "status": "absent"})
    container.payment_service.create({"studentId": student.id, "amount": 500, "status": "paid"})

    container.student_service.delete(student.id)

    assert [a.student_id for a in container.attendance_repo.list_all()] == [other.id]
    assert container.payments_repo.list_all() == []
    with pytest.raises(NotFoundError):
        container.student_service.get(student.id)


def test_delete_unknown_student(container):
    with pytest.raises(NotFoundError, match="Student not found"):
        container.student_service.delete(99)
