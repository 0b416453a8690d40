from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from ..core.enums import EmployeeRole
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository
from .schema import validate_employee

logger = logging.getLogger(__name__)


class EmployeeService:
    def __init__(self, employees: EmployeeRepository, *, classrooms=None):
        self._employees = employees
        self._classrooms = classrooms

    def list(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def create(self, payload: Any) -> Employee:
        data = validate_employee(payload)
        self._ensure_code_free(data["employee_code"])

        new_id = self._employees.create(data=data)
        logger.info("Created employee %s (id=%s, role=%s)", data["employee_code"], new_id, data["role"].value)
        return self.get(new_id)

    def update(self, employee_id: int, payload: Any) -> Employee:
        current = self.get(employee_id)
        changes = validate_employee(payload, partial=True)
        if not changes:
            return current

        code = changes.get("employee_code")
        if code and code != current.employee_code:
            self._ensure_code_free(code, exclude_id=current.id)

        role = changes.get("role")
        if role and role != EmployeeRole.TEACHER and current.is_teacher and self._teaches_any(current.id):
            raise ValidationError(
                "Invalid employee data",
                [{"field": "role", "message": "Employee is assigned as a classroom teacher"}],
            )

        self._employees.update(current.id, changes=changes)
        return self.get(current.id)

    def delete(self, employee_id: int) -> None:
        employee = self.get(employee_id)
        if self._classrooms is not None:
            self._classrooms.clear_teacher(employee.id)
        if not self._employees.delete(employee.id):
            raise NotFoundError("Employee not found")
        logger.info("Deleted employee %s (id=%s)", employee.employee_code, employee.id)

    def _teaches_any(self, employee_id: int) -> bool:
        if self._classrooms is None:
            return False
        return bool(self._classrooms.list_by_teacher(employee_id))

    def _ensure_code_free(self, code: str, *, exclude_id: Optional[int] = None) -> None:
        existing = self._employees.get_by_code(code)
        if existing and existing.id != exclude_id:
            raise ValidationError(
                "Invalid employee data",
                [{"field": "employeeId", "message": "Employee ID already exists"}],
            )
