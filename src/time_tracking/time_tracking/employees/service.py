from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.validators import require_max_length, require_non_empty
from ..core.exceptions import ConflictError, NotFoundError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

NAME_MAX_LENGTH = 100


def _clean_name(value: Optional[str], field_name: str) -> str:
    return require_max_length(require_non_empty(value, field_name), field_name, NAME_MAX_LENGTH)


class EmployeeService:
    """Use case: manage employee records."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def create_employee(self, *, first_name: str, last_name: str) -> Employee:
        first_name = _clean_name(first_name, "first_name")
        last_name = _clean_name(last_name, "last_name")

        if self._employees.exists_by_name(first_name, last_name):
            raise ConflictError(f"Employee already exists with name: {first_name} {last_name}")

        employee = self._employees.create(first_name=first_name, last_name=last_name)
        logger.info(
            "Employee created: id=%s, name=%s %s",
            employee.employee_id,
            first_name,
            last_name,
            extra={"employee_id": employee.employee_id},
        )
        return employee

    def get_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee", employee_id)
        return employee

    def list_employees(self, search: Optional[str] = None) -> Sequence[Employee]:
        if search and search.strip():
            return self._employees.search_by_name(search.strip())
        return self._employees.list_all()

    def update_employee(self, employee_id: int, *, first_name: str, last_name: str) -> Employee:
        first_name = _clean_name(first_name, "first_name")
        last_name = _clean_name(last_name, "last_name")

        current = self.get_employee(employee_id)
        renamed = (current.first_name, current.last_name) != (first_name, last_name)
        if renamed and self._employees.exists_by_name(first_name, last_name):
            raise ConflictError(f"Employee already exists with name: {first_name} {last_name}")

        updated = self._employees.update(employee_id=employee_id, first_name=first_name, last_name=last_name)
        if not updated:
            raise NotFoundError("Employee", employee_id)
        logger.info(
            "Employee updated: id=%s, name=%s %s",
            employee_id,
            first_name,
            last_name,
            extra={"employee_id": employee_id},
        )
        return updated

    def delete_employee(self, employee_id: int) -> None:
        if not self._employees.exists(employee_id):
            raise NotFoundError("Employee", employee_id)
        self._employees.delete_by_id(employee_id)
        logger.info("Employee deleted: id=%s", employee_id, extra={"employee_id": employee_id})
