from __future__ import annotations

import pytest

from src.time_tracking.time_tracking.core.exceptions import ConflictError, NotFoundError, ValidationError
from src.time_tracking.time_tracking.employees.service import EmployeeService

from tests.fakes import InMemoryEmployees


@pytest.fixture
def svc() -> EmployeeService:
    return EmployeeService(InMemoryEmployees())


def test_create_trims_names(svc):
    employee = svc.create_employee(first_name="  John ", last_name="Doe ")
    assert (employee.first_name, employee.last_name) == ("John", "Doe")


def test_duplicate_name_is_a_conflict(svc):
    svc.create_employee(first_name="John", last_name="Doe")
    with pytest.raises(ConflictError):
        svc.create_employee(first_name="John", last_name="Doe")


@pytest.mark.parametrize("first, last", [("", "Doe"), ("John", "   "), (None, "Doe")])
def test_blank_names_are_rejected(svc, first, last):
    with pytest.raises(ValidationError):
        svc.create_employee(first_name=first, last_name=last)


def test_overlong_name_is_rejected(svc):
    with pytest.raises(ValidationError):
        svc.create_employee(first_name="x" * 101, last_name="Doe")


def test_get_missing_employee_raises(svc):
    with pytest.raises(NotFoundError):
        svc.get_employee(5)


def test_list_is_ordered_by_last_name_and_searchable(svc):
    svc.create_employee(first_name="Jane", last_name="Smith")
    svc.create_employee(first_name="John", last_name="Doe")
    svc.create_employee(first_name="Anna", last_name="Adams")

    assert [e.last_name for e in svc.list_employees()] == ["Adams", "Doe", "Smith"]
    assert [e.first_name for e in svc.list_employees("jo")] == ["John"]
    assert len(svc.list_employees("  ")) == 3


def test_rename_to_existing_name_is_a_conflict(svc):
    svc.create_employee(first_name="John", last_name="Doe")
    jane = svc.create_employee(first_name="Jane", last_name="Smith")

    with pytest.raises(ConflictError):
        svc.update_employee(jane.employee_id, first_name="John", last_name="Doe")


def test_update_keeping_same_name_is_allowed(svc):
    john = svc.create_employee(first_name="John", last_name="Doe")
    updated = svc.update_employee(john.employee_id, first_name="John", last_name="Doe")
    assert updated == john


def test_delete_missing_employee_raises(svc):
    with pytest.raises(NotFoundError):
        svc.delete_employee(3)


def test_delete_employee(svc):
    john = svc.create_employee(first_name="John", last_name="Doe")
    svc.delete_employee(john.employee_id)
    with pytest.raises(NotFoundError):
        svc.get_employee(john.employee_id)
