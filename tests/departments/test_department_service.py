from __future__ import annotations

import pytest

from src.employee_management.employee_management.core.enums import EmployeeStatus
from src.employee_management.employee_management.core.exceptions import (
    BusinessRuleError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from src.employee_management.employee_management.departments.model import DepartmentInput
from src.employee_management.employee_management.departments.service import parse_department_input
from tests.builders import FIXED_NOW, add_department, add_employee


def test_employee_count_ordering(container):
    engineering = add_department(container, "Engineering")
    hr = add_department(container, "HR")
    add_department(container, "Finance")
    add_employee(container, "a@x.com", engineering)
    add_employee(container, "b@x.com", engineering)
    add_employee(container, "c@x.com", hr)

    rows = container.department_service.list_with_employee_count()

    assert [(d.name, d.employee_count) for d in rows] == [("Engineering", 2), ("HR", 1), ("Finance", 0)]


def test_employee_count_ignores_deactivated(container):
    engineering = add_department(container, "Engineering")
    add_employee(container, "a@x.com", engineering)
    gone = add_employee(container, "b@x.com", engineering)
    container.employee_service.delete_employee(gone, now=FIXED_NOW)

    assert container.department_service.get_department(engineering).employee_count == 1


def test_duplicate_name_is_rejected_case_insensitively(container):
    add_department(container, "Engineering")

    with pytest.raises(ConflictError):
        container.department_service.create_department(DepartmentInput("engineering"), now=FIXED_NOW)


def test_rename_to_own_name_is_allowed(container):
    department_id = add_department(container, "Engineering")

    updated = container.department_service.update_department(
        department_id, DepartmentInput("Engineering", description="Builds things"), now=FIXED_NOW
    )

    assert updated.description == "Builds things"
    assert updated.updated_at == FIXED_NOW


def test_rename_to_taken_name_conflicts(container):
    add_department(container, "Engineering")
    hr = add_department(container, "HR")

    with pytest.raises(ConflictError):
        container.department_service.update_department(hr, DepartmentInput("Engineering"), now=FIXED_NOW)


def test_missing_department_raises_not_found(container):
    with pytest.raises(NotFoundError, match="Department with ID 99 not found"):
        container.department_service.get_department(99)


def test_delete_with_active_employees_is_refused(container):
    department_id = add_department(container, "Engineering")
    add_employee(container, "a@x.com", department_id)

    with pytest.raises(BusinessRuleError, match="active employees"):
        container.department_service.delete_department(department_id)

    assert container.department_service.get_department(department_id).name == "Engineering"


def test_delete_detaches_deactivated_employees(container, store):
    department_id = add_department(container, "Engineering")
    employee_id = add_employee(container, "a@x.com", department_id)
    container.employee_service.delete_employee(employee_id, now=FIXED_NOW)

    container.department_service.delete_department(department_id)

    assert store.employees[employee_id].department_id is None
    assert store.employees[employee_id].status == EmployeeStatus.DEACTIVATED
    with pytest.raises(NotFoundError):
        container.department_service.get_department(department_id)


def test_parse_requires_name():
    with pytest.raises(ValidationError):
        parse_department_input({"name": "   "})


def test_parse_limits_name_length():
    with pytest.raises(ValidationError):
        parse_department_input({"name": "x" * 101})


def test_parse_reads_camel_case_fields():
    data = parse_department_input({"name": " Sales ", "description": "Deals", "managerName": "Kim"})

    assert data == DepartmentInput("Sales", "Deals", "Kim")
