from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from src.employee_management.employee_management.common.pagination import PageRequest
from src.employee_management.employee_management.core.enums import EmployeeStatus
from src.employee_management.employee_management.core.exceptions import ConflictError, NotFoundError, ValidationError
from src.employee_management.employee_management.employees.service import parse_employee_input
from tests.builders import FIXED_NOW, add_department, add_employee, employee_input


def test_create_joins_department_name(container):
    department_id = add_department(container, "Engineering")

    employee = container.employee_service.create_employee(employee_input("a@x.com", department_id), now=FIXED_NOW)

    assert employee.department_name == "Engineering"
    assert employee.status == EmployeeStatus.ACTIVE
    assert employee.created_at == FIXED_NOW


def test_duplicate_email_conflicts(container):
    department_id = add_department(container, "Engineering")
    add_employee(container, "a@x.com", department_id)

    with pytest.raises(ConflictError, match="Employee with this email already exists"):
        add_employee(container, "a@x.com", department_id)


def test_email_of_deactivated_employee_stays_taken(container):
    department_id = add_department(container, "Engineering")
    employee_id = add_employee(container, "a@x.com", department_id)
    container.employee_service.delete_employee(employee_id, now=FIXED_NOW)

    with pytest.raises(ConflictError):
        add_employee(container, "a@x.com", department_id)


def test_unknown_department_is_validation_error(container):
    with pytest.raises(ValidationError, match="Department with ID 7 does not exist"):
        add_employee(container, "a@x.com", 7)


def test_soft_delete_hides_employee(container):
    department_id = add_department(container, "Engineering")
    employee_id = add_employee(container, "a@x.com", department_id)

    container.employee_service.delete_employee(employee_id, now=FIXED_NOW)

    assert container.employee_service.list_employees() == []
    with pytest.raises(NotFoundError):
        container.employee_service.get_employee(employee_id)
    with pytest.raises(NotFoundError):
        container.employee_service.delete_employee(employee_id, now=FIXED_NOW)


def test_update_can_deactivate(container):
    department_id = add_department(container, "Engineering")
    employee_id = add_employee(container, "a@x.com", department_id)

    updated = container.employee_service.update_employee(
        employee_id,
        employee_input("a@x.com", department_id, status=EmployeeStatus.DEACTIVATED, salary=Decimal("1")),
        now=FIXED_NOW,
    )

    assert updated.status == EmployeeStatus.DEACTIVATED
    assert updated.salary == Decimal("1")
    assert updated.updated_at == FIXED_NOW


def test_update_to_other_employees_email_conflicts(container):
    department_id = add_department(container, "Engineering")
    add_employee(container, "a@x.com", department_id)
    second = add_employee(container, "b@x.com", department_id)

    with pytest.raises(ConflictError):
        container.employee_service.update_employee(second, employee_input("a@x.com", department_id), now=FIXED_NOW)


def test_bulk_create_is_all_or_nothing(container):
    department_id = add_department(container, "Engineering")
    add_employee(container, "taken@x.com", department_id)

    with pytest.raises(ConflictError, match="taken@x.com"):
        container.employee_service.bulk_create(
            [employee_input("new@x.com", department_id), employee_input("taken@x.com", department_id)],
            now=FIXED_NOW,
        )

    assert [e.email for e in container.employee_service.list_employees()] == ["taken@x.com"]


def test_bulk_create_rejects_duplicates_inside_request(container):
    department_id = add_department(container, "Engineering")

    with pytest.raises(ConflictError):
        container.employee_service.bulk_create(
            [employee_input("a@x.com", department_id), employee_input("a@x.com", department_id)], now=FIXED_NOW
        )

    assert container.employee_service.list_employees() == []


def test_bulk_create_returns_created_in_order(container):
    department_id = add_department(container, "Engineering")

    created = container.employee_service.bulk_create(
        [employee_input("a@x.com", department_id), employee_input("b@x.com", department_id)], now=FIXED_NOW
    )

    assert [e.email for e in created] == ["a@x.com", "b@x.com"]


def test_bulk_create_requires_items(container):
    with pytest.raises(ValidationError):
        container.employee_service.bulk_create([], now=FIXED_NOW)


def test_bulk_delete_counts_found_ids(container):
    department_id = add_department(container, "Engineering")
    first = add_employee(container, "a@x.com", department_id)
    second = add_employee(container, "b@x.com", department_id)

    assert container.employee_service.bulk_delete([first, second, 999], now=FIXED_NOW) == 2
    assert container.employee_service.list_employees() == []


def test_bulk_delete_with_no_match_is_not_found(container):
    with pytest.raises(NotFoundError):
        container.employee_service.bulk_delete([998, 999], now=FIXED_NOW)


def test_paging_search_and_sort(container):
    engineering = add_department(container, "Engineering")
    sales = add_department(container, "Sales")
    add_employee(container, "c@x.com", engineering, first_name="Cleo", salary=Decimal("30000"))
    add_employee(container, "a@x.com", sales, first_name="Abe", salary=Decimal("90000"))
    add_employee(container, "b@x.com", engineering, first_name="Bea", salary=Decimal("60000"))

    by_name = container.employee_service.get_page(PageRequest(page_size=2))
    assert [e.first_name for e in by_name.items] == ["Abe", "Bea"]
    assert by_name.total_count == 3
    assert by_name.total_pages == 2
    assert by_name.has_next_page and not by_name.has_previous_page

    by_salary = container.employee_service.get_page(PageRequest(sort_by="Salary", sort_descending=True))
    assert [e.first_name for e in by_salary.items] == ["Abe", "Bea", "Cleo"]

    searched = container.employee_service.get_page(PageRequest(search_term="sales"))
    assert [e.first_name for e in searched.items] == ["Abe"]


def test_department_page_does_not_search_department_name(container):
    engineering = add_department(container, "Engineering")
    add_employee(container, "a@x.com", engineering, first_name="Abe")
    add_employee(container, "b@x.com", engineering, first_name="Bea")

    page = container.employee_service.get_department_page(engineering, PageRequest(search_term="engineering"))

    assert page.total_count == 0


def test_unknown_sort_key_falls_back_to_first_name_ascending(container):
    department_id = add_department(container, "Engineering")
    add_employee(container, "b@x.com", department_id, first_name="Bea")
    add_employee(container, "a@x.com", department_id, first_name="Abe")

    page = container.employee_service.get_page(PageRequest(sort_by="shoe_size", sort_descending=True))

    assert [e.first_name for e in page.items] == ["Abe", "Bea"]


def test_out_of_range_paging_is_normalized(container):
    page = container.employee_service.get_page(PageRequest(page_number=0, page_size=1000))

    assert page.page_number == 1
    assert page.page_size == 10


def test_parse_employee_input_new_is_always_active():
    data = parse_employee_input(
        {
            "firstName": "Ada",
            "lastName": "Lovelace",
            "email": "ada@x.com",
            "dateOfJoining": "2023-06-01",
            "salary": 100,
            "departmentId": 1,
            "isActive": False,
        }
    )

    assert data.status == EmployeeStatus.ACTIVE
    assert data.date_of_joining == date(2023, 6, 1)


def test_parse_employee_input_update_reads_is_active():
    payload = {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@x.com",
        "dateOfJoining": "2023-06-01",
        "salary": "100.50",
        "departmentId": 1,
        "isActive": False,
    }

    assert parse_employee_input(payload, for_update=True).status == EmployeeStatus.DEACTIVATED


@pytest.mark.parametrize(
    "override",
    [
        {"email": "not-an-email"},
        {"salary": -1},
        {"departmentId": 0},
        {"dateOfJoining": "01/06/2023"},
        {"firstName": ""},
    ],
)
def test_parse_employee_input_rejects_bad_fields(override):
    payload = {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@x.com",
        "dateOfJoining": "2023-06-01",
        "salary": 100,
        "departmentId": 1,
    }
    payload.update(override)

    with pytest.raises(ValidationError):
        parse_employee_input(payload)


def test_email_uniqueness_is_case_sensitive(container):
    department_id = add_department(container, "Engineering")
    add_employee(container, "ada@x.com", department_id)

    with pytest.raises(ConflictError):
        add_employee(container, "ada@x.com", department_id, first_name="Copy")
    add_employee(container, "ADA@x.com", department_id)

    assert [e.email for e in container.employee_service.list_employees()] == ["ada@x.com", "ADA@x.com"]
