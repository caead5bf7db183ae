from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from src.employee_management.employee_management.container import Container
from src.employee_management.employee_management.departments.model import DepartmentInput
from src.employee_management.employee_management.employees.model import EmployeeInput

FIXED_NOW = datetime(2024, 3, 14, 9, 30)


class FakeClock:
    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def add_department(container: Container, name: str) -> int:
    return container.department_service.create_department(DepartmentInput(name), now=FIXED_NOW).department_id


def employee_input(email: str, department_id: int, **overrides) -> EmployeeInput:
    values = dict(
        first_name="Ada",
        last_name="Lovelace",
        email=email,
        date_of_joining=date(2023, 6, 1),
        salary=Decimal("50000.00"),
        department_id=department_id,
        position="Engineer",
    )
    values.update(overrides)
    return EmployeeInput(**values)


def add_employee(container: Container, email: str, department_id: int, **overrides) -> int:
    employee = container.employee_service.create_employee(employee_input(email, department_id, **overrides), now=FIXED_NOW)
    return employee.employee_id
