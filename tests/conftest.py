from __future__ import annotations

import random

import pytest

from src.employee_management.employee_management import create_app
from src.employee_management.employee_management.attendance.service import AttendanceService
from src.employee_management.employee_management.container import Container
from src.employee_management.employee_management.core.enums import Role
from src.employee_management.employee_management.departments.service import DepartmentService
from src.employee_management.employee_management.employees.service import EmployeeService
from src.employee_management.employee_management.performance.service import PerformanceService
from src.employee_management.employee_management.reports.cache import ReportCache
from src.employee_management.employee_management.reports.registry import default_generators
from src.employee_management.employee_management.reports.service import ReportService
from src.employee_management.employee_management.seed.service import SeedService
from src.employee_management.employee_management.users.service import AuthService
from tests.builders import FIXED_NOW, FakeClock
from tests.fakes import (
    InMemoryAttendance,
    InMemoryDepartments,
    InMemoryEmployees,
    InMemoryPerformance,
    InMemoryReports,
    InMemorySeeds,
    InMemoryUsers,
    Store,
)

SECRET = "test-secret-key-with-at-least-32-bytes"


@pytest.fixture
def store() -> Store:
    return Store()


@pytest.fixture
def cache_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def report_repo(store) -> InMemoryReports:
    return InMemoryReports(store)


@pytest.fixture
def container(store, report_repo, cache_clock) -> Container:
    departments = InMemoryDepartments(store)
    employees = InMemoryEmployees(store)
    return Container(
        department_service=DepartmentService(departments),
        employee_service=EmployeeService(employees, departments),
        attendance_service=AttendanceService(InMemoryAttendance(store), employees),
        performance_service=PerformanceService(InMemoryPerformance(store)),
        auth_service=AuthService(InMemoryUsers(store), secret_key=SECRET, issuer="EMS.API", audience="EMS.Client"),
        report_service=ReportService(
            default_generators(report_repo, clock=lambda: FIXED_NOW),
            ReportCache(1800, clock=cache_clock),
        ),
        seed_service=SeedService(InMemorySeeds(store), employee_count=12, attendance_days=7, rng=random.Random(7)),
        database_check=lambda: None,
    )


@pytest.fixture
def app(container):
    return create_app(container=container, settings_module="config.testing")


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers(container):
    def make(role: Role = Role.ADMIN) -> dict:
        result = container.auth_service.issue_token(username=f"{role.value.lower()}-user", email="u@ems.com", role=role)
        return {"Authorization": f"Bearer {result.token}"}

    return make

