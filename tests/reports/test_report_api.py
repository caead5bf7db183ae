from __future__ import annotations

from dataclasses import replace

import pytest

from src.employee_management.employee_management import create_app
from src.employee_management.employee_management.reports.cache import ReportCache
from src.employee_management.employee_management.reports.service import ReportService
from tests.builders import add_department, add_employee

XLSX = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@pytest.fixture
def staffed(container):
    department_id = add_department(container, "Engineering")
    add_employee(container, "ada@x.com", department_id)
    return container


@pytest.mark.parametrize(
    "path, mimetype, filename",
    [
        ("/api/reports/employees", "text/csv", "employees.csv"),
        ("/api/reports/employees/pdf", "application/pdf", "employees.pdf"),
        ("/api/reports/employees/excel", XLSX, "employees.xlsx"),
        ("/api/reports/departments/excel", XLSX, "departments.xlsx"),
        ("/api/reports/salaries/pdf", "application/pdf", "salaries.pdf"),
        ("/api/reports/hiring-trends", "text/csv", "hiring-trends.csv"),
        ("/api/reports/attendance-patterns/excel", XLSX, "attendance-patterns.xlsx"),
    ],
)
def test_download(client, staffed, path, mimetype, filename):
    response = client.get(path)

    assert response.status_code == 200
    assert response.mimetype == mimetype
    assert response.headers["Content-Disposition"] == f"attachment; filename={filename}"
    assert response.data


def test_unknown_subject_is_404(client):
    assert client.get("/api/reports/payroll").status_code == 404


def test_unknown_format_is_404(client):
    assert client.get("/api/reports/employees/docx").status_code == 404


def test_csv_is_only_served_at_bare_path(client):
    assert client.get("/api/reports/employees/csv").status_code == 404


def test_attendance_date_filter(client, staffed):
    response = client.get("/api/reports/attendance?startDate=2024-01-01&endDate=2024-01-31")

    assert response.status_code == 200
    assert response.data.decode("utf-8-sig").splitlines()[0].startswith("Id,EmployeeId")


def test_bad_attendance_date_is_400(client):
    assert client.get("/api/reports/attendance/pdf?startDate=31-01-2024").status_code == 400


def test_bad_employee_filter_is_400(client):
    assert client.get("/api/reports/performance-metrics?employeeId=abc").status_code == 400


def test_missing_generator_is_500(container):
    client = create_app(
        container=replace(container, report_service=ReportService([], ReportCache(60))),
        settings_module="config.testing",
    ).test_client()

    response = client.get("/api/reports/employees/pdf")

    assert response.status_code == 500
    assert "No pdf generator registered" in response.get_json()["message"]
