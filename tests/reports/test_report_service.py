from __future__ import annotations

import csv
import io
from datetime import date

import pytest
from openpyxl import load_workbook

from src.employee_management.employee_management.core.enums import ReportFormat, ReportSubject
from src.employee_management.employee_management.core.exceptions import ReportNotImplementedError
from src.employee_management.employee_management.reports.base import ReportQuery
from src.employee_management.employee_management.reports.cache import ReportCache
from src.employee_management.employee_management.reports.generators.employee_directory import (
    EmployeeDirectoryCsvGenerator,
)
from src.employee_management.employee_management.reports.registry import GENERATOR_TYPES
from src.employee_management.employee_management.reports.service import ReportService
from tests.builders import FIXED_NOW, add_department, add_employee


def _csv_rows(content: bytes) -> list[list[str]]:
    assert content.startswith(b"\xef\xbb\xbf")
    return list(csv.reader(io.StringIO(content.decode("utf-8-sig"))))


def test_every_subject_and_format_is_registered():
    assert {(g.subject, g.format) for g in GENERATOR_TYPES} == {
        (s, f) for s in ReportSubject for f in ReportFormat
    }
    assert len(GENERATOR_TYPES) == 24


def test_unregistered_pair_raises(report_repo):
    service = ReportService([EmployeeDirectoryCsvGenerator(report_repo)], ReportCache(60))

    with pytest.raises(ReportNotImplementedError, match="No pdf generator registered for report 'employees'"):
        service.generate(ReportSubject.EMPLOYEES, ReportFormat.PDF)


def test_employee_csv_lists_active_employees(container):
    department_id = add_department(container, "Engineering")
    add_employee(container, "ada@x.com", department_id)
    gone = add_employee(container, "bob@x.com", department_id, first_name="Bob")
    container.employee_service.delete_employee(gone, now=FIXED_NOW)

    report = container.report_service.generate(ReportSubject.EMPLOYEES, ReportFormat.CSV)

    rows = _csv_rows(report.content)
    assert rows[0] == ["Id", "FirstName", "LastName", "Email", "Department", "Position", "Salary"]
    assert rows[1][3:5] == ["ada@x.com", "Engineering"]
    assert len(rows) == 2
    assert report.filename == "employees.csv"
    assert report.content_type == "text/csv"


def test_cached_report_is_byte_identical_after_data_changes(container, cache_clock):
    department_id = add_department(container, "Engineering")
    add_employee(container, "ada@x.com", department_id)

    first = container.report_service.generate(ReportSubject.EMPLOYEES, ReportFormat.PDF)
    add_employee(container, "bob@x.com", department_id)
    cache_clock.advance(29 * 60)
    second = container.report_service.generate(ReportSubject.EMPLOYEES, ReportFormat.PDF)
    cache_clock.advance(2 * 60)
    third = container.report_service.generate(ReportSubject.EMPLOYEES, ReportFormat.CSV)

    assert second.content == first.content
    assert b"bob@x.com" in third.content


def test_ttl_expiry_picks_up_new_data(container, cache_clock):
    department_id = add_department(container, "Engineering")
    add_employee(container, "ada@x.com", department_id)
    container.report_service.generate(ReportSubject.EMPLOYEES, ReportFormat.CSV)
    add_employee(container, "bob@x.com", department_id)

    cache_clock.advance(30 * 60)
    report = container.report_service.generate(ReportSubject.EMPLOYEES, ReportFormat.CSV)

    assert b"bob@x.com" in report.content


def test_attendance_ranges_are_cached_separately(container, report_repo):
    employee_id = add_employee(container, "ada@x.com", add_department(container, "Engineering"))
    container.attendance_service.check_in(employee_id, now=FIXED_NOW)

    whole = container.report_service.generate(ReportSubject.ATTENDANCE, ReportFormat.CSV)
    before = container.report_service.generate(
        ReportSubject.ATTENDANCE, ReportFormat.CSV, ReportQuery(end_date=date(2024, 3, 1))
    )
    container.report_service.generate(ReportSubject.ATTENDANCE, ReportFormat.CSV)

    assert len(_csv_rows(whole.content)) == 2
    assert len(_csv_rows(before.content)) == 1
    assert report_repo.calls == 2


def test_performance_filter_uses_its_own_cache_entry(container):
    department_id = add_department(container, "Engineering")
    ada = add_employee(container, "ada@x.com", department_id)
    bob = add_employee(container, "bob@x.com", department_id, first_name="Bob")
    container.performance_service.record(ada, 2024, 1, 91, now=FIXED_NOW)
    container.performance_service.record(bob, 2024, 1, 55, now=FIXED_NOW)

    everyone = container.report_service.generate(ReportSubject.PERFORMANCE_METRICS, ReportFormat.CSV)
    only_bob = container.report_service.generate(
        ReportSubject.PERFORMANCE_METRICS, ReportFormat.CSV, ReportQuery(employee_id=bob)
    )

    assert len(_csv_rows(everyone.content)) == 3
    assert [row[1] for row in _csv_rows(only_bob.content)[1:]] == ["Bob Lovelace"]


def test_department_excel_sheets(container):
    department_id = add_department(container, "Engineering")
    add_employee(container, "ada@x.com", department_id)

    report = container.report_service.generate(ReportSubject.DEPARTMENTS, ReportFormat.EXCEL)
    workbook = load_workbook(io.BytesIO(report.content))

    assert workbook.sheetnames == ["Department Report", "Employee Details"]
    sheet = workbook["Department Report"]
    assert sheet["A1"].value == "Department Report"
    assert [c.value for c in sheet[4]][:2] == ["ID", "Name"]
    assert sheet["B5"].value == "Engineering"
    assert sheet["E5"].value == 1
    assert report.filename == "departments.xlsx"


def test_department_csv_totals(container):
    engineering = add_department(container, "Engineering")
    add_department(container, "Finance")
    add_employee(container, "a@x.com", engineering)
    add_employee(container, "b@x.com", engineering)

    rows = _csv_rows(container.report_service.generate(ReportSubject.DEPARTMENTS, ReportFormat.CSV).content)

    assert [(r[1], r[5], r[6]) for r in rows[1:]] == [("Engineering", "2", "100000.00"), ("Finance", "0", "0")]
