from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles used for endpoint authorization."""

    ADMIN = "Admin"
    HR = "HR"
    MANAGER = "Manager"
    EMPLOYEE = "Employee"


class EmployeeStatus(str, Enum):
    """Soft-delete state stored on each employee row."""

    ACTIVE = "Active"
    DEACTIVATED = "Deactivated"


class ReportSubject(str, Enum):
    EMPLOYEES = "employees"
    DEPARTMENTS = "departments"
    ATTENDANCE = "attendance"
    SALARIES = "salaries"
    HIRING_TRENDS = "hiring-trends"
    DEPARTMENT_GROWTH = "department-growth"
    ATTENDANCE_PATTERNS = "attendance-patterns"
    PERFORMANCE_METRICS = "performance-metrics"


class ReportFormat(str, Enum):
    CSV = "csv"
    PDF = "pdf"
    EXCEL = "excel"

    @property
    def content_type(self) -> str:
        return {
            ReportFormat.CSV: "text/csv",
            ReportFormat.PDF: "application/pdf",
            ReportFormat.EXCEL: "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        }[self]

    @property
    def file_extension(self) -> str:
        return {
            ReportFormat.CSV: "csv",
            ReportFormat.PDF: "pdf",
            ReportFormat.EXCEL: "xlsx",
        }[self]
