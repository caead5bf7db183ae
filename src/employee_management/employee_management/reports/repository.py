from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .rows import AttendanceRow, DepartmentRow, EmployeeRow, HireRow, PerformanceRow


class ReportRepository(Protocol):
    """Read-only queries behind every report; implementations never write."""

    def active_employees(self) -> Sequence[EmployeeRow]:
        """Active employees ordered by id."""

        raise NotImplementedError

    def departments_with_totals(self) -> Sequence[DepartmentRow]:
        """Every department with its active head count and active salary total, ordered by id."""

        raise NotImplementedError

    def attendance(self, *, start_date: Optional[date] = None, end_date: Optional[date] = None) -> Sequence[AttendanceRow]:
        """Inclusive date range, ordered by date then employee name."""

        raise NotImplementedError

    def hires_between(self, start_date: date, end_date: date) -> Sequence[HireRow]:
        """Employees of any status who joined in the inclusive range, ordered by joining date then id."""

        raise NotImplementedError

    def performance(self, *, employee_id: Optional[int] = None) -> Sequence[PerformanceRow]:
        """Ordered by department name, last name, year, quarter."""

        raise NotImplementedError
