from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from ..departments.model import DepartmentInput
from .model import SeedAttendance, SeedEmployee, SeedMetric, SeedStatus, SeedUser


class SeedRepository(Protocol):
    """Bulk writes used only by demo seeding."""

    def status(self) -> SeedStatus:
        raise NotImplementedError

    def clear_all(self) -> None:
        """Delete every row, dependants first, and restart ids at 1."""

        raise NotImplementedError

    def add_departments(self, rows: Sequence[DepartmentInput], *, created_at: datetime) -> None:
        raise NotImplementedError

    def department_ids(self) -> dict[str, int]:
        """Department id by name."""

        raise NotImplementedError

    def add_employees(self, rows: Sequence[SeedEmployee], *, created_at: datetime) -> None:
        raise NotImplementedError

    def active_employee_ids(self) -> list[int]:
        raise NotImplementedError

    def add_attendance(self, rows: Sequence[SeedAttendance], *, created_at: datetime) -> None:
        raise NotImplementedError

    def add_metrics(self, rows: Sequence[SeedMetric], *, created_at: datetime) -> None:
        raise NotImplementedError

    def add_users(self, rows: Sequence[SeedUser], *, created_at: datetime) -> None:
        raise NotImplementedError
