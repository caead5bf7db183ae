from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import Department, DepartmentInput


class DepartmentRepository(Protocol):
    def list_all(self) -> Sequence[Department]:
        raise NotImplementedError

    def list_by_employee_count(self) -> Sequence[Department]:
        """All departments ordered by active employee count, largest first."""

        raise NotImplementedError

    def get_by_id(self, department_id: int) -> Optional[Department]:
        raise NotImplementedError

    def name_exists(self, name: str, *, exclude_id: Optional[int] = None) -> bool:
        raise NotImplementedError

    def create(self, data: DepartmentInput, *, created_at: datetime) -> int:
        raise NotImplementedError

    def update(self, department_id: int, data: DepartmentInput, *, updated_at: datetime) -> bool:
        raise NotImplementedError

    def has_active_employees(self, department_id: int) -> bool:
        raise NotImplementedError

    def delete(self, department_id: int) -> bool:
        raise NotImplementedError
