from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional, Protocol, Sequence

from ..common.pagination import PageRequest, PagedResult
from .model import Employee, EmployeeInput

# Allow-listed sort keys (lower-cased) accepted by `get_page`.
SORT_KEYS = ("firstname", "lastname", "email", "position", "salary", "department", "dateofjoining")
DEPARTMENT_SORT_KEYS = tuple(k for k in SORT_KEYS if k != "department")


class EmployeeRepository(Protocol):
    def list_active(self, *, department_id: Optional[int] = None) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: int, *, include_deactivated: bool = False) -> Optional[Employee]:
        raise NotImplementedError

    def email_exists(self, email: str, *, exclude_id: Optional[int] = None) -> bool:
        """Case-sensitive match against every row, deactivated ones included."""

        raise NotImplementedError

    def find_existing_emails(self, emails: Iterable[str]) -> Sequence[str]:
        raise NotImplementedError

    def create(self, data: EmployeeInput, *, created_at: datetime) -> int:
        raise NotImplementedError

    def create_many(self, items: Sequence[EmployeeInput], *, created_at: datetime) -> Sequence[int]:
        """Insert all items in one transaction; nothing is stored if any insert fails."""

        raise NotImplementedError

    def update(self, employee_id: int, data: EmployeeInput, *, updated_at: datetime) -> bool:
        raise NotImplementedError

    def deactivate_many(self, employee_ids: Sequence[int], *, updated_at: datetime) -> int:
        """Mark the given rows deactivated in one transaction; returns how many ids existed."""

        raise NotImplementedError

    def get_page(self, request: PageRequest, *, department_id: Optional[int] = None) -> PagedResult[Employee]:
        raise NotImplementedError
