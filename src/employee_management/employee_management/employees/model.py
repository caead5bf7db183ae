from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..core.enums import EmployeeStatus


@dataclass(frozen=True)
class Employee:
    """Domain entity: employee with its department name joined in."""

    employee_id: int
    first_name: str
    last_name: str
    email: str
    phone_number: Optional[str]
    address: Optional[str]
    date_of_birth: Optional[date]
    date_of_joining: date
    position: Optional[str]
    salary: Decimal
    department_id: Optional[int]
    department_name: Optional[str]
    status: EmployeeStatus
    created_at: datetime
    updated_at: Optional[datetime] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def is_active(self) -> bool:
        return self.status == EmployeeStatus.ACTIVE


@dataclass(frozen=True)
class EmployeeInput:
    """Validated create/update payload."""

    first_name: str
    last_name: str
    email: str
    date_of_joining: date
    salary: Decimal
    department_id: int
    phone_number: Optional[str] = None
    address: Optional[str] = None
    date_of_birth: Optional[date] = None
    position: Optional[str] = None
    status: EmployeeStatus = EmployeeStatus.ACTIVE
