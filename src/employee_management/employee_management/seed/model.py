from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..core.enums import EmployeeStatus, Role


@dataclass(frozen=True)
class SeedEmployee:
    first_name: str
    last_name: str
    email: str
    phone_number: str
    address: str
    date_of_birth: date
    date_of_joining: date
    position: str
    salary: Decimal
    department_id: int
    status: EmployeeStatus


@dataclass(frozen=True)
class SeedAttendance:
    employee_id: int
    work_date: date
    check_in_time: datetime
    check_out_time: datetime
    notes: Optional[str]


@dataclass(frozen=True)
class SeedMetric:
    employee_id: int
    year: int
    quarter: int
    performance_score: Decimal
    comments: str
    goals: str
    achievements: str


@dataclass(frozen=True)
class SeedUser:
    username: str
    email: str
    password_hash: str
    role: Role


@dataclass(frozen=True)
class SeedStatus:
    """Row counts per table."""

    departments: int
    employees: int
    attendances: int
    performance_metrics: int
    users: int

    @property
    def is_empty(self) -> bool:
        return not (self.departments or self.employees or self.attendances or self.performance_metrics or self.users)
