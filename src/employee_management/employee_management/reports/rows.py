"""Read models consumed by the report generators.

Rows are flat projections joined with department names; the aggregate rows
(`HiringTrendRow`, `DepartmentGrowthRow`, `AttendancePatternRow`) are built
in `analytics` from the flat ones.
"""
from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Optional

NO_DEPARTMENT = "No Department"


@dataclass(frozen=True)
class EmployeeRow:
    employee_id: int
    first_name: str
    last_name: str
    email: str
    phone_number: Optional[str]
    department: Optional[str]
    position: Optional[str]
    salary: Decimal
    date_of_birth: Optional[date]
    date_of_joining: date

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class DepartmentRow:
    department_id: int
    name: str
    description: Optional[str]
    manager_name: Optional[str]
    created_at: datetime
    employee_count: int
    total_salary: Decimal


@dataclass(frozen=True)
class AttendanceRow:
    attendance_id: int
    employee_id: int
    employee_name: str
    department: Optional[str]
    work_date: date
    check_in_time: datetime
    check_out_time: Optional[datetime]
    notes: Optional[str]
    created_at: datetime

    @property
    def total_hours(self) -> Optional[timedelta]:
        if self.check_out_time is None:
            return None
        return self.check_out_time - self.check_in_time

    @property
    def status(self) -> str:
        return "Completed" if self.check_out_time is not None else "In Progress"


@dataclass(frozen=True)
class HireRow:
    employee_id: int
    department: Optional[str]
    date_of_joining: date


@dataclass(frozen=True)
class PerformanceRow:
    employee_id: int
    first_name: str
    last_name: str
    department: Optional[str]
    year: int
    quarter: int
    performance_score: Decimal
    comments: Optional[str]
    goals: Optional[str]
    achievements: Optional[str]
    created_at: datetime

    @property
    def employee_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class HiringTrendRow:
    year: int
    month: int
    hires: int
    department: str

    @property
    def month_name(self) -> str:
        return calendar.month_name[self.month]


@dataclass(frozen=True)
class DepartmentGrowthRow:
    department: str
    year: int
    month: int
    new_hires: int

    @property
    def month_name(self) -> str:
        return calendar.month_name[self.month]


@dataclass(frozen=True)
class AttendancePatternRow:
    employee_id: int
    employee_name: str
    department: str
    weekday: int
    hour: int
    attendance_count: int
    avg_check_in_minutes: float
    avg_total_hours: Optional[float]

    @property
    def day_name(self) -> str:
        return calendar.day_name[self.weekday]

    @property
    def avg_check_in_time(self) -> str:
        minutes = int(round(self.avg_check_in_minutes))
        return f"{minutes // 60:02d}:{minutes % 60:02d}"
