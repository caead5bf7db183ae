from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional


@dataclass(frozen=True)
class Attendance:
    """Domain entity: one employee's check-in/check-out for a calendar day."""

    attendance_id: int
    employee_id: int
    employee_name: str
    work_date: date
    check_in_time: datetime
    check_out_time: Optional[datetime]
    notes: Optional[str]
    created_at: datetime
    updated_at: Optional[datetime] = None

    @property
    def total_hours(self) -> Optional[timedelta]:
        if self.check_out_time is None:
            return None
        return self.check_out_time - self.check_in_time

    @property
    def is_checked_out(self) -> bool:
        return self.check_out_time is not None
