from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import Attendance


class AttendanceRepository(Protocol):
    def get_by_id(self, attendance_id: int) -> Optional[Attendance]:
        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[Attendance]:
        raise NotImplementedError

    def insert_if_absent(
        self,
        *,
        employee_id: int,
        work_date: date,
        check_in_time: datetime,
        notes: Optional[str],
        created_at: datetime,
    ) -> int:
        """Create the day's row unless one exists; returns the id of whichever row is stored."""

        raise NotImplementedError

    def update_checkout(
        self,
        *,
        attendance_id: int,
        check_out_time: datetime,
        notes: Optional[str],
        updated_at: datetime,
    ) -> bool:
        """Set check-out only while it is still empty; False when another request got there first."""

        raise NotImplementedError

    def list_for_employee(
        self,
        employee_id: int,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[Attendance]:
        raise NotImplementedError

    def list_all(self, *, start_date: Optional[date] = None, end_date: Optional[date] = None) -> Sequence[Attendance]:
        raise NotImplementedError
