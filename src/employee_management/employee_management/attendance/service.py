from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Optional, Sequence

from ..common.validators import optional_text, require_positive_int
from ..core.constants import NOTES_MAX_LENGTH
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import Attendance
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Daily check-in/check-out.

    Both operations are idempotent for a given server-local day: repeating a
    check-in returns the stored row, repeating a check-out returns the row with
    its original check-out time.
    """

    def __init__(self, attendance: AttendanceRepository, employees: EmployeeRepository):
        self._attendance = attendance
        self._employees = employees

    def _require_active_employee(self, employee_id: Any) -> int:
        employee_id = require_positive_int(employee_id, "EmployeeId")
        if not self._employees.get_by_id(employee_id):
            raise ValidationError(f"Employee with ID {employee_id} does not exist")
        return employee_id

    def _load(self, attendance_id: int) -> Attendance:
        record = self._attendance.get_by_id(attendance_id)
        if not record:
            raise NotFoundError(f"Attendance record {attendance_id} not found")
        return record

    def check_in(self, employee_id: Any, notes: Optional[str] = None, *, now: datetime | None = None) -> Attendance:
        now = now or datetime.now()
        employee_id = self._require_active_employee(employee_id)
        notes = optional_text(notes, "Notes", NOTES_MAX_LENGTH)

        existing = self._attendance.get_for_employee_and_date(employee_id, now.date())
        if existing:
            return existing

        attendance_id = self._attendance.insert_if_absent(
            employee_id=employee_id,
            work_date=now.date(),
            check_in_time=now,
            notes=notes,
            created_at=now,
        )
        logger.debug("Employee %s checked in (attendance %s)", employee_id, attendance_id)
        return self._load(attendance_id)

    def check_out(self, employee_id: Any, notes: Optional[str] = None, *, now: datetime | None = None) -> Attendance:
        now = now or datetime.now()
        employee_id = require_positive_int(employee_id, "EmployeeId")
        notes = optional_text(notes, "Notes", NOTES_MAX_LENGTH)

        record = self._attendance.get_for_employee_and_date(employee_id, now.date())
        if not record:
            raise NotFoundError("No check-in found for today")
        if record.is_checked_out:
            return record

        self._attendance.update_checkout(
            attendance_id=record.attendance_id,
            check_out_time=max(now, record.check_in_time),
            notes=notes if notes is not None else record.notes,
            updated_at=now,
        )
        # A concurrent check-out may have won; either way the stored row is the answer.
        return self._load(record.attendance_id)

    def get_today_attendance(self, employee_id: int, *, now: datetime | None = None) -> Attendance:
        now = now or datetime.now()
        record = self._attendance.get_for_employee_and_date(employee_id, now.date())
        if not record:
            raise NotFoundError("No attendance record found for today")
        return record

    def get_employee_attendance(
        self,
        employee_id: int,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[Attendance]:
        return self._attendance.list_for_employee(employee_id, start_date=start_date, end_date=end_date)

    def get_all_attendance(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[Attendance]:
        return self._attendance.list_all(start_date=start_date, end_date=end_date)
