from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from src.employee_management.employee_management.attendance.service import AttendanceService
from src.employee_management.employee_management.core.exceptions import NotFoundError, ValidationError
from tests.builders import FIXED_NOW, add_department, add_employee
from tests.fakes import InMemoryAttendance, InMemoryEmployees


@pytest.fixture
def employee_id(container) -> int:
    return add_employee(container, "ada@x.com", add_department(container, "Engineering"))


def test_check_in_records_now(container, employee_id):
    record = container.attendance_service.check_in(employee_id, "Morning", now=FIXED_NOW)

    assert record.work_date == FIXED_NOW.date()
    assert record.check_in_time == FIXED_NOW
    assert record.check_out_time is None
    assert record.total_hours is None
    assert record.employee_name == "Ada Lovelace"
    assert record.notes == "Morning"


def test_second_check_in_returns_first_record(container, employee_id):
    first = container.attendance_service.check_in(employee_id, "Morning", now=FIXED_NOW)
    second = container.attendance_service.check_in(employee_id, "Again", now=FIXED_NOW + timedelta(hours=1))

    assert second == first
    assert container.attendance_service.get_all_attendance() == [first]


def test_check_in_losing_a_race_returns_stored_row(store, employee_id):
    class RacingAttendance(InMemoryAttendance):
        """Hides the row from the pre-check, as if another request inserted it meanwhile."""

        def get_for_employee_and_date(self, employee_id, work_date):
            if self.insert_calls == 0:
                return None
            return super().get_for_employee_and_date(employee_id, work_date)

    repo = RacingAttendance(store)
    service = AttendanceService(repo, InMemoryEmployees(store))
    repo.insert_if_absent(
        employee_id=employee_id, work_date=FIXED_NOW.date(), check_in_time=FIXED_NOW, notes="first", created_at=FIXED_NOW
    )
    repo.insert_calls = 0

    record = service.check_in(employee_id, "second", now=FIXED_NOW + timedelta(minutes=1))

    assert record.notes == "first"
    assert len(store.attendance) == 1


def test_check_in_for_unknown_employee_is_rejected(container):
    with pytest.raises(ValidationError):
        container.attendance_service.check_in(404, now=FIXED_NOW)


def test_check_in_for_deactivated_employee_is_rejected(container, employee_id):
    container.employee_service.delete_employee(employee_id, now=FIXED_NOW)

    with pytest.raises(ValidationError):
        container.attendance_service.check_in(employee_id, now=FIXED_NOW)


def test_check_out_without_check_in_is_not_found(container, employee_id):
    with pytest.raises(NotFoundError, match="No check-in found for today"):
        container.attendance_service.check_out(employee_id, now=FIXED_NOW)


def test_check_out_sets_total_hours_and_replaces_notes(container, employee_id):
    container.attendance_service.check_in(employee_id, "Morning", now=FIXED_NOW)

    record = container.attendance_service.check_out(
        employee_id, "Evening check-out", now=FIXED_NOW + timedelta(hours=8, minutes=15)
    )

    assert record.total_hours == timedelta(hours=8, minutes=15)
    assert record.notes == "Evening check-out"


def test_check_out_without_notes_keeps_check_in_notes(container, employee_id):
    container.attendance_service.check_in(employee_id, "Morning", now=FIXED_NOW)

    record = container.attendance_service.check_out(employee_id, now=FIXED_NOW + timedelta(hours=1))

    assert record.notes == "Morning"


def test_second_check_out_keeps_first_time(container, employee_id):
    container.attendance_service.check_in(employee_id, now=FIXED_NOW)
    first = container.attendance_service.check_out(employee_id, now=FIXED_NOW + timedelta(hours=4))
    second = container.attendance_service.check_out(employee_id, "late", now=FIXED_NOW + timedelta(hours=6))

    assert second.check_out_time == first.check_out_time
    assert second.notes == first.notes


def test_check_out_never_precedes_check_in(container, employee_id):
    container.attendance_service.check_in(employee_id, now=FIXED_NOW)

    record = container.attendance_service.check_out(employee_id, now=FIXED_NOW - timedelta(minutes=5))

    assert record.check_out_time == FIXED_NOW
    assert record.total_hours == timedelta(0)


def test_yesterdays_check_in_does_not_count_today(container, employee_id):
    container.attendance_service.check_in(employee_id, now=FIXED_NOW - timedelta(days=1))

    with pytest.raises(NotFoundError):
        container.attendance_service.get_today_attendance(employee_id, now=FIXED_NOW)
    with pytest.raises(NotFoundError):
        container.attendance_service.check_out(employee_id, now=FIXED_NOW)


def test_history_is_newest_first_and_range_filtered(container, employee_id):
    for days in (0, 1, 2):
        container.attendance_service.check_in(employee_id, now=FIXED_NOW - timedelta(days=days))

    history = container.attendance_service.get_employee_attendance(employee_id)
    window = container.attendance_service.get_employee_attendance(
        employee_id, start_date=date(2024, 3, 13), end_date=date(2024, 3, 13)
    )

    assert [a.work_date for a in history] == [date(2024, 3, 14), date(2024, 3, 13), date(2024, 3, 12)]
    assert [a.work_date for a in window] == [date(2024, 3, 13)]


def test_all_attendance_orders_by_date_then_employee(container, employee_id):
    other = add_employee(container, "bob@x.com", container.employee_service.get_employee(employee_id).department_id)
    container.attendance_service.check_in(other, now=FIXED_NOW)
    container.attendance_service.check_in(employee_id, now=FIXED_NOW)
    container.attendance_service.check_in(other, now=datetime(2024, 3, 13, 9))

    rows = container.attendance_service.get_all_attendance()

    assert [(a.work_date.day, a.employee_id) for a in rows] == [(14, employee_id), (14, other), (13, other)]
