"""Demo data seeding for development databases."""
from __future__ import annotations

import logging
import random
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Optional

from werkzeug.security import generate_password_hash

from ..common.datetime_utils import now_local
from ..core.constants import DEFAULT_SEED_ATTENDANCE_DAYS, DEFAULT_SEED_EMPLOYEE_COUNT
from ..core.enums import EmployeeStatus
from ..departments.model import DepartmentInput
from . import data
from .model import SeedAttendance, SeedEmployee, SeedMetric, SeedStatus, SeedUser
from .repository import SeedRepository

logger = logging.getLogger(__name__)

ACTIVE_RATE = 0.95
PRESENCE_RATE = 0.95
OVERTIME_RATE = 0.3
NOTE_RATE = 0.1


class SeedError(RuntimeError):
    """Raised when a reseed cannot start from an empty database."""


class SeedService:
    def __init__(
        self,
        seeds: SeedRepository,
        *,
        employee_count: int = DEFAULT_SEED_EMPLOYEE_COUNT,
        attendance_days: int = DEFAULT_SEED_ATTENDANCE_DAYS,
        rng: Optional[random.Random] = None,
    ):
        self._seeds = seeds
        self._employee_count = employee_count
        self._attendance_days = attendance_days
        self._rng = rng or random.Random()

    def status(self) -> SeedStatus:
        return self._seeds.status()

    def seed(self, *, now: Optional[datetime] = None) -> SeedStatus:
        """Fill each table that is still empty; tables with rows are left alone."""
        now = now or now_local()
        status = self._seeds.status()

        if not status.departments:
            self._seeds.add_departments(
                [DepartmentInput(name, description, manager) for name, description, manager, _ in data.DEPARTMENTS],
                created_at=now,
            )
        if not status.employees:
            self._seeds.add_employees(self._employees(now.date()), created_at=now)
        if not status.attendances:
            self._seeds.add_attendance(self._attendance(now.date()), created_at=now)
        if not status.performance_metrics:
            self._seeds.add_metrics(self._metrics(now.year), created_at=now)
        if not status.users:
            self._seeds.add_users(
                [
                    SeedUser(username, email, generate_password_hash(password), role)
                    for username, email, password, role in data.DEMO_USERS
                ],
                created_at=now,
            )

        result = self._seeds.status()
        logger.info("Seeded database: %s", result)
        return result

    def clear(self) -> None:
        self._seeds.clear_all()
        logger.info("Cleared all seeded tables")

    def reseed(self, *, now: Optional[datetime] = None) -> SeedStatus:
        self.clear()
        left = self._seeds.status()
        if not left.is_empty:
            raise SeedError(
                f"Data clearing incomplete. Remaining: {left.employees} employees, "
                f"{left.departments} departments, {left.users} users"
            )
        return self.seed(now=now)

    def _employees(self, today: date) -> list[SeedEmployee]:
        rng = self._rng
        salary_ranges = {name: bounds for name, _, _, bounds in data.DEPARTMENTS}
        departments = list(self._seeds.department_ids().items())
        if not departments:
            return []

        used_emails: set[str] = set()
        employees = []
        for _ in range(self._employee_count):
            first_name = rng.choice(data.FIRST_NAMES)
            last_name = rng.choice(data.LAST_NAMES)
            department_name, department_id = rng.choice(departments)
            low, high = salary_ranges.get(department_name, (Decimal("40000"), Decimal("120000")))
            salary = (low + (high - low) * Decimal(str(rng.random()))).quantize(Decimal("0.01"))

            local_part = f"{first_name.lower()}.{last_name.lower()}"
            email = f"{local_part}@company.com"
            counter = 1
            while email in used_emails:
                email = f"{local_part}{counter}@company.com"
                counter += 1
            used_emails.add(email)

            city, state = rng.choice(data.CITIES)
            employees.append(
                SeedEmployee(
                    first_name=first_name,
                    last_name=last_name,
                    email=email,
                    phone_number=f"{rng.randint(100, 998)}-{rng.randint(100, 998)}-{rng.randint(1000, 9998)}",
                    address=f"{rng.randint(100, 9998)} {rng.choice(data.STREETS)}, {city}, {state} {rng.randint(10000, 99998)}",
                    date_of_birth=today - timedelta(days=365 * rng.randint(22, 64) + rng.randint(0, 364)),
                    date_of_joining=today - timedelta(days=rng.randint(30, 3649)),
                    position=rng.choice(data.POSITIONS),
                    salary=salary,
                    department_id=department_id,
                    status=EmployeeStatus.ACTIVE if rng.random() < ACTIVE_RATE else EmployeeStatus.DEACTIVATED,
                )
            )
        return employees

    def _attendance(self, today: date) -> list[SeedAttendance]:
        rng = self._rng
        records = []
        for employee_id in self._seeds.active_employee_ids():
            for offset in range(self._attendance_days):
                work_date = today - timedelta(days=offset)
                if work_date.weekday() >= 5 or rng.random() >= PRESENCE_RATE:
                    continue

                check_in = datetime.combine(work_date, time(8)) + timedelta(minutes=rng.randint(-30, 59))
                check_out = datetime.combine(work_date, time(17)) + timedelta(minutes=rng.randint(-60, 119))
                if rng.random() < OVERTIME_RATE:
                    check_out += timedelta(hours=rng.randint(1, 3))
                notes = rng.choice(data.ATTENDANCE_NOTES) if rng.random() < NOTE_RATE else None
                records.append(SeedAttendance(employee_id, work_date, check_in, check_out, notes))
        return records

    def _metrics(self, current_year: int) -> list[SeedMetric]:
        rng = self._rng
        metrics = []
        for employee_id in self._seeds.active_employee_ids():
            for year in (current_year - 1, current_year):
                for quarter in range(1, 5):
                    score = rng.randint(60, 100)
                    comment, achievements = next((c, a) for floor, c, a in data.SCORE_BANDS if score >= floor)
                    metrics.append(
                        SeedMetric(
                            employee_id=employee_id,
                            year=year,
                            quarter=quarter,
                            performance_score=Decimal(score),
                            comments=comment,
                            goals=rng.choice(data.GOALS),
                            achievements=rng.choice(achievements),
                        )
                    )
        return metrics
