from __future__ import annotations

from datetime import datetime
from typing import Sequence

from ..core.enums import EmployeeStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from ..departments.model import DepartmentInput
from .model import SeedAttendance, SeedEmployee, SeedMetric, SeedStatus, SeedUser
from .repository import SeedRepository

# Dependants first so foreign keys never block a delete.
_TABLES = ("attendances", "performance_metrics", "employees", "departments", "users")


class MySQLSeedRepository(SeedRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def status(self) -> SeedStatus:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    (SELECT COUNT(*) FROM departments) AS departments,
                    (SELECT COUNT(*) FROM employees) AS employees,
                    (SELECT COUNT(*) FROM attendances) AS attendances,
                    (SELECT COUNT(*) FROM performance_metrics) AS performance_metrics,
                    (SELECT COUNT(*) FROM users) AS users
                """
            )
            r = fetchone(cur) or {}
            return SeedStatus(
                departments=int(r.get("departments") or 0),
                employees=int(r.get("employees") or 0),
                attendances=int(r.get("attendances") or 0),
                performance_metrics=int(r.get("performance_metrics") or 0),
                users=int(r.get("users") or 0),
            )

    def clear_all(self) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            for table in _TABLES:
                cur.execute(f"DELETE FROM {table}")
        # ALTER TABLE commits implicitly, so it runs after the deletes are committed.
        with db_cursor(self._conn_factory) as (_, cur):
            for table in _TABLES:
                cur.execute(f"ALTER TABLE {table} AUTO_INCREMENT = 1")

    def add_departments(self, rows: Sequence[DepartmentInput], *, created_at: datetime) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                "INSERT INTO departments (name, description, manager_name, created_at) VALUES (%s, %s, %s, %s)",
                [(d.name, d.description, d.manager_name, created_at) for d in rows],
            )

    def department_ids(self) -> dict[str, int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT department_id, name FROM departments ORDER BY department_id")
            return {r["name"]: int(r["department_id"]) for r in fetchall(cur)}

    def add_employees(self, rows: Sequence[SeedEmployee], *, created_at: datetime) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                """
                INSERT INTO employees
                    (first_name, last_name, email, phone_number, address, date_of_birth, date_of_joining,
                     position, salary, department_id, status, created_at)
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
                """,
                [
                    (
                        e.first_name, e.last_name, e.email, e.phone_number, e.address, e.date_of_birth,
                        e.date_of_joining, e.position, e.salary, e.department_id, e.status.value, created_at,
                    )
                    for e in rows
                ],
            )

    def active_employee_ids(self) -> list[int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT employee_id FROM employees WHERE status=%s ORDER BY employee_id",
                (EmployeeStatus.ACTIVE.value,),
            )
            return [int(r["employee_id"]) for r in fetchall(cur)]

    def add_attendance(self, rows: Sequence[SeedAttendance], *, created_at: datetime) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                """
                INSERT INTO attendances (employee_id, work_date, check_in_time, check_out_time, notes, created_at)
                VALUES (%s, %s, %s, %s, %s, %s)
                """,
                [(a.employee_id, a.work_date, a.check_in_time, a.check_out_time, a.notes, created_at) for a in rows],
            )

    def add_metrics(self, rows: Sequence[SeedMetric], *, created_at: datetime) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                """
                INSERT INTO performance_metrics
                    (employee_id, year, quarter, performance_score, comments, goals, achievements, created_at)
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s)
                """,
                [
                    (m.employee_id, m.year, m.quarter, m.performance_score, m.comments, m.goals, m.achievements, created_at)
                    for m in rows
                ],
            )

    def add_users(self, rows: Sequence[SeedUser], *, created_at: datetime) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                """
                INSERT INTO users (username, email, password_hash, role, is_active, created_at)
                VALUES (%s, %s, %s, %s, 1, %s)
                """,
                [(u.username, u.email, u.password_hash, u.role.value, created_at) for u in rows],
            )
