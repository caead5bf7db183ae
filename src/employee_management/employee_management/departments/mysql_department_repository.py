from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..core.enums import EmployeeStatus
from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, duplicate_key_as, fetchall, fetchone
from .model import Department, DepartmentInput
from .repository import DepartmentRepository

_SELECT = """
    SELECT d.department_id, d.name, d.description, d.manager_name, d.created_at, d.updated_at,
           COUNT(e.employee_id) AS employee_count
    FROM departments d
    LEFT JOIN employees e ON e.department_id = d.department_id AND e.status = %s
"""


def _duplicate_name() -> ConflictError:
    return ConflictError("Department with this name already exists")


def _to_department(r: dict) -> Department:
    return Department(
        department_id=int(r["department_id"]),
        name=r["name"],
        description=r.get("description"),
        manager_name=r.get("manager_name"),
        created_at=r["created_at"],
        updated_at=r.get("updated_at"),
        employee_count=int(r.get("employee_count") or 0),
    )


class MySQLDepartmentRepository(DepartmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " GROUP BY d.department_id ORDER BY d.department_id", (EmployeeStatus.ACTIVE.value,))
            return [_to_department(r) for r in fetchall(cur)]

    def list_by_employee_count(self) -> Sequence[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + " GROUP BY d.department_id ORDER BY employee_count DESC, d.department_id",
                (EmployeeStatus.ACTIVE.value,),
            )
            return [_to_department(r) for r in fetchall(cur)]

    def get_by_id(self, department_id: int) -> Optional[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + " WHERE d.department_id=%s GROUP BY d.department_id",
                (EmployeeStatus.ACTIVE.value, int(department_id)),
            )
            r = fetchone(cur)
            return _to_department(r) if r else None

    def name_exists(self, name: str, *, exclude_id: Optional[int] = None) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            if exclude_id is None:
                cur.execute("SELECT 1 AS found FROM departments WHERE name=%s LIMIT 1", (name,))
            else:
                cur.execute(
                    "SELECT 1 AS found FROM departments WHERE name=%s AND department_id<>%s LIMIT 1",
                    (name, int(exclude_id)),
                )
            return fetchone(cur) is not None

    def create(self, data: DepartmentInput, *, created_at: datetime) -> int:
        with duplicate_key_as(_duplicate_name), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO departments(name, description, manager_name, created_at)
                VALUES(%s,%s,%s,%s)
                """,
                (data.name, data.description, data.manager_name, created_at),
            )
            return int(cur.lastrowid)

    def update(self, department_id: int, data: DepartmentInput, *, updated_at: datetime) -> bool:
        with duplicate_key_as(_duplicate_name), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE departments
                SET name=%s, description=%s, manager_name=%s, updated_at=%s
                WHERE department_id=%s
                """,
                (data.name, data.description, data.manager_name, updated_at, int(department_id)),
            )
            return cur.rowcount > 0

    def has_active_employees(self, department_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT 1 AS found FROM employees WHERE department_id=%s AND status=%s LIMIT 1",
                (int(department_id), EmployeeStatus.ACTIVE.value),
            )
            return fetchone(cur) is not None

    def delete(self, department_id: int) -> bool:
        # The active-employee guard runs in the same transaction as the delete.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                DELETE FROM departments
                WHERE department_id=%s
                  AND NOT EXISTS (
                      SELECT 1 FROM employees WHERE department_id=%s AND status=%s
                  )
                """,
                (int(department_id), int(department_id), EmployeeStatus.ACTIVE.value),
            )
            return cur.rowcount > 0
