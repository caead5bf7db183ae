from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional, Sequence

from ..common.pagination import PageRequest, PagedResult
from ..core.exceptions import ConflictError
from ..core.enums import EmployeeStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, duplicate_key_as, fetchall, fetchone, in_clause, like_contains, to_decimal
from .model import Employee, EmployeeInput
from .repository import DEPARTMENT_SORT_KEYS, SORT_KEYS, EmployeeRepository

_SELECT = """
    SELECT e.employee_id, e.first_name, e.last_name, e.email, e.phone_number, e.address,
           e.date_of_birth, e.date_of_joining, e.position, e.salary, e.department_id,
           d.name AS department_name, e.status, e.created_at, e.updated_at
    FROM employees e
    LEFT JOIN departments d ON d.department_id = e.department_id
"""

_SORT_COLUMNS = {
    "firstname": "e.first_name",
    "lastname": "e.last_name",
    "email": "e.email",
    "position": "e.position",
    "salary": "e.salary",
    "department": "d.name",
    "dateofjoining": "e.date_of_joining",
}

_INSERT = """
    INSERT INTO employees(first_name, last_name, email, phone_number, address, date_of_birth,
                          date_of_joining, position, salary, department_id, status, created_at)
    VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
"""


def _duplicate_email() -> ConflictError:
    return ConflictError("Employee with this email already exists")


def _to_employee(r: dict) -> Employee:
    return Employee(
        employee_id=int(r["employee_id"]),
        first_name=r["first_name"],
        last_name=r["last_name"],
        email=r["email"],
        phone_number=r.get("phone_number"),
        address=r.get("address"),
        date_of_birth=r.get("date_of_birth"),
        date_of_joining=r["date_of_joining"],
        position=r.get("position"),
        salary=to_decimal(r.get("salary")),
        department_id=r.get("department_id"),
        department_name=r.get("department_name"),
        status=EmployeeStatus(r["status"]),
        created_at=r["created_at"],
        updated_at=r.get("updated_at"),
    )


def _insert_params(data: EmployeeInput, created_at: datetime) -> tuple:
    return (
        data.first_name,
        data.last_name,
        data.email,
        data.phone_number,
        data.address,
        data.date_of_birth,
        data.date_of_joining,
        data.position,
        data.salary,
        data.department_id,
        EmployeeStatus.ACTIVE.value,
        created_at,
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_active(self, *, department_id: Optional[int] = None) -> Sequence[Employee]:
        clauses = ["e.status=%s"]
        params: list[object] = [EmployeeStatus.ACTIVE.value]
        if department_id is not None:
            clauses.append("e.department_id=%s")
            params.append(int(department_id))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + f" WHERE {' AND '.join(clauses)} ORDER BY e.employee_id", tuple(params))
            return [_to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: int, *, include_deactivated: bool = False) -> Optional[Employee]:
        sql = _SELECT + " WHERE e.employee_id=%s"
        params: list[object] = [int(employee_id)]
        if not include_deactivated:
            sql += " AND e.status=%s"
            params.append(EmployeeStatus.ACTIVE.value)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def email_exists(self, email: str, *, exclude_id: Optional[int] = None) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            if exclude_id is None:
                cur.execute("SELECT 1 AS found FROM employees WHERE email=%s LIMIT 1", (email,))
            else:
                cur.execute(
                    "SELECT 1 AS found FROM employees WHERE email=%s AND employee_id<>%s LIMIT 1",
                    (email, int(exclude_id)),
                )
            return fetchone(cur) is not None

    def find_existing_emails(self, emails: Iterable[str]) -> Sequence[str]:
        emails = list(emails)
        if not emails:
            return []
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT email FROM employees WHERE email IN ({in_clause(emails)})", tuple(emails))
            return [r["email"] for r in fetchall(cur)]

    def create(self, data: EmployeeInput, *, created_at: datetime) -> int:
        with duplicate_key_as(_duplicate_email), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_INSERT, _insert_params(data, created_at))
            return int(cur.lastrowid)

    def create_many(self, items: Sequence[EmployeeInput], *, created_at: datetime) -> Sequence[int]:
        ids: list[int] = []
        with duplicate_key_as(_duplicate_email), db_cursor(self._conn_factory) as (_, cur):
            for data in items:
                cur.execute(_INSERT, _insert_params(data, created_at))
                ids.append(int(cur.lastrowid))
        return ids

    def update(self, employee_id: int, data: EmployeeInput, *, updated_at: datetime) -> bool:
        with duplicate_key_as(_duplicate_email), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET first_name=%s, last_name=%s, email=%s, phone_number=%s, address=%s,
                    date_of_birth=%s, date_of_joining=%s, position=%s, salary=%s,
                    department_id=%s, status=%s, updated_at=%s
                WHERE employee_id=%s
                """,
                (
                    data.first_name,
                    data.last_name,
                    data.email,
                    data.phone_number,
                    data.address,
                    data.date_of_birth,
                    data.date_of_joining,
                    data.position,
                    data.salary,
                    data.department_id,
                    data.status.value,
                    updated_at,
                    int(employee_id),
                ),
            )
            return cur.rowcount > 0

    def deactivate_many(self, employee_ids: Sequence[int], *, updated_at: datetime) -> int:
        ids = [int(i) for i in employee_ids]
        if not ids:
            return 0
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT COUNT(*) AS n FROM employees WHERE employee_id IN ({in_clause(ids)})", tuple(ids))
            found = int(fetchone(cur)["n"])
            if found:
                cur.execute(
                    f"UPDATE employees SET status=%s, updated_at=%s WHERE employee_id IN ({in_clause(ids)})",
                    (EmployeeStatus.DEACTIVATED.value, updated_at, *ids),
                )
            return found

    def get_page(self, request: PageRequest, *, department_id: Optional[int] = None) -> PagedResult[Employee]:
        request = request.normalized()
        clauses = ["e.status=%s"]
        params: list[object] = [EmployeeStatus.ACTIVE.value]

        if department_id is not None:
            clauses.append("e.department_id=%s")
            params.append(int(department_id))

        if request.search_term:
            searchable = ["e.first_name", "e.last_name", "e.email", "e.position"]
            if department_id is None:
                searchable.append("d.name")
            like = like_contains(request.search_term.lower())
            clauses.append("(" + " OR ".join(f"LOWER({col}) LIKE %s ESCAPE '!'" for col in searchable) + ")")
            params.extend([like] * len(searchable))

        allowed = SORT_KEYS if department_id is None else DEPARTMENT_SORT_KEYS
        sort_key = request.sort_by if request.sort_by in allowed else "firstname"
        direction = "DESC" if request.sort_descending and request.sort_by in allowed else "ASC"
        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT COUNT(*) AS n
                FROM employees e
                LEFT JOIN departments d ON d.department_id = e.department_id
                WHERE {where}
                """,
                tuple(params),
            )
            total = int(fetchone(cur)["n"])

            cur.execute(
                _SELECT + f" WHERE {where} ORDER BY {_SORT_COLUMNS[sort_key]} {direction}, e.employee_id LIMIT %s OFFSET %s",
                (*params, request.page_size, request.offset),
            )
            items = [_to_employee(r) for r in fetchall(cur)]

        return PagedResult(items=items, total_count=total, page_number=request.page_number, page_size=request.page_size)
