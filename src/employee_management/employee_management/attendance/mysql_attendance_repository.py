from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Attendance
from .repository import AttendanceRepository

_SELECT = """
    SELECT a.attendance_id, a.employee_id, CONCAT(e.first_name, ' ', e.last_name) AS employee_name,
           a.work_date, a.check_in_time, a.check_out_time, a.notes, a.created_at, a.updated_at
    FROM attendances a
    JOIN employees e ON e.employee_id = a.employee_id
"""


def _to_attendance(r: dict) -> Attendance:
    return Attendance(
        attendance_id=int(r["attendance_id"]),
        employee_id=int(r["employee_id"]),
        employee_name=r["employee_name"],
        work_date=r["work_date"],
        check_in_time=r["check_in_time"],
        check_out_time=r.get("check_out_time"),
        notes=r.get("notes"),
        created_at=r["created_at"],
        updated_at=r.get("updated_at"),
    )


def _range_clauses(start_date: Optional[date], end_date: Optional[date]) -> tuple[list[str], list[object]]:
    clauses: list[str] = []
    params: list[object] = []
    if start_date is not None:
        clauses.append("a.work_date >= %s")
        params.append(start_date)
    if end_date is not None:
        clauses.append("a.work_date <= %s")
        params.append(end_date)
    return clauses, params


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, attendance_id: int) -> Optional[Attendance]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE a.attendance_id=%s", (int(attendance_id),))
            r = fetchone(cur)
            return _to_attendance(r) if r else None

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[Attendance]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE a.employee_id=%s AND a.work_date=%s", (int(employee_id), work_date))
            r = fetchone(cur)
            return _to_attendance(r) if r else None

    def insert_if_absent(
        self,
        *,
        employee_id: int,
        work_date: date,
        check_in_time: datetime,
        notes: Optional[str],
        created_at: datetime,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            # On a duplicate (employee_id, work_date) nothing changes and lastrowid is the stored row.
            cur.execute(
                """
                INSERT INTO attendances(employee_id, work_date, check_in_time, notes, created_at)
                VALUES(%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE attendance_id=LAST_INSERT_ID(attendance_id)
                """,
                (int(employee_id), work_date, check_in_time, notes, created_at),
            )
            return int(cur.lastrowid)

    def update_checkout(
        self,
        *,
        attendance_id: int,
        check_out_time: datetime,
        notes: Optional[str],
        updated_at: datetime,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendances
                SET check_out_time=%s, notes=%s, updated_at=%s
                WHERE attendance_id=%s AND check_out_time IS NULL
                """,
                (check_out_time, notes, updated_at, int(attendance_id)),
            )
            return cur.rowcount > 0

    def list_for_employee(
        self,
        employee_id: int,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[Attendance]:
        clauses, params = _range_clauses(start_date, end_date)
        clauses.insert(0, "a.employee_id=%s")
        params.insert(0, int(employee_id))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + f" WHERE {' AND '.join(clauses)} ORDER BY a.work_date DESC",
                tuple(params),
            )
            return [_to_attendance(r) for r in fetchall(cur)]

    def list_all(self, *, start_date: Optional[date] = None, end_date: Optional[date] = None) -> Sequence[Attendance]:
        clauses, params = _range_clauses(start_date, end_date)
        where = f" WHERE {' AND '.join(clauses)}" if clauses else ""

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + where + " ORDER BY a.work_date DESC, a.employee_id",
                tuple(params),
            )
            return [_to_attendance(r) for r in fetchall(cur)]
