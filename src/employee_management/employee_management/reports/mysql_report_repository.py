from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import EmployeeStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, to_decimal
from .repository import ReportRepository
from .rows import AttendanceRow, DepartmentRow, EmployeeRow, HireRow, PerformanceRow


class MySQLReportRepository(ReportRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def active_employees(self) -> Sequence[EmployeeRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT e.employee_id, e.first_name, e.last_name, e.email, e.phone_number, d.name AS department,
                       e.position, e.salary, e.date_of_birth, e.date_of_joining
                FROM employees e
                LEFT JOIN departments d ON d.department_id = e.department_id
                WHERE e.status=%s
                ORDER BY e.employee_id
                """,
                (EmployeeStatus.ACTIVE.value,),
            )
            return [
                EmployeeRow(
                    employee_id=int(r["employee_id"]),
                    first_name=r["first_name"],
                    last_name=r["last_name"],
                    email=r["email"],
                    phone_number=r.get("phone_number"),
                    department=r.get("department"),
                    position=r.get("position"),
                    salary=to_decimal(r.get("salary")),
                    date_of_birth=r.get("date_of_birth"),
                    date_of_joining=r["date_of_joining"],
                )
                for r in fetchall(cur)
            ]

    def departments_with_totals(self) -> Sequence[DepartmentRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT d.department_id, d.name, d.description, d.manager_name, d.created_at,
                       COUNT(e.employee_id) AS employee_count,
                       COALESCE(SUM(e.salary), 0) AS total_salary
                FROM departments d
                LEFT JOIN employees e ON e.department_id = d.department_id AND e.status = %s
                GROUP BY d.department_id, d.name, d.description, d.manager_name, d.created_at
                ORDER BY d.department_id
                """,
                (EmployeeStatus.ACTIVE.value,),
            )
            return [
                DepartmentRow(
                    department_id=int(r["department_id"]),
                    name=r["name"],
                    description=r.get("description"),
                    manager_name=r.get("manager_name"),
                    created_at=r["created_at"],
                    employee_count=int(r["employee_count"]),
                    total_salary=to_decimal(r["total_salary"]),
                )
                for r in fetchall(cur)
            ]

    def attendance(self, *, start_date: Optional[date] = None, end_date: Optional[date] = None) -> Sequence[AttendanceRow]:
        clauses: list[str] = []
        params: list[object] = []
        if start_date is not None:
            clauses.append("a.work_date >= %s")
            params.append(start_date)
        if end_date is not None:
            clauses.append("a.work_date <= %s")
            params.append(end_date)
        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT a.attendance_id, a.employee_id, CONCAT(e.first_name, ' ', e.last_name) AS employee_name,
                       d.name AS department, a.work_date, a.check_in_time, a.check_out_time, a.notes, a.created_at
                FROM attendances a
                JOIN employees e ON e.employee_id = a.employee_id
                LEFT JOIN departments d ON d.department_id = e.department_id
                {where}
                ORDER BY a.work_date, employee_name, a.attendance_id
                """,
                tuple(params),
            )
            return [
                AttendanceRow(
                    attendance_id=int(r["attendance_id"]),
                    employee_id=int(r["employee_id"]),
                    employee_name=r["employee_name"],
                    department=r.get("department"),
                    work_date=r["work_date"],
                    check_in_time=r["check_in_time"],
                    check_out_time=r.get("check_out_time"),
                    notes=r.get("notes"),
                    created_at=r["created_at"],
                )
                for r in fetchall(cur)
            ]

    def hires_between(self, start_date: date, end_date: date) -> Sequence[HireRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT e.employee_id, d.name AS department, e.date_of_joining
                FROM employees e
                LEFT JOIN departments d ON d.department_id = e.department_id
                WHERE e.date_of_joining BETWEEN %s AND %s
                ORDER BY e.date_of_joining, e.employee_id
                """,
                (start_date, end_date),
            )
            return [
                HireRow(
                    employee_id=int(r["employee_id"]),
                    department=r.get("department"),
                    date_of_joining=r["date_of_joining"],
                )
                for r in fetchall(cur)
            ]

    def performance(self, *, employee_id: Optional[int] = None) -> Sequence[PerformanceRow]:
        where = "WHERE p.employee_id=%s" if employee_id is not None else ""
        params = (int(employee_id),) if employee_id is not None else ()

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT p.employee_id, e.first_name, e.last_name, d.name AS department, p.year, p.quarter,
                       p.performance_score, p.comments, p.goals, p.achievements, p.created_at
                FROM performance_metrics p
                JOIN employees e ON e.employee_id = p.employee_id
                LEFT JOIN departments d ON d.department_id = e.department_id
                {where}
                ORDER BY d.name, e.last_name, p.year, p.quarter, p.employee_id
                """,
                params,
            )
            return [
                PerformanceRow(
                    employee_id=int(r["employee_id"]),
                    first_name=r["first_name"],
                    last_name=r["last_name"],
                    department=r.get("department"),
                    year=int(r["year"]),
                    quarter=int(r["quarter"]),
                    performance_score=to_decimal(r["performance_score"]),
                    comments=r.get("comments"),
                    goals=r.get("goals"),
                    achievements=r.get("achievements"),
                    created_at=r["created_at"],
                )
                for r in fetchall(cur)
            ]
