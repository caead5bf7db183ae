from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import (
    DEFAULT_JWT_EXPIRY_MINUTES,
    DEFAULT_SEED_ATTENDANCE_DAYS,
    DEFAULT_SEED_EMPLOYEE_COUNT,
    REPORT_CACHE_TTL_SECONDS,
)
from .database.connection import DBConfig, DatabaseConnection
from .departments.mysql_department_repository import MySQLDepartmentRepository
from .departments.service import DepartmentService
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.service import EmployeeService
from .performance.mysql_performance_repository import MySQLPerformanceRepository
from .performance.service import PerformanceService
from .reports.cache import ReportCache
from .reports.mysql_report_repository import MySQLReportRepository
from .reports.registry import default_generators
from .reports.service import ReportService
from .seed.mysql_seed_repository import MySQLSeedRepository
from .seed.service import SeedService
from .users.mysql_user_repository import MySQLUserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    department_service: DepartmentService
    employee_service: EmployeeService
    attendance_service: AttendanceService
    performance_service: PerformanceService
    auth_service: AuthService
    report_service: ReportService
    seed_service: SeedService

    # Raises when the database is unreachable.
    database_check: Callable[[], Any]


def build_container(*, db_config: dict, settings: Any) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    departments_repo = MySQLDepartmentRepository(conn)
    employees_repo = MySQLEmployeeRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    performance_repo = MySQLPerformanceRepository(conn)
    users_repo = MySQLUserRepository(conn)

    auth_service = AuthService(
        users_repo,
        secret_key=str(getattr(settings, "SECRET_KEY")),
        issuer=str(getattr(settings, "JWT_ISSUER", "EMS.API")),
        audience=str(getattr(settings, "JWT_AUDIENCE", "EMS.Client")),
        expiry_minutes=int(getattr(settings, "JWT_EXPIRY_MINUTES", DEFAULT_JWT_EXPIRY_MINUTES)),
    )
    report_service = ReportService(
        default_generators(MySQLReportRepository(conn)),
        ReportCache(float(getattr(settings, "REPORT_CACHE_TTL_SECONDS", REPORT_CACHE_TTL_SECONDS))),
    )
    seed_service = SeedService(
        MySQLSeedRepository(conn),
        employee_count=int(getattr(settings, "SEED_EMPLOYEE_COUNT", DEFAULT_SEED_EMPLOYEE_COUNT)),
        attendance_days=int(getattr(settings, "SEED_ATTENDANCE_DAYS", DEFAULT_SEED_ATTENDANCE_DAYS)),
    )

    return Container(
        department_service=DepartmentService(departments_repo),
        employee_service=EmployeeService(employees_repo, departments_repo),
        attendance_service=AttendanceService(attendance_repo, employees_repo),
        performance_service=PerformanceService(performance_repo),
        auth_service=auth_service,
        report_service=report_service,
        seed_service=seed_service,
        database_check=conn.ping,
    )
