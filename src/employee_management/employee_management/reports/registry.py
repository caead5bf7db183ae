from __future__ import annotations

from datetime import datetime
from typing import Callable, Iterable

from ..common.datetime_utils import now_local
from .base import ReportGenerator
from .generators.attendance_pattern import (
    AttendancePatternCsvGenerator,
    AttendancePatternExcelGenerator,
    AttendancePatternPdfGenerator,
)
from .generators.attendance_report import (
    AttendanceReportCsvGenerator,
    AttendanceReportExcelGenerator,
    AttendanceReportPdfGenerator,
)
from .generators.department_growth import (
    DepartmentGrowthCsvGenerator,
    DepartmentGrowthExcelGenerator,
    DepartmentGrowthPdfGenerator,
)
from .generators.department_report import (
    DepartmentReportCsvGenerator,
    DepartmentReportExcelGenerator,
    DepartmentReportPdfGenerator,
)
from .generators.employee_directory import (
    EmployeeDirectoryCsvGenerator,
    EmployeeDirectoryExcelGenerator,
    EmployeeDirectoryPdfGenerator,
)
from .generators.hiring_trend import HiringTrendCsvGenerator, HiringTrendExcelGenerator, HiringTrendPdfGenerator
from .generators.performance_metrics import (
    PerformanceMetricsCsvGenerator,
    PerformanceMetricsExcelGenerator,
    PerformanceMetricsPdfGenerator,
)
from .generators.salary_report import SalaryReportCsvGenerator, SalaryReportExcelGenerator, SalaryReportPdfGenerator
from .repository import ReportRepository

GENERATOR_TYPES: tuple[type[ReportGenerator], ...] = (
    EmployeeDirectoryCsvGenerator,
    EmployeeDirectoryPdfGenerator,
    EmployeeDirectoryExcelGenerator,
    DepartmentReportCsvGenerator,
    DepartmentReportPdfGenerator,
    DepartmentReportExcelGenerator,
    AttendanceReportCsvGenerator,
    AttendanceReportPdfGenerator,
    AttendanceReportExcelGenerator,
    SalaryReportCsvGenerator,
    SalaryReportPdfGenerator,
    SalaryReportExcelGenerator,
    HiringTrendCsvGenerator,
    HiringTrendPdfGenerator,
    HiringTrendExcelGenerator,
    DepartmentGrowthCsvGenerator,
    DepartmentGrowthPdfGenerator,
    DepartmentGrowthExcelGenerator,
    AttendancePatternCsvGenerator,
    AttendancePatternPdfGenerator,
    AttendancePatternExcelGenerator,
    PerformanceMetricsCsvGenerator,
    PerformanceMetricsPdfGenerator,
    PerformanceMetricsExcelGenerator,
)


def default_generators(
    reports: ReportRepository, *, clock: Callable[[], datetime] = now_local
) -> list[ReportGenerator]:
    return [generator_type(reports, clock=clock) for generator_type in GENERATOR_TYPES]


def index_generators(generators: Iterable[ReportGenerator]) -> dict:
    """Key generators by (subject, format); a later duplicate replaces an earlier one."""
    return {(g.subject, g.format): g for g in generators}
