"""Pure aggregations shared by the CSV, PDF and Excel renditions of a report."""
from __future__ import annotations

import calendar
from collections import OrderedDict, defaultdict
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from .rows import (
    NO_DEPARTMENT,
    AttendancePatternRow,
    AttendanceRow,
    DepartmentGrowthRow,
    EmployeeRow,
    HireRow,
    HiringTrendRow,
    PerformanceRow,
)

SALARY_BRACKETS: list[tuple[str, Optional[Decimal], Optional[Decimal]]] = [
    ("< $50,000", None, Decimal("50000")),
    ("$50,000 - $75,000", Decimal("50000"), Decimal("75000")),
    ("$75,000 - $100,000", Decimal("75000"), Decimal("100000")),
    ("$100,000 - $125,000", Decimal("100000"), Decimal("125000")),
    ("> $125,000", Decimal("125000"), None),
]

HIGH_PERFORMER_SCORE = Decimal("80")
IMPROVEMENT_NEEDED_SCORE = Decimal("50")


def department_name(value: Optional[str]) -> str:
    return value or NO_DEPARTMENT


def years_since(start: date, today: date) -> int:
    """Calendar-year difference, as shown in the experience and age columns."""
    return today.year - start.year


@dataclass(frozen=True)
class SalaryStats:
    count: int
    total: Decimal
    average: Decimal
    median: Decimal
    minimum: Decimal
    maximum: Decimal

    @property
    def spread(self) -> Decimal:
        return self.maximum - self.minimum


def salary_stats(salaries: Sequence[Decimal]) -> SalaryStats:
    """Median is the upper middle value for an even count."""
    if not salaries:
        zero = Decimal("0")
        return SalaryStats(0, zero, zero, zero, zero, zero)
    total = sum(salaries, Decimal("0"))
    return SalaryStats(
        count=len(salaries),
        total=total,
        average=total / len(salaries),
        median=sorted(salaries)[len(salaries) // 2],
        minimum=min(salaries),
        maximum=max(salaries),
    )


def salary_brackets(salaries: Sequence[Decimal]) -> list[tuple[str, int, float]]:
    """(label, count, share of all employees in 0..1) per bracket."""
    result = []
    for label, low, high in SALARY_BRACKETS:
        count = sum(1 for s in salaries if (low is None or s >= low) and (high is None or s < high))
        share = count / len(salaries) if salaries else 0.0
        result.append((label, count, share))
    return result


@dataclass(frozen=True)
class DepartmentSalary:
    department: str
    count: int
    total: Decimal
    average: Decimal
    minimum: Decimal
    maximum: Decimal


def department_salaries(employees: Iterable[EmployeeRow]) -> list[DepartmentSalary]:
    groups: dict[str, list[Decimal]] = defaultdict(list)
    for e in employees:
        groups[department_name(e.department)].append(e.salary)

    result = []
    for name, salaries in groups.items():
        stats = salary_stats(salaries)
        result.append(DepartmentSalary(name, stats.count, stats.total, stats.average, stats.minimum, stats.maximum))
    return result


def hiring_trends(hires: Sequence[HireRow]) -> list[HiringTrendRow]:
    """Group hires by joining month; the department shown is that of the month's earliest hire."""
    groups: "OrderedDict[tuple[int, int], list[HireRow]]" = OrderedDict()
    for hire in sorted(hires, key=lambda h: (h.date_of_joining, h.employee_id)):
        key = (hire.date_of_joining.year, hire.date_of_joining.month)
        groups.setdefault(key, []).append(hire)

    return [
        HiringTrendRow(year=year, month=month, hires=len(group), department=department_name(group[0].department))
        for (year, month), group in groups.items()
    ]


def department_growth(hires: Iterable[HireRow]) -> list[DepartmentGrowthRow]:
    counts: dict[tuple[str, int, int], int] = defaultdict(int)
    for hire in hires:
        counts[(department_name(hire.department), hire.date_of_joining.year, hire.date_of_joining.month)] += 1

    return [
        DepartmentGrowthRow(department=dept, year=year, month=month, new_hires=n)
        for (dept, year, month), n in sorted(counts.items())
    ]


@dataclass(frozen=True)
class GrowthSummary:
    total_hires: int
    departments: int
    average_hires_per_month: float
    top_department: str


def growth_summary(rows: Sequence[DepartmentGrowthRow]) -> GrowthSummary:
    totals = department_growth_totals(rows)
    months = {(r.year, r.month) for r in rows}
    total = sum(r.new_hires for r in rows)
    return GrowthSummary(
        total_hires=total,
        departments=len(totals),
        average_hires_per_month=total / len(months) if months else 0.0,
        top_department=totals[0].department if totals else "N/A",
    )


@dataclass(frozen=True)
class DepartmentGrowthTotal:
    department: str
    total_hires: int
    average_per_month: float
    share_of_hires: float


def department_growth_totals(rows: Sequence[DepartmentGrowthRow]) -> list[DepartmentGrowthTotal]:
    """Per-department totals ordered by total hires descending, then name."""
    groups: dict[str, list[int]] = defaultdict(list)
    for r in rows:
        groups[r.department].append(r.new_hires)
    overall = sum(r.new_hires for r in rows)

    result = [
        DepartmentGrowthTotal(
            department=dept,
            total_hires=sum(counts),
            average_per_month=sum(counts) / len(counts),
            share_of_hires=sum(counts) / overall if overall else 0.0,
        )
        for dept, counts in groups.items()
    ]
    return sorted(result, key=lambda t: (-t.total_hires, t.department))


@dataclass(frozen=True)
class MonthlyHires:
    year: int
    month: int
    total_hires: int
    departments_active: int


def monthly_hires(rows: Sequence[DepartmentGrowthRow]) -> list[MonthlyHires]:
    totals: dict[tuple[int, int], int] = defaultdict(int)
    departments: dict[tuple[int, int], set[str]] = defaultdict(set)
    for r in rows:
        totals[(r.year, r.month)] += r.new_hires
        departments[(r.year, r.month)].add(r.department)
    return [MonthlyHires(y, m, totals[(y, m)], len(departments[(y, m)])) for (y, m) in sorted(totals)]


def attendance_patterns(rows: Iterable[AttendanceRow]) -> list[AttendancePatternRow]:
    """Group attendance by employee, weekday and check-in hour.

    Weekdays use Monday=0; the average total hours only counts completed days
    and is None when a group has none.
    """
    groups: dict[tuple[int, str, str, int, int], list[AttendanceRow]] = defaultdict(list)
    for r in rows:
        key = (r.employee_id, r.employee_name, department_name(r.department), r.work_date.weekday(), r.check_in_time.hour)
        groups[key].append(r)

    result = []
    for (employee_id, name, dept, weekday, hour), group in groups.items():
        minutes = [a.check_in_time.hour * 60 + a.check_in_time.minute for a in group]
        hours = [a.total_hours.total_seconds() / 3600 for a in group if a.total_hours is not None]
        result.append(
            AttendancePatternRow(
                employee_id=employee_id,
                employee_name=name,
                department=dept,
                weekday=weekday,
                hour=hour,
                attendance_count=len(group),
                avg_check_in_minutes=sum(minutes) / len(minutes),
                avg_total_hours=sum(hours) / len(hours) if hours else None,
            )
        )
    return sorted(result, key=lambda p: (p.department, p.employee_name, p.weekday, p.hour))


def mean_of(values: Iterable[Optional[float]]) -> float:
    present = [v for v in values if v is not None]
    return sum(present) / len(present) if present else 0.0


@dataclass(frozen=True)
class EmployeePattern:
    employee_id: int
    employee_name: str
    department: str
    total_records: int
    avg_hours: float
    most_common_day: str


def employee_patterns(rows: Sequence[AttendancePatternRow]) -> list[EmployeePattern]:
    groups: dict[tuple[int, str, str], list[AttendancePatternRow]] = defaultdict(list)
    for r in rows:
        groups[(r.employee_id, r.employee_name, r.department)].append(r)

    result = []
    for (employee_id, name, dept), group in groups.items():
        per_day: dict[int, int] = defaultdict(int)
        for r in group:
            per_day[r.weekday] += r.attendance_count
        busiest = min(per_day, key=lambda d: (-per_day[d], d))
        result.append(
            EmployeePattern(
                employee_id=employee_id,
                employee_name=name,
                department=dept,
                total_records=sum(r.attendance_count for r in group),
                avg_hours=mean_of(r.avg_total_hours for r in group),
                most_common_day=calendar.day_name[busiest],
            )
        )
    return sorted(result, key=lambda e: (-e.total_records, e.employee_name))


@dataclass(frozen=True)
class HourlyPattern:
    hour: int
    total_records: int
    unique_employees: int
    avg_hours: float


def hourly_patterns(rows: Sequence[AttendancePatternRow]) -> list[HourlyPattern]:
    groups: dict[int, list[AttendancePatternRow]] = defaultdict(list)
    for r in rows:
        groups[r.hour].append(r)
    return [
        HourlyPattern(
            hour=hour,
            total_records=sum(r.attendance_count for r in groups[hour]),
            unique_employees=len({r.employee_id for r in groups[hour]}),
            avg_hours=mean_of(r.avg_total_hours for r in groups[hour]),
        )
        for hour in sorted(groups)
    ]


def busiest(rows: Sequence[AttendancePatternRow], key, limit: int = 3) -> list[tuple[object, int, float]]:
    """Top `limit` groups by attendance count: (group, records, average hours)."""
    counts: dict[object, int] = defaultdict(int)
    hours: dict[object, list[Optional[float]]] = defaultdict(list)
    for r in rows:
        counts[key(r)] += r.attendance_count
        hours[key(r)].append(r.avg_total_hours)
    ranked = sorted(counts, key=lambda k: (-counts[k], str(k)))[:limit]
    return [(k, counts[k], mean_of(hours[k])) for k in ranked]


@dataclass(frozen=True)
class PerformanceSummary:
    total_records: int
    unique_employees: int
    departments: int
    average_score: Decimal
    high_performers: int


def performance_summary(rows: Sequence[PerformanceRow]) -> PerformanceSummary:
    scores = [r.performance_score for r in rows]
    return PerformanceSummary(
        total_records=len(rows),
        unique_employees=len({r.employee_id for r in rows}),
        departments=len({department_name(r.department) for r in rows}),
        average_score=sum(scores, Decimal("0")) / len(scores) if scores else Decimal("0"),
        high_performers=sum(1 for s in scores if s >= HIGH_PERFORMER_SCORE),
    )


@dataclass(frozen=True)
class EmployeePerformance:
    employee_id: int
    employee_name: str
    department: str
    records: int
    average_score: Decimal
    best_score: Decimal
    latest_score: Decimal


def employee_performance(rows: Iterable[PerformanceRow]) -> list[EmployeePerformance]:
    groups: dict[int, list[PerformanceRow]] = defaultdict(list)
    for r in rows:
        groups[r.employee_id].append(r)

    result = []
    for employee_id, group in groups.items():
        scores = [r.performance_score for r in group]
        latest = max(group, key=lambda r: (r.year, r.quarter))
        result.append(
            EmployeePerformance(
                employee_id=employee_id,
                employee_name=group[0].employee_name,
                department=department_name(group[0].department),
                records=len(group),
                average_score=sum(scores, Decimal("0")) / len(scores),
                best_score=max(scores),
                latest_score=latest.performance_score,
            )
        )
    return sorted(result, key=lambda e: (-e.average_score, e.employee_id))


@dataclass(frozen=True)
class DepartmentPerformance:
    department: str
    employees: int
    records: int
    average_score: Decimal
    high_performers: int
    improvement_needed: int


def department_performance(rows: Iterable[PerformanceRow]) -> list[DepartmentPerformance]:
    groups: dict[str, list[PerformanceRow]] = defaultdict(list)
    for r in rows:
        groups[department_name(r.department)].append(r)

    result = []
    for dept, group in groups.items():
        scores = [r.performance_score for r in group]
        result.append(
            DepartmentPerformance(
                department=dept,
                employees=len({r.employee_id for r in group}),
                records=len(group),
                average_score=sum(scores, Decimal("0")) / len(scores),
                high_performers=sum(1 for s in scores if s >= HIGH_PERFORMER_SCORE),
                improvement_needed=sum(1 for s in scores if s < IMPROVEMENT_NEEDED_SCORE),
            )
        )
    return sorted(result, key=lambda d: (-d.average_score, d.department))


def score_distribution(rows: Iterable[PerformanceRow]) -> list[tuple[str, int]]:
    scores = [r.performance_score for r in rows]
    return [
        ("Excellent (90+)", sum(1 for s in scores if s >= 90)),
        ("Good (70-89)", sum(1 for s in scores if 70 <= s < 90)),
        ("Average (50-69)", sum(1 for s in scores if 50 <= s < 70)),
        ("Needs Improvement (<50)", sum(1 for s in scores if s < 50)),
    ]
