from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from reportlab.lib import colors

from ...core.enums import ReportFormat, ReportSubject
from ..analytics import (
    department_performance,
    employee_performance,
    performance_summary,
    score_distribution,
)
from ..base import EmployeeFilterMixin, ReportGenerator, ReportQuery
from ..rendering.csv_writer import csv_bytes
from ..rendering.excel import CORAL, GREEN, ONE_DECIMAL, YELLOW, ExcelReport
from ..rendering.formatting import generated_on, ymd
from ..rendering.pdf import PdfReport
from ..rows import PerformanceRow

TOP_PERFORMERS = 5


def _score_fill(value):
    if value is None:
        return None
    score = Decimal(str(value))
    if score >= 80:
        return GREEN
    if score >= 60:
        return YELLOW
    return CORAL


def _summary_lines(rows: Sequence[PerformanceRow]) -> list[str]:
    summary = performance_summary(rows)
    return [
        f"Total Records: {summary.total_records}",
        f"Employees Evaluated: {summary.unique_employees}",
        f"Departments: {summary.departments}",
        f"Average Score: {summary.average_score:.1f}",
        f"High Performers (80+): {summary.high_performers}",
    ]


class _PerformanceMetrics(EmployeeFilterMixin, ReportGenerator):
    subject = ReportSubject.PERFORMANCE_METRICS
    cache_name = "performance_metrics"

    def _rows(self, query: ReportQuery) -> Sequence[PerformanceRow]:
        return self._reports.performance(employee_id=query.employee_id)


class PerformanceMetricsCsvGenerator(_PerformanceMetrics):
    format = ReportFormat.CSV

    def generate(self, query: ReportQuery) -> bytes:
        return csv_bytes(
            [
                "EmployeeId", "EmployeeName", "Department", "Year", "Quarter", "PerformanceScore",
                "Comments", "Goals", "Achievements", "CreatedAt",
            ],
            [
                [
                    p.employee_id, p.employee_name, p.department, p.year, p.quarter, p.performance_score,
                    p.comments, p.goals, p.achievements, ymd(p.created_at.date()),
                ]
                for p in self._rows(query)
            ],
        )


class PerformanceMetricsPdfGenerator(_PerformanceMetrics):
    format = ReportFormat.PDF

    def generate(self, query: ReportQuery) -> bytes:
        rows = self._rows(query)
        now = self._clock()
        pdf = PdfReport()
        pdf.title("Performance Metrics Report")
        pdf.subtitle(f"Employee Performance Analysis - {now.year}")

        pdf.heading("Summary")
        pdf.bullets(_summary_lines(rows))

        def score_fill(values, column):
            if column != 5:
                return None
            score = Decimal(str(values[5]))
            if score >= 80:
                return colors.lightgreen
            if score >= 60:
                return colors.lightyellow
            return colors.lightcoral

        pdf.table(
            ["Emp ID", "Employee", "Department", "Year", "Q", "Score"],
            [
                [p.employee_id, p.employee_name, p.department or "N/A", p.year, p.quarter, f"{p.performance_score:.1f}"]
                for p in rows
            ],
            weights=[1, 3, 2.5, 1, 0.7, 1],
            fill=score_fill,
        )

        if rows:
            pdf.heading("Top Performers")
            pdf.bullets(
                [
                    f"{e.employee_name} ({e.department}): {e.average_score:.1f} avg"
                    for e in employee_performance(rows)[:TOP_PERFORMERS]
                ]
            )
            pdf.heading("Department Averages")
            pdf.bullets(
                [
                    f"{d.department}: {d.average_score:.1f} ({d.employees} employees)"
                    for d in department_performance(rows)
                ]
            )
            pdf.heading("Score Distribution")
            pdf.bullets([f"{label}: {count}" for label, count in score_distribution(rows)])
        pdf.footer(now)
        return pdf.to_bytes()


class PerformanceMetricsExcelGenerator(_PerformanceMetrics):
    format = ReportFormat.EXCEL

    def generate(self, query: ReportQuery) -> bytes:
        rows = self._rows(query)
        now = self._clock()
        xlsx = ExcelReport()

        sheet = "Performance Metrics"
        columns = ["Employee ID", "Employee Name", "Department", "Year", "Quarter", "Score", "Comments", "Goals", "Achievements"]
        xlsx.title(sheet, "Performance Metrics Report", columns=len(columns))
        xlsx.note(sheet, generated_on(now), columns=len(columns), row=2)
        summary = performance_summary(rows)
        xlsx.cells(
            sheet,
            4,
            [
                "Total Records:", summary.total_records,
                "Employees:", summary.unique_employees,
                "Average Score:", round(float(summary.average_score), 1),
                "High Performers:", summary.high_performers,
            ],
            bold=True,
        )
        last = xlsx.table(
            sheet,
            columns,
            [
                [
                    p.employee_id, p.employee_name, p.department or "N/A", p.year, p.quarter,
                    float(p.performance_score), p.comments or "", p.goals or "", p.achievements or "",
                ]
                for p in rows
            ],
            header_row=6,
            formats={"Score": ONE_DECIMAL},
        )
        xlsx.fill_column(sheet, 6, 7, last, _score_fill)
        xlsx.autofit(sheet, from_row=6)

        employees = "Employee Summary"
        xlsx.table(
            employees,
            ["Employee ID", "Employee Name", "Department", "Records", "Average Score", "Best Score", "Latest Score"],
            [
                [
                    e.employee_id, e.employee_name, e.department, e.records,
                    float(e.average_score), float(e.best_score), float(e.latest_score),
                ]
                for e in employee_performance(rows)
            ],
            formats={"Average Score": ONE_DECIMAL, "Best Score": ONE_DECIMAL, "Latest Score": ONE_DECIMAL},
        )
        xlsx.autofit(employees)

        departments = "Department Performance"
        xlsx.table(
            departments,
            ["Department", "Employees", "Records", "Average Score", "High Performers", "Needs Improvement"],
            [
                [
                    d.department, d.employees, d.records, float(d.average_score),
                    d.high_performers, d.improvement_needed,
                ]
                for d in department_performance(rows)
            ],
            formats={"Average Score": ONE_DECIMAL},
        )
        xlsx.autofit(departments)
        return xlsx.to_bytes()
