from __future__ import annotations

from datetime import datetime

from ...common.datetime_utils import months_ago
from ...core.constants import HIRING_TREND_MONTHS
from ...core.enums import ReportFormat, ReportSubject
from ..analytics import department_growth, department_growth_totals, growth_summary, monthly_hires
from ..base import ReportGenerator, ReportQuery
from ..rendering.csv_writer import csv_bytes
from ..rendering.excel import ONE_DECIMAL, PERCENT_FORMAT, ExcelReport
from ..rendering.formatting import generated_on
from ..rendering.pdf import PdfReport
from ..rows import DepartmentGrowthRow

TOP_DEPARTMENTS = 5


def _period_label(start: datetime, end: datetime) -> str:
    return f"Growth Analysis: {start:%B %Y} - {end:%B %Y}"


class _DepartmentGrowth(ReportGenerator):
    subject = ReportSubject.DEPARTMENT_GROWTH
    cache_name = "department_growth"

    def _window(self) -> tuple[datetime, datetime]:
        now = self._clock()
        return months_ago(now, HIRING_TREND_MONTHS), now

    def _rows(self, start: datetime, end: datetime) -> list[DepartmentGrowthRow]:
        return department_growth(self._reports.hires_between(start.date(), end.date()))


class DepartmentGrowthCsvGenerator(_DepartmentGrowth):
    format = ReportFormat.CSV

    def generate(self, query: ReportQuery) -> bytes:
        return csv_bytes(
            ["Department", "Year", "Month", "MonthName", "NewHires"],
            [[g.department, g.year, g.month, g.month_name, g.new_hires] for g in self._rows(*self._window())],
        )


class DepartmentGrowthPdfGenerator(_DepartmentGrowth):
    format = ReportFormat.PDF

    def generate(self, query: ReportQuery) -> bytes:
        start, end = self._window()
        rows = self._rows(start, end)
        pdf = PdfReport()
        pdf.title("Department Growth Report")
        pdf.subtitle(_period_label(start, end))

        summary = growth_summary(rows)
        pdf.heading("Summary")
        pdf.bullets(
            [
                f"Total New Hires: {summary.total_hires}",
                f"Departments with Growth: {summary.departments}",
                f"Average Hires per Month: {summary.average_hires_per_month:.1f}",
                f"Top Growing Department: {summary.top_department}",
            ]
        )

        pdf.table(
            ["Department", "Year", "Month", "New Hires"],
            [[g.department, g.year, g.month_name, g.new_hires] for g in rows],
            weights=[3, 1, 2, 1],
        )

        totals = department_growth_totals(rows)
        if totals:
            pdf.heading("Growth Trends by Department")
            pdf.bullets(
                [
                    f"{t.department}: {t.total_hires} hires ({t.average_per_month:.1f} avg/month)"
                    for t in totals[:TOP_DEPARTMENTS]
                ]
            )
        pdf.footer(end)
        return pdf.to_bytes()


class DepartmentGrowthExcelGenerator(_DepartmentGrowth):
    format = ReportFormat.EXCEL

    def generate(self, query: ReportQuery) -> bytes:
        start, end = self._window()
        rows = self._rows(start, end)
        summary = growth_summary(rows)
        xlsx = ExcelReport()

        sheet = "Department Growth"
        columns = ["Department", "Year", "Month", "Month Name", "New Hires"]
        xlsx.title(sheet, "Department Growth Report", columns=len(columns))
        xlsx.note(sheet, _period_label(start, end), columns=len(columns), row=2)
        xlsx.note(sheet, generated_on(end), columns=len(columns), row=3)
        xlsx.cells(sheet, 5, ["Total New Hires:", summary.total_hires, "Departments:", summary.departments], bold=True)
        xlsx.table(
            sheet,
            columns,
            [[g.department, g.year, g.month, g.month_name, g.new_hires] for g in rows],
            header_row=7,
        )
        xlsx.autofit(sheet, from_row=5)

        by_department = "Department Summary"
        xlsx.table(
            by_department,
            ["Department", "Total Hires", "Avg Hires per Month", "Share of Hires"],
            [[t.department, t.total_hires, t.average_per_month, t.share_of_hires] for t in department_growth_totals(rows)],
            formats={"Avg Hires per Month": ONE_DECIMAL, "Share of Hires": PERCENT_FORMAT},
        )
        xlsx.autofit(by_department)

        monthly = "Monthly Trends"
        xlsx.table(
            monthly,
            ["Month", "Total Hires", "Departments Active"],
            [[datetime(m.year, m.month, 1).strftime("%B %Y"), m.total_hires, m.departments_active] for m in monthly_hires(rows)],
        )
        xlsx.autofit(monthly)
        return xlsx.to_bytes()
