from __future__ import annotations

from ...common.datetime_utils import months_ago
from ...core.constants import HIRING_TREND_MONTHS
from ...core.enums import ReportFormat, ReportSubject
from ..analytics import hiring_trends
from ..base import ReportGenerator, ReportQuery
from ..rendering.csv_writer import csv_bytes
from ..rendering.excel import ExcelReport
from ..rendering.formatting import generated_on
from ..rendering.pdf import PdfReport
from ..rows import HiringTrendRow


class _HiringTrend(ReportGenerator):
    subject = ReportSubject.HIRING_TRENDS
    cache_name = "hiring_trend"

    def _rows(self) -> list[HiringTrendRow]:
        now = self._clock()
        start = months_ago(now, HIRING_TREND_MONTHS).date()
        return hiring_trends(self._reports.hires_between(start, now.date()))


class HiringTrendCsvGenerator(_HiringTrend):
    format = ReportFormat.CSV

    def generate(self, query: ReportQuery) -> bytes:
        return csv_bytes(
            ["Year", "Month", "MonthName", "Hires", "Department"],
            [[t.year, t.month, t.month_name, t.hires, t.department] for t in self._rows()],
        )


class HiringTrendPdfGenerator(_HiringTrend):
    format = ReportFormat.PDF

    def generate(self, query: ReportQuery) -> bytes:
        rows = self._rows()
        pdf = PdfReport()
        pdf.title("Hiring Trends Report")
        pdf.subtitle(f"Last {HIRING_TREND_MONTHS} months")
        pdf.table(
            ["Year", "Month", "Month Name", "Hires", "Department"],
            [[t.year, t.month, t.month_name, t.hires, t.department] for t in rows],
            weights=[1, 1, 2, 1, 2.5],
        )
        if rows:
            pdf.heading("Summary")
            busiest = max(rows, key=lambda t: (t.hires, -t.year, -t.month))
            pdf.bullets(
                [
                    f"Total Hires: {sum(t.hires for t in rows)}",
                    f"Months with Hires: {len(rows)}",
                    f"Busiest Month: {busiest.month_name} {busiest.year} ({busiest.hires} hires)",
                ]
            )
        pdf.footer(self._clock())
        return pdf.to_bytes()


class HiringTrendExcelGenerator(_HiringTrend):
    format = ReportFormat.EXCEL

    def generate(self, query: ReportQuery) -> bytes:
        xlsx = ExcelReport()
        sheet = "Hiring Trends"
        columns = ["Year", "Month", "Month Name", "Hires", "Department"]
        xlsx.title(sheet, "Hiring Trends Report", columns=len(columns))
        xlsx.note(sheet, generated_on(self._clock()), columns=len(columns), row=2)
        xlsx.table(
            sheet,
            columns,
            [[t.year, t.month, t.month_name, t.hires, t.department] for t in self._rows()],
            header_row=4,
        )
        xlsx.autofit(sheet, from_row=4)
        return xlsx.to_bytes()
