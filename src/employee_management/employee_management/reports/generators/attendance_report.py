from __future__ import annotations

from typing import Optional, Sequence

from reportlab.lib import colors

from ...core.enums import ReportFormat, ReportSubject
from ...common.datetime_utils import format_duration
from ..base import DateRangeMixin, ReportGenerator, ReportQuery
from ..rendering.csv_writer import csv_bytes
from ..rendering.excel import ExcelReport
from ..rendering.formatting import clock_time, hours_minutes, timestamp, ymd
from ..rendering.pdf import PdfReport
from ..rows import AttendanceRow


def _date_range_label(query: ReportQuery) -> Optional[str]:
    start, end = query.start_date, query.end_date
    if start and end:
        return f"Date Range: {ymd(start)} to {ymd(end)}"
    if start:
        return f"Date Range: From {ymd(start)}"
    if end:
        return f"Date Range: Until {ymd(end)}"
    return None


def _summary_lines(rows: Sequence[AttendanceRow]) -> list[str]:
    completed = sum(1 for a in rows if a.check_out_time is not None)
    lines = [
        f"Total Records: {len(rows)}",
        f"Completed Sessions: {completed}",
        f"In Progress Sessions: {len(rows) - completed}",
    ]
    if rows:
        dates = [a.work_date for a in rows]
        lines.append(f"Date Range: {ymd(min(dates))} to {ymd(max(dates))}")
    return lines


def _latest_first(rows: Sequence[AttendanceRow]) -> list[AttendanceRow]:
    return sorted(rows, key=lambda a: (-a.work_date.toordinal(), a.employee_name, a.attendance_id))


class _AttendanceReport(DateRangeMixin, ReportGenerator):
    subject = ReportSubject.ATTENDANCE
    cache_name = "attendance_report"

    def _rows(self, query: ReportQuery) -> Sequence[AttendanceRow]:
        return self._reports.attendance(start_date=query.start_date, end_date=query.end_date)


class AttendanceReportCsvGenerator(_AttendanceReport):
    format = ReportFormat.CSV

    def generate(self, query: ReportQuery) -> bytes:
        return csv_bytes(
            ["Id", "EmployeeId", "EmployeeName", "Department", "Date", "CheckInTime", "CheckOutTime", "TotalHours", "CreatedAt"],
            [
                [
                    a.attendance_id, a.employee_id, a.employee_name, a.department, ymd(a.work_date),
                    clock_time(a.check_in_time), clock_time(a.check_out_time),
                    format_duration(a.total_hours), timestamp(a.created_at),
                ]
                for a in self._rows(query)
            ],
        )


class AttendanceReportPdfGenerator(_AttendanceReport):
    format = ReportFormat.PDF

    def generate(self, query: ReportQuery) -> bytes:
        rows = _latest_first(self._rows(query))
        pdf = PdfReport(wide=True)
        pdf.title("Attendance Report")
        label = _date_range_label(query)
        if label:
            pdf.subtitle(label)

        def status_fill(values, column):
            if column != 7:
                return None
            return colors.lightgreen if values[7] == "Completed" else colors.orange

        pdf.table(
            ["ID", "Employee", "Department", "Date", "Check In", "Check Out", "Hours", "Status"],
            [
                [
                    a.employee_id, a.employee_name, a.department or "N/A", ymd(a.work_date),
                    clock_time(a.check_in_time, seconds=False),
                    clock_time(a.check_out_time, seconds=False) or "N/A",
                    hours_minutes(a.total_hours) or "N/A", a.status,
                ]
                for a in rows
            ],
            weights=[1, 2, 2, 2, 1.5, 1.5, 1.5, 1.5],
            fill=status_fill,
        )
        pdf.heading("Summary")
        for line in _summary_lines(rows):
            pdf.line(line)
        pdf.footer(self._clock())
        return pdf.to_bytes()


class AttendanceReportExcelGenerator(_AttendanceReport):
    format = ReportFormat.EXCEL

    def generate(self, query: ReportQuery) -> bytes:
        rows = _latest_first(self._rows(query))
        xlsx = ExcelReport()
        sheet = "Attendance Report"
        last = xlsx.table(
            sheet,
            ["Employee ID", "Employee Name", "Department", "Date", "Check In Time", "Check Out Time", "Total Hours", "Status", "Notes"],
            [
                [
                    a.employee_id, a.employee_name, a.department or "N/A", ymd(a.work_date),
                    clock_time(a.check_in_time), clock_time(a.check_out_time) or "Not checked out",
                    hours_minutes(a.total_hours) or "N/A", a.status, a.notes or "",
                ]
                for a in rows
            ],
        )
        xlsx.autofit(sheet)

        summary_row = last + 2
        xlsx.cells(sheet, summary_row, ["Summary"], bold=True, size=14)
        for offset, line in enumerate(_summary_lines(rows), start=1):
            label, value = line.split(": ", 1)
            xlsx.cells(sheet, summary_row + offset, [f"{label}:", int(value) if value.isdigit() else value])
        return xlsx.to_bytes()
