from __future__ import annotations

from datetime import date, timedelta

from ...core.constants import ATTENDANCE_PATTERN_DAYS
from ...core.enums import ReportFormat, ReportSubject
from ..analytics import attendance_patterns, busiest, employee_patterns, hourly_patterns, mean_of
from ..base import ReportGenerator, ReportQuery
from ..rendering.csv_writer import csv_bytes
from ..rendering.excel import ONE_DECIMAL, ExcelReport
from ..rendering.formatting import generated_on, ymd
from ..rendering.pdf import PdfReport
from ..rows import AttendancePatternRow


def _hours(value) -> str:
    return f"{value:.2f}" if value is not None else ""


class _AttendancePattern(ReportGenerator):
    subject = ReportSubject.ATTENDANCE_PATTERNS
    cache_name = "attendance_pattern"

    def _window(self) -> tuple[date, date]:
        today = self._clock().date()
        return today - timedelta(days=ATTENDANCE_PATTERN_DAYS), today

    def _rows(self, start: date, end: date) -> list[AttendancePatternRow]:
        return attendance_patterns(self._reports.attendance(start_date=start, end_date=end))


def _summary(rows: list[AttendancePatternRow]) -> list[tuple[str, object]]:
    return [
        ("Total Attendance Records", sum(p.attendance_count for p in rows)),
        ("Unique Employees", len({p.employee_id for p in rows})),
        ("Average Hours per Day", f"{mean_of(p.avg_total_hours for p in rows):.1f}"),
    ]


class AttendancePatternCsvGenerator(_AttendancePattern):
    format = ReportFormat.CSV

    def generate(self, query: ReportQuery) -> bytes:
        return csv_bytes(
            ["EmployeeId", "EmployeeName", "Department", "DayOfWeek", "Hour", "AttendanceCount", "AvgCheckInTime", "AvgTotalHours"],
            [
                [
                    p.employee_id, p.employee_name, p.department, p.day_name, p.hour,
                    p.attendance_count, p.avg_check_in_time, _hours(p.avg_total_hours),
                ]
                for p in self._rows(*self._window())
            ],
        )


class AttendancePatternPdfGenerator(_AttendancePattern):
    format = ReportFormat.PDF

    def generate(self, query: ReportQuery) -> bytes:
        start, end = self._window()
        rows = self._rows(start, end)
        pdf = PdfReport(wide=True)
        pdf.title("Attendance Patterns Report")
        pdf.subtitle(f"Pattern Analysis: {ymd(start)} to {ymd(end)}")

        pdf.heading("Summary")
        pdf.bullets([f"{label}: {value}" for label, value in _summary(rows)])

        pdf.table(
            ["Emp ID", "Employee", "Department", "Day", "Hour", "Count", "Avg Check-in", "Avg Hours"],
            [
                [
                    p.employee_id, p.employee_name, p.department, p.day_name, f"{p.hour}:00",
                    p.attendance_count, p.avg_check_in_time, _hours(p.avg_total_hours) or "N/A",
                ]
                for p in rows
            ],
            weights=[1, 2.5, 2, 1.5, 1, 1, 1.5, 1.5],
        )

        if rows:
            pdf.heading("Pattern Analysis")
            pdf.line("Peak Check-in Hours:")
            pdf.bullets(
                [f"{hour}:00 - {count} records" for hour, count, _ in busiest(rows, key=lambda p: p.hour)]
            )
            pdf.line("Most Active Departments:")
            pdf.bullets(
                [
                    f"{dept}: {count} records ({hours:.1f} avg hours)"
                    for dept, count, hours in busiest(rows, key=lambda p: p.department)
                ]
            )
        pdf.footer(self._clock())
        return pdf.to_bytes()


class AttendancePatternExcelGenerator(_AttendancePattern):
    format = ReportFormat.EXCEL

    def generate(self, query: ReportQuery) -> bytes:
        start, end = self._window()
        rows = self._rows(start, end)
        xlsx = ExcelReport()

        sheet = "Attendance Patterns"
        columns = ["Employee ID", "Employee Name", "Department", "Day of Week", "Hour", "Count", "Avg Check-in", "Avg Hours"]
        xlsx.title(sheet, "Attendance Patterns Report", columns=len(columns))
        xlsx.note(sheet, f"Pattern Analysis: {ymd(start)} to {ymd(end)} | {generated_on(self._clock())}", columns=len(columns), row=2)
        summary = _summary(rows)
        xlsx.cells(sheet, 4, [item for label, value in summary for item in (f"{label}:", value)], bold=True)
        xlsx.table(
            sheet,
            columns,
            [
                [
                    p.employee_id, p.employee_name, p.department, p.day_name, f"{p.hour}:00",
                    p.attendance_count, p.avg_check_in_time,
                    round(p.avg_total_hours, 2) if p.avg_total_hours is not None else None,
                ]
                for p in rows
            ],
            header_row=6,
        )
        xlsx.autofit(sheet, from_row=6)

        employees = "Employee Summary"
        xlsx.table(
            employees,
            ["Employee ID", "Employee Name", "Department", "Total Records", "Avg Hours", "Most Common Day"],
            [
                [e.employee_id, e.employee_name, e.department, e.total_records, e.avg_hours, e.most_common_day]
                for e in employee_patterns(rows)
            ],
            formats={"Avg Hours": ONE_DECIMAL},
        )
        xlsx.autofit(employees)

        hourly = "Hourly Patterns"
        xlsx.table(
            hourly,
            ["Hour", "Total Records", "Unique Employees", "Avg Hours"],
            [[f"{h.hour}:00", h.total_records, h.unique_employees, h.avg_hours] for h in hourly_patterns(rows)],
            formats={"Avg Hours": ONE_DECIMAL},
        )
        xlsx.autofit(hourly)
        return xlsx.to_bytes()
