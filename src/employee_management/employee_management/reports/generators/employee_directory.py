from __future__ import annotations

from ...core.enums import ReportFormat, ReportSubject
from ..analytics import department_name, department_salaries, salary_stats
from ..base import ReportGenerator, ReportQuery
from ..rendering.csv_writer import csv_bytes
from ..rendering.excel import MONEY_FORMAT, ExcelReport
from ..rendering.formatting import generated_on, money, ymd
from ..rendering.pdf import PdfReport


class _EmployeeDirectory(ReportGenerator):
    subject = ReportSubject.EMPLOYEES
    cache_name = "employee_directory"


class EmployeeDirectoryCsvGenerator(_EmployeeDirectory):
    format = ReportFormat.CSV

    def generate(self, query: ReportQuery) -> bytes:
        rows = self._reports.active_employees()
        return csv_bytes(
            ["Id", "FirstName", "LastName", "Email", "Department", "Position", "Salary"],
            [
                [e.employee_id, e.first_name, e.last_name, e.email, e.department, e.position, e.salary]
                for e in rows
            ],
        )


class EmployeeDirectoryPdfGenerator(_EmployeeDirectory):
    format = ReportFormat.PDF

    def generate(self, query: ReportQuery) -> bytes:
        rows = self._reports.active_employees()
        pdf = PdfReport()
        pdf.title("Employee Directory Report")
        pdf.table(
            ["ID", "First Name", "Last Name", "Email", "Department", "Position", "Salary"],
            [
                [e.employee_id, e.first_name, e.last_name, e.email, e.department or "", e.position or "", money(e.salary)]
                for e in rows
            ],
            weights=[1, 2, 2, 3, 2, 2, 2],
        )
        pdf.footer(self._clock())
        return pdf.to_bytes()


class EmployeeDirectoryExcelGenerator(_EmployeeDirectory):
    format = ReportFormat.EXCEL

    def generate(self, query: ReportQuery) -> bytes:
        rows = self._reports.active_employees()
        xlsx = ExcelReport()

        sheet = "Employee Directory"
        columns = [
            "ID", "First Name", "Last Name", "Email", "Phone", "Department",
            "Position", "Salary", "Date of Birth", "Date of Joining",
        ]
        xlsx.title(sheet, "Employee Directory Report", columns=len(columns))
        xlsx.note(sheet, generated_on(self._clock()), columns=len(columns), row=2)
        xlsx.table(
            sheet,
            columns,
            [
                [
                    e.employee_id, e.first_name, e.last_name, e.email, e.phone_number,
                    e.department or "N/A", e.position or "N/A", float(e.salary),
                    ymd(e.date_of_birth), ymd(e.date_of_joining),
                ]
                for e in rows
            ],
            header_row=4,
            formats={"Salary": MONEY_FORMAT},
        )
        xlsx.autofit(sheet, from_row=4)

        summary = "Summary"
        stats = salary_stats([e.salary for e in rows])
        xlsx.title(summary, "Employee Directory Summary", columns=4)
        last = xlsx.table(
            summary,
            ["Metric", "Value"],
            [
                ["Total Employees", str(stats.count)],
                ["Total Salary Cost", money(stats.total)],
                ["Average Salary", money(stats.average)],
                ["Minimum Salary", money(stats.minimum)],
                ["Maximum Salary", money(stats.maximum)],
            ],
            header_row=3,
        )
        breakdown_row = last + 3
        xlsx.cells(summary, breakdown_row, ["Department Breakdown"], bold=True, size=12)
        departments = sorted(department_salaries(rows), key=lambda d: (-d.total, d.department))
        xlsx.table(
            summary,
            ["Department", "Employee Count", "Average Salary", "Total Salary"],
            [[department_name(d.department), d.count, float(d.average), float(d.total)] for d in departments],
            header_row=breakdown_row + 1,
            formats={"Average Salary": MONEY_FORMAT, "Total Salary": MONEY_FORMAT},
        )
        xlsx.autofit(summary, from_row=3)
        return xlsx.to_bytes()
