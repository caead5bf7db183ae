from __future__ import annotations

from ...core.enums import ReportFormat, ReportSubject
from ..analytics import department_salaries, salary_brackets, salary_stats, years_since
from ..base import ReportGenerator, ReportQuery
from ..rendering.csv_writer import csv_bytes
from ..rendering.excel import MONEY_FORMAT, PERCENT_FORMAT, ExcelReport
from ..rendering.formatting import generated_on, money, ymd
from ..rendering.pdf import PdfReport


class _SalaryReport(ReportGenerator):
    subject = ReportSubject.SALARIES
    cache_name = "salary_report"


class SalaryReportCsvGenerator(_SalaryReport):
    format = ReportFormat.CSV

    def generate(self, query: ReportQuery) -> bytes:
        return csv_bytes(
            ["Id", "FirstName", "LastName", "Email", "Department", "Position", "Salary", "DateOfJoining"],
            [
                [
                    e.employee_id, e.first_name, e.last_name, e.email, e.department,
                    e.position, e.salary, ymd(e.date_of_joining),
                ]
                for e in self._reports.active_employees()
            ],
        )


class SalaryReportPdfGenerator(_SalaryReport):
    format = ReportFormat.PDF

    def generate(self, query: ReportQuery) -> bytes:
        employees = self._reports.active_employees()
        now = self._clock()
        pdf = PdfReport()
        pdf.title("Salary Report")
        pdf.table(
            ["Employee", "Department", "Position", "Salary", "Experience", "Joining Date"],
            [
                [
                    e.full_name, e.department or "N/A", e.position or "N/A", money(e.salary),
                    f"{years_since(e.date_of_joining, now.date())} years", ymd(e.date_of_joining),
                ]
                for e in sorted(employees, key=lambda e: (e.salary, e.last_name))
            ],
        )

        pdf.heading("Salary Analysis")
        if employees:
            stats = salary_stats([e.salary for e in employees])
            pdf.bullets(
                [
                    f"Total Employees: {stats.count}",
                    f"Minimum Salary: {money(stats.minimum)}",
                    f"Maximum Salary: {money(stats.maximum)}",
                    f"Average Salary: {money(stats.average)}",
                    f"Median Salary: {money(stats.median)}",
                    f"Total Payroll: {money(stats.total)}",
                ]
            )
            pdf.heading("Salary by Department")
            departments = sorted(department_salaries(employees), key=lambda d: (-d.average, d.department))
            pdf.bullets([f"{d.department}: {money(d.average)} (avg) - {d.count} employees" for d in departments])
        pdf.footer(now)
        return pdf.to_bytes()


class SalaryReportExcelGenerator(_SalaryReport):
    format = ReportFormat.EXCEL

    def generate(self, query: ReportQuery) -> bytes:
        employees = self._reports.active_employees()
        now = self._clock()
        today = now.date()
        xlsx = ExcelReport()

        sheet = "Salary Report"
        columns = ["Employee", "Department", "Position", "Salary", "Experience", "Joining Date", "Age", "Years at Company"]
        xlsx.title(sheet, "Salary Report", columns=len(columns))
        xlsx.note(sheet, generated_on(now), columns=len(columns), row=2)
        xlsx.table(
            sheet,
            columns,
            [
                [
                    e.full_name, e.department or "N/A", e.position or "N/A", float(e.salary),
                    years_since(e.date_of_joining, today), ymd(e.date_of_joining),
                    years_since(e.date_of_birth, today) if e.date_of_birth else None,
                    years_since(e.date_of_joining, today),
                ]
                for e in sorted(employees, key=lambda e: (-e.salary, e.last_name))
            ],
            header_row=4,
            formats={"Salary": MONEY_FORMAT},
        )
        xlsx.autofit(sheet, from_row=4)

        analysis = "Salary Analysis"
        xlsx.title(analysis, "Salary Analysis", columns=4)
        if employees:
            salaries = [e.salary for e in employees]
            stats = salary_stats(salaries)
            last = xlsx.table(
                analysis,
                ["Metric", "Value"],
                [
                    ["Total Employees", str(stats.count)],
                    ["Total Payroll", money(stats.total)],
                    ["Average Salary", money(stats.average)],
                    ["Median Salary", money(stats.median)],
                    ["Minimum Salary", money(stats.minimum)],
                    ["Maximum Salary", money(stats.maximum)],
                    ["Salary Range", money(stats.spread)],
                ],
                header_row=3,
            )
            brackets_row = last + 2
            xlsx.cells(analysis, brackets_row, ["Salary Brackets"], bold=True, size=12)
            xlsx.table(
                analysis,
                ["Salary Range", "Employee Count", "Percentage"],
                [[label, count, share] for label, count, share in salary_brackets(salaries)],
                header_row=brackets_row + 1,
                formats={"Percentage": PERCENT_FORMAT},
            )
            xlsx.autofit(analysis, from_row=3)

        by_department = "Department Analysis"
        xlsx.title(by_department, "Salary Analysis by Department", columns=6)
        departments = sorted(department_salaries(employees), key=lambda d: (-d.average, d.department))
        xlsx.table(
            by_department,
            ["Department", "Employee Count", "Total Salary", "Average Salary", "Min Salary", "Max Salary"],
            [
                [d.department, d.count, float(d.total), float(d.average), float(d.minimum), float(d.maximum)]
                for d in departments
            ],
            header_row=3,
            formats={name: MONEY_FORMAT for name in ("Total Salary", "Average Salary", "Min Salary", "Max Salary")},
        )
        xlsx.autofit(by_department, from_row=3)
        return xlsx.to_bytes()
