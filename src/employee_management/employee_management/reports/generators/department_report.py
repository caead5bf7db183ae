from __future__ import annotations

from ...core.enums import ReportFormat, ReportSubject
from ..analytics import years_since
from ..base import ReportGenerator, ReportQuery
from ..rendering.csv_writer import csv_bytes
from ..rendering.excel import MONEY_FORMAT, ExcelReport
from ..rendering.formatting import generated_on, ymd
from ..rendering.pdf import PdfReport


class _DepartmentReport(ReportGenerator):
    subject = ReportSubject.DEPARTMENTS
    cache_name = "department_report"


class DepartmentReportCsvGenerator(_DepartmentReport):
    format = ReportFormat.CSV

    def generate(self, query: ReportQuery) -> bytes:
        return csv_bytes(
            ["Id", "Name", "Description", "ManagerName", "CreatedAt", "EmployeeCount", "TotalSalary"],
            [
                [
                    d.department_id, d.name, d.description, d.manager_name,
                    ymd(d.created_at), d.employee_count, d.total_salary,
                ]
                for d in self._reports.departments_with_totals()
            ],
        )


class DepartmentReportPdfGenerator(_DepartmentReport):
    format = ReportFormat.PDF

    def generate(self, query: ReportQuery) -> bytes:
        departments = self._reports.departments_with_totals()
        pdf = PdfReport()
        pdf.title("Department Report")
        pdf.table(
            ["ID", "Name", "Description", "Manager", "Employees", "Created"],
            [
                [d.department_id, d.name, d.description or "", d.manager_name or "", d.employee_count, ymd(d.created_at)]
                for d in departments
            ],
            weights=[1, 3, 3, 2, 2, 2],
        )

        total_departments = len(departments)
        total_employees = sum(d.employee_count for d in departments)
        average = total_employees / total_departments if total_departments else 0.0
        pdf.heading("Summary")
        pdf.bullets(
            [
                f"Total Departments: {total_departments}",
                f"Total Active Employees: {total_employees}",
                f"Average Employees per Department: {average:.1f}",
            ]
        )
        pdf.footer(self._clock())
        return pdf.to_bytes()


class DepartmentReportExcelGenerator(_DepartmentReport):
    format = ReportFormat.EXCEL

    def generate(self, query: ReportQuery) -> bytes:
        departments = self._reports.departments_with_totals()
        employees = self._reports.active_employees()
        now = self._clock()
        xlsx = ExcelReport()

        sheet = "Department Report"
        columns = ["ID", "Name", "Description", "Manager", "Employee Count", "Total Salary", "Created Date"]
        xlsx.title(sheet, "Department Report", columns=len(columns))
        xlsx.note(sheet, generated_on(now), columns=len(columns), row=2)
        xlsx.table(
            sheet,
            columns,
            [
                [
                    d.department_id, d.name, d.description or "", d.manager_name or "",
                    d.employee_count, float(d.total_salary), ymd(d.created_at),
                ]
                for d in departments
            ],
            header_row=4,
            formats={"Total Salary": MONEY_FORMAT},
        )
        xlsx.autofit(sheet, from_row=4)

        details = "Employee Details"
        xlsx.title(details, "Employee Details by Department", columns=8)
        ordered = sorted(
            (e for e in employees if e.department),
            key=lambda e: (e.department, e.last_name, e.first_name),
        )
        xlsx.table(
            details,
            ["Department", "Employee ID", "Name", "Email", "Position", "Salary", "Joining Date", "Experience (Years)"],
            [
                [
                    e.department, e.employee_id, e.full_name, e.email, e.position or "",
                    float(e.salary), ymd(e.date_of_joining), years_since(e.date_of_joining, now.date()),
                ]
                for e in ordered
            ],
            header_row=3,
            formats={"Salary": MONEY_FORMAT},
        )
        xlsx.autofit(details, from_row=3)
        return xlsx.to_bytes()
