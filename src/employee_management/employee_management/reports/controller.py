from __future__ import annotations

from flask import Flask

from ..common.http import error_response, internal_error_response, query_date, query_int
from ..container import Container
from ..core.enums import ReportFormat, ReportSubject
from ..core.exceptions import DomainError, NotFoundError
from .base import ReportQuery


def _subject(value: str) -> ReportSubject:
    try:
        return ReportSubject(value)
    except ValueError:
        raise NotFoundError(f"Unknown report '{value}'")


def _format(value: str) -> ReportFormat:
    try:
        return ReportFormat(value)
    except ValueError:
        raise NotFoundError(f"Unknown report format '{value}'")


def _query(subject: ReportSubject) -> ReportQuery:
    if subject is ReportSubject.ATTENDANCE:
        return ReportQuery(start_date=query_date("startDate"), end_date=query_date("endDate"))
    if subject is ReportSubject.PERFORMANCE_METRICS:
        return ReportQuery(employee_id=query_int("employeeId"))
    return ReportQuery()


def register(app: Flask, container: Container) -> None:
    service = container.report_service

    def send(subject_value: str, format_value: str):
        try:
            subject = _subject(subject_value)
            report = service.generate(subject, _format(format_value), _query(subject))
            return app.response_class(
                report.content,
                mimetype=report.content_type,
                headers={"Content-Disposition": f"attachment; filename={report.filename}"},
            )
        except DomainError as e:
            return error_response(e)
        except Exception:
            app.logger.exception("Error generating %s report (%s)", subject_value, format_value)
            return internal_error_response()

    @app.route("/api/reports/<subject>", methods=["GET"], endpoint="reports_csv")
    def report_csv(subject: str):
        return send(subject, ReportFormat.CSV.value)

    @app.route("/api/reports/<subject>/<report_format>", methods=["GET"], endpoint="reports_formatted")
    def report_formatted(subject: str, report_format: str):
        if report_format == ReportFormat.CSV.value:
            return error_response(NotFoundError(f"Unknown report format '{report_format}'"))
        return send(subject, report_format)
