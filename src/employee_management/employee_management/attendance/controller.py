from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import format_duration, iso_or_none
from ..common.http import error_response, internal_error_response, json_body, query_date
from ..container import Container
from ..core.exceptions import DomainError
from .model import Attendance


def attendance_json(a: Attendance) -> dict:
    return {
        "id": a.attendance_id,
        "employeeId": a.employee_id,
        "employeeName": a.employee_name,
        "date": iso_or_none(a.work_date),
        "checkInTime": iso_or_none(a.check_in_time),
        "checkOutTime": iso_or_none(a.check_out_time),
        "totalHours": format_duration(a.total_hours),
        "notes": a.notes,
        "createdAt": iso_or_none(a.created_at),
    }


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/api/attendance/check-in", methods=["POST"], endpoint="attendance_check_in")
    def check_in():
        try:
            payload = json_body()
            record = service.check_in(payload.get("employeeId"), payload.get("notes"))
            return jsonify(attendance_json(record))
        except DomainError as e:
            return error_response(e)
        except Exception:
            app.logger.exception("Error during check-in")
            return internal_error_response()

    @app.route("/api/attendance/check-out", methods=["POST"], endpoint="attendance_check_out")
    def check_out():
        try:
            payload = json_body()
            record = service.check_out(payload.get("employeeId"), payload.get("notes"))
            return jsonify(attendance_json(record))
        except DomainError as e:
            return error_response(e)
        except Exception:
            app.logger.exception("Error during check-out")
            return internal_error_response()

    @app.route("/api/attendance/employee/<int:employee_id>", methods=["GET"], endpoint="attendance_employee")
    def get_employee_attendance(employee_id: int):
        try:
            records = service.get_employee_attendance(employee_id, query_date("startDate"), query_date("endDate"))
            return jsonify([attendance_json(a) for a in records])
        except DomainError as e:
            return error_response(e)
        except Exception:
            app.logger.exception("Error retrieving attendance for employee %s", employee_id)
            return internal_error_response()

    @app.route("/api/attendance/employee/<int:employee_id>/today", methods=["GET"], endpoint="attendance_today")
    def get_today_attendance(employee_id: int):
        try:
            return jsonify(attendance_json(service.get_today_attendance(employee_id)))
        except DomainError as e:
            return error_response(e)
        except Exception:
            app.logger.exception("Error retrieving today's attendance for employee %s", employee_id)
            return internal_error_response()

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_list")
    def get_all_attendance():
        try:
            records = service.get_all_attendance(query_date("startDate"), query_date("endDate"))
            return jsonify([attendance_json(a) for a in records])
        except DomainError as e:
            return error_response(e)
        except Exception:
            app.logger.exception("Error retrieving attendance")
            return internal_error_response()
