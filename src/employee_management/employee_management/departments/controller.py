from __future__ import annotations

from flask import Flask, jsonify, url_for

from ..common.datetime_utils import iso_or_none
from ..common.http import error_response, internal_error_response, json_body
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import DomainError
from ..users.guards import roles_required, token_required
from .model import Department
from .service import parse_department_input


def department_json(d: Department) -> dict:
    return {
        "id": d.department_id,
        "name": d.name,
        "description": d.description,
        "managerName": d.manager_name,
        "employeeCount": d.employee_count,
        "createdAt": iso_or_none(d.created_at),
        "updatedAt": iso_or_none(d.updated_at),
    }


def register(app: Flask, container: Container) -> None:
    service = container.department_service
    auth = container.auth_service

    @app.route("/api/departments", methods=["GET"], endpoint="departments_list")
    @token_required(auth)
    def list_departments():
        try:
            return jsonify([department_json(d) for d in service.list_departments()])
        except Exception:
            app.logger.exception("Error retrieving departments")
            return internal_error_response()

    @app.route("/api/departments/with-employee-count", methods=["GET"], endpoint="departments_with_count")
    @token_required(auth)
    def list_with_employee_count():
        try:
            return jsonify([department_json(d) for d in service.list_with_employee_count()])
        except Exception:
            app.logger.exception("Error retrieving departments with employee count")
            return internal_error_response()

    @app.route("/api/departments/<int:department_id>", methods=["GET"], endpoint="departments_get")
    @token_required(auth)
    def get_department(department_id: int):
        try:
            return jsonify(department_json(service.get_department(department_id)))
        except DomainError as e:
            return error_response(e)
        except Exception:
            app.logger.exception("Error retrieving department with ID %s", department_id)
            return internal_error_response()

    @app.route("/api/departments", methods=["POST"], endpoint="departments_create")
    @roles_required(auth, Role.ADMIN, Role.HR)
    def create_department():
        try:
            department = service.create_department(parse_department_input(json_body()))
            response = jsonify(department_json(department))
            response.status_code = 201
            response.headers["Location"] = url_for("departments_get", department_id=department.department_id)
            return response
        except DomainError as e:
            return error_response(e)
        except Exception:
            app.logger.exception("Error creating department")
            return internal_error_response()

    @app.route("/api/departments/<int:department_id>", methods=["PUT"], endpoint="departments_update")
    @roles_required(auth, Role.ADMIN, Role.HR)
    def update_department(department_id: int):
        try:
            department = service.update_department(department_id, parse_department_input(json_body()))
            return jsonify(department_json(department))
        except DomainError as e:
            return error_response(e)
        except Exception:
            app.logger.exception("Error updating department with ID %s", department_id)
            return internal_error_response()

    @app.route("/api/departments/<int:department_id>", methods=["DELETE"], endpoint="departments_delete")
    @roles_required(auth, Role.ADMIN)
    def delete_department(department_id: int):
        try:
            service.delete_department(department_id)
            return "", 204
        except DomainError as e:
            return error_response(e)
        except Exception:
            app.logger.exception("Error deleting department with ID %s", department_id)
            return internal_error_response()
