from __future__ import annotations

from flask import Flask, jsonify, request, url_for

from ..common.datetime_utils import iso_or_none
from ..common.http import (
    decimal_to_json,
    error_response,
    internal_error_response,
    json_body,
    json_list_body,
    query_bool,
    query_int,
)
from ..common.pagination import PageRequest, PagedResult
from ..container import Container
from ..core.constants import DEFAULT_PAGE_NUMBER, DEFAULT_PAGE_SIZE
from ..core.exceptions import DomainError
from .model import Employee
from .service import parse_employee_input


def employee_json(e: Employee) -> dict:
    return {
        "id": e.employee_id,
        "firstName": e.first_name,
        "lastName": e.last_name,
        "email": e.email,
        "phoneNumber": e.phone_number,
        "address": e.address,
        "dateOfBirth": iso_or_none(e.date_of_birth),
        "dateOfJoining": iso_or_none(e.date_of_joining),
        "position": e.position,
        "salary": decimal_to_json(e.salary),
        "departmentId": e.department_id,
        "departmentName": e.department_name or "",
        "isActive": e.is_active,
        "status": e.status.value,
        "createdAt": iso_or_none(e.created_at),
        "updatedAt": iso_or_none(e.updated_at),
    }


def paged_json(page: PagedResult[Employee]) -> dict:
    return {
        "items": [employee_json(e) for e in page.items],
        "totalCount": page.total_count,
        "pageNumber": page.page_number,
        "pageSize": page.page_size,
        "totalPages": page.total_pages,
        "hasPreviousPage": page.has_previous_page,
        "hasNextPage": page.has_next_page,
    }


def _page_request() -> PageRequest:
    return PageRequest(
        page_number=query_int("pageNumber", DEFAULT_PAGE_NUMBER),
        page_size=query_int("pageSize", DEFAULT_PAGE_SIZE),
        search_term=request.args.get("searchTerm"),
        sort_by=request.args.get("sortBy"),
        sort_descending=query_bool("sortDescending"),
    )


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route("/api/employees", methods=["GET"], endpoint="employees_list")
    def list_employees():
        try:
            return jsonify([employee_json(e) for e in service.list_employees()])
        except Exception:
            app.logger.exception("Error retrieving employees")
            return internal_error_response()

    @app.route("/api/employees/<int:employee_id>", methods=["GET"], endpoint="employees_get")
    def get_employee(employee_id: int):
        try:
            return jsonify(employee_json(service.get_employee(employee_id)))
        except DomainError as e:
            return error_response(e)
        except Exception:
            app.logger.exception("Error retrieving employee with ID %s", employee_id)
            return internal_error_response()

    @app.route("/api/employees/paged", methods=["GET"], endpoint="employees_paged")
    def get_employees_paged():
        try:
            return jsonify(paged_json(service.get_page(_page_request())))
        except DomainError as e:
            return error_response(e)
        except Exception:
            app.logger.exception("Error retrieving paged employees")
            return internal_error_response()

    @app.route(
        "/api/employees/department/<int:department_id>/paged",
        methods=["GET"],
        endpoint="employees_department_paged",
    )
    def get_department_employees_paged(department_id: int):
        try:
            return jsonify(paged_json(service.get_department_page(department_id, _page_request())))
        except DomainError as e:
            return error_response(e)
        except Exception:
            app.logger.exception("Error retrieving paged employees for department %s", department_id)
            return internal_error_response()

    @app.route("/api/employees", methods=["POST"], endpoint="employees_create")
    def create_employee():
        try:
            employee = service.create_employee(parse_employee_input(json_body()))
            response = jsonify(employee_json(employee))
            response.status_code = 201
            response.headers["Location"] = url_for("employees_get", employee_id=employee.employee_id)
            return response
        except DomainError as e:
            return error_response(e)
        except Exception:
            app.logger.exception("Error creating employee")
            return internal_error_response()

    @app.route("/api/employees/<int:employee_id>", methods=["PUT"], endpoint="employees_update")
    def update_employee(employee_id: int):
        try:
            employee = service.update_employee(employee_id, parse_employee_input(json_body(), for_update=True))
            return jsonify(employee_json(employee))
        except DomainError as e:
            return error_response(e)
        except Exception:
            app.logger.exception("Error updating employee with ID %s", employee_id)
            return internal_error_response()

    @app.route("/api/employees/<int:employee_id>", methods=["DELETE"], endpoint="employees_delete")
    def delete_employee(employee_id: int):
        try:
            service.delete_employee(employee_id)
            return "", 204
        except DomainError as e:
            return error_response(e)
        except Exception:
            app.logger.exception("Error deleting employee with ID %s", employee_id)
            return internal_error_response()

    @app.route("/api/employees/bulk", methods=["POST"], endpoint="employees_bulk_create")
    def bulk_create_employees():
        try:
            items = [parse_employee_input(item) for item in json_list_body()]
            created = service.bulk_create(items)
            return jsonify([employee_json(e) for e in created])
        except DomainError as e:
            return error_response(e)
        except Exception:
            app.logger.exception("Error bulk creating employees")
            return internal_error_response()

    @app.route("/api/employees/bulk", methods=["DELETE"], endpoint="employees_bulk_delete")
    def bulk_delete_employees():
        try:
            service.bulk_delete(json_list_body())
            return "", 204
        except DomainError as e:
            return error_response(e)
        except Exception:
            app.logger.exception("Error bulk deleting employees")
            return internal_error_response()
