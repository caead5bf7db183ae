from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import parse_optional_date
from ..common.pagination import PageRequest, PagedResult
from ..common.validators import (
    optional_text,
    require_decimal,
    require_email,
    require_max_length,
    require_non_empty,
    require_positive_int,
)
from ..core.constants import ADDRESS_MAX_LENGTH, EMAIL_MAX_LENGTH, NAME_MAX_LENGTH, PHONE_MAX_LENGTH
from ..core.enums import EmployeeStatus
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from ..departments.repository import DepartmentRepository
from .model import Employee, EmployeeInput
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


def _date_field(payload: Mapping[str, Any], key: str, label: str, *, required: bool):
    raw = payload.get(key)
    if raw is not None and not isinstance(raw, str):
        raise ValidationError(f"{label} must be a date in YYYY-MM-DD format")
    value = parse_optional_date(raw, label)
    if required and value is None:
        raise ValidationError(f"{label} is required")
    return value


def _status_field(payload: Mapping[str, Any]) -> EmployeeStatus:
    if "isActive" in payload and payload["isActive"] is not None:
        if not isinstance(payload["isActive"], bool):
            raise ValidationError("IsActive must be true or false")
        return EmployeeStatus.ACTIVE if payload["isActive"] else EmployeeStatus.DEACTIVATED
    raw = payload.get("status")
    if raw is None:
        return EmployeeStatus.ACTIVE
    for status in EmployeeStatus:
        if str(raw).strip().lower() == status.value.lower():
            return status
    raise ValidationError(f"Unknown status '{raw}'")


def parse_employee_input(payload: Mapping[str, Any], *, for_update: bool = False) -> EmployeeInput:
    """Build an `EmployeeInput` from a camelCase JSON object.

    Status is only read on update; new employees always start active.
    """
    if not isinstance(payload, Mapping):
        raise ValidationError("Employee must be a JSON object")

    first_name = require_non_empty(payload.get("firstName"), "FirstName")
    last_name = require_non_empty(payload.get("lastName"), "LastName")
    require_max_length(first_name, "FirstName", NAME_MAX_LENGTH)
    require_max_length(last_name, "LastName", NAME_MAX_LENGTH)

    email = require_email(payload.get("email"))
    require_max_length(email, "Email", EMAIL_MAX_LENGTH)

    return EmployeeInput(
        first_name=first_name,
        last_name=last_name,
        email=email,
        phone_number=optional_text(payload.get("phoneNumber"), "PhoneNumber", PHONE_MAX_LENGTH),
        address=optional_text(payload.get("address"), "Address", ADDRESS_MAX_LENGTH),
        date_of_birth=_date_field(payload, "dateOfBirth", "DateOfBirth", required=False),
        date_of_joining=_date_field(payload, "dateOfJoining", "DateOfJoining", required=True),
        position=optional_text(payload.get("position"), "Position", NAME_MAX_LENGTH),
        salary=require_decimal(payload.get("salary"), "Salary", minimum=Decimal("0")),
        department_id=require_positive_int(payload.get("departmentId"), "DepartmentId"),
        status=_status_field(payload) if for_update else EmployeeStatus.ACTIVE,
    )


class EmployeeService:
    """Use cases: employee CRUD, soft delete, paging and all-or-nothing bulk operations."""

    def __init__(self, employees: EmployeeRepository, departments: DepartmentRepository):
        self._employees = employees
        self._departments = departments

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_active()

    def get_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee with ID {employee_id} not found")
        return employee

    def get_page(self, request: PageRequest) -> PagedResult[Employee]:
        return self._employees.get_page(request.normalized())

    def get_department_page(self, department_id: int, request: PageRequest) -> PagedResult[Employee]:
        return self._employees.get_page(request.normalized(), department_id=department_id)

    def _require_department(self, department_id: int) -> None:
        if not self._departments.get_by_id(department_id):
            raise ValidationError(f"Department with ID {department_id} does not exist")

    def create_employee(self, data: EmployeeInput, *, now: datetime | None = None) -> Employee:
        now = now or datetime.now()
        self._require_department(data.department_id)
        if self._employees.email_exists(data.email):
            raise ConflictError("Employee with this email already exists")

        employee_id = self._employees.create(data, created_at=now)
        logger.info("Created employee %s", employee_id)
        return self.get_employee(employee_id)

    def update_employee(self, employee_id: int, data: EmployeeInput, *, now: datetime | None = None) -> Employee:
        now = now or datetime.now()
        self.get_employee(employee_id)
        self._require_department(data.department_id)
        if self._employees.email_exists(data.email, exclude_id=employee_id):
            raise ConflictError("Employee with this email already exists")

        self._employees.update(employee_id, data, updated_at=now)
        updated = self._employees.get_by_id(employee_id, include_deactivated=True)
        if not updated:
            raise NotFoundError(f"Employee with ID {employee_id} not found")
        return updated

    def delete_employee(self, employee_id: int, *, now: datetime | None = None) -> None:
        now = now or datetime.now()
        self.get_employee(employee_id)
        self._employees.deactivate_many([employee_id], updated_at=now)
        logger.info("Deactivated employee %s", employee_id)

    def bulk_create(self, items: Sequence[EmployeeInput], *, now: datetime | None = None) -> Sequence[Employee]:
        now = now or datetime.now()
        if not items:
            raise ValidationError("At least one employee is required")

        seen: set[str] = set()
        for data in items:
            if data.email in seen:
                raise ConflictError(f"Duplicate email in request: {data.email}")
            seen.add(data.email)
        for department_id in sorted({data.department_id for data in items}):
            self._require_department(department_id)

        existing = self._employees.find_existing_emails([data.email for data in items])
        if existing:
            raise ConflictError(f"Employees with these emails already exist: {', '.join(sorted(existing))}")

        ids = self._employees.create_many(items, created_at=now)
        logger.info("Bulk created %s employees", len(ids))
        return [self._employees.get_by_id(i, include_deactivated=True) for i in ids]

    def bulk_delete(self, employee_ids: Sequence[Any], *, now: Optional[datetime] = None) -> int:
        now = now or datetime.now()
        ids = [require_positive_int(i, "EmployeeId") for i in employee_ids]
        if not ids:
            raise ValidationError("At least one employee ID is required")

        found = self._employees.deactivate_many(ids, updated_at=now)
        if not found:
            raise NotFoundError("No employees found for the given IDs")
        logger.info("Bulk deactivated %s employees", found)
        return found
