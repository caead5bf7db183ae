from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Mapping, Sequence

from ..common.validators import optional_text, require_max_length, require_non_empty
from ..core.constants import DESCRIPTION_MAX_LENGTH, NAME_MAX_LENGTH
from ..core.exceptions import BusinessRuleError, ConflictError, NotFoundError
from .model import Department, DepartmentInput
from .repository import DepartmentRepository

logger = logging.getLogger(__name__)


def parse_department_input(payload: Mapping[str, Any]) -> DepartmentInput:
    name = require_non_empty(payload.get("name"), "Name")
    require_max_length(name, "Name", NAME_MAX_LENGTH)
    return DepartmentInput(
        name=name,
        description=optional_text(payload.get("description"), "Description", DESCRIPTION_MAX_LENGTH),
        manager_name=optional_text(payload.get("managerName"), "ManagerName", NAME_MAX_LENGTH),
    )


class DepartmentService:
    """Use cases: department CRUD with unique names and guarded deletion."""

    def __init__(self, departments: DepartmentRepository):
        self._departments = departments

    def list_departments(self) -> Sequence[Department]:
        return self._departments.list_all()

    def list_with_employee_count(self) -> Sequence[Department]:
        return self._departments.list_by_employee_count()

    def get_department(self, department_id: int) -> Department:
        department = self._departments.get_by_id(department_id)
        if not department:
            raise NotFoundError(f"Department with ID {department_id} not found")
        return department

    def create_department(self, data: DepartmentInput, *, now: datetime | None = None) -> Department:
        now = now or datetime.now()
        if self._departments.name_exists(data.name):
            raise ConflictError("Department with this name already exists")

        department_id = self._departments.create(data, created_at=now)
        logger.info("Created department %s (%s)", department_id, data.name)
        return self.get_department(department_id)

    def update_department(self, department_id: int, data: DepartmentInput, *, now: datetime | None = None) -> Department:
        now = now or datetime.now()
        self.get_department(department_id)
        if self._departments.name_exists(data.name, exclude_id=department_id):
            raise ConflictError("Department with this name already exists")

        self._departments.update(department_id, data, updated_at=now)
        return self.get_department(department_id)

    def delete_department(self, department_id: int) -> None:
        self.get_department(department_id)
        if self._departments.has_active_employees(department_id):
            raise BusinessRuleError("Cannot delete department with active employees")
        if not self._departments.delete(department_id):
            # An employee was activated between the check and the delete.
            raise BusinessRuleError("Cannot delete department with active employees")
        logger.info("Deleted department %s", department_id)
