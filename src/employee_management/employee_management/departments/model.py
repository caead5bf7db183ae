from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Department:
    """Department read model; `employee_count` counts active employees only."""

    department_id: int
    name: str
    description: Optional[str]
    manager_name: Optional[str]
    created_at: datetime
    updated_at: Optional[datetime] = None
    employee_count: int = 0


@dataclass(frozen=True)
class DepartmentInput:
    name: str
    description: Optional[str] = None
    manager_name: Optional[str] = None
