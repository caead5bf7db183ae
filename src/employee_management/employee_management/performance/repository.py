from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import PerformanceInput, PerformanceMetric


class PerformanceRepository(Protocol):
    def exists(self, employee_id: int, year: int, quarter: int) -> bool:
        raise NotImplementedError

    def create(self, data: PerformanceInput, *, created_at: datetime) -> int:
        """Raise `ConflictError` when the employee already has a row for the period."""

        raise NotImplementedError

    def get_by_id(self, metric_id: int) -> Optional[PerformanceMetric]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: int) -> Sequence[PerformanceMetric]:
        raise NotImplementedError
