from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional, Sequence

from ..common.validators import optional_text, require_decimal, require_positive_int
from ..core.constants import PERFORMANCE_TEXT_MAX_LENGTH
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from .model import PerformanceInput, PerformanceMetric
from .repository import PerformanceRepository

logger = logging.getLogger(__name__)


class PerformanceService:
    def __init__(self, metrics: PerformanceRepository):
        self._metrics = metrics

    def record(
        self,
        employee_id: Any,
        year: Any,
        quarter: Any,
        score: Any,
        comments: Optional[str] = None,
        goals: Optional[str] = None,
        achievements: Optional[str] = None,
        *,
        now: datetime | None = None,
    ) -> PerformanceMetric:
        now = now or datetime.now()
        employee_id = require_positive_int(employee_id, "EmployeeId")
        year = require_positive_int(year, "Year")
        quarter = require_positive_int(quarter, "Quarter")
        if quarter > 4:
            raise ValidationError("Quarter must be between 1 and 4")
        score = require_decimal(score, "PerformanceScore", minimum=Decimal("0"))
        if score > 100:
            raise ValidationError("PerformanceScore must be between 0 and 100")

        data = PerformanceInput(
            employee_id=employee_id,
            year=year,
            quarter=quarter,
            performance_score=score,
            comments=optional_text(comments, "Comments", PERFORMANCE_TEXT_MAX_LENGTH),
            goals=optional_text(goals, "Goals", PERFORMANCE_TEXT_MAX_LENGTH),
            achievements=optional_text(achievements, "Achievements", PERFORMANCE_TEXT_MAX_LENGTH),
        )
        if self._metrics.exists(employee_id, year, quarter):
            raise ConflictError("Performance metric for this employee and quarter already exists")

        metric_id = self._metrics.create(data, created_at=now)
        metric = self._metrics.get_by_id(metric_id)
        if not metric:
            raise NotFoundError(f"Performance metric {metric_id} not found")
        return metric

    def list_for_employee(self, employee_id: int) -> Sequence[PerformanceMetric]:
        return self._metrics.list_for_employee(employee_id)
