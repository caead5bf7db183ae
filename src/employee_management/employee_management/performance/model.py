from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class PerformanceMetric:
    """Quarterly performance score for one employee."""

    metric_id: int
    employee_id: int
    year: int
    quarter: int
    performance_score: Decimal
    comments: Optional[str]
    goals: Optional[str]
    achievements: Optional[str]
    created_at: datetime
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class PerformanceInput:
    employee_id: int
    year: int
    quarter: int
    performance_score: Decimal
    comments: Optional[str] = None
    goals: Optional[str] = None
    achievements: Optional[str] = None
