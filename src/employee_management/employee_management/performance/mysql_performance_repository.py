from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, duplicate_key_as, fetchall, fetchone, to_decimal
from .model import PerformanceInput, PerformanceMetric
from .repository import PerformanceRepository

_SELECT = """
    SELECT metric_id, employee_id, year, quarter, performance_score, comments, goals, achievements,
           created_at, updated_at
    FROM performance_metrics
"""


def _duplicate_period() -> ConflictError:
    return ConflictError("Performance metric for this employee and quarter already exists")


def _to_metric(r: dict) -> PerformanceMetric:
    return PerformanceMetric(
        metric_id=int(r["metric_id"]),
        employee_id=int(r["employee_id"]),
        year=int(r["year"]),
        quarter=int(r["quarter"]),
        performance_score=to_decimal(r["performance_score"]),
        comments=r.get("comments"),
        goals=r.get("goals"),
        achievements=r.get("achievements"),
        created_at=r["created_at"],
        updated_at=r.get("updated_at"),
    )


class MySQLPerformanceRepository(PerformanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def exists(self, employee_id: int, year: int, quarter: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT 1 AS found FROM performance_metrics WHERE employee_id=%s AND year=%s AND quarter=%s",
                (int(employee_id), int(year), int(quarter)),
            )
            return fetchone(cur) is not None

    def create(self, data: PerformanceInput, *, created_at: datetime) -> int:
        with duplicate_key_as(_duplicate_period), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO performance_metrics(employee_id, year, quarter, performance_score,
                                                comments, goals, achievements, created_at)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    data.employee_id,
                    data.year,
                    data.quarter,
                    data.performance_score,
                    data.comments,
                    data.goals,
                    data.achievements,
                    created_at,
                ),
            )
            return int(cur.lastrowid)

    def get_by_id(self, metric_id: int) -> Optional[PerformanceMetric]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE metric_id=%s", (int(metric_id),))
            r = fetchone(cur)
            return _to_metric(r) if r else None

    def list_for_employee(self, employee_id: int) -> Sequence[PerformanceMetric]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE employee_id=%s ORDER BY year, quarter", (int(employee_id),))
            return [_to_metric(r) for r in fetchall(cur)]
