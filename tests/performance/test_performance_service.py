from __future__ import annotations

from decimal import Decimal

import pytest

from src.employee_management.employee_management.core.exceptions import ConflictError, ValidationError
from tests.builders import FIXED_NOW


def test_record_and_list_in_period_order(container):
    service = container.performance_service
    service.record(1, 2024, 2, "88.5", goals="Ship v2", now=FIXED_NOW)
    service.record(1, 2024, 1, 71, now=FIXED_NOW)
    service.record(2, 2024, 1, 90, now=FIXED_NOW)

    rows = service.list_for_employee(1)

    assert [(m.year, m.quarter) for m in rows] == [(2024, 1), (2024, 2)]
    assert rows[1].performance_score == Decimal("88.5")
    assert rows[1].goals == "Ship v2"


def test_one_metric_per_quarter(container):
    container.performance_service.record(1, 2024, 1, 80, now=FIXED_NOW)

    with pytest.raises(ConflictError):
        container.performance_service.record(1, 2024, 1, 95, now=FIXED_NOW)


@pytest.mark.parametrize("quarter, score", [(0, 50), (5, 50), (1, -1), (1, 100.5)])
def test_rejects_out_of_range_values(container, quarter, score):
    with pytest.raises(ValidationError):
        container.performance_service.record(1, 2024, quarter, score, now=FIXED_NOW)
