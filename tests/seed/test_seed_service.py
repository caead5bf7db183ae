from __future__ import annotations

import random

import pytest
from werkzeug.security import check_password_hash

from src.employee_management.employee_management.seed import data
from src.employee_management.employee_management.seed.model import SeedStatus
from src.employee_management.employee_management.seed.service import SeedError, SeedService
from tests.builders import FIXED_NOW, add_department
from tests.fakes import InMemorySeeds, Store


@pytest.fixture
def seeds(store) -> InMemorySeeds:
    return InMemorySeeds(store)


def _service(seeds, **kwargs) -> SeedService:
    kwargs.setdefault("rng", random.Random(42))
    return SeedService(seeds, employee_count=40, attendance_days=14, **kwargs)


def test_seed_fills_every_table(seeds, store):
    status = _service(seeds).seed(now=FIXED_NOW)

    assert status.departments == len(data.DEPARTMENTS)
    assert status.employees == 40
    assert status.attendances > 0
    assert status.performance_metrics == 8 * len(seeds.active_employee_ids())
    assert status.users == 3
    assert len({e.email for e in store.employees.values()}) == 40


def test_attendance_is_weekdays_with_plausible_times(seeds, store):
    _service(seeds).seed(now=FIXED_NOW)

    for a in store.attendance.values():
        assert a.work_date.weekday() < 5
        assert a.check_in_time.date() == a.work_date
        assert 7 * 60 + 30 <= a.check_in_time.hour * 60 + a.check_in_time.minute < 9 * 60
        assert a.check_out_time > a.check_in_time
        assert store.employees[a.employee_id].is_active


def test_metrics_cover_last_and_current_year(seeds, store):
    _service(seeds).seed(now=FIXED_NOW)

    years = {m.year for m in store.metrics.values()}
    scores = [m.performance_score for m in store.metrics.values()]

    assert years == {2023, 2024}
    assert min(scores) >= 60 and max(scores) <= 100


def test_salaries_follow_department_ranges(seeds, store):
    _service(seeds).seed(now=FIXED_NOW)
    ranges = {name: bounds for name, _, _, bounds in data.DEPARTMENTS}

    for e in store.employees.values():
        low, high = ranges[store.department_name(e.department_id)]
        assert low <= e.salary <= high


def test_demo_users_can_log_in(seeds, store):
    _service(seeds).seed(now=FIXED_NOW)

    admin = next(u for u in store.users.values() if u.username == "admin")

    assert admin.email == "admin@ems.com"
    assert check_password_hash(admin.password_hash, "admin123")


def test_seed_skips_tables_that_have_rows(container, seeds, store):
    add_department(container, "Existing")

    status = _service(seeds).seed(now=FIXED_NOW)

    assert status.departments == 1
    assert status.employees == 40
    assert {e.department_id for e in store.employees.values()} == {1}


def test_seed_twice_changes_nothing(seeds):
    service = _service(seeds)
    first = service.seed(now=FIXED_NOW)

    assert service.seed(now=FIXED_NOW) == first


def test_clear_then_reseed(seeds):
    service = _service(seeds)
    service.seed(now=FIXED_NOW)

    service.clear()
    assert service.status().is_empty

    assert service.reseed(now=FIXED_NOW).employees == 40


def test_reseed_refuses_when_clear_leaves_rows(store):
    class StickySeeds(InMemorySeeds):
        def clear_all(self):
            self._s.attendance.clear()

    seeds = StickySeeds(store)
    service = _service(seeds)
    service.seed(now=FIXED_NOW)

    with pytest.raises(SeedError, match="Data clearing incomplete"):
        service.reseed(now=FIXED_NOW)


def test_same_rng_seed_gives_same_data():
    first, second = Store(), Store()
    _service(InMemorySeeds(first), rng=random.Random(1)).seed(now=FIXED_NOW)
    _service(InMemorySeeds(second), rng=random.Random(1)).seed(now=FIXED_NOW)

    assert [e.email for e in first.employees.values()] == [e.email for e in second.employees.values()]


def test_empty_status():
    assert SeedStatus(0, 0, 0, 0, 0).is_empty
    assert not SeedStatus(0, 0, 0, 0, 1).is_empty
