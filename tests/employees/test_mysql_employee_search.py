from __future__ import annotations

from src.employee_management.employee_management.common.pagination import PageRequest
from src.employee_management.employee_management.database.mysql_base import like_contains
from src.employee_management.employee_management.employees.mysql_employee_repository import MySQLEmployeeRepository


class _RecordingCursor:
    def __init__(self, executed):
        self._executed = executed

    def execute(self, sql, params=()):
        self._executed.append((sql, params))

    def fetchone(self):
        return {"n": 0}

    def fetchall(self):
        return []

    def close(self):
        pass


class _RecordingConnection:
    def __init__(self):
        self.executed = []

    def connect(self):
        return self

    def cursor(self, dictionary=True):
        return _RecordingCursor(self.executed)

    def commit(self):
        pass

    def rollback(self):
        pass

    def close(self):
        pass


def test_like_contains_escapes_wildcards():
    assert like_contains("50%_off") == "%50!%!_off%"
    assert like_contains("a!b") == "%a!!b%"
    assert like_contains("plain") == "%plain%"


def test_page_search_matches_wildcards_literally():
    conn = _RecordingConnection()
    repo = MySQLEmployeeRepository(conn)

    page = repo.get_page(PageRequest(search_term="J_Doe%"))

    count_sql, count_params = conn.executed[0]
    assert count_sql.count("LIKE %s ESCAPE '!'") == 5
    assert list(count_params[1:]) == ["%j!_doe!%%"] * 5
    assert page.total_count == 0


def test_department_page_search_skips_department_name():
    conn = _RecordingConnection()
    repo = MySQLEmployeeRepository(conn)

    repo.get_page(PageRequest(search_term="ops"), department_id=3)

    sql, params = conn.executed[0]
    assert "d.name" not in sql.split("WHERE", 1)[1]
    assert list(params) == ["Active", 3] + ["%ops%"] * 4
