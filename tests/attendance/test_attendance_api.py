from __future__ import annotations

from tests.builders import add_department, add_employee


def test_check_in_out_round_trip(client, container):
    employee_id = add_employee(container, "ada@x.com", add_department(container, "Engineering"))

    checked_in = client.post("/api/attendance/check-in", json={"employeeId": employee_id, "notes": "Morning"})
    again = client.post("/api/attendance/check-in", json={"employeeId": employee_id})
    checked_out = client.post(
        "/api/attendance/check-out", json={"employeeId": employee_id, "notes": "Evening check-out"}
    )

    assert checked_in.status_code == 200
    assert checked_in.get_json()["totalHours"] is None
    assert again.get_json()["id"] == checked_in.get_json()["id"]
    body = checked_out.get_json()
    assert body["notes"] == "Evening check-out"
    assert body["checkOutTime"] is not None
    assert body["totalHours"].count(":") == 2


def test_check_out_without_check_in_is_404(client, container):
    employee_id = add_employee(container, "ada@x.com", add_department(container, "Engineering"))

    response = client.post("/api/attendance/check-out", json={"employeeId": employee_id})

    assert response.status_code == 404
    assert response.get_json() == {"message": "No check-in found for today"}


def test_check_in_unknown_employee_is_400(client):
    assert client.post("/api/attendance/check-in", json={"employeeId": 77}).status_code == 400


def test_today_without_record_is_404(client):
    assert client.get("/api/attendance/employee/1/today").status_code == 404


def test_bad_date_filter_is_400(client):
    assert client.get("/api/attendance?startDate=yesterday").status_code == 400


def test_employee_history_endpoint(client, container):
    employee_id = add_employee(container, "ada@x.com", add_department(container, "Engineering"))
    client.post("/api/attendance/check-in", json={"employeeId": employee_id})

    rows = client.get(f"/api/attendance/employee/{employee_id}").get_json()

    assert len(rows) == 1
    assert rows[0]["employeeName"] == "Ada Lovelace"
