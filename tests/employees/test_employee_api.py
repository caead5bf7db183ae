from __future__ import annotations

from tests.builders import add_department, add_employee


def _payload(email: str, department_id: int, **overrides) -> dict:
    payload = {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": email,
        "dateOfJoining": "2023-06-01",
        "salary": 72000.5,
        "departmentId": department_id,
        "position": "Engineer",
    }
    payload.update(overrides)
    return payload


def test_create_returns_created_employee(client, container):
    department_id = add_department(container, "Engineering")

    response = client.post("/api/employees", json=_payload("ada@x.com", department_id))

    body = response.get_json()
    assert response.status_code == 201
    assert body["departmentName"] == "Engineering"
    assert body["salary"] == 72000.5
    assert body["isActive"] is True
    assert response.headers["Location"].endswith(f"/api/employees/{body['id']}")


def test_create_duplicate_email_is_conflict(client, container):
    department_id = add_department(container, "Engineering")
    add_employee(container, "ada@x.com", department_id)

    response = client.post("/api/employees", json=_payload("ada@x.com", department_id))

    assert response.status_code == 409


def test_create_with_unknown_department_is_bad_request(client):
    response = client.post("/api/employees", json=_payload("ada@x.com", 5))

    assert response.status_code == 400
    assert response.get_json() == {"message": "Department with ID 5 does not exist"}


def test_delete_then_get_is_not_found(client, container):
    department_id = add_department(container, "Engineering")
    employee_id = add_employee(container, "ada@x.com", department_id)

    assert client.delete(f"/api/employees/{employee_id}").status_code == 204
    assert client.get(f"/api/employees/{employee_id}").status_code == 404


def test_update_with_is_active_false(client, container):
    department_id = add_department(container, "Engineering")
    employee_id = add_employee(container, "ada@x.com", department_id)

    response = client.put(f"/api/employees/{employee_id}", json=_payload("ada@x.com", department_id, isActive=False))

    assert response.status_code == 200
    assert response.get_json()["status"] == "Deactivated"
    assert client.get("/api/employees").get_json() == []


def test_paged_shape(client, container):
    department_id = add_department(container, "Engineering")
    for n in range(3):
        add_employee(container, f"e{n}@x.com", department_id, first_name=f"Emp{n}")

    response = client.get("/api/employees/paged?pageNumber=2&pageSize=2&sortBy=firstName")

    body = response.get_json()
    assert [e["firstName"] for e in body["items"]] == ["Emp2"]
    assert body["totalCount"] == 3
    assert body["totalPages"] == 2
    assert body["hasPreviousPage"] is True
    assert body["hasNextPage"] is False


def test_department_paged_only_lists_that_department(client, container):
    engineering = add_department(container, "Engineering")
    sales = add_department(container, "Sales")
    add_employee(container, "a@x.com", engineering)
    add_employee(container, "b@x.com", sales)

    body = client.get(f"/api/employees/department/{sales}/paged").get_json()

    assert [e["email"] for e in body["items"]] == ["b@x.com"]


def test_bulk_create_conflict_writes_nothing(client, container):
    department_id = add_department(container, "Engineering")
    add_employee(container, "taken@x.com", department_id)

    response = client.post(
        "/api/employees/bulk",
        json=[_payload("new@x.com", department_id), _payload("taken@x.com", department_id)],
    )

    assert response.status_code == 409
    assert [e["email"] for e in client.get("/api/employees").get_json()] == ["taken@x.com"]


def test_bulk_create_and_delete(client, container):
    department_id = add_department(container, "Engineering")

    created = client.post(
        "/api/employees/bulk", json=[_payload("a@x.com", department_id), _payload("b@x.com", department_id)]
    )
    ids = [e["id"] for e in created.get_json()]

    assert created.status_code == 200
    assert client.delete("/api/employees/bulk", json=ids).status_code == 204
    assert client.get("/api/employees").get_json() == []


def test_bulk_delete_unknown_ids_is_not_found(client):
    assert client.delete("/api/employees/bulk", json=[41, 42]).status_code == 404


def test_bulk_body_must_be_a_list(client):
    assert client.post("/api/employees/bulk", json={"email": "a@x.com"}).status_code == 400
