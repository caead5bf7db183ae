from __future__ import annotations

from dataclasses import replace

from src.employee_management.employee_management import create_app
from src.employee_management.employee_management.core.enums import Role


def test_seed_endpoints_are_admin_only(client, auth_headers):
    assert client.get("/api/seed/status").status_code == 401
    assert client.post("/api/seed/seed", headers=auth_headers(Role.HR)).status_code == 403


def test_seed_status_and_clear(client, auth_headers):
    headers = auth_headers(Role.ADMIN)

    seeded = client.post("/api/seed/seed", headers=headers)
    status = client.get("/api/seed/status", headers=headers).get_json()
    cleared = client.delete("/api/seed/clear", headers=headers)
    after = client.get("/api/seed/status", headers=headers).get_json()

    assert seeded.get_json()["message"] == "Database seeded successfully"
    assert status["departments"] == 10
    assert status["employees"] == 12
    assert status["users"] == 3
    assert cleared.get_json()["message"] == "Database cleared successfully"
    assert (after["departments"], after["employees"], after["attendances"], after["users"]) == (0, 0, 0, 0)


def test_reseed(client, auth_headers):
    response = client.post("/api/seed/reseed", headers=auth_headers())

    assert response.status_code == 200
    assert response.get_json()["message"] == "Database reseeded successfully"


def test_seed_failure_reports_error(container, auth_headers):
    class BrokenSeeds:
        def status(self):
            raise RuntimeError("connection refused")

    broken = replace(container, seed_service=type(container.seed_service)(BrokenSeeds()))
    client = create_app(container=broken, settings_module="config.testing").test_client()

    response = client.post("/api/seed/seed", headers=auth_headers())

    assert response.status_code == 500
    assert response.get_json() == {"message": "Error occurred during seeding", "error": "connection refused"}
