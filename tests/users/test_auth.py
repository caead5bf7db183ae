from __future__ import annotations

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from src.employee_management.employee_management.core.enums import Role
from src.employee_management.employee_management.core.exceptions import (
    AuthenticationError,
    ConflictError,
    ValidationError,
)
from src.employee_management.employee_management.users.service import AuthService
from tests.builders import FIXED_NOW
from tests.fakes import InMemoryUsers, Store

SECRET = "another-secret-key-with-at-least-32-bytes"


@pytest.fixture
def auth() -> AuthService:
    return AuthService(InMemoryUsers(Store()), secret_key=SECRET, issuer="EMS.API", audience="EMS.Client")


def test_register_defaults_to_employee_role(auth):
    result = auth.register(username="ada", email="ada@x.com", password="secret1", now=FIXED_NOW)

    assert result.role == Role.EMPLOYEE
    assert auth.decode_token(result.token).username == "ada"


def test_register_accepts_role_case_insensitively(auth):
    assert auth.register(username="h", email="h@x.com", password="secret1", role="hr").role == Role.HR


def test_register_rejects_unknown_role(auth):
    with pytest.raises(ValidationError):
        auth.register(username="h", email="h@x.com", password="secret1", role="Owner")


def test_register_rejects_short_password(auth):
    with pytest.raises(ValidationError):
        auth.register(username="ada", email="ada@x.com", password="12345")


def test_register_duplicate_username_or_email(auth):
    auth.register(username="ada", email="ada@x.com", password="secret1")

    with pytest.raises(ConflictError):
        auth.register(username="ada", email="other@x.com", password="secret1")
    with pytest.raises(ConflictError):
        auth.register(username="other", email="ada@x.com", password="secret1")


def test_login_checks_password(auth):
    auth.register(username="ada", email="ada@x.com", password="secret1", role="Admin")

    result = auth.login("ada", "secret1", now=FIXED_NOW)

    assert result.role == Role.ADMIN
    with pytest.raises(AuthenticationError, match="Invalid username or password"):
        auth.login("ada", "wrong-one")
    with pytest.raises(AuthenticationError, match="Invalid username or password"):
        auth.login("nobody", "secret1")


def test_token_claims_carry_issuer_and_audience(auth):
    result = auth.issue_token(username="ada", email="ada@x.com", role=Role.MANAGER)

    payload = jwt.decode(result.token, SECRET, algorithms=["HS256"], audience="EMS.Client", issuer="EMS.API")

    assert payload["sub"] == "ada"
    assert payload["role"] == "Manager"
    assert result.expires_at > datetime.now(timezone.utc)


def test_expired_token_is_rejected(auth):
    token = jwt.encode(
        {
            "sub": "ada",
            "role": "Admin",
            "iss": "EMS.API",
            "aud": "EMS.Client",
            "exp": datetime.now(timezone.utc) - timedelta(hours=1),
        },
        SECRET,
        algorithm="HS256",
    )

    with pytest.raises(AuthenticationError, match="Token expired"):
        auth.decode_token(token)


def test_token_for_other_audience_is_rejected(auth):
    other = AuthService(InMemoryUsers(Store()), secret_key=SECRET, issuer="EMS.API", audience="Someone.Else")

    with pytest.raises(AuthenticationError):
        auth.decode_token(other.issue_token(username="ada", email="", role=Role.ADMIN).token)


def test_login_and_register_endpoints(client):
    registered = client.post(
        "/api/auth/register", json={"username": "ada", "email": "ada@x.com", "password": "secret1", "role": "HR"}
    )
    logged_in = client.post("/api/auth/login", json={"username": "ada", "password": "secret1"})
    refused = client.post("/api/auth/login", json={"username": "ada", "password": "nope"})

    assert registered.status_code == 200
    assert set(logged_in.get_json()) == {"token", "username", "email", "role", "expiresAt"}
    assert logged_in.get_json()["role"] == "HR"
    assert refused.status_code == 401


def test_garbage_bearer_token_is_401(client):
    response = client.post("/api/departments", json={"name": "x"}, headers={"Authorization": "Bearer nonsense"})

    assert response.status_code == 401
