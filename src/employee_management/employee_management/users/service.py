from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_email, require_max_length, require_min_length, require_non_empty
from ..core.constants import (
    DEFAULT_JWT_EXPIRY_MINUTES,
    EMAIL_MAX_LENGTH,
    JWT_ALGORITHM,
    JWT_LEEWAY_SECONDS,
    MIN_PASSWORD_LENGTH,
    NAME_MAX_LENGTH,
)
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ConflictError, ValidationError
from .model import AuthResult, TokenClaims
from .repository import UserRepository

logger = logging.getLogger(__name__)


def parse_role(value: Optional[str]) -> Role:
    if value is None or not str(value).strip():
        return Role.EMPLOYEE
    text = str(value).strip()
    for role in Role:
        if role.value.lower() == text.lower():
            return role
    allowed = ", ".join(r.value for r in Role)
    raise ValidationError(f"Role must be one of: {allowed}")


class AuthService:
    """Use case: register and log in users, issue and verify bearer tokens."""

    def __init__(
        self,
        users: UserRepository,
        *,
        secret_key: str,
        issuer: str,
        audience: str,
        expiry_minutes: int = DEFAULT_JWT_EXPIRY_MINUTES,
    ):
        self._users = users
        self._secret_key = secret_key
        self._issuer = issuer
        self._audience = audience
        self._expiry = timedelta(minutes=int(expiry_minutes))

    def login(self, username: str, password: str, *, now: datetime | None = None) -> AuthResult:
        username = require_non_empty(username, "Username")
        require_non_empty(password, "Password")

        user = self._users.get_by_username(username)
        if not user or not user.is_active:
            raise AuthenticationError("Invalid username or password")

        try:
            ok = check_password_hash(user.password_hash, password)
        except ValueError:
            # e.g. placeholder or corrupted hashes
            ok = False
        if not ok:
            raise AuthenticationError("Invalid username or password")

        self._users.touch_last_login(user.user_id, at=now or datetime.now())
        return self.issue_token(username=user.username, email=user.email, role=user.role)

    def register(
        self,
        *,
        username: str,
        email: str,
        password: str,
        role: Optional[str] = None,
        now: datetime | None = None,
    ) -> AuthResult:
        username = require_non_empty(username, "Username")
        require_max_length(username, "Username", NAME_MAX_LENGTH)
        email = require_email(email)
        require_max_length(email, "Email", EMAIL_MAX_LENGTH)
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)
        parsed_role = parse_role(role)

        if self._users.username_or_email_exists(username, email):
            raise ConflictError("Username or email already exists")

        self._users.create_user(
            username=username,
            email=email,
            password_hash=generate_password_hash(password),
            role=parsed_role,
            created_at=now or datetime.now(),
        )
        logger.info("Registered user %s with role %s", username, parsed_role.value)
        return self.issue_token(username=username, email=email, role=parsed_role)

    def issue_token(self, *, username: str, email: str, role: Role) -> AuthResult:
        expires_at = datetime.now(timezone.utc) + self._expiry
        payload = {
            "sub": username,
            "email": email,
            "role": role.value,
            "iss": self._issuer,
            "aud": self._audience,
            "exp": expires_at,
        }
        token = jwt.encode(payload, self._secret_key, algorithm=JWT_ALGORITHM)
        return AuthResult(token=token, username=username, email=email, role=role, expires_at=expires_at)

    def decode_token(self, token: str) -> TokenClaims:
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[JWT_ALGORITHM],
                audience=self._audience,
                issuer=self._issuer,
                leeway=JWT_LEEWAY_SECONDS,
            )
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("Token expired")
        except jwt.InvalidTokenError:
            raise AuthenticationError("Invalid token")

        try:
            return TokenClaims(username=payload["sub"], email=payload.get("email", ""), role=Role(payload["role"]))
        except (KeyError, ValueError):
            raise AuthenticationError("Invalid token")
