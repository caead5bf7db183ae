from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Login identity; not linked to Employee records."""

    user_id: int
    username: str
    email: str
    password_hash: str
    role: Role
    is_active: bool = True
    created_at: Optional[datetime] = None
    last_login_at: Optional[datetime] = None


@dataclass(frozen=True)
class AuthResult:
    """Issued bearer token plus the identity it was issued for."""

    token: str
    username: str
    email: str
    role: Role
    expires_at: datetime


@dataclass(frozen=True)
class TokenClaims:
    username: str
    email: str
    role: Role
