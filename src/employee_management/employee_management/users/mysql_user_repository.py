from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..core.enums import Role
from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, duplicate_key_as, fetchone
from .model import User
from .repository import UserRepository


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_username(self, username: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_id, username, email, password_hash, role, is_active, created_at, last_login_at
                FROM users
                WHERE username=%s
                """,
                (username,),
            )
            row = fetchone(cur)
            if not row:
                return None
            return User(
                user_id=int(row["user_id"]),
                username=row["username"],
                email=row["email"],
                password_hash=row["password_hash"],
                role=Role(row["role"]),
                is_active=bool(row.get("is_active", True)),
                created_at=row.get("created_at"),
                last_login_at=row.get("last_login_at"),
            )

    def username_or_email_exists(self, username: str, email: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT 1 AS found FROM users WHERE username=%s OR email=%s LIMIT 1",
                (username, email),
            )
            return fetchone(cur) is not None

    def create_user(
        self,
        *,
        username: str,
        email: str,
        password_hash: str,
        role: Role,
        created_at: datetime,
    ) -> int:
        with duplicate_key_as(lambda: ConflictError("Username or email already exists")), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO users(username, email, password_hash, role, is_active, created_at)
                VALUES(%s,%s,%s,%s,1,%s)
                """,
                (username, email, password_hash, role.value, created_at),
            )
            return int(cur.lastrowid)

    def touch_last_login(self, user_id: int, *, at: datetime) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE users SET last_login_at=%s WHERE user_id=%s", (at, int(user_id)))
