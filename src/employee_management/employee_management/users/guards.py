"""Bearer-token guards for Flask views."""
from __future__ import annotations

from functools import wraps

from flask import g, request

from ..common.http import error_response
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, DomainError
from .model import TokenClaims
from .service import AuthService


def _bearer_token() -> str:
    header = request.headers.get("Authorization", "")
    if not header.startswith("Bearer "):
        raise AuthenticationError("Authentication required")
    token = header.split(" ", 1)[1].strip()
    if not token:
        raise AuthenticationError("Authentication required")
    return token


def roles_required(auth_service: AuthService, *roles: Role):
    """Require a valid token; when roles are given the token's role must be one of them."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                claims: TokenClaims = auth_service.decode_token(_bearer_token())
                if roles and claims.role not in roles:
                    raise AuthorizationError("You do not have permission to perform this action")
            except DomainError as e:
                return error_response(e)
            g.current_user = claims
            return view(*args, **kwargs)

        return wrapper

    return decorator


def token_required(auth_service: AuthService):
    return roles_required(auth_service)
