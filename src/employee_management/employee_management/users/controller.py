from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import error_response, internal_error_response, json_body
from ..container import Container
from ..core.exceptions import DomainError
from .model import AuthResult


def _auth_json(result: AuthResult) -> dict:
    return {
        "token": result.token,
        "username": result.username,
        "email": result.email,
        "role": result.role.value,
        "expiresAt": result.expires_at.isoformat(),
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/login", methods=["POST"], endpoint="auth_login")
    def login():
        try:
            data = json_body()
            result = container.auth_service.login(data.get("username") or "", data.get("password") or "")
            return jsonify(_auth_json(result))
        except DomainError as e:
            return error_response(e)
        except Exception:
            app.logger.exception("Error during login")
            return internal_error_response()

    @app.route("/api/auth/register", methods=["POST"], endpoint="auth_register")
    def register_user():
        try:
            data = json_body()
            result = container.auth_service.register(
                username=data.get("username") or "",
                email=data.get("email") or "",
                password=data.get("password") or "",
                role=data.get("role"),
            )
            return jsonify(_auth_json(result))
        except DomainError as e:
            return error_response(e)
        except Exception:
            app.logger.exception("Error during registration")
            return internal_error_response()
