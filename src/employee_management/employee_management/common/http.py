"""Translate domain exceptions into JSON error responses.

Controllers catch `DomainError` and hand it to `error_response`; this module is
the only place status codes for the error taxonomy are chosen.
"""
from __future__ import annotations

from datetime import date
from typing import Any, Optional

from flask import jsonify, request

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    BusinessRuleError,
    ConflictError,
    DomainError,
    NotFoundError,
    ReportNotImplementedError,
    ValidationError,
)
from .datetime_utils import parse_optional_date

_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (ValidationError, 400),
    (BusinessRuleError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (ConflictError, 409),
    (ReportNotImplementedError, 500),
]


def status_for(error: DomainError) -> int:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status
    return 400


def error_response(error: DomainError):
    return jsonify({"message": str(error)}), status_for(error)


def internal_error_response():
    return jsonify({"message": "Internal server error"}), 500


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def json_list_body() -> list:
    data = request.get_json(silent=True)
    if not isinstance(data, list):
        raise ValidationError("Request body must be a JSON array")
    return data


def query_date(name: str) -> Optional[date]:
    return parse_optional_date(request.args.get(name), name)


def query_int(name: str, default: Optional[int] = None) -> Optional[int]:
    raw = request.args.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"{name} must be an integer")


def query_bool(name: str, default: bool = False) -> bool:
    raw = request.args.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def decimal_to_json(value: Any) -> Any:
    return float(value) if value is not None else None
