"""Helpers shared by the JSON controllers."""
from __future__ import annotations

import logging
from datetime import date, datetime
from functools import wraps

from flask import jsonify, request, session

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    DomainError,
    MemberNotFound,
    NotificationError,
    PaymentGatewayError,
    SignatureMismatch,
    StaffNotFound,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (SignatureMismatch, 400),
    (MemberNotFound, 404),
    (StaffNotFound, 404),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (PaymentGatewayError, 502),
    (NotificationError, 502),
    (ConfigurationError, 503),
)


def error_response(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return error_response("Authentication required", 401)
        return view(*args, **kwargs)

    return wrapper


def api_errors(view):
    """Translate domain errors into JSON responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except DomainError as e:
            for error_type, status in _STATUS_BY_ERROR:
                if isinstance(e, error_type):
                    return error_response(str(e), status)
            return error_response(str(e), 400)
        except Exception:
            logger.exception("Unhandled error in %s %s", request.method, request.path)
            return error_response("Server error", 500)

    return wrapper


def json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def parse_date(value, field_name: str, *, default: date | None = None) -> date:
    if value in (None, ""):
        if default is not None:
            return default
        raise ValidationError(f"{field_name} is required")
    try:
        return datetime.strptime(str(value), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date")


def parse_int(value, field_name: str) -> int:
    if value in (None, ""):
        raise ValidationError(f"{field_name} is required")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")


def parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in {"1", "true", "yes", "on"}
