"""Application error taxonomy and the single normalization point for display messages.

Every data-access collaborator raises the most specific AppError subclass it can.
Callers never branch on raw backend error shapes; they use is_app_error /
is_rate_limit_error or the string returned by handle_error.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from enum import StrEnum
from typing import Any

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"
DEFAULT_NETWORK_MESSAGE = "Network error. Please check your connection."

# Auth error codes returned by the hosted backend, translated for display.
BACKEND_ERROR_MESSAGES: dict[str, str] = {
    "invalid_credentials": "Invalid email or password",
    "email_not_confirmed": "Please verify your email address",
    "user_not_found": "No account found with this email",
}


class ErrorKind(StrEnum):
    """Closed set of failure categories. Capability checks match on this tag."""

    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    VALIDATION = "validation"
    NETWORK = "network"
    UNCLASSIFIED = "unclassified"


class AppError(Exception):
    """Base application error: human message, machine code, HTTP-style status."""

    kind: ErrorKind = ErrorKind.UNCLASSIFIED
    _READ_ONLY = frozenset({"message", "code", "status_code", "kind", "remaining_time", "field"})

    def __init__(self, message: str, code: str, status_code: int = 500):
        super().__init__(message)
        object.__setattr__(self, "message", message)
        object.__setattr__(self, "code", code)
        object.__setattr__(self, "status_code", status_code)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self._READ_ONLY:
            raise AttributeError(f"{type(self).__name__}.{name} is read-only")
        super().__setattr__(name, value)

    def _init_args(self) -> tuple:
        return (self.message, self.code, self.status_code)

    def __reduce__(self):
        # Taxonomy fields come back through __init__; setstate carries the rest (__notes__ etc).
        state = {k: v for k, v in self.__dict__.items() if k not in self._READ_ONLY}
        return (type(self), self._init_args(), state or None)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, code={self.code!r}, status_code={self.status_code})"


class AuthError(AppError):
    kind = ErrorKind.AUTH

    def __init__(self, message: str):
        super().__init__(message, "AUTH_ERROR", 401)

    def _init_args(self) -> tuple:
        return (self.message,)


class RateLimitError(AppError):
    """Account or client locked out; remaining_time is minutes until retry is allowed."""

    kind = ErrorKind.RATE_LIMIT

    def __init__(self, remaining_time: int):
        super().__init__(
            f"Account locked. Try again in {remaining_time} minutes.",
            "RATE_LIMIT",
            429,
        )
        object.__setattr__(self, "remaining_time", remaining_time)

    def _init_args(self) -> tuple:
        return (self.remaining_time,)


class ValidationError(AppError):
    kind = ErrorKind.VALIDATION

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message, "VALIDATION_ERROR", 400)
        object.__setattr__(self, "field", field)

    def _init_args(self) -> tuple:
        return (self.message, self.field)


class NetworkError(AppError):
    kind = ErrorKind.NETWORK

    def __init__(self, message: str = DEFAULT_NETWORK_MESSAGE):
        super().__init__(message, "NETWORK_ERROR", 503)

    def _init_args(self) -> tuple:
        return (self.message,)


def is_app_error(error: Any) -> bool:
    return isinstance(error, AppError)


def is_rate_limit_error(error: Any) -> bool:
    return is_app_error(error) and error.kind == ErrorKind.RATE_LIMIT


def _field_of(error: Any, name: str) -> Any:
    if isinstance(error, Mapping):
        return error.get(name)
    if isinstance(error, (str, bytes)):
        return None
    return getattr(error, name, None)


def _backend_code(error: Any) -> str | None:
    try:
        code = _field_of(error, "code")
    except Exception:
        return None
    return code if isinstance(code, str) else None


def _message_of(error: Any) -> str:
    """Own message of an error-shaped value (exception, mapping or object), '' if none."""
    try:
        message = _field_of(error, "message")
        if isinstance(message, str) and message:
            return message
        if isinstance(error, BaseException):
            return str(error)
    except Exception:
        return ""
    return ""


def handle_error(error: Any) -> str:
    """Turn any failure value into a non-empty, user-facing message. Never raises."""
    if is_app_error(error):
        return error.message or UNEXPECTED_ERROR_MESSAGE

    code = _backend_code(error)
    if code is not None and code in BACKEND_ERROR_MESSAGES:
        return BACKEND_ERROR_MESSAGES[code]

    message = _message_of(error)
    if message:
        return message

    if isinstance(error, str) and error:
        return error

    return UNEXPECTED_ERROR_MESSAGE


def error_from_status(
    status_code: int,
    message: str,
    *,
    retry_after: float | None = None,
    field: str | None = None,
) -> AppError:
    """Most specific AppError for a backend HTTP status."""
    if status_code in (401, 403):
        return AuthError(message)
    if status_code == 429:
        minutes = max(1, math.ceil((retry_after or 60) / 60))
        return RateLimitError(minutes)
    if status_code in (400, 422):
        return ValidationError(message, field)
    return AppError(message, "BACKEND_ERROR", status_code)
