"""Application errors and their JSON representation.

Plugin cores raise their own exception types; the API layer translates
them into :class:`AppError` instances so every failure leaves the server
as the same ``{"code", "message", "details"?}`` object.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping

from werkzeug.exceptions import HTTPException

Details = Mapping[str, Any] | list[Any] | None


@dataclass(slots=True)
class AppError(Exception):
    message: str
    code: str = "error"
    status_code: int = 400
    details: Details = None

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"code": self.code, "message": self.message}
        # Empty details are omitted rather than sent as {}.
        if self.details:
            payload["details"] = self.details
        return payload


@dataclass(slots=True)
class ValidationAppError(AppError):
    """Malformed request body or out-of-range argument (400)."""

    code: str = "validation_error"
    status_code: int = 400


@dataclass(slots=True)
class UnprocessableAppError(AppError):
    """Well-formed input the computation cannot accept, such as a zero divisor (422)."""

    code: str = "unprocessable"
    status_code: int = 422


@dataclass(slots=True)
class NotFoundAppError(AppError):
    code: str = "not_found"
    status_code: int = 404


@dataclass(slots=True)
class InternalAppError(AppError):
    code: str = "internal_error"
    status_code: int = 500


def from_http_exception(error: HTTPException) -> AppError:
    """Wrap a werkzeug routing or protocol error as ``http.<status>``."""

    status = error.code or 500
    return AppError(
        message=error.description or error.name,
        code=f"http.{status}",
        status_code=status,
    )


def ensure_app_error(error: BaseException, *, fallback_code: str) -> AppError:
    """Return ``error`` unchanged if it is an :class:`AppError`, else a generic 500."""

    if isinstance(error, AppError):
        return error
    # Unexpected exceptions never leak their text to clients.
    return InternalAppError(code=fallback_code, message="Internal server error")


__all__ = [
    "AppError",
    "ValidationAppError",
    "UnprocessableAppError",
    "NotFoundAppError",
    "InternalAppError",
    "from_http_exception",
    "ensure_app_error",
]
