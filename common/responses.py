"""JSON envelopes: ``{"success": true, "data": ...}`` or ``{"success": false, "error": ...}``."""

from __future__ import annotations

from typing import Any, Mapping

from flask import Response, jsonify

from .errors import AppError


def _envelope(success: bool, key: str, body: Any, status: int) -> Response:
    response = jsonify({"success": success, key: body})
    response.status_code = status
    return response


def ok(data: Any, *, status: int = 200) -> Response:
    return _envelope(True, "data", data, status)


def fail(error: AppError | Mapping[str, Any], *, status: int | None = None) -> Response:
    """Failure envelope. An explicit ``status`` wins over the error's own code."""

    if isinstance(error, AppError):
        return _envelope(False, "error", error.to_dict(), status or error.status_code)
    return _envelope(False, "error", dict(error), status or 400)


__all__ = ["ok", "fail"]
