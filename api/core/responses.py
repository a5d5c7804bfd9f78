"""
Uniform JSON envelope for every endpoint.

Success: {"success": true, "data": ..., "message": "..."}
Failure: {"success": false, "error": "...", "message": "..."}

`message` is dropped when not given; `data` and `error` never appear together.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


def success_response(data: Any, message: str | None = None) -> dict[str, Any]:
    body: dict[str, Any] = {"success": True, "data": data}
    if message is not None:
        body["message"] = message
    return body


def error_response(error: str, message: str | None = None) -> dict[str, Any]:
    body: dict[str, Any] = {"success": False, "error": error}
    if message is not None:
        body["message"] = message
    return body


class ApiResponse(BaseModel, Generic[T]):
    """
    OpenAPI shape of the envelope (documentation only).
    """

    success: bool
    data: T | None = None
    error: str | None = None
    message: str | None = None
