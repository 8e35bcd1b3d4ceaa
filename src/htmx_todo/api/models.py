"""JSON bodies for error responses.

Successful todo requests answer with HTML fragments; only failures use JSON.
"""

from __future__ import annotations

from typing import Any, Literal

from fastapi.responses import JSONResponse
from pydantic import BaseModel


class ApiError(BaseModel):
    code: str
    message: str
    details: Any | None = None


class ApiErrorResponse(BaseModel):
    ok: Literal[False] = False
    error: ApiError


def error_response(
    status_code: int, *, code: str, message: str, details: Any | None = None
) -> JSONResponse:
    body = ApiErrorResponse(error=ApiError(code=code, message=message, details=details))
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))
