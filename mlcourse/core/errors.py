"""JSON envelope errors: {success: false, message, data}."""
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class ApiError(Exception):
    """Raised by dependencies that must abort a request with an envelope."""

    def __init__(self, status_code: int, message: str, data: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.data = data


def envelope(status_code: int, success: bool, message: str, data: Any = None, include_data: bool = True) -> JSONResponse:
    content: dict[str, Any] = {"success": success, "message": message}
    if include_data:
        content["data"] = data
    return JSONResponse(status_code=status_code, content=content)


def error_details(exc: BaseException) -> dict[str, str]:
    """Raw error payload echoed on 500 responses."""
    return {"name": type(exc).__name__, "message": str(exc)}


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return envelope(exc.status_code, False, exc.message, exc.data, include_data=exc.data is not None)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [{"loc": list(e.get("loc", ())), "msg": e.get("msg", "")} for e in exc.errors()]
    return envelope(400, False, "Invalid request body.", errors)
