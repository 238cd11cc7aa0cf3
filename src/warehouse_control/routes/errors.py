"""Translation of service and validation errors into HTTP responses."""

from __future__ import annotations

from typing import Any, Dict, Sequence

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

from warehouse_control.errors import NotFoundError, WarehouseError

REQUIRED_ERROR_TYPES = {"missing", "string_too_short"}
INVALID_ITEM_ID = "invalid item id or it was not provided"


def field_label(name: Any) -> str:
    """``user_id`` -> ``UserId``."""
    return "".join(part.capitalize() for part in str(name).split("_"))


def describe_validation_error(errors: Sequence[Dict[str, Any]]) -> str:
    if not errors:
        return "invalid request"

    error = errors[0]
    loc = tuple(error.get("loc", ()))
    error_type = error.get("type", "")

    if error_type == "json_invalid":
        return str(error.get("ctx", {}).get("error", error.get("msg", "invalid JSON")))
    if loc and loc[0] == "path":
        return INVALID_ITEM_ID
    if len(loc) < 2:
        return f"invalid request body: {error.get('msg', '')}"

    label = field_label(loc[-1])
    if error_type in REQUIRED_ERROR_TYPES:
        return f"{label} is required"
    return f"{label} is not valid: {error.get('msg', '')}"


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = describe_validation_error(exc.errors())
    logger.error("{} {} bad request: {}", request.method, request.url.path, message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": message})


def http_error(exc: WarehouseError) -> HTTPException:
    """Log a failed service call and build the response for it."""
    logger.error(str(exc))
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))


__all__ = ["describe_validation_error", "validation_exception_handler", "http_error", "INVALID_ITEM_ID"]
