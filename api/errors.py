"""
Rendering of application errors as JSON responses
"""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.exceptions import AppException, ValidationError
from schemas.common import ErrorResponse
import logging

logger = logging.getLogger(__name__)


def error_response(
    exc: AppException,
    status_code: Optional[int] = None,
    message: Optional[str] = None,
    detail: Optional[str] = None
) -> JSONResponse:
    """
    Turn an application exception into its JSON response.

    Only the message reaches the client; context and the cause stay in logs.
    Routes may override the status or message where their contract differs
    from the taxonomy default.
    """
    body = ErrorResponse(error=message or exc.message, detail=detail)
    return JSONResponse(
        status_code=status_code or exc.status_code,
        content=body.model_dump(mode="json")
    )


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(p) for p in error.get("loc", ()) if p != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(parts)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    request_id = getattr(request.state, "request_id", "-")
    if exc.status_code >= 500:
        logger.error(f"[{request_id}] {request.method} {request.url.path} failed: {exc}")
    else:
        logger.info(f"[{request_id}] {request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return error_response(exc)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = ValidationError("Invalid request", context={"errors": exc.errors()})
    return error_response(error, detail=_describe_validation_errors(exc))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    request_id = getattr(request.state, "request_id", "-")
    logger.exception(f"[{request_id}] Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error="Internal server error").model_dump(mode="json")
    )


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
