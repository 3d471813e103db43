"""Render rejected inflection calls as JSON error bodies."""
from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from declension.core.logging import api_logger, current_correlation_id
from declension.core.middleware import CORRELATION_HEADER

from .exceptions import AppErrorException
from .types import AppError, ErrorCode

log = api_logger()


def error_response(error: AppError, request: Request) -> JSONResponse:
    status = error.code.http_status
    emit = log.warning if status < 500 else log.error
    emit("inflection_rejected", code=error.code.name, origin=error.origin, detail=error.message)
    correlation_id = current_correlation_id() or request.headers.get(CORRELATION_HEADER)
    return JSONResponse(status_code=status, content=error.to_dict(correlation_id))


async def declension_error_handler(request: Request, exc: AppErrorException) -> JSONResponse:
    return error_response(exc.error, request)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Schema failures (missing case, unknown policy) as E2000 with the offending fields."""
    fields = [
        {"loc": list(e.get("loc", ())), "msg": e.get("msg", ""), "type": e.get("type", "")}
        for e in exc.errors()
    ]
    error = AppError(
        code=ErrorCode.E2000_VALIDATION_GENERIC,
        message="Request body does not describe an inflection call",
        origin="request",
        metadata={"details": fields},
    )
    return error_response(error, request)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppErrorException, declension_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
