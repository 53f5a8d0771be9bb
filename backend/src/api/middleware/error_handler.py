"""
Error Handler Middleware

Maps every failure to the one error envelope clients parse:

    {"error": {"code": "...", "message": "...", "details": {...}}}

    PrimerException          its status_code, error_code and headers
    RequestValidationError   422, the body/query/path did not match the route
    pydantic ValidationError 400, a model built inside a service rejected its data
    anything else            500 INTERNAL_ERROR, logged with traceback, message hidden
"""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from src.shared.core.exceptions import PrimerException
from src.shared.core.logging import logger


def error_response(
    status_code: int,
    code: str,
    message: str,
    details: Any = None,
    headers: Any = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": {"code": code, "message": message, "details": jsonable_encoder(details or {})}},
        headers=headers,
    )


async def handle_primer_exception(request: Request, exc: PrimerException) -> JSONResponse:
    logger.warning(
        "Request failed",
        error_code=exc.error_code,
        status_code=exc.status_code,
        message=exc.message,
        path=request.url.path,
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=exc.headers)


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    logger.info("Request rejected by schema", errors=len(errors), path=request.url.path)
    return error_response(422, "VALIDATION_ERROR", "Request validation failed", {"errors": errors})


async def handle_model_validation(request: Request, exc: ValidationError) -> JSONResponse:
    errors = exc.errors()
    logger.warning("Model validation failed", errors=len(errors), path=request.url.path)
    return error_response(400, "VALIDATION_ERROR", "Validation failed", {"errors": errors})


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error",
        error_type=type(exc).__name__,
        error=str(exc),
        path=request.url.path,
        exc_info=True,
    )
    return error_response(500, "INTERNAL_ERROR", "An unexpected error occurred")


def setup_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PrimerException, handle_primer_exception)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(ValidationError, handle_model_validation)
    app.add_exception_handler(Exception, handle_unexpected)
