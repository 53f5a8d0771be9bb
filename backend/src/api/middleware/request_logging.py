"""
Request Logging Middleware

Logs one line per HTTP request and tags every log line emitted while the
request is handled with the same request id.

Headers:
========
    X-Request-ID     Reused from the request when present, otherwise a new UUID4
    X-Process-Time   Handling time in milliseconds

Health checks are logged at debug level so they don't drown the access log.
"""

import time
import uuid

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from src.shared.core.logging import clear_log_context, get_logger, log_context


logger = get_logger("http")

REQUEST_ID_HEADER = "X-Request-ID"
PROCESS_TIME_HEADER = "X-Process-Time"

QUIET_PATHS = {"/health", "/ready", "/live"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Access logging with request ids and timing."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        log_context(request_id=request_id, method=request.method, path=request.url.path)

        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("Request crashed")
            clear_log_context()
            raise

        elapsed_ms = (time.perf_counter() - start) * 1000
        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers[PROCESS_TIME_HEADER] = f"{elapsed_ms:.2f}"

        log = logger.debug if request.url.path in QUIET_PATHS else logger.info
        log(
            "Request completed",
            status_code=response.status_code,
            duration_ms=round(elapsed_ms, 2),
        )
        clear_log_context()
        return response
