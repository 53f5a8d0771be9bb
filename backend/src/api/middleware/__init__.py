"""
API Middleware

Custom middleware for the FastAPI application.

Components:
===========
- error_handler: Global exception handling
- request_logging: Access log, X-Request-ID and X-Process-Time headers

Usage:
======
    from src.api.middleware import setup_exception_handlers, RequestLoggingMiddleware

    app = FastAPI()
    setup_exception_handlers(app)
    app.add_middleware(RequestLoggingMiddleware)
"""

from src.api.middleware.error_handler import setup_exception_handlers
from src.api.middleware.request_logging import RequestLoggingMiddleware

__all__ = [
    "setup_exception_handlers",
    "RequestLoggingMiddleware",
]
