"""
Custom Exceptions

Every error a Primer service raises on purpose. The error handler turns
them into the JSON envelope

    {"error": {"code": "NOT_FOUND", "message": "Note with id '…' not found", "details": {}}}

with the exception's status code and headers.

Exception Hierarchy:
====================
    PrimerException (500 INTERNAL_ERROR)
       ├── AuthenticationError      401  bad credentials or token, sends WWW-Authenticate
       ├── AuthorizationError       403  inactive account
       ├── NotFoundError            404  user / item / note / reference entry
       ├── ValidationError          400  business rule broken (price range, upload type)
       ├── ConflictError            409
       │      └── DuplicateResourceError  email already registered
       ├── PayloadTooLargeError     413  note upload over MAX_UPLOAD_BYTES
       └── ServiceUnavailableError  503  database unreachable on /ready
"""

from typing import Any, Optional


class PrimerException(Exception):
    """
    Base exception for all Primer application errors.

    Subclasses set ``status_code`` and ``error_code`` as class attributes;
    both can still be overridden per instance.
    """

    status_code: int = 500
    error_code: str = "INTERNAL_ERROR"
    default_message: str = "Internal server error"

    def __init__(
        self,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        if error_code is not None:
            self.error_code = error_code
        self.details = details or {}
        self.headers = headers
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }


# ═══════════════════════════════════════════════════════════════════════════════
# AUTH (401, 403)
# ═══════════════════════════════════════════════════════════════════════════════


class AuthenticationError(PrimerException):
    """Missing, malformed or expired bearer token, or wrong password."""

    status_code = 401
    error_code = "AUTHENTICATION_ERROR"
    default_message = "Authentication failed"

    def __init__(self, message: Optional[str] = None, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message, details=details, headers={"WWW-Authenticate": "Bearer"})


class AuthorizationError(PrimerException):
    status_code = 403
    error_code = "AUTHORIZATION_ERROR"
    default_message = "Access denied"


# ═══════════════════════════════════════════════════════════════════════════════
# LOOKUPS (404)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(PrimerException):
    """
    Missing resource. Resources owned by another user are reported the
    same way, so ids of other users' notes and items never leak.

    Example:
        raise NotFoundError("Note", note_id)  # "Note with id '…' not found"
    """

    status_code = 404
    error_code = "NOT_FOUND"

    def __init__(
        self,
        resource: str,
        resource_id: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        if resource_id:
            message = f"{resource} with id '{resource_id}' not found"
        else:
            message = f"{resource} not found"
        super().__init__(message, details=details)


class UserNotFoundError(NotFoundError):
    def __init__(self, user_id: str) -> None:
        super().__init__("User", user_id)


class ItemNotFoundError(NotFoundError):
    def __init__(self, item_id: str) -> None:
        super().__init__("Item", item_id)


class NoteNotFoundError(NotFoundError):
    def __init__(self, note_id: str) -> None:
        super().__init__("Note", note_id)


class ReferenceNotFoundError(NotFoundError):
    """HTTP method or status code missing from the reference catalogs."""

    def __init__(self, kind: str, key: str) -> None:
        super().__init__(kind, key)


# ═══════════════════════════════════════════════════════════════════════════════
# REQUEST PROBLEMS (400, 409, 413)
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(PrimerException):
    """Input that parses but breaks a rule, e.g. min_price > max_price."""

    status_code = 400
    error_code = "VALIDATION_ERROR"
    default_message = "Validation failed"

    def __init__(self, message: Optional[str] = None, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message, details=details)


class ConflictError(PrimerException):
    status_code = 409
    error_code = "CONFLICT"
    default_message = "Resource conflict"

    def __init__(self, message: Optional[str] = None, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message, details=details)


class DuplicateResourceError(ConflictError):
    default_message = "Resource already exists"


class PayloadTooLargeError(PrimerException):
    """Note upload larger than MAX_UPLOAD_BYTES."""

    status_code = 413
    error_code = "PAYLOAD_TOO_LARGE"

    def __init__(self, limit_bytes: int, message: Optional[str] = None) -> None:
        super().__init__(
            message or f"Upload exceeds the {limit_bytes} byte limit",
            details={"limit_bytes": limit_bytes},
        )


# ═══════════════════════════════════════════════════════════════════════════════
# DEPENDENCIES (503)
# ═══════════════════════════════════════════════════════════════════════════════


class ServiceUnavailableError(PrimerException):
    status_code = 503
    error_code = "SERVICE_UNAVAILABLE"
    default_message = "Service temporarily unavailable"

    def __init__(self, message: Optional[str] = None, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message, details=details)
