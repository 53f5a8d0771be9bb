"""
Reference Service

The API fundamentals reference: HTTP methods, status codes and a glossary.

The catalogs are static, so the service holds no session and every method
is a lookup. Status code phrases come from ``http.HTTPStatus``.

Status Categories:
==================
    1xx → informational
    2xx → success
    3xx → redirection
    4xx → client_error
    5xx → server_error
"""

from http import HTTPStatus
from typing import Optional

from src.shared.core.exceptions import ReferenceNotFoundError
from src.shared.models.enums import StatusCategory
from src.shared.schemas.reference import GlossaryTerm, HttpMethodInfo, StatusCodeInfo


# ═══════════════════════════════════════════════════════════════════════════════
# HTTP METHODS
# ═══════════════════════════════════════════════════════════════════════════════

HTTP_METHODS: tuple[HttpMethodInfo, ...] = (
    HttpMethodInfo(
        method="GET",
        safe=True,
        idempotent=True,
        has_request_body=False,
        description="Retrieve a representation of a resource or collection.",
    ),
    HttpMethodInfo(
        method="HEAD",
        safe=True,
        idempotent=True,
        has_request_body=False,
        description="Same as GET but only the status line and headers are returned.",
    ),
    HttpMethodInfo(
        method="POST",
        safe=False,
        idempotent=False,
        has_request_body=True,
        description="Create a new resource in a collection or trigger processing.",
    ),
    HttpMethodInfo(
        method="PUT",
        safe=False,
        idempotent=True,
        has_request_body=True,
        description="Replace a resource entirely with the representation sent.",
    ),
    HttpMethodInfo(
        method="PATCH",
        safe=False,
        idempotent=False,
        has_request_body=True,
        description="Apply a partial update; fields not sent are left unchanged.",
    ),
    HttpMethodInfo(
        method="DELETE",
        safe=False,
        idempotent=True,
        has_request_body=False,
        description="Remove a resource.",
    ),
    HttpMethodInfo(
        method="OPTIONS",
        safe=True,
        idempotent=True,
        has_request_body=False,
        description="Describe the communication options for a resource (used by CORS preflight).",
    ),
)


# ═══════════════════════════════════════════════════════════════════════════════
# STATUS CODES
# ═══════════════════════════════════════════════════════════════════════════════

_STATUS_DESCRIPTIONS: dict[int, str] = {
    200: "The request succeeded and the response carries the result.",
    201: "A new resource was created, typically in answer to POST.",
    202: "The request was accepted for processing that has not finished yet.",
    204: "The request succeeded and there is no body to return, common for DELETE.",
    301: "The resource has moved permanently to the URL in the Location header.",
    304: "The cached representation is still valid.",
    400: "The request is malformed or breaks a business rule.",
    401: "Authentication is missing or invalid.",
    403: "The client is authenticated but not allowed to do this.",
    404: "No resource exists at this URL.",
    405: "The resource does not support this HTTP method.",
    409: "The request conflicts with the current state, such as a duplicate.",
    413: "The request body is larger than the server accepts.",
    422: "The body is well-formed but fails validation.",
    429: "Too many requests in a given time window.",
    500: "An unexpected error happened on the server.",
    502: "An upstream server returned an invalid response.",
    503: "The server cannot handle the request right now.",
}


def status_category(code: int) -> StatusCategory:
    """
    Outcome class of a status code.

    Raises:
        ValueError: Code outside 100..599
    """
    categories = {
        1: StatusCategory.INFORMATIONAL,
        2: StatusCategory.SUCCESS,
        3: StatusCategory.REDIRECTION,
        4: StatusCategory.CLIENT_ERROR,
        5: StatusCategory.SERVER_ERROR,
    }
    if not 100 <= code <= 599:
        raise ValueError(f"{code} is not an HTTP status code")
    return categories[code // 100]


STATUS_CODES: tuple[StatusCodeInfo, ...] = tuple(
    StatusCodeInfo(
        code=code,
        phrase=HTTPStatus(code).phrase,
        category=status_category(code),
        description=description,
    )
    for code, description in sorted(_STATUS_DESCRIPTIONS.items())
)


# ═══════════════════════════════════════════════════════════════════════════════
# GLOSSARY
# ═══════════════════════════════════════════════════════════════════════════════

GLOSSARY: tuple[GlossaryTerm, ...] = (
    GlossaryTerm(
        term="API",
        definition="Interface allowing two software systems to exchange requests and data.",
    ),
    GlossaryTerm(
        term="REST",
        definition="Architectural style for web APIs built on stateless HTTP requests and resource-oriented URLs.",
    ),
    GlossaryTerm(
        term="HTTP verb",
        definition="One of GET/POST/PUT/PATCH/DELETE and friends, denoting the intended action on a resource.",
    ),
    GlossaryTerm(
        term="Status code",
        definition="Three-digit HTTP response code indicating the outcome class: success, client error, server error.",
    ),
    GlossaryTerm(
        term="Resource",
        definition="A thing addressed by a URL, such as /items/5.",
    ),
    GlossaryTerm(
        term="Endpoint",
        definition="A URL pattern combined with an HTTP method that the API answers, such as GET /users.",
    ),
    GlossaryTerm(
        term="Idempotent",
        definition="Repeating the request has the same effect on the server as sending it once.",
    ),
    GlossaryTerm(
        term="Dependency injection",
        definition="Handlers declare what they need (a session, the current user) and the framework provides it per request.",
    ),
    GlossaryTerm(
        term="Middleware",
        definition="Code wrapped around every request and response, for logging, CORS or timing.",
    ),
    GlossaryTerm(
        term="Background task",
        definition="Work scheduled by a handler that runs after the response has been sent.",
    ),
)


class ReferenceService:
    """Lookups over the static reference catalogs."""

    @staticmethod
    def list_methods() -> list[HttpMethodInfo]:
        return list(HTTP_METHODS)

    @staticmethod
    def get_method(method: str) -> HttpMethodInfo:
        """
        Case-insensitive method lookup.

        Raises:
            ReferenceNotFoundError: Not a catalogued method
        """
        wanted = method.strip().upper()
        for info in HTTP_METHODS:
            if info.method == wanted:
                return info
        raise ReferenceNotFoundError("HTTP method", method)

    @staticmethod
    def list_status_codes(category: Optional[StatusCategory] = None) -> list[StatusCodeInfo]:
        return [info for info in STATUS_CODES if category is None or info.category == category]

    @staticmethod
    def get_status_code(code: int) -> StatusCodeInfo:
        """
        Raises:
            ReferenceNotFoundError: Code is valid but not catalogued
        """
        for info in STATUS_CODES:
            if info.code == code:
                return info
        raise ReferenceNotFoundError("Status code", str(code))

    @staticmethod
    def glossary() -> list[GlossaryTerm]:
        return list(GLOSSARY)
