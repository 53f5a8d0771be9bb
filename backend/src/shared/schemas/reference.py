"""
Reference Schemas

Response models for the API fundamentals reference: HTTP methods,
status codes and glossary terms.
"""

from pydantic import BaseModel

from src.shared.models.enums import StatusCategory


class HttpMethodInfo(BaseModel):
    """An HTTP verb and its semantics."""

    method: str
    safe: bool
    idempotent: bool
    has_request_body: bool
    description: str


class StatusCodeInfo(BaseModel):
    """A catalogued HTTP status code."""

    code: int
    phrase: str
    category: StatusCategory
    description: str


class GlossaryTerm(BaseModel):
    """A glossary entry."""

    term: str
    definition: str
