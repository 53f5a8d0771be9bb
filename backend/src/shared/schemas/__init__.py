"""
Pydantic request and response models.

Request models reject bad input with 422 before a handler runs. Response
models are validated from ORM rows (BaseSchema, from_attributes).
"""

from src.shared.schemas.common import (
    BaseSchema,
    PaginationParams,
    PaginationMeta,
    PaginatedResponse,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
)
from src.shared.schemas.user import (
    UserBase,
    UserCreate,
    UserLogin,
    UserUpdate,
    UserResponse,
    AuthResponse,
    TokenResponse,
)
from src.shared.schemas.item import (
    ItemCreate,
    ItemUpdate,
    ItemResponse,
)
from src.shared.schemas.note import (
    NoteCreate,
    NoteHeading,
    NoteSummary,
    NoteResponse,
    NoteOutlineResponse,
)
from src.shared.schemas.reference import (
    HttpMethodInfo,
    StatusCodeInfo,
    GlossaryTerm,
)

__all__ = [
    # Common
    "BaseSchema",
    "PaginationParams",
    "PaginationMeta",
    "PaginatedResponse",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    # User
    "UserBase",
    "UserCreate",
    "UserLogin",
    "UserUpdate",
    "UserResponse",
    "AuthResponse",
    "TokenResponse",
    # Item
    "ItemCreate",
    "ItemUpdate",
    "ItemResponse",
    # Note
    "NoteCreate",
    "NoteHeading",
    "NoteSummary",
    "NoteResponse",
    "NoteOutlineResponse",
    # Reference
    "HttpMethodInfo",
    "StatusCodeInfo",
    "GlossaryTerm",
]
