"""
Common Schemas

Response shapes shared by every resource.

    list endpoints  {"data": [...], "pagination": {"page", "per_page", "total", "total_pages"}}
    errors          {"error": {"code", "message", "details"}}
"""

from datetime import datetime, timezone
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field


DataT = TypeVar("DataT")


class BaseSchema(BaseModel):
    """Response models are built straight from ORM rows."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class PaginationParams(BaseModel):
    """``page``/``per_page`` as resolved by the get_pagination dependency."""

    page: int = Field(default=1, ge=1)
    per_page: int = Field(default=20, ge=1)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page

    @property
    def limit(self) -> int:
        return self.per_page


class PaginationMeta(BaseModel):
    page: int
    per_page: int
    total: int
    total_pages: int

    @classmethod
    def create(cls, page: int, per_page: int, total: int) -> "PaginationMeta":
        """total=41, per_page=20 → total_pages=3; no rows → 0 pages."""
        total_pages = -(-total // per_page) if per_page > 0 else 0
        return cls(page=page, per_page=per_page, total=total, total_pages=total_pages)


class PaginatedResponse(BaseModel, Generic[DataT]):
    data: list[DataT]
    pagination: PaginationMeta


class ErrorDetail(BaseModel):
    code: str = Field(description="Machine-readable code such as NOT_FOUND or VALIDATION_ERROR")
    message: str
    details: Optional[dict[str, Any]] = None


class ErrorResponse(BaseModel):
    """OpenAPI model of the error envelope written by the exception handlers."""

    error: ErrorDetail


class HealthResponse(BaseModel):
    status: str = "healthy"
    service: str = "primer"
    version: str = "1.0.0"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
