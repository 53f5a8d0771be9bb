"""
User Schemas

Request/response models for user and authentication endpoints.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from src.shared.schemas.common import BaseSchema


class UserBase(BaseModel):
    """Base user schema."""

    email: EmailStr


class UserCreate(UserBase):
    """Schema for user registration."""

    password: str = Field(
        min_length=8,
        max_length=72,
        description="Password (8 to 72 characters)",
    )
    full_name: Optional[str] = Field(default=None, max_length=255)


class UserLogin(UserBase):
    """Schema for user login."""

    password: str = Field(min_length=1, max_length=72)


class UserUpdate(BaseModel):
    """Schema for updating the current user's profile."""

    full_name: Optional[str] = Field(default=None, max_length=255)


class UserResponse(BaseSchema):
    """Schema for user response."""

    id: UUID
    email: str
    full_name: Optional[str] = None
    is_active: bool
    created_at: datetime


class AuthResponse(BaseModel):
    """Schema for registration and JSON login responses."""

    user: UserResponse
    access_token: str
    token_type: str = "bearer"
    expires_in: int  # seconds


class TokenResponse(BaseModel):
    """OAuth2 password flow token response."""

    access_token: str
    token_type: str = "bearer"
