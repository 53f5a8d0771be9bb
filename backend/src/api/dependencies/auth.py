"""
Authentication Dependencies

FastAPI dependencies for OAuth2 bearer authentication.

Dependency Hierarchy:
=====================
    oauth2_scheme            ← Read "Authorization: Bearer <token>" (optional)
           │
           ▼
    get_current_user()       ← Decode JWT, load the user, require is_active

The scheme's tokenUrl points at POST /auth/token so the interactive docs
can run the OAuth2 password flow.

Type Aliases:
=============
    CurrentUser  - Active, authenticated User model

Usage:
======
    from src.api.dependencies.auth import CurrentUser

    @router.get("/me")
    async def get_me(current_user: CurrentUser):
        return current_user
"""

from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.dependencies.database import get_db
from src.shared.models.user import User
from src.shared.services.auth_service import AuthService


# auto_error=False so a missing header raises our AuthenticationError envelope
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/token", auto_error=False)


async def get_current_user(
    token: Annotated[Optional[str], Depends(oauth2_scheme)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> User:
    """
    Get the active user the bearer token belongs to.

    Raises:
        AuthenticationError: Missing, invalid or expired token, or unknown user (401)
        AuthorizationError: Deactivated user (403)
    """
    return await AuthService(db).resolve_token(token)


# ═══════════════════════════════════════════════════════════════════════════════
# TYPE ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

CurrentUser = Annotated[User, Depends(get_current_user)]
