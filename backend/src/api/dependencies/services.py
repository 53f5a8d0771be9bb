"""
Service Dependencies

FastAPI dependencies for service injection.

Services are created per-request with the request's db session. They are
stateless apart from that session reference, so nothing leaks between
requests.

Usage:
======
    from src.api.dependencies.services import ItemServiceDep

    @router.post("")
    async def create_item(data: ItemCreate, service: ItemServiceDep):
        ...
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.dependencies.database import get_db
from src.shared.services.auth_service import AuthService
from src.shared.services.item_service import ItemService
from src.shared.services.note_service import NoteService
from src.shared.services.user_service import UserService


async def get_auth_service(
    db: AsyncSession = Depends(get_db),
) -> AuthService:
    """Dependency to get AuthService instance."""
    return AuthService(db)


async def get_user_service(
    db: AsyncSession = Depends(get_db),
) -> UserService:
    """Dependency to get UserService instance."""
    return UserService(db)


async def get_item_service(
    db: AsyncSession = Depends(get_db),
) -> ItemService:
    """Dependency to get ItemService instance."""
    return ItemService(db)


async def get_note_service(
    db: AsyncSession = Depends(get_db),
) -> NoteService:
    """Dependency to get NoteService instance."""
    return NoteService(db)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
ItemServiceDep = Annotated[ItemService, Depends(get_item_service)]
NoteServiceDep = Annotated[NoteService, Depends(get_note_service)]
