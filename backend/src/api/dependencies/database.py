"""
Database Dependency

FastAPI dependency for database sessions.

The session is committed on success and rolled back on error. FastAPI
caches dependencies per request, so the current-user lookup and the
services of one request share a single session.

Usage:
======
    from src.api.dependencies.database import DbSession

    @router.get("/ready")
    async def ready(db: DbSession):
        ...
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.shared.db import get_db as _get_db


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Yield an async database session for the duration of the request.
    """
    async for session in _get_db():
        yield session


DbSession = Annotated[AsyncSession, Depends(get_db)]
