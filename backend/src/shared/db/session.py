"""
Engine and sessions.

PostgreSQL (asyncpg) gets a pre-pinged connection pool sized by
DATABASE_POOL_SIZE / DATABASE_MAX_OVERFLOW. SQLite (aiosqlite) gets
NullPool: every checkout opens the file anew, so a connection is never
shared between the server's event loop and the one a test or migration
runs on.

Sessions come from two places:

    get_db()             one per request, committed when the handler returns
    AsyncSessionLocal()  opened directly by the note pipeline and /ws/notes,
                         which outlive or never have a request
"""

from typing import Any, AsyncGenerator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from src.config.settings import settings
from src.shared.core.logging import logger
from src.shared.models.base import Base


def _engine_options() -> dict[str, Any]:
    if settings.is_sqlite:
        return {"poolclass": NullPool}
    return {
        "pool_size": settings.DATABASE_POOL_SIZE,
        "max_overflow": settings.DATABASE_MAX_OVERFLOW,
        "pool_pre_ping": True,
    }


engine = create_async_engine(settings.DATABASE_URL, echo=settings.DEBUG, **_engine_options())

# expire_on_commit=False: notes are still read after the pipeline commits
AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Request-scoped session.

    Commits after the handler returns and rolls back if it raised.
    Handlers that schedule a background task commit first themselves.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """Fail startup when the database is unreachable; create tables on DATABASE_AUTO_CREATE."""
    try:
        async with engine.begin() as conn:
            await conn.execute(text("SELECT 1"))
            if settings.DATABASE_AUTO_CREATE:
                await conn.run_sync(Base.metadata.create_all)
                logger.info("Database tables ensured")
    except Exception as e:
        logger.error("Database unavailable at startup", error=str(e))
        raise
    logger.info("Database ready", dialect=engine.dialect.name)


async def close_db() -> None:
    await engine.dispose()
    logger.info("Database connections closed")


async def ping_db(session: AsyncSession) -> bool:
    try:
        await session.execute(text("SELECT 1"))
    except Exception as e:
        logger.warning("Database ping failed", error=str(e))
        return False
    return True
