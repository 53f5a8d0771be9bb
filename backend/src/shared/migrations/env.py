# pylint: skip-file
# ruff: noqa
"""
Alembic environment for Primer.

The URL comes from settings.DATABASE_URL, so the same revisions run
against PostgreSQL (asyncpg) in deployment and SQLite (aiosqlite) locally.
On SQLite, operations are rendered in batch mode because it cannot ALTER
columns in place.

    cd backend
    alembic upgrade head            # apply to DATABASE_URL
    alembic upgrade head --sql      # print the DDL instead
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool

from alembic import context

from src.config.settings import settings
from src.shared import models


config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# users, items and notes register themselves on import of src.shared.models
target_metadata = models.Base.metadata


def run_migrations_offline() -> None:
    """Emit DDL for DATABASE_URL's dialect without connecting."""
    context.configure(
        url=settings.DATABASE_URL,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        render_as_batch=settings.is_sqlite,
    )
    with context.begin_transaction():
        context.run_migrations()


def _migrate(connection: Connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
        render_as_batch=connection.dialect.name == "sqlite",
    )
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    engine = create_async_engine(settings.DATABASE_URL, poolclass=NullPool)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_migrate)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
