"""
Database access for Primer.

    handler   ── Depends(get_db) ──►┐
    pipeline  ── AsyncSessionLocal()┼──► repositories ──► PostgreSQL | SQLite
    /ws/notes ── AsyncSessionLocal()┘
"""

from src.shared.db.session import (
    AsyncSessionLocal,
    close_db,
    engine,
    get_db,
    init_db,
    ping_db,
)

__all__ = [
    "AsyncSessionLocal",
    "close_db",
    "engine",
    "get_db",
    "init_db",
    "ping_db",
]
