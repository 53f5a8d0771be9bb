"""
Primer API entry point.

Request path:

    CORSMiddleware
      └─ RequestLoggingMiddleware   X-Request-ID, X-Process-Time, access log
           └─ exception handlers    PrimerException → {"error": {...}}
                └─ routers          /health /auth /users /items /notes /reference /ws/notes

Note analysis is scheduled with BackgroundTasks and reports back over
/ws/notes, so a single process serves both. Run it with

    primer-api                                   # console script
    uvicorn src.api.main:app --reload            # from backend/
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.config.settings import DEFAULT_SECRET_KEY, settings
from src.shared.db import init_db, close_db
from src.shared.core.logging import logger
from src.api.middleware import RequestLoggingMiddleware, setup_exception_handlers
from src.api.routes import register_routes


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Check the database (creating tables on DATABASE_AUTO_CREATE) and dispose it on exit."""
    logger.info(
        "Primer starting",
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
        database="sqlite" if settings.is_sqlite else "postgresql",
    )
    if settings.is_production and settings.SECRET_KEY == DEFAULT_SECRET_KEY:
        logger.warning("SECRET_KEY is the built-in default; tokens can be forged")
    await init_db()
    try:
        yield
    finally:
        await close_db()
        logger.info("Primer stopped")


def create_application() -> FastAPI:
    app = FastAPI(
        title=settings.APP_NAME,
        description="API fundamentals by example: auth, CRUD, uploads, background tasks and WebSockets",
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    # Added last runs first: CORS wraps request logging
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Process-Time"],
    )

    setup_exception_handlers(app)
    register_routes(app)
    return app


app = create_application()


def run() -> None:
    """Console entry point."""
    uvicorn.run(
        "src.api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
