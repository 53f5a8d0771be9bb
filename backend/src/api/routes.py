"""
Route table.

    (root)      /health /live /ready
    /auth       register, login, token, me
    /users      directory, profile update
    /items      CRUD with search, filters, sorting
    /notes      create/upload, list, outline, delete
    /reference  HTTP methods, status codes, glossary
    (root)      /ws/notes
"""

from fastapi import APIRouter, FastAPI

from src.api.handlers import (
    auth_handler,
    events_handler,
    health_handler,
    item_handler,
    note_handler,
    reference_handler,
    user_handler,
)
from src.shared.schemas.common import ErrorResponse


# Documented on every router behind a bearer token
AUTH_ERRORS = {
    401: {"model": ErrorResponse, "description": "Missing or invalid bearer token"},
    403: {"model": ErrorResponse, "description": "Inactive account"},
}

ROUTERS: list[tuple[APIRouter, str, str, bool]] = [
    (health_handler.router, "", "Health", False),
    (auth_handler.router, "/auth", "Authentication", False),
    (user_handler.router, "/users", "Users", True),
    (item_handler.router, "/items", "Items", True),
    (note_handler.router, "/notes", "Notes", True),
    (reference_handler.router, "/reference", "Reference", False),
    (events_handler.router, "", "Events", False),
]


def register_routes(app: FastAPI) -> None:
    for router, prefix, tag, authenticated in ROUTERS:
        app.include_router(
            router,
            prefix=prefix,
            tags=[tag],
            responses=AUTH_ERRORS if authenticated else None,
        )
