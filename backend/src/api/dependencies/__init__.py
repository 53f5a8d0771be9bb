"""
Annotated dependency aliases used in handler signatures.

    async def list_notes(user: CurrentUser, pagination: Pagination, notes: NoteServiceDep): ...

    DbSession        request-scoped AsyncSession (commit on success)
    CurrentUser      active user behind the bearer token, else 401/403
    Pagination       page >= 1, 1 <= per_page <= MAX_PAGE_SIZE
    *ServiceDep      service bound to the request session
"""

from src.api.dependencies.database import (
    get_db,
    DbSession,
)
from src.api.dependencies.auth import (
    oauth2_scheme,
    get_current_user,
    CurrentUser,
)
from src.api.dependencies.pagination import (
    get_pagination,
    Pagination,
)
from src.api.dependencies.services import (
    get_auth_service,
    get_user_service,
    get_item_service,
    get_note_service,
    AuthServiceDep,
    UserServiceDep,
    ItemServiceDep,
    NoteServiceDep,
)

__all__ = [
    # Database
    "get_db",
    "DbSession",
    # Authentication
    "oauth2_scheme",
    "get_current_user",
    "CurrentUser",
    # Pagination
    "get_pagination",
    "Pagination",
    # Services
    "get_auth_service",
    "get_user_service",
    "get_item_service",
    "get_note_service",
    "AuthServiceDep",
    "UserServiceDep",
    "ItemServiceDep",
    "NoteServiceDep",
]
