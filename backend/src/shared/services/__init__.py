"""
Business Logic Services

Services encapsulate business logic and coordinate between repositories
and domain rules.

Service Pattern:
================
    Handler → Service → Repository → Database

Services should:
- Contain business logic and validation
- Raise PrimerException subclasses for rule violations
- Use the session they were given (the caller commits)
- NOT handle HTTP concerns (that's for handlers)

Available Services:
===================
- AuthService: Registration, login, token resolution
- UserService: User directory and profile updates
- ItemService: Item CRUD, search and sorting
- NoteService: Notes, uploads, outline and duplicate analysis
- ReferenceService: Static HTTP methods / status codes / glossary

Usage:
======
    from src.shared.services import AuthService, ItemService

    service = AuthService(db)
    login = await service.register(email, password)
    login.user, login.access_token
"""

from src.shared.services.auth_service import AuthService
from src.shared.services.item_service import ItemService
from src.shared.services.note_service import NoteService
from src.shared.services.reference_service import ReferenceService
from src.shared.services.user_service import UserService

__all__ = [
    "AuthService",
    "ItemService",
    "NoteService",
    "ReferenceService",
    "UserService",
]
