"""
User Service

Business logic for browsing users and editing the current profile.
"""

from typing import Optional, Tuple
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.shared.core.exceptions import UserNotFoundError
from src.shared.models.user import User
from src.shared.repositories.user_repository import UserRepository


class UserService:
    """Service for user lookups and profile updates."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = UserRepository(session)

    async def list_users(self, offset: int, limit: int) -> Tuple[list[User], int]:
        """
        Page through users ordered by email.

        Returns:
            Tuple of (users, total)
        """
        users = await self.repo.list(
            offset=offset,
            limit=limit,
            order_by="email",
            order_desc=False,
        )
        return users, await self.repo.count()

    async def get_user(self, user_id: UUID) -> User:
        """
        Raises:
            UserNotFoundError: No user with that id
        """
        user = await self.repo.get(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))
        return user

    async def update_profile(self, user: User, full_name: Optional[str]) -> User:
        return await self.repo.update(user, full_name=full_name)
