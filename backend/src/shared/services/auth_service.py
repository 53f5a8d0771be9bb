"""
Authentication Service

Accounts and bearer tokens.

    register()       unique lower-cased email, bcrypt hash → Login
    login()          email + password → Login, 401 on any mismatch
    resolve_token()  bearer token → active User (401 / 403)

The same resolve_token() guards REST routes (get_current_user) and the
/ws/notes handshake.
"""

from dataclasses import dataclass
from datetime import timedelta
from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.config.settings import settings
from src.shared.core.exceptions import AuthenticationError, AuthorizationError, DuplicateResourceError
from src.shared.core.logging import get_logger
from src.shared.models.user import User
from src.shared.repositories.user_repository import UserRepository
from src.shared.utils.security import SecurityUtils


logger = get_logger("auth")


@dataclass
class Login:
    """A user together with a freshly issued access token."""

    user: User
    access_token: str
    expires_in: int  # seconds


class AuthService:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = UserRepository(session)

    @staticmethod
    def issue_token(user: User) -> Login:
        lifetime = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        token = SecurityUtils.create_access_token(
            subject=str(user.id),
            secret_key=settings.SECRET_KEY,
            expires_delta=lifetime,
            algorithm=settings.JWT_ALGORITHM,
            extra_claims={"email": user.email},
        )
        return Login(user=user, access_token=token, expires_in=int(lifetime.total_seconds()))

    async def resolve_token(self, token: Optional[str]) -> User:
        """
        Raises:
            AuthenticationError: Token missing, invalid or expired, or its user was removed
            AuthorizationError: Account deactivated
        """
        if not token:
            raise AuthenticationError("Not authenticated")
        try:
            claims = SecurityUtils.decode_access_token(token, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
            user_id = UUID(claims["sub"])
        except ValueError as e:
            raise AuthenticationError(str(e)) from e

        user = await self.repo.get(user_id)
        if user is None:
            raise AuthenticationError("User no longer exists")
        if not user.is_active:
            raise AuthorizationError("Inactive user")
        return user

    async def register(self, email: str, password: str, full_name: Optional[str] = None) -> Login:
        """
        Raises:
            DuplicateResourceError: Email taken, compared case-insensitively
        """
        email = email.lower()
        if await self.repo.email_exists(email):
            raise DuplicateResourceError("Email already registered")

        user = await self.repo.create(
            email=email,
            password_hash=SecurityUtils.hash_password(password),
            full_name=full_name,
        )
        logger.info("User registered", user_id=str(user.id))
        return self.issue_token(user)

    async def authenticate(self, email: str, password: str) -> User:
        """Unknown email and wrong password fail identically."""
        user = await self.repo.get_by_email(email)
        if user is None or not SecurityUtils.verify_password(password, user.password_hash):
            raise AuthenticationError("Invalid email or password")
        return user

    async def login(self, email: str, password: str) -> Login:
        return self.issue_token(await self.authenticate(email, password))
