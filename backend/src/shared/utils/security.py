"""
Password hashes and access tokens for Primer accounts.

Passwords are stored as passlib bcrypt hashes. Access tokens are HS256
JWTs from PyJWT whose ``sub`` is the user id; ``exp`` and ``sub`` are
mandatory when decoding. The same token authenticates REST calls
(``Authorization: Bearer``) and the /ws/notes query string.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import jwt
from passlib.context import CryptContext


DEFAULT_TOKEN_LIFETIME = timedelta(days=1)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class SecurityUtils:
    """Stateless helpers used by AuthService."""

    @staticmethod
    def hash_password(password: str) -> str:
        return pwd_context.hash(password)

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        return pwd_context.verify(plain_password, hashed_password)

    @staticmethod
    def create_access_token(
        subject: str,
        secret_key: str,
        expires_delta: Optional[timedelta] = None,
        algorithm: str = "HS256",
        extra_claims: Optional[dict[str, Any]] = None,
    ) -> str:
        """
        Sign a token for ``subject``.

        ``sub``, ``iat`` and ``exp`` always win over same-named extra claims.
        """
        issued_at = datetime.now(timezone.utc)
        claims: dict[str, Any] = {
            **(extra_claims or {}),
            "sub": subject,
            "iat": issued_at,
            "exp": issued_at + (expires_delta or DEFAULT_TOKEN_LIFETIME),
        }
        return jwt.encode(claims, secret_key, algorithm=algorithm)

    @staticmethod
    def decode_access_token(token: str, secret_key: str, algorithm: str = "HS256") -> dict:
        """
        Verify signature and expiry and return the claims.

        Raises:
            ValueError: "Token has expired" or "Invalid token: ..."
        """
        try:
            return jwt.decode(
                token,
                secret_key,
                algorithms=[algorithm],
                options={"require": ["exp", "sub"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise ValueError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise ValueError(f"Invalid token: {e}") from e
