"""
Configuration Module

Primer settings, read from environment variables and an optional .env file.

Usage:
======
    from src.config import settings

    token_ttl = settings.ACCESS_TOKEN_EXPIRE_MINUTES
    threshold = settings.DUPLICATE_SIMILARITY_THRESHOLD
"""

from src.config.settings import Settings, get_settings, settings

__all__ = [
    "Settings",
    "get_settings",
    "settings",
]
