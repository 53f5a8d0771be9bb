"""
Utilities Package

Common utility functions and helpers.

Contents:
=========
- security: Password hashing and JWT management
- markdown: Heading outlines, titles and similarity for study notes

Usage:
======
    from src.shared.utils.security import SecurityUtils
    from src.shared.utils.markdown import extract_outline, similarity
"""

from src.shared.utils.security import SecurityUtils
from src.shared.utils.markdown import (
    Heading,
    extract_outline,
    derive_title,
    normalize_text,
    content_fingerprint,
    similarity,
    word_count,
)

__all__ = [
    "SecurityUtils",
    "Heading",
    "extract_outline",
    "derive_title",
    "normalize_text",
    "content_fingerprint",
    "similarity",
    "word_count",
]
