"""
Security utilities for authentication and password handling.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

import bcrypt
from jose import JWTError, jwt

from profile_api.core.config import Settings, settings as default_settings


def _truncate(password: str) -> bytes:
    # bcrypt only looks at the first 72 bytes
    return password.encode("utf-8")[:72]


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a bcrypt hash.

    Args:
        plain_password: Plain text password
        hashed_password: Hashed password to verify against

    Returns:
        bool: True if password matches, False otherwise
    """
    try:
        return bcrypt.checkpw(_truncate(plain_password), hashed_password.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def get_password_hash(password: str) -> str:
    """
    Hash a password using bcrypt.

    Args:
        password: Plain text password to hash

    Returns:
        str: Hashed password
    """
    salt = bcrypt.gensalt(rounds=10)
    return bcrypt.hashpw(_truncate(password), salt).decode("utf-8")


def create_access_token(
    data: dict[str, Any],
    expires_delta: timedelta | None = None,
    settings: Settings | None = None,
) -> str:
    """
    Create a JWT access token.

    Args:
        data: Data to encode in the token
        expires_delta: Optional custom expiration time
        settings: Settings holding the signing key, the environment-loaded ones if omitted

    Returns:
        str: Encoded JWT token
    """
    settings = settings or default_settings
    to_encode = data.copy()

    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expires_min)
    expire = datetime.now(timezone.utc) + expires_delta

    to_encode.update({"exp": expire, "type": "access"})
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_alg)


def decode_token(
    token: str,
    expected_type: str | None = None,
    settings: Settings | None = None,
) -> dict[str, Any] | None:
    """
    Decode and verify a JWT token with optional type validation.

    Args:
        token: JWT token to decode
        expected_type: Expected token type ("access")
        settings: Settings holding the signing key, the environment-loaded ones if omitted

    Returns:
        dict | None: Decoded token payload, or None if invalid
    """
    settings = settings or default_settings
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_alg])
    except JWTError:
        return None

    if expected_type and payload.get("type") != expected_type:
        return None

    return payload
