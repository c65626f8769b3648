"""
Security utilities for authentication.

Provides password hashing (bcrypt) and JWT session token management.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from jwt.exceptions import InvalidTokenError
from passlib.context import CryptContext

from app.core.config import settings

# Password hashing context using bcrypt with a fixed work factor
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)

SESSION_COOKIE_NAME = "token"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password.

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain_password, hashed_password)


def dummy_verify() -> None:
    """Burn the same time as a real verification for unknown accounts."""
    pwd_context.dummy_verify()


def get_password_hash(password: str) -> str:
    """
    Hash a password using bcrypt.

    Args:
        password: The plain text password to hash

    Returns:
        The hashed password string
    """
    return pwd_context.hash(password)


def session_max_age() -> int:
    """Lifetime of the session token and its cookie, in seconds."""
    return int(timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS).total_seconds())


def create_access_token(user_id: str, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a JWT session token for a user.

    Args:
        user_id: The user identifier stored as the ``sub`` claim
        expires_delta: Optional custom expiration time

    Returns:
        The encoded JWT token string
    """
    if expires_delta is None:
        expires_delta = timedelta(seconds=session_max_age())

    now = datetime.now(timezone.utc)
    to_encode = {"sub": user_id, "iat": now, "exp": now + expires_delta}

    return jwt.encode(
        to_encode,
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
    )


def decode_access_token(token: str) -> Optional[dict]:
    """
    Decode and validate a JWT session token.

    Signature and expiry are both checked.

    Returns:
        The decoded token payload, or None if invalid
    """
    try:
        return jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
        )
    except InvalidTokenError:
        return None


def get_token_subject(token: str) -> Optional[str]:
    """
    Extract the subject (user id) from a JWT token.

    Returns:
        The subject claim, or None if the token is invalid
    """
    payload = decode_access_token(token)
    if payload is None:
        return None
    return payload.get("sub")
