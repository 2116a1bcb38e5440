"""
Signing key state and JWT token management.

The install id of the deployment doubles as the token signing key. It is
published once by the bootstrap step into a ``SigningKeyProvider`` which
is then handed explicitly to whatever signs or verifies tokens.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from jose import jwt

from sysinfo.config import get_settings
from sysinfo.core.exceptions import SigningKeyNotSet


class SigningKeyProvider:
    """Holds the process-wide token signing key."""

    def __init__(self, key: Optional[str] = None):
        self._key = key

    def get(self) -> str:
        """
        Return the signing key.

        Raises:
            SigningKeyNotSet: If bootstrap has not published a key yet
        """
        if not self._key:
            raise SigningKeyNotSet()
        return self._key

    def set(self, key: str) -> None:
        """Publish a new signing key."""
        self._key = key

    @property
    def is_set(self) -> bool:
        return bool(self._key)


def create_access_token(
    signing_keys: SigningKeyProvider,
    username: str,
    grant_type: str = "access",
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a JWT token signed with the deployment's signing key.

    Args:
        signing_keys: Provider holding the published signing key
        username: Subject of the token
        grant_type: "access" or "refresh"
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT token string
    """
    settings = get_settings()

    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.jwt_access_token_expire_minutes)

    expire = datetime.now(timezone.utc) + expires_delta

    payload = {
        "sub": username,
        "grant_type": grant_type,
        "exp": expire,
        "iat": datetime.now(timezone.utc),
    }

    return jwt.encode(
        payload,
        signing_keys.get(),
        algorithm=settings.jwt_algorithm,
    )


def decode_token(signing_keys: SigningKeyProvider, token: str) -> dict[str, Any]:
    """
    Decode and validate a JWT token.

    Args:
        signing_keys: Provider holding the published signing key
        token: The JWT token string to decode

    Returns:
        Decoded payload dictionary with keys: sub, grant_type, exp, iat

    Raises:
        JWTError: If token is invalid or expired
        SigningKeyNotSet: If bootstrap has not published a key yet
    """
    settings = get_settings()
    return jwt.decode(
        token,
        signing_keys.get(),
        algorithms=[settings.jwt_algorithm],
    )


def is_token_expired(payload: dict[str, Any]) -> bool:
    """
    Check if a decoded token payload is expired.

    Args:
        payload: Decoded JWT payload

    Returns:
        True if expired, False otherwise
    """
    exp = payload.get("exp")
    if exp is None:
        return True
    return datetime.now(timezone.utc) > datetime.fromtimestamp(exp, tz=timezone.utc)
