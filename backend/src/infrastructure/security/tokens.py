"""Signed access tokens identifying the signed-in user.

Tokens are HS256 JWTs whose ``sub`` claim is the user's UUID.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID

import jwt

from infrastructure.config import Settings, get_settings


class InvalidTokenError(Exception):
    """Raised when a token is missing, malformed, expired or badly signed."""


def create_access_token(
    user_id: UUID,
    expires_delta: timedelta = timedelta(hours=1),
    settings: Optional[Settings] = None,
) -> str:
    """
    Issue a signed access token for a user.
    
    Args:
        user_id: User to encode in the sub claim
        expires_delta: Lifetime of the token
        settings: Settings to sign with (defaults to the cached settings)
        
    Returns:
        Encoded JWT string
    """
    settings = settings or get_settings()
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "aud": settings.jwt_audience,
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Optional[Settings] = None) -> UUID:
    """
    Verify a token and return the user id it was issued for.
    
    Raises:
        InvalidTokenError: If the token cannot be trusted
    """
    settings = settings or get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            options={"require": ["sub", "exp"]},
        )
        return UUID(payload["sub"])
    except jwt.PyJWTError as e:
        raise InvalidTokenError(str(e)) from e
    except ValueError as e:
        raise InvalidTokenError("Token subject is not a valid user id") from e
