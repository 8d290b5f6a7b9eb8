"""JWT token utilities.

Access tokens are issued by the backend-as-a-service auth server. The API
only verifies them; ``create_token`` mints tokens in the same format for
local development and tests.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from wedding.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    sub: str  # Auth user ID, the invitation owner
    exp: datetime
    aud: str
    email: str | None = None
    role: str | None = None

    @property
    def user_id(self) -> str:
        return self.sub


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    user_id: str,
    settings: AuthSettings,
    email: str | None = None,
    expires_in: timedelta = timedelta(hours=1),
) -> str:
    """Create a JWT token shaped like the backend's access tokens.

    Args:
        user_id: Auth user ID
        settings: Authentication settings
        email: Optional email claim
        expires_in: Token lifetime

    Returns:
        Encoded JWT token
    """
    payload = {
        "sub": user_id,
        "aud": settings.jwt_audience,
        "role": "authenticated",
        "exp": datetime.now(timezone.utc) + expires_in,
    }
    if email:
        payload["email"] = email

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
