"""JWT token domain service."""

from uuid import UUID

import logfire

from wedding.config import AuthSettings
from wedding.domain.value import UserId
from wedding.util.jwt import JWTError, TokenPayload, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for verifying backend-issued access tokens."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.error("JWT token verification failed", error=str(e))
                raise
            logfire.info("JWT token verified", user_id=payload.sub)
            return payload

    def get_user_id_from_token(self, token: str | None) -> UserId | None:
        """Extract the owner's user ID from a token without raising.

        Args:
            token: JWT token string (optional)

        Returns:
            User ID if token is valid, None if token is missing or invalid
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
            return UserId(UUID(payload.sub))
        except (JWTError, ValueError) as e:
            # Invalid token or non-UUID subject, treat as unauthenticated
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None
