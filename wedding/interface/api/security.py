"""Request authentication helpers.

Owners authenticate with the access token issued by the backend's auth
service, sent either as ``Authorization: Bearer <token>`` or in the
``auth_token`` cookie.
"""

from fastapi import HTTPException, status
from pydantic import ValidationError

from wedding.domain.service import JWTService


def extract_token(authorization: str | None, auth_token: str | None) -> str | None:
    """Pick the bearer token from the header, falling back to the cookie."""
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials.strip():
            return credentials.strip()
    return auth_token


def optional_user_id(
    jwt_service: JWTService, authorization: str | None, auth_token: str | None
) -> str | None:
    """Authenticated user ID, or None for anonymous guests."""
    user_id = jwt_service.get_user_id_from_token(
        extract_token(authorization, auth_token)
    )
    return str(user_id) if user_id else None


def require_user_id(
    jwt_service: JWTService,
    authorization: str | None,
    auth_token: str | None,
    action: str,
) -> str:
    """Authenticated user ID.

    Raises:
        HTTPException: 401 if the token is missing or invalid
    """
    user_id = optional_user_id(jwt_service, authorization, auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return user_id


def unprocessable(error: ValidationError) -> HTTPException:
    """422 response for content rejected by domain validation."""
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail=error.errors(include_url=False, include_context=False, include_input=False),
    )
