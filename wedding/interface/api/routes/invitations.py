"""Invitation routes (owner dashboard)."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, HTTPException, status
from pydantic import ValidationError

from wedding.application.usecase.invitation import (
    CreateInvitationRequest,
    CreateInvitationResponse,
    CreateInvitationUseCase,
    GetInvitationRequest,
    GetInvitationResponse,
    GetInvitationUseCase,
    InvitationChanges,
    InvitationFields,
    ListInvitationsRequest,
    ListInvitationsResponse,
    ListInvitationsUseCase,
    PublishInvitationRequest,
    PublishInvitationResponse,
    PublishInvitationUseCase,
    UpdateInvitationRequest,
    UpdateInvitationResponse,
    UpdateInvitationUseCase,
)
from wedding.domain.error import NotAuthorizedError, NotFoundError, SlugTakenError
from wedding.domain.service import JWTService
from wedding.interface.api.security import require_user_id, unprocessable

router = APIRouter(prefix="/invitations", tags=["invitations"], route_class=DishkaRoute)


@router.post(
    "", response_model=CreateInvitationResponse, status_code=status.HTTP_201_CREATED
)
async def create_invitation(
    request: InvitationFields,
    create_invitation_use_case: FromDishka[CreateInvitationUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> CreateInvitationResponse:
    """Create a draft invitation.

    Requires authentication. The share slug is the custom slug when given,
    otherwise it is generated from the couple's names.

    Raises:
        HTTPException: 401 if not authenticated, 409 if the custom slug is
            taken, 422 if the content is invalid
    """
    user_id = require_user_id(
        jwt_service, authorization, auth_token, "create invitations"
    )

    try:
        return await create_invitation_use_case.execute(
            CreateInvitationRequest(owner_id=user_id, **request.model_dump())
        )
    except SlugTakenError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ValidationError as e:
        logfire.warn("Invitation rejected by validation", errors=e.error_count())
        raise unprocessable(e)


@router.get("", response_model=ListInvitationsResponse)
async def list_invitations(
    list_invitations_use_case: FromDishka[ListInvitationsUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> ListInvitationsResponse:
    """List the authenticated owner's invitations, newest first."""
    user_id = require_user_id(
        jwt_service, authorization, auth_token, "list invitations"
    )
    return await list_invitations_use_case.execute(
        ListInvitationsRequest(owner_id=user_id)
    )


@router.get("/{invitation_id}", response_model=GetInvitationResponse)
async def get_invitation(
    invitation_id: UUID,
    get_invitation_use_case: FromDishka[GetInvitationUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> GetInvitationResponse:
    """Get an invitation (drafts included) for its owner."""
    user_id = require_user_id(
        jwt_service, authorization, auth_token, "view invitations"
    )

    try:
        return await get_invitation_use_case.execute(
            GetInvitationRequest(invitation_id=str(invitation_id), user_id=user_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NotAuthorizedError:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to view this invitation",
        )


@router.patch("/{invitation_id}", response_model=UpdateInvitationResponse)
async def update_invitation(
    invitation_id: UUID,
    request: InvitationChanges,
    update_invitation_use_case: FromDishka[UpdateInvitationUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> UpdateInvitationResponse:
    """Change an invitation's content.

    Only the fields present in the body are changed; ``null`` removes an
    optional field.
    """
    user_id = require_user_id(
        jwt_service, authorization, auth_token, "edit invitations"
    )

    try:
        return await update_invitation_use_case.execute(
            UpdateInvitationRequest(
                invitation_id=str(invitation_id),
                user_id=user_id,
                **request.model_dump(exclude_unset=True),
            )
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized invitation update attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to edit this invitation",
        )
    except SlugTakenError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ValidationError as e:
        raise unprocessable(e)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


async def _set_published(
    invitation_id: UUID,
    publish: bool,
    use_case: PublishInvitationUseCase,
    user_id: str,
) -> PublishInvitationResponse:
    try:
        return await use_case.execute(
            PublishInvitationRequest(
                invitation_id=str(invitation_id), user_id=user_id, publish=publish
            )
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NotAuthorizedError:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to publish this invitation",
        )


@router.post("/{invitation_id}/publish", response_model=PublishInvitationResponse)
async def publish_invitation(
    invitation_id: UUID,
    publish_invitation_use_case: FromDishka[PublishInvitationUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> PublishInvitationResponse:
    """Publish an invitation so its share link works for guests."""
    user_id = require_user_id(
        jwt_service, authorization, auth_token, "publish invitations"
    )
    return await _set_published(
        invitation_id, True, publish_invitation_use_case, user_id
    )


@router.post("/{invitation_id}/unpublish", response_model=PublishInvitationResponse)
async def unpublish_invitation(
    invitation_id: UUID,
    publish_invitation_use_case: FromDishka[PublishInvitationUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> PublishInvitationResponse:
    """Move an invitation back to draft."""
    user_id = require_user_id(
        jwt_service, authorization, auth_token, "unpublish invitations"
    )
    return await _set_published(
        invitation_id, False, publish_invitation_use_case, user_id
    )
