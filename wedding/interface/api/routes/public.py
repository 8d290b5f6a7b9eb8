"""Public invitation routes (guests)."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import ValidationError

from wedding.application.usecase.invitation import (
    GetInvitationResponse,
    GetPublicInvitationRequest,
    GetPublicInvitationUseCase,
)
from wedding.domain.error import NotFoundError

router = APIRouter(prefix="/public", tags=["public"], route_class=DishkaRoute)


@router.get("/{slug}", response_model=GetInvitationResponse)
async def get_public_invitation(
    slug: str,
    get_public_invitation_use_case: FromDishka[GetPublicInvitationUseCase],
) -> GetInvitationResponse:
    """Get the published invitation behind a share link.

    Drafts and malformed slugs are reported as not found.
    """
    try:
        request = GetPublicInvitationRequest(slug=slug)
    except ValidationError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Invitation not found"
        )

    try:
        return await get_public_invitation_use_case.execute(request)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Invitation not found"
        )
