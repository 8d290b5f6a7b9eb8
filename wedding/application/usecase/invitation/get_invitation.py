"""Get invitation use cases (owner view and public view)."""

from uuid import UUID

from pydantic import BaseModel

from wedding.config import Settings
from wedding.domain.error import NotFoundError
from wedding.domain.service import InvitationService
from wedding.domain.value import InvitationId, Slug, UserId

from .common import InvitationItem


class GetInvitationRequest(BaseModel):
    """Get invitation request (owner)."""

    invitation_id: str  # UUID string
    user_id: str  # Current user ID (must be owner)


class GetPublicInvitationRequest(BaseModel):
    """Get public invitation request (guests)."""

    slug: Slug


class GetInvitationResponse(BaseModel):
    """Get invitation response."""

    invitation: InvitationItem


class GetInvitationUseCase:
    """Use case for the owner's view of an invitation, drafts included."""

    def __init__(
        self, invitation_service: InvitationService, settings: Settings
    ) -> None:
        self.invitation_service = invitation_service
        self.settings = settings

    async def execute(self, request: GetInvitationRequest) -> GetInvitationResponse:
        """Execute get invitation flow.

        Raises:
            NotFoundError: If the invitation doesn't exist
            NotAuthorizedError: If the user isn't the owner
        """
        invitation = await self.invitation_service.get_owned(
            InvitationId(UUID(request.invitation_id)),
            UserId(UUID(request.user_id)),
        )
        return GetInvitationResponse(
            invitation=InvitationItem.from_invitation(
                invitation, self.settings.sharing.public_base_url
            )
        )


class GetPublicInvitationUseCase:
    """Use case for the page guests open from a share link."""

    def __init__(
        self, invitation_service: InvitationService, settings: Settings
    ) -> None:
        self.invitation_service = invitation_service
        self.settings = settings

    async def execute(
        self, request: GetPublicInvitationRequest
    ) -> GetInvitationResponse:
        """Execute get public invitation flow.

        Raises:
            NotFoundError: If no published invitation has the slug
        """
        invitation = await self.invitation_service.get_published_by_slug(request.slug)
        if invitation is None:
            raise NotFoundError("Invitation", str(request.slug))

        return GetInvitationResponse(
            invitation=InvitationItem.from_invitation(
                invitation, self.settings.sharing.public_base_url
            )
        )
