"""Publish invitation use case."""

from uuid import UUID

from pydantic import BaseModel

from wedding.config import Settings
from wedding.domain.service import InvitationService
from wedding.domain.value import InvitationId, UserId

from .common import InvitationItem


class PublishInvitationRequest(BaseModel):
    """Publish or unpublish request."""

    invitation_id: str  # UUID string
    user_id: str  # Current user ID (must be owner)
    publish: bool = True  # False moves the invitation back to draft


class PublishInvitationResponse(BaseModel):
    """Publish invitation response."""

    invitation: InvitationItem


class PublishInvitationUseCase:
    """Use case for switching an invitation between draft and published."""

    def __init__(
        self, invitation_service: InvitationService, settings: Settings
    ) -> None:
        self.invitation_service = invitation_service
        self.settings = settings

    async def execute(
        self, request: PublishInvitationRequest
    ) -> PublishInvitationResponse:
        """Execute publish flow.

        Publishing a published invitation (or unpublishing a draft) is a no-op.

        Raises:
            NotFoundError: If the invitation doesn't exist
            NotAuthorizedError: If the user isn't the owner
        """
        invitation_id = InvitationId(UUID(request.invitation_id))
        user_id = UserId(UUID(request.user_id))

        if request.publish:
            invitation = await self.invitation_service.publish(invitation_id, user_id)
        else:
            invitation = await self.invitation_service.unpublish(
                invitation_id, user_id
            )

        return PublishInvitationResponse(
            invitation=InvitationItem.from_invitation(
                invitation, self.settings.sharing.public_base_url
            )
        )
