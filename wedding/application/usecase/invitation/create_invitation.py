"""Create invitation use case."""

from uuid import UUID

from pydantic import BaseModel

from wedding.config import Settings
from wedding.domain.service import InvitationService
from wedding.domain.value import UserId

from .common import InvitationFields, InvitationItem


class CreateInvitationRequest(InvitationFields):
    """Create invitation request."""

    owner_id: str  # User ID from the verified token


class CreateInvitationResponse(BaseModel):
    """Create invitation response."""

    invitation: InvitationItem


class CreateInvitationUseCase:
    """Use case for creating a draft invitation."""

    def __init__(
        self, invitation_service: InvitationService, settings: Settings
    ) -> None:
        """Initialize create invitation use case.

        Args:
            invitation_service: Invitation domain service
            settings: Application settings (for share links)
        """
        self.invitation_service = invitation_service
        self.settings = settings

    async def execute(
        self, request: CreateInvitationRequest
    ) -> CreateInvitationResponse:
        """Execute create invitation flow.

        Args:
            request: Owner ID and invitation content

        Returns:
            The created draft with its share link

        Raises:
            SlugTakenError: If the custom slug is already in use
        """
        fields = request.model_dump(exclude={"owner_id"})
        invitation = await self.invitation_service.create_invitation(
            UserId(UUID(request.owner_id)), **fields
        )

        return CreateInvitationResponse(
            invitation=InvitationItem.from_invitation(
                invitation, self.settings.sharing.public_base_url
            )
        )
