"""List invitations use case."""

from uuid import UUID

from pydantic import BaseModel

from wedding.config import Settings
from wedding.domain.service import InvitationService
from wedding.domain.value import UserId

from .common import InvitationItem


class ListInvitationsRequest(BaseModel):
    """List invitations request."""

    owner_id: str  # Current user ID


class ListInvitationsResponse(BaseModel):
    """List invitations response."""

    invitations: list[InvitationItem]
    total: int


class ListInvitationsUseCase:
    """Use case for the owner's dashboard list."""

    def __init__(
        self, invitation_service: InvitationService, settings: Settings
    ) -> None:
        self.invitation_service = invitation_service
        self.settings = settings

    async def execute(self, request: ListInvitationsRequest) -> ListInvitationsResponse:
        """Execute list invitations flow (newest first)."""
        invitations = await self.invitation_service.list_for_owner(
            UserId(UUID(request.owner_id))
        )
        items = [
            InvitationItem.from_invitation(
                invitation, self.settings.sharing.public_base_url
            )
            for invitation in invitations
        ]
        return ListInvitationsResponse(invitations=items, total=len(items))
