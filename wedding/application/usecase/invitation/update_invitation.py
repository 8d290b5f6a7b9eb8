"""Update invitation use case."""

import datetime as dt
from uuid import UUID

from pydantic import BaseModel

from wedding.config import Settings
from wedding.domain.model import BankAccount, Ceremony, SocialLink
from wedding.domain.service import InvitationService
from wedding.domain.value import InvitationId, Slug, Template, TimeZone, UserId

from .common import InvitationItem


class InvitationChanges(BaseModel):
    """Partial invitation content.

    Only fields explicitly set are changed; setting an optional field to
    None removes it.
    """

    bride_names: str | None = None
    groom_names: str | None = None
    date: dt.date | None = None
    time: dt.time | None = None
    venue: str | None = None
    message: str | None = None
    bride_parents: str | None = None
    groom_parents: str | None = None
    show_akad: bool | None = None
    akad: Ceremony | None = None
    show_resepsi: bool | None = None
    resepsi: Ceremony | None = None
    opening_text: str | None = None
    invitation_text: str | None = None
    bride_photo: str | None = None
    groom_photo: str | None = None
    cover_photo: str | None = None
    gallery: list[str] | None = None
    bank_accounts: list[BankAccount] | None = None
    social_links: list[SocialLink] | None = None
    google_maps_url: str | None = None
    google_maps_embed: str | None = None
    custom_slug: Slug | None = None
    background_music: str | None = None
    rsvp_enabled: bool | None = None
    comments_enabled: bool | None = None
    max_guests: int | None = None
    template: Template | None = None
    timezone: TimeZone | None = None


class UpdateInvitationRequest(InvitationChanges):
    """Update invitation request."""

    invitation_id: str  # UUID string
    user_id: str  # Current user ID (must be owner)


class UpdateInvitationResponse(BaseModel):
    """Update invitation response."""

    invitation: InvitationItem


class UpdateInvitationUseCase:
    """Use case for editing an invitation's content."""

    def __init__(
        self, invitation_service: InvitationService, settings: Settings
    ) -> None:
        self.invitation_service = invitation_service
        self.settings = settings

    async def execute(
        self, request: UpdateInvitationRequest
    ) -> UpdateInvitationResponse:
        """Execute update invitation flow.

        Raises:
            NotFoundError: If the invitation doesn't exist
            NotAuthorizedError: If the user isn't the owner
            SlugTakenError: If a new custom slug is already in use
        """
        changes = request.model_dump(
            exclude_unset=True, exclude={"invitation_id", "user_id"}
        )
        invitation = await self.invitation_service.update_invitation(
            InvitationId(UUID(request.invitation_id)),
            UserId(UUID(request.user_id)),
            **changes,
        )

        return UpdateInvitationResponse(
            invitation=InvitationItem.from_invitation(
                invitation, self.settings.sharing.public_base_url
            )
        )
