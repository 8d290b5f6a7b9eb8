"""Confirm gift use case."""

from uuid import UUID

from pydantic import BaseModel

from wedding.domain.error import NotFoundError
from wedding.domain.service import GiftService, InvitationService
from wedding.domain.value import GiftId, InvitationId, UserId

from .common import GiftItem


class ConfirmGiftRequest(BaseModel):
    """Confirm gift request."""

    invitation_id: str  # UUID string
    gift_id: str  # UUID string
    user_id: str  # Current user ID (must be owner)


class ConfirmGiftResponse(BaseModel):
    """Confirm gift response."""

    gift: GiftItem


class ConfirmGiftUseCase:
    """Use case for the owner confirming a gift arrived."""

    def __init__(
        self, gift_service: GiftService, invitation_service: InvitationService
    ) -> None:
        self.gift_service = gift_service
        self.invitation_service = invitation_service

    async def execute(self, request: ConfirmGiftRequest) -> ConfirmGiftResponse:
        """Execute confirm gift flow.

        Raises:
            NotFoundError: If the invitation or gift doesn't exist, or the
                gift belongs to another invitation
            NotAuthorizedError: If the user isn't the owner
        """
        invitation_id = InvitationId(UUID(request.invitation_id))
        gift_id = GiftId(UUID(request.gift_id))

        await self.invitation_service.get_owned(
            invitation_id, UserId(UUID(request.user_id))
        )

        gift = await self.gift_service.get_gift_by_id(gift_id)
        if gift is None or gift.invitation_id != invitation_id:
            raise NotFoundError("Gift", request.gift_id)

        confirmed = await self.gift_service.confirm_gift(gift_id)
        return ConfirmGiftResponse(gift=GiftItem.from_gift(confirmed))
