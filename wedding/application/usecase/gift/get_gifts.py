"""Get gifts use case."""

from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel

from wedding.domain.service import GiftService, InvitationService
from wedding.domain.value import InvitationId, UserId

from .common import GiftItem


class GetGiftsRequest(BaseModel):
    """Get gifts request."""

    invitation_id: str  # UUID string
    user_id: str  # Current user ID (must be owner)


class GetGiftsResponse(BaseModel):
    """Get gifts response."""

    invitation_id: str
    gifts: list[GiftItem]
    total: int
    confirmed_amount: Decimal


class GetGiftsUseCase:
    """Use case for the owner reviewing reported gifts."""

    def __init__(
        self, gift_service: GiftService, invitation_service: InvitationService
    ) -> None:
        self.gift_service = gift_service
        self.invitation_service = invitation_service

    async def execute(self, request: GetGiftsRequest) -> GetGiftsResponse:
        """Execute get gifts flow (newest first).

        Raises:
            NotFoundError: If the invitation doesn't exist
            NotAuthorizedError: If the user isn't the owner
        """
        invitation_id = InvitationId(UUID(request.invitation_id))
        await self.invitation_service.get_owned(
            invitation_id, UserId(UUID(request.user_id))
        )

        gifts = await self.gift_service.get_gifts_for_invitation(invitation_id)

        return GetGiftsResponse(
            invitation_id=request.invitation_id,
            gifts=[GiftItem.from_gift(gift) for gift in gifts],
            total=len(gifts),
            confirmed_amount=sum(
                (gift.amount for gift in gifts if gift.confirmed), Decimal("0")
            ),
        )
