"""Record gift use case."""

from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel

from wedding.domain.service import GiftService
from wedding.domain.value import InvitationId

from .common import GiftItem


class RecordGiftRequest(BaseModel):
    """Record gift request."""

    invitation_id: str  # UUID string
    sender_name: str
    amount: Decimal
    bank_account: str
    message: str | None = None


class RecordGiftResponse(BaseModel):
    """Record gift response."""

    gift: GiftItem


class RecordGiftUseCase:
    """Use case for a guest reporting a cashless gift."""

    def __init__(self, gift_service: GiftService) -> None:
        self.gift_service = gift_service

    async def execute(self, request: RecordGiftRequest) -> RecordGiftResponse:
        """Execute record gift flow.

        Raises:
            NotFoundError: If the invitation doesn't exist
            InvitationNotPublishedError: If the invitation is a draft
        """
        gift = await self.gift_service.record_gift(
            invitation_id=InvitationId(UUID(request.invitation_id)),
            sender_name=request.sender_name,
            amount=request.amount,
            bank_account=request.bank_account,
            message=request.message,
        )
        return RecordGiftResponse(gift=GiftItem.from_gift(gift))
