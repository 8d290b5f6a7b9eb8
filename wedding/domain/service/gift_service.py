"""Gift domain service."""

from datetime import datetime
from decimal import Decimal
from uuid import uuid4

import logfire

from wedding.domain.error import InvitationNotPublishedError, NotFoundError
from wedding.domain.model.gift import Gift
from wedding.domain.repository import GiftRepository, InvitationRepository
from wedding.domain.value import GiftId, InvitationId

from .base import Service


class GiftService(Service):
    """Domain service for gifts reported by guests."""

    def __init__(
        self,
        gift_repository: GiftRepository,
        invitation_repository: InvitationRepository,
    ) -> None:
        """Initialize gift service.

        Args:
            gift_repository: Gift repository
            invitation_repository: Invitation repository
        """
        self.gift_repository = gift_repository
        self.invitation_repository = invitation_repository

    async def record_gift(
        self,
        invitation_id: InvitationId,
        sender_name: str,
        amount: Decimal,
        bank_account: str,
        message: str | None = None,
    ) -> Gift:
        """Record a gift a guest sent to one of the couple's accounts.

        Args:
            invitation_id: Invitation ID
            sender_name: Guest name
            amount: Amount sent
            bank_account: Account the gift was sent to (free text)
            message: Optional note

        Returns:
            Recorded gift, unconfirmed

        Raises:
            NotFoundError: If the invitation doesn't exist
            InvitationNotPublishedError: If the invitation is a draft
        """
        with logfire.span(
            "gift_service.record_gift",
            invitation_id=str(invitation_id),
            amount=str(amount),
        ):
            invitation = await self.invitation_repository.find_by_id(invitation_id)
            if invitation is None:
                logfire.error(
                    "Invitation not found for gift", invitation_id=str(invitation_id)
                )
                raise NotFoundError("Invitation", str(invitation_id))
            if not invitation.is_published:
                logfire.warn(
                    "Gift for unpublished invitation",
                    invitation_id=str(invitation_id),
                )
                raise InvitationNotPublishedError(str(invitation_id))

            gift = Gift(
                id=GiftId(uuid4()),
                invitation_id=invitation_id,
                sender_name=sender_name,
                amount=amount,
                message=message,
                bank_account=bank_account,
                confirmed=False,
                created_at=datetime.now(),
            )

            saved = await self.gift_repository.save(gift)
            logfire.info(
                "Gift recorded",
                gift_id=str(saved.id),
                invitation_id=str(invitation_id),
            )
            return saved

    async def get_gifts_for_invitation(self, invitation_id: InvitationId) -> list[Gift]:
        """Get all gifts for an invitation, newest first."""
        with logfire.span(
            "gift_service.get_gifts_for_invitation", invitation_id=str(invitation_id)
        ):
            gifts = await self.gift_repository.find_by_invitation(invitation_id)
            logfire.info(
                "Gifts retrieved for invitation",
                invitation_id=str(invitation_id),
                count=len(gifts),
            )
            return gifts

    async def get_gift_by_id(self, gift_id: GiftId) -> Gift | None:
        with logfire.span("gift_service.get_gift_by_id", gift_id=str(gift_id)):
            return await self.gift_repository.find_by_id(gift_id)

    async def confirm_gift(self, gift_id: GiftId) -> Gift:
        """Mark a gift as received.

        Confirming an already confirmed gift returns it unchanged.

        Args:
            gift_id: Gift ID

        Returns:
            Confirmed gift

        Raises:
            NotFoundError: If the gift doesn't exist
        """
        with logfire.span("gift_service.confirm_gift", gift_id=str(gift_id)):
            gift = await self.gift_repository.find_by_id(gift_id)
            if gift is None:
                logfire.error("Gift not found for confirmation", gift_id=str(gift_id))
                raise NotFoundError("Gift", str(gift_id))
            if gift.confirmed:
                logfire.info("Gift already confirmed", gift_id=str(gift_id))
                return gift

            confirmed = await self.gift_repository.mark_confirmed(gift_id)
            if confirmed is None:
                raise NotFoundError("Gift", str(gift_id))
            logfire.info("Gift confirmed", gift_id=str(gift_id))
            return confirmed
