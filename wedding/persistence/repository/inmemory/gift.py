"""In-memory gift repository for testing."""

from typing import Optional

from wedding.domain.model.gift import Gift
from wedding.domain.repository.gift import GiftRepository
from wedding.domain.value import GiftId, InvitationId


class InMemoryGiftRepository(GiftRepository):
    """In-memory implementation of GiftRepository for testing."""

    def __init__(self) -> None:
        self._gifts: dict[GiftId, Gift] = {}

    async def find_by_id(self, gift_id: GiftId) -> Optional[Gift]:
        """Find a gift by ID."""
        return self._gifts.get(gift_id)

    async def find_by_invitation(self, invitation_id: InvitationId) -> list[Gift]:
        """Find gifts for an invitation, newest first."""
        gifts = [g for g in self._gifts.values() if g.invitation_id == invitation_id]
        gifts.sort(key=lambda g: g.created_at, reverse=True)
        return gifts

    async def save(self, gift: Gift) -> Gift:
        """Save a gift."""
        self._gifts[gift.id] = gift
        return gift

    async def mark_confirmed(self, gift_id: GiftId) -> Optional[Gift]:
        """Set the confirmed flag."""
        gift = self._gifts.get(gift_id)
        if gift is None:
            return None
        confirmed = gift.confirm()
        self._gifts[gift_id] = confirmed
        return confirmed
