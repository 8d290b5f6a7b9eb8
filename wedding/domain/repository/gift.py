"""Gift repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from wedding.domain.model.gift import Gift
from wedding.domain.value import GiftId, InvitationId


class GiftRepository(ABC):
    """Repository for Gift entity.

    Gifts are inserted once and afterwards only ever confirmed.
    """

    @abstractmethod
    async def find_by_id(self, gift_id: GiftId) -> Optional[Gift]:
        """Find a gift by ID.

        Args:
            gift_id: The gift's unique identifier

        Returns:
            The gift if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_invitation(self, invitation_id: InvitationId) -> List[Gift]:
        """Find all gifts for an invitation, newest first.

        Args:
            invitation_id: The invitation ID

        Returns:
            List of gifts
        """
        pass

    @abstractmethod
    async def save(self, gift: Gift) -> Gift:
        """Insert a new gift.

        Args:
            gift: The gift to save

        Returns:
            The saved gift
        """
        pass

    @abstractmethod
    async def mark_confirmed(self, gift_id: GiftId) -> Optional[Gift]:
        """Set the confirmed flag of a gift.

        The flag is only ever set, never cleared.

        Args:
            gift_id: The gift ID

        Returns:
            The confirmed gift, or None if it doesn't exist
        """
        pass
