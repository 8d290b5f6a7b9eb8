"""Invitation repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from wedding.domain.model.invitation import Invitation
from wedding.domain.value import InvitationId, Slug, UserId


class InvitationRepository(ABC):
    """Repository for Invitation aggregate.

    Bank accounts and social links are stored with the invitation and are
    always read and written as part of it.
    """

    @abstractmethod
    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID.

        Args:
            invitation_id: The invitation's unique identifier

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[Invitation]:
        """Find an invitation by its share slug.

        Args:
            slug: The share slug

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_owner(self, owner_id: UserId) -> List[Invitation]:
        """Find all invitations of an owner, newest first.

        Args:
            owner_id: The owner's user ID

        Returns:
            List of invitations
        """
        pass

    @abstractmethod
    async def slug_exists(
        self, slug: Slug, exclude_id: Optional[InvitationId] = None
    ) -> bool:
        """Check whether a share slug is already in use.

        Args:
            slug: The slug to check
            exclude_id: Invitation to ignore (the one being updated)

        Returns:
            True if another invitation uses the slug
        """
        pass

    @abstractmethod
    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update).

        An invitation without an ID is assigned one.

        Args:
            invitation: The invitation to save

        Returns:
            The saved invitation
        """
        pass
