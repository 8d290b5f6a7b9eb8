"""In-memory invitation repository for testing."""

from typing import Optional
from uuid import uuid4

from wedding.domain.model.invitation import Invitation
from wedding.domain.repository.invitation import InvitationRepository
from wedding.domain.value import InvitationId, Slug, UserId


class InMemoryInvitationRepository(InvitationRepository):
    """In-memory implementation of InvitationRepository for testing."""

    def __init__(self) -> None:
        self._invitations: dict[InvitationId, Invitation] = {}

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID."""
        return self._invitations.get(invitation_id)

    async def find_by_slug(self, slug: Slug) -> Optional[Invitation]:
        """Find an invitation by share slug."""
        for invitation in self._invitations.values():
            if invitation.slug == slug:
                return invitation
        return None

    async def find_by_owner(self, owner_id: UserId) -> list[Invitation]:
        """Find an owner's invitations, newest first."""
        invitations = [
            i for i in self._invitations.values() if i.owner_id == owner_id
        ]
        invitations.sort(key=lambda i: i.created_at, reverse=True)
        return invitations

    async def slug_exists(
        self, slug: Slug, exclude_id: Optional[InvitationId] = None
    ) -> bool:
        """Check whether a slug is in use by another invitation."""
        return any(
            i.slug == slug and i.id != exclude_id for i in self._invitations.values()
        )

    async def save(self, invitation: Invitation) -> Invitation:
        """Save or update an invitation."""
        if invitation.id is None:
            invitation = invitation.model_copy(update={"id": InvitationId(uuid4())})
        self._invitations[invitation.id] = invitation
        return invitation
