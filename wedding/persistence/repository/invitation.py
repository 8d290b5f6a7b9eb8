"""PostgreSQL implementation of Invitation repository."""

from typing import List, Optional
from uuid import uuid4

from sqlalchemy import desc, exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from wedding.domain.model import Invitation
from wedding.domain.repository import InvitationRepository
from wedding.domain.value import InvitationId, Slug, UserId
from wedding.persistence.mappers import invitation_to_dict, row_to_invitation
from wedding.persistence.tables import invitations_table


class PostgresInvitationRepository(InvitationRepository):
    """PostgreSQL implementation of InvitationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID."""
        stmt = select(invitations_table).where(invitations_table.c.id == invitation_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_invitation(row._asdict()) if row else None

    async def find_by_slug(self, slug: Slug) -> Optional[Invitation]:
        """Find an invitation by share slug."""
        stmt = select(invitations_table).where(invitations_table.c.slug == slug.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_invitation(row._asdict()) if row else None

    async def find_by_owner(self, owner_id: UserId) -> List[Invitation]:
        """Find all invitations of an owner, newest first."""
        stmt = (
            select(invitations_table)
            .where(invitations_table.c.owner_id == owner_id)
            .order_by(desc(invitations_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_invitation(row._asdict()) for row in result.fetchall()]

    async def slug_exists(
        self, slug: Slug, exclude_id: Optional[InvitationId] = None
    ) -> bool:
        """Check whether a share slug is already in use."""
        condition = invitations_table.c.slug == slug.root
        if exclude_id is not None:
            condition = condition & (invitations_table.c.id != exclude_id)
        result = await self.session.execute(select(exists().where(condition)))
        return bool(result.scalar())

    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update)."""
        if invitation.id is None:
            invitation = invitation.model_copy(update={"id": InvitationId(uuid4())})

        invitation_dict = invitation_to_dict(invitation)
        existing = await self.find_by_id(invitation.id)

        if existing:
            stmt = (
                invitations_table.update()
                .where(invitations_table.c.id == invitation.id)
                .values(**invitation_dict)
            )
        else:
            stmt = invitations_table.insert().values(**invitation_dict)
        await self.session.execute(stmt)
        await self.session.flush()

        return await self.find_by_id(invitation.id) or invitation
