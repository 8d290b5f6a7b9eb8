"""PostgreSQL implementation of Gift repository."""

from typing import List, Optional

from sqlalchemy import desc, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from wedding.domain.model import Gift
from wedding.domain.repository import GiftRepository
from wedding.domain.value import GiftId, InvitationId
from wedding.persistence.mappers import gift_to_dict, row_to_gift
from wedding.persistence.tables import gifts_table


class PostgresGiftRepository(GiftRepository):
    """PostgreSQL implementation of GiftRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, gift_id: GiftId) -> Optional[Gift]:
        """Find a gift by ID."""
        stmt = select(gifts_table).where(gifts_table.c.id == gift_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_gift(row._asdict()) if row else None

    async def find_by_invitation(self, invitation_id: InvitationId) -> List[Gift]:
        """Find all gifts for an invitation, newest first."""
        stmt = (
            select(gifts_table)
            .where(gifts_table.c.invitation_id == invitation_id)
            .order_by(desc(gifts_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_gift(row._asdict()) for row in result.fetchall()]

    async def save(self, gift: Gift) -> Gift:
        """Insert a gift."""
        stmt = gifts_table.insert().values(**gift_to_dict(gift))
        await self.session.execute(stmt)
        await self.session.flush()
        return gift

    async def mark_confirmed(self, gift_id: GiftId) -> Optional[Gift]:
        """Set the confirmed flag; there is no statement that clears it."""
        stmt = (
            update(gifts_table)
            .where(gifts_table.c.id == gift_id)
            .values(confirmed=True)
            .returning(gifts_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None

        await self.session.flush()
        return row_to_gift(row._asdict())
