"""PostgreSQL implementation of Comment repository."""

from typing import Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from wedding.domain.model import Comment
from wedding.domain.repository import CommentRepository
from wedding.domain.value import Attendance, CommentId, InvitationId
from wedding.persistence.mappers import comment_to_dict, row_to_comment
from wedding.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_invitation(self, invitation_id: InvitationId) -> List[Comment]:
        """Find all comments on an invitation, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.invitation_id == invitation_id)
            .order_by(comments_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_by_attendance(
        self, invitation_id: InvitationId
    ) -> Dict[Attendance, int]:
        """Count comments per attendance answer."""
        stmt = (
            select(comments_table.c.attendance, func.count())
            .where(comments_table.c.invitation_id == invitation_id)
            .group_by(comments_table.c.attendance)
        )
        result = await self.session.execute(stmt)

        counts = {attendance: 0 for attendance in Attendance}
        for attendance, count in result.all():
            counts[Attendance(attendance)] = count
        return counts

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment."""
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment
