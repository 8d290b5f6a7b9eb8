"""In-memory comment repository for testing."""

from typing import Optional

from wedding.domain.model.comment import Comment
from wedding.domain.repository.comment import CommentRepository
from wedding.domain.value import Attendance, CommentId, InvitationId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_invitation(self, invitation_id: InvitationId) -> list[Comment]:
        """Find comments on an invitation, oldest first."""
        comments = [
            c for c in self._comments.values() if c.invitation_id == invitation_id
        ]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def count_by_attendance(
        self, invitation_id: InvitationId
    ) -> dict[Attendance, int]:
        """Count comments per attendance answer."""
        counts = {attendance: 0 for attendance in Attendance}
        for comment in self._comments.values():
            if comment.invitation_id == invitation_id:
                counts[comment.attendance] += 1
        return counts

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._comments[comment.id] = comment
        return comment
