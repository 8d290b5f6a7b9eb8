"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from wedding.domain.model.comment import Comment
from wedding.domain.value import Attendance, CommentId, InvitationId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_invitation(self, invitation_id: InvitationId) -> List[Comment]:
        """Find all comments on an invitation, oldest first.

        Args:
            invitation_id: The invitation ID

        Returns:
            List of comments in creation order
        """
        pass

    @abstractmethod
    async def count_by_attendance(
        self, invitation_id: InvitationId
    ) -> Dict[Attendance, int]:
        """Count comments on an invitation per attendance answer.

        Every answer is present in the result, with zero when unused.

        Args:
            invitation_id: The invitation ID

        Returns:
            Mapping of attendance answer to count
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a new comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass
