"""Create comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from wedding.domain.service import CommentService
from wedding.domain.value import Attendance, InvitationId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    invitation_id: str  # UUID string
    name: str
    message: str
    attendance: Attendance


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment_id: str
    invitation_id: str
    name: str
    message: str
    attendance: Attendance
    created_at: datetime


class CreateCommentUseCase:
    """Use case for a guest leaving a wish and attendance answer."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            The stored comment, message sanitized

        Raises:
            NotFoundError: If the invitation doesn't exist
            InvitationNotPublishedError: If the invitation is a draft
            CommentsClosedError: If comments are turned off
            RsvpClosedError: If attendance can no longer be confirmed
        """
        comment = await self.comment_service.create_comment(
            invitation_id=InvitationId(UUID(request.invitation_id)),
            name=request.name,
            message=request.message,
            attendance=request.attendance,
        )

        return CreateCommentResponse(
            comment_id=str(comment.id),
            invitation_id=str(comment.invitation_id),
            name=comment.name,
            message=comment.message,
            attendance=comment.attendance,
            created_at=comment.created_at,
        )
