"""Get comments use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from wedding.domain.error import NotFoundError
from wedding.domain.service import CommentService, InvitationService
from wedding.domain.value import Attendance, InvitationId, UserId


class CommentItem(BaseModel):
    """Comment item in response."""

    comment_id: str
    name: str
    message: str
    attendance: Attendance
    created_at: datetime


class AttendanceSummary(BaseModel):
    """Attendance answer counts."""

    yes: int
    no: int
    maybe: int


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    invitation_id: str  # UUID string
    user_id: str | None = None  # Set when the owner is authenticated


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    invitation_id: str
    comments: list[CommentItem]
    attendance: AttendanceSummary
    total: int


class GetCommentsUseCase:
    """Use case for listing the wishes left on an invitation."""

    def __init__(
        self,
        comment_service: CommentService,
        invitation_service: InvitationService,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            invitation_service: Invitation domain service
        """
        self.comment_service = comment_service
        self.invitation_service = invitation_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Comments of a draft are visible to its owner only.

        Raises:
            NotFoundError: If the invitation doesn't exist or isn't visible
        """
        invitation_id = InvitationId(UUID(request.invitation_id))

        invitation = await self.invitation_service.get_by_id(invitation_id)
        is_owner = request.user_id is not None and invitation is not None and (
            invitation.is_owned_by(UserId(UUID(request.user_id)))
        )
        if invitation is None or not (invitation.is_published or is_owner):
            raise NotFoundError("Invitation", request.invitation_id)

        comments = await self.comment_service.get_comments_for_invitation(
            invitation_id
        )
        counts = await self.comment_service.attendance_summary(invitation_id)

        return GetCommentsResponse(
            invitation_id=request.invitation_id,
            comments=[
                CommentItem(
                    comment_id=str(comment.id),
                    name=comment.name,
                    message=comment.message,
                    attendance=comment.attendance,
                    created_at=comment.created_at,
                )
                for comment in comments
            ],
            attendance=AttendanceSummary(
                yes=counts[Attendance.YES],
                no=counts[Attendance.NO],
                maybe=counts[Attendance.MAYBE],
            ),
            total=len(comments),
        )
