"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from wedding.domain.error import (
    CommentsClosedError,
    InvitationNotPublishedError,
    NotFoundError,
    RsvpClosedError,
)
from wedding.domain.model.comment import Comment
from wedding.domain.model.invitation import Invitation
from wedding.domain.repository import CommentRepository, InvitationRepository
from wedding.domain.value import Attendance, CommentId, InvitationId

from .base import Service


class CommentService(Service):
    """Domain service for guest comments and attendance answers."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        invitation_repository: InvitationRepository,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            invitation_repository: Invitation repository
        """
        self.comment_repository = comment_repository
        self.invitation_repository = invitation_repository

    async def create_comment(
        self,
        invitation_id: InvitationId,
        name: str,
        message: str,
        attendance: Attendance,
    ) -> Comment:
        """Leave a comment on a published invitation.

        Args:
            invitation_id: Invitation ID
            name: Guest name
            message: Wish text (sanitized by the model)
            attendance: Attendance answer

        Returns:
            Created comment

        Raises:
            NotFoundError: If the invitation doesn't exist
            InvitationNotPublishedError: If the invitation is a draft
            CommentsClosedError: If the owner turned comments off
            RsvpClosedError: If the answer is "yes" but RSVP is off or
                ``max_guests`` is reached
        """
        with logfire.span(
            "comment_service.create_comment",
            invitation_id=str(invitation_id),
            attendance=attendance.value,
        ):
            invitation = await self.invitation_repository.find_by_id(invitation_id)
            if invitation is None:
                logfire.error(
                    "Invitation not found for comment",
                    invitation_id=str(invitation_id),
                )
                raise NotFoundError("Invitation", str(invitation_id))
            if not invitation.is_published:
                logfire.warn(
                    "Comment on unpublished invitation",
                    invitation_id=str(invitation_id),
                )
                raise InvitationNotPublishedError(str(invitation_id))
            if not invitation.comments_enabled:
                logfire.warn(
                    "Comment on invitation with comments closed",
                    invitation_id=str(invitation_id),
                )
                raise CommentsClosedError(str(invitation_id))
            if attendance == Attendance.YES:
                await self._check_rsvp_open(invitation)

            comment = Comment(
                id=CommentId(uuid4()),
                invitation_id=invitation_id,
                name=name,
                message=message,
                attendance=attendance,
                created_at=datetime.now(),
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                invitation_id=str(invitation_id),
            )
            return saved

    async def get_comments_for_invitation(
        self, invitation_id: InvitationId
    ) -> list[Comment]:
        """Get all comments on an invitation, oldest first."""
        with logfire.span(
            "comment_service.get_comments_for_invitation",
            invitation_id=str(invitation_id),
        ):
            comments = await self.comment_repository.find_by_invitation(invitation_id)
            logfire.info(
                "Comments retrieved for invitation",
                invitation_id=str(invitation_id),
                count=len(comments),
            )
            return comments

    async def attendance_summary(
        self, invitation_id: InvitationId
    ) -> dict[Attendance, int]:
        """Count attendance answers on an invitation.

        Args:
            invitation_id: Invitation ID

        Returns:
            Count per attendance answer, zero for unused answers
        """
        with logfire.span(
            "comment_service.attendance_summary", invitation_id=str(invitation_id)
        ):
            return await self.comment_repository.count_by_attendance(invitation_id)

    async def _check_rsvp_open(self, invitation: Invitation) -> None:
        """Raise unless another guest may confirm attendance."""
        if not invitation.rsvp_enabled:
            logfire.warn("RSVP disabled", invitation_id=str(invitation.id))
            raise RsvpClosedError(str(invitation.id), "RSVP is disabled")

        counts = await self.comment_repository.count_by_attendance(invitation.id)
        if not invitation.has_seats_for(counts[Attendance.YES]):
            logfire.warn(
                "Guest limit reached",
                invitation_id=str(invitation.id),
                max_guests=invitation.max_guests,
            )
            raise RsvpClosedError(str(invitation.id), "guest limit reached")
