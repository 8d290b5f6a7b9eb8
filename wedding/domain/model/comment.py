"""Comment domain model."""

from datetime import datetime

from pydantic import Field, field_validator

from wedding.domain.model.common import DomainModel
from wedding.domain.value import (
    Attendance,
    CommentId,
    InvitationId,
    clean_guest_text,
)

NAME_MAX_LENGTH = 100
MESSAGE_MAX_LENGTH = 500


class Comment(DomainModel):
    """A guest's wish and attendance answer on an invitation.

    Comments are written by anonymous guests and never edited. Name and
    message are sanitized on construction; only inline emphasis survives,
    and the length limits apply to the sanitized text that gets stored.
    """

    id: CommentId
    invitation_id: InvitationId
    name: str = Field(min_length=1)
    message: str = Field(min_length=1)
    attendance: Attendance
    created_at: datetime = Field(default_factory=datetime.now)

    @field_validator("name")
    @classmethod
    def sanitize_name(cls, v: str) -> str:
        return clean_guest_text(v, NAME_MAX_LENGTH, label="Name")

    @field_validator("message")
    @classmethod
    def sanitize_message(cls, v: str) -> str:
        """Strip disallowed markup, rejecting messages left empty."""
        return clean_guest_text(v, MESSAGE_MAX_LENGTH, label="Message")
