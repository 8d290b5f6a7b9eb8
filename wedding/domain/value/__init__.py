"""Domain value objects for wedding invitations."""

from wedding.domain.value.content import (
    ContentKind,
    RichText,
    clean_guest_text,
    coerce_content,
    sanitize_embed,
    sanitize_guest_text,
    sanitize_html,
    strip_markup,
)
from wedding.domain.value.identifiers import CommentId, GiftId, InvitationId, UserId
from wedding.domain.value.types import (
    Attendance,
    InvitationStatus,
    Slug,
    Template,
    TimeZone,
)

__all__ = [
    # Identifiers
    "UserId",
    "InvitationId",
    "CommentId",
    "GiftId",
    # Types
    "Attendance",
    "InvitationStatus",
    "Slug",
    "Template",
    "TimeZone",
    # Content
    "ContentKind",
    "RichText",
    "clean_guest_text",
    "coerce_content",
    "sanitize_embed",
    "sanitize_guest_text",
    "sanitize_html",
    "strip_markup",
]
