"""Strongly typed identifiers for invitation entities.

NewType keeps invitation, comment and gift IDs from being mixed up even
though all of them are UUIDs at runtime.
"""

from typing import NewType
from uuid import UUID

# Owner identity issued by the backend's auth service
UserId = NewType("UserId", UUID)

InvitationId = NewType("InvitationId", UUID)
CommentId = NewType("CommentId", UUID)
GiftId = NewType("GiftId", UUID)
