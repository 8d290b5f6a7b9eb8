"""PostgreSQL repository implementations."""

from wedding.persistence.repository.comment import PostgresCommentRepository
from wedding.persistence.repository.gift import PostgresGiftRepository
from wedding.persistence.repository.invitation import PostgresInvitationRepository

__all__ = [
    "PostgresInvitationRepository",
    "PostgresCommentRepository",
    "PostgresGiftRepository",
]
