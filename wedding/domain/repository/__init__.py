"""Repository interfaces for the wedding invitation domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from wedding.domain.repository.comment import CommentRepository
from wedding.domain.repository.gift import GiftRepository
from wedding.domain.repository.invitation import InvitationRepository

__all__ = [
    "InvitationRepository",
    "CommentRepository",
    "GiftRepository",
]
