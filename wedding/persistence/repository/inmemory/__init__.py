"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .gift import InMemoryGiftRepository
from .invitation import InMemoryInvitationRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryGiftRepository",
    "InMemoryInvitationRepository",
]
