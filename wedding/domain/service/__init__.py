"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .gift_service import GiftService
from .invitation_service import InvitationService
from .jwt_service import JWTService
from .schema_service import SchemaClient, SchemaService

__all__ = [
    "CommentService",
    "GiftService",
    "InvitationService",
    "JWTService",
    "SchemaClient",
    "SchemaService",
    "Service",
]
