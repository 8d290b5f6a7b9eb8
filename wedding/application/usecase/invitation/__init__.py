"""Invitation use cases."""

from .common import InvitationFields, InvitationItem, SocialLinkItem
from .create_invitation import (
    CreateInvitationRequest,
    CreateInvitationResponse,
    CreateInvitationUseCase,
)
from .get_invitation import (
    GetInvitationRequest,
    GetInvitationResponse,
    GetInvitationUseCase,
    GetPublicInvitationRequest,
    GetPublicInvitationUseCase,
)
from .list_invitations import (
    ListInvitationsRequest,
    ListInvitationsResponse,
    ListInvitationsUseCase,
)
from .publish_invitation import (
    PublishInvitationRequest,
    PublishInvitationResponse,
    PublishInvitationUseCase,
)
from .update_invitation import (
    InvitationChanges,
    UpdateInvitationRequest,
    UpdateInvitationResponse,
    UpdateInvitationUseCase,
)

__all__ = [
    "InvitationFields",
    "InvitationItem",
    "SocialLinkItem",
    "CreateInvitationRequest",
    "CreateInvitationResponse",
    "CreateInvitationUseCase",
    "GetInvitationRequest",
    "GetInvitationResponse",
    "GetInvitationUseCase",
    "GetPublicInvitationRequest",
    "GetPublicInvitationUseCase",
    "ListInvitationsRequest",
    "ListInvitationsResponse",
    "ListInvitationsUseCase",
    "PublishInvitationRequest",
    "PublishInvitationResponse",
    "PublishInvitationUseCase",
    "InvitationChanges",
    "UpdateInvitationRequest",
    "UpdateInvitationResponse",
    "UpdateInvitationUseCase",
]
