"""Domain models for wedding invitations."""

from wedding.domain.model.comment import Comment
from wedding.domain.model.common import DomainModel
from wedding.domain.model.gift import Gift
from wedding.domain.model.invitation import (
    BankAccount,
    Ceremony,
    Invitation,
    SocialLink,
)
from wedding.domain.model.migration import Migration

__all__ = [
    "DomainModel",
    "Invitation",
    "BankAccount",
    "SocialLink",
    "Ceremony",
    "Comment",
    "Gift",
    "Migration",
]
