"""Gift domain model."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field, field_validator

from wedding.domain.model.common import DomainModel
from wedding.domain.value import GiftId, InvitationId, clean_guest_text

SENDER_NAME_MAX_LENGTH = 100
MESSAGE_MAX_LENGTH = 500
BANK_ACCOUNT_MAX_LENGTH = 200


class Gift(DomainModel):
    """A cashless gift a guest reports having sent.

    Gifts start unconfirmed. The invitation owner confirms them once the
    transfer shows up; confirmation is one-way. Guest-written text is
    sanitized like comments are.
    """

    id: GiftId
    invitation_id: InvitationId
    sender_name: str = Field(min_length=1)
    amount: Decimal = Field(ge=0, max_digits=14, decimal_places=2)
    message: Optional[str] = None
    bank_account: str = Field(min_length=1)
    confirmed: bool = False
    created_at: datetime = Field(default_factory=datetime.now)

    @field_validator("sender_name")
    @classmethod
    def sanitize_sender_name(cls, v: str) -> str:
        return clean_guest_text(v, SENDER_NAME_MAX_LENGTH, label="Sender name")

    @field_validator("message")
    @classmethod
    def sanitize_message(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return clean_guest_text(v, MESSAGE_MAX_LENGTH, label="Message", required=False)

    @field_validator("bank_account")
    @classmethod
    def sanitize_bank_account(cls, v: str) -> str:
        return clean_guest_text(v, BANK_ACCOUNT_MAX_LENGTH, label="Bank account")

    def confirm(self) -> "Gift":
        """Return a confirmed copy (self when already confirmed)."""
        if self.confirmed:
            return self
        return self.model_copy(update={"confirmed": True})
