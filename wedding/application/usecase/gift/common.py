"""Shapes shared by the gift use cases."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel

from wedding.domain.model import Gift


class GiftItem(BaseModel):
    """Gift in responses."""

    gift_id: str
    invitation_id: str
    sender_name: str
    amount: Decimal
    message: str | None
    bank_account: str
    confirmed: bool
    created_at: datetime

    @classmethod
    def from_gift(cls, gift: Gift) -> "GiftItem":
        return cls(
            gift_id=str(gift.id),
            invitation_id=str(gift.invitation_id),
            sender_name=gift.sender_name,
            amount=gift.amount,
            message=gift.message,
            bank_account=gift.bank_account,
            confirmed=gift.confirmed,
            created_at=gift.created_at,
        )
