"""Test configuration and helpers."""

import datetime as dt
from typing import Any
from uuid import uuid4

from wedding.config import Settings
from wedding.domain.model import Invitation
from wedding.domain.value import InvitationId, InvitationStatus, UserId
from wedding.util.jwt import create_token


def make_user_id() -> UserId:
    return UserId(uuid4())


def invitation_fields(**overrides: Any) -> dict[str, Any]:
    """Minimal set of fields for a valid invitation."""
    fields: dict[str, Any] = {
        "bride_names": "Siti",
        "groom_names": "Budi",
        "date": dt.date(2026, 6, 20),
        "time": dt.time(10, 0),
        "venue": "Gedung Serbaguna, Yogyakarta",
        "message": "<p>Kami mengundang Anda</p>",
    }
    fields.update(overrides)
    return fields


def make_invitation(
    owner_id: UserId | None = None,
    status: InvitationStatus = InvitationStatus.DRAFT,
    **overrides: Any,
) -> Invitation:
    """Build an invitation with an ID, ready to save."""
    return Invitation(
        id=InvitationId(uuid4()),
        owner_id=owner_id or make_user_id(),
        status=status,
        **invitation_fields(**overrides),
    )


def auth_header(user_id: UserId) -> dict[str, str]:
    """Authorization header with a token the configured API accepts."""
    token = create_token(str(user_id), Settings().auth)
    return {"Authorization": f"Bearer {token}"}
