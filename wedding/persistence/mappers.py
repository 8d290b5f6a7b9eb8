"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from wedding.domain.model import (
    BankAccount,
    Ceremony,
    Comment,
    Gift,
    Invitation,
    SocialLink,
)
from wedding.domain.value import (
    Attendance,
    CommentId,
    GiftId,
    InvitationId,
    InvitationStatus,
    RichText,
    Slug,
    Template,
    TimeZone,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _rich_text(value: Optional[Dict[str, Any]]) -> Optional[RichText]:
    return RichText.model_validate(value) if value is not None else None


def _ceremony(row: Dict[str, Any], prefix: str) -> Optional[Ceremony]:
    if row.get(f"{prefix}_date") is None:
        return None
    return Ceremony(
        date=row[f"{prefix}_date"],
        time=row[f"{prefix}_time"],
        venue=row[f"{prefix}_venue"],
        maps_url=row.get(f"{prefix}_maps_url"),
    )


def _ceremony_columns(ceremony: Optional[Ceremony], prefix: str) -> Dict[str, Any]:
    fields = ("date", "time", "venue", "maps_url")
    if ceremony is None:
        return {f"{prefix}_{name}": None for name in fields}
    return {f"{prefix}_{name}": getattr(ceremony, name) for name in fields}


def row_to_invitation(row: Dict[str, Any]) -> Invitation:
    """Convert database row to Invitation domain model.

    Args:
        row: Database row as dict

    Returns:
        Invitation domain model
    """
    bank_accounts = row.get("bank_accounts")
    social_links = row.get("social_links")
    custom_slug = row.get("custom_slug")

    return Invitation(
        id=InvitationId(_uuid(row["id"])),
        owner_id=UserId(_uuid(row["owner_id"])),
        slug=Slug(row["slug"]),
        bride_names=row["bride_names"],
        groom_names=row["groom_names"],
        date=row["date"],
        time=row["time"],
        venue=row["venue"],
        message=RichText.model_validate(row["message"]),
        bride_parents=row.get("bride_parents"),
        groom_parents=row.get("groom_parents"),
        show_akad=row.get("show_akad", True),
        akad=_ceremony(row, "akad"),
        show_resepsi=row.get("show_resepsi", True),
        resepsi=_ceremony(row, "resepsi"),
        opening_text=row.get("opening_text"),
        invitation_text=row.get("invitation_text"),
        bride_photo=row.get("bride_photo"),
        groom_photo=row.get("groom_photo"),
        cover_photo=row.get("cover_photo"),
        gallery=row.get("gallery"),
        bank_accounts=(
            [BankAccount.model_validate(a) for a in bank_accounts]
            if bank_accounts is not None
            else None
        ),
        social_links=(
            [SocialLink.model_validate(s) for s in social_links]
            if social_links is not None
            else None
        ),
        google_maps_url=row.get("google_maps_url"),
        google_maps_embed=_rich_text(row.get("google_maps_embed")),
        custom_slug=Slug(custom_slug) if custom_slug is not None else None,
        background_music=row.get("background_music"),
        rsvp_enabled=row.get("rsvp_enabled", True),
        comments_enabled=row.get("comments_enabled", True),
        max_guests=row.get("max_guests"),
        status=InvitationStatus(row["status"]),
        template=Template(row["template"]),
        timezone=TimeZone(row["timezone"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def invitation_to_dict(invitation: Invitation) -> Dict[str, Any]:
    """Convert Invitation domain model to database dict.

    None stays None so absent optional fields are stored as SQL NULL,
    while empty strings and lists are stored as given.

    Args:
        invitation: Invitation domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = invitation.model_dump(
        exclude={
            "slug",
            "custom_slug",
            "message",
            "akad",
            "resepsi",
            "google_maps_embed",
            "bank_accounts",
            "social_links",
            "status",
            "template",
            "timezone",
        }
    )
    data.update(
        slug=str(invitation.slug),
        custom_slug=(
            str(invitation.custom_slug) if invitation.custom_slug is not None else None
        ),
        message=invitation.message.model_dump(mode="json"),
        google_maps_embed=(
            invitation.google_maps_embed.model_dump(mode="json")
            if invitation.google_maps_embed is not None
            else None
        ),
        bank_accounts=(
            [a.model_dump(mode="json") for a in invitation.bank_accounts]
            if invitation.bank_accounts is not None
            else None
        ),
        social_links=(
            [s.model_dump(mode="json") for s in invitation.social_links]
            if invitation.social_links is not None
            else None
        ),
        status=invitation.status.value,
        template=invitation.template.value,
        timezone=invitation.timezone.value,
    )
    data.update(_ceremony_columns(invitation.akad, "akad"))
    data.update(_ceremony_columns(invitation.resepsi, "resepsi"))
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        invitation_id=InvitationId(_uuid(row["invitation_id"])),
        name=row["name"],
        message=row["message"],
        attendance=Attendance(row["attendance"]),
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    data = comment.model_dump()
    data["attendance"] = comment.attendance.value
    return data


def row_to_gift(row: Dict[str, Any]) -> Gift:
    """Convert database row to Gift domain model."""
    return Gift(
        id=GiftId(_uuid(row["id"])),
        invitation_id=InvitationId(_uuid(row["invitation_id"])),
        sender_name=row["sender_name"],
        amount=row["amount"],
        message=row.get("message"),
        bank_account=row["bank_account"],
        confirmed=row["confirmed"],
        created_at=row["created_at"],
    )


def gift_to_dict(gift: Gift) -> Dict[str, Any]:
    """Convert Gift domain model to database dict."""
    return gift.model_dump()
