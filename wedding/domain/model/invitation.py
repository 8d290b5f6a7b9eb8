"""Invitation aggregate root.

An invitation describes one wedding event and everything the public page
shows about it. Bank accounts and social links are embedded records: they
have no identity of their own and are stored, replaced and removed together
with the invitation.
"""

import datetime as dt
from typing import Any, Optional

from pydantic import Field, field_validator, model_validator

from wedding.domain.model.common import DomainModel
from wedding.domain.value import (
    ContentKind,
    InvitationId,
    InvitationStatus,
    RichText,
    Slug,
    Template,
    TimeZone,
    UserId,
    coerce_content,
)
from wedding.domain.value.common import ValueObject


def _validate_http_url(v: str) -> str:
    if not v.startswith(("http://", "https://")):
        raise ValueError("URL must start with http:// or https://")
    return v


class BankAccount(ValueObject):
    """Account guests can send a cashless gift to.

    The account number is free text; no checksum is applied.
    """

    bank: str = Field(min_length=1, max_length=100)
    account_name: str = Field(min_length=1, max_length=150)
    account_number: str = Field(min_length=1, max_length=50)


class SocialLink(ValueObject):
    """Link to the couple's social media, optionally with an embed."""

    platform: str = Field(min_length=1, max_length=50)
    title: str = Field(min_length=1, max_length=150)
    url: str = Field(min_length=1, max_length=2000)
    embed_code: Optional[RichText] = None

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        return _validate_http_url(v)

    @field_validator("embed_code", mode="before")
    @classmethod
    def coerce_embed(cls, v: Any) -> Any:
        """Embed code is always sanitized as an embed."""
        return coerce_content(v, ContentKind.EMBED)


class Ceremony(ValueObject):
    """One part of the wedding day, such as the akad nikah or the resepsi."""

    date: dt.date
    time: dt.time
    venue: str = Field(min_length=1, max_length=500)
    maps_url: Optional[str] = None

    @field_validator("maps_url")
    @classmethod
    def validate_maps_url(cls, v: Optional[str]) -> Optional[str]:
        return _validate_http_url(v) if v is not None else v


class Invitation(DomainModel):
    """Invitation aggregate root.

    Optional fields default to None, meaning absent. An empty string or an
    empty list is a different value and is preserved as such.

    Business rules:
    - Only the owner may change or publish the invitation
    - ``slug`` is the share identifier; it equals ``custom_slug`` when one is
      chosen and is otherwise derived from the couple's names
    - Guests only see and respond to published invitations
    - Guests may comment only while comments are enabled, and may answer
      "yes" only while RSVP is enabled and ``max_guests`` isn't reached
    """

    id: Optional[InvitationId] = None  # Assigned on first save
    owner_id: UserId
    slug: Slug

    bride_names: str = Field(min_length=1, max_length=200)
    groom_names: str = Field(min_length=1, max_length=200)
    date: dt.date
    time: dt.time
    venue: str = Field(min_length=1, max_length=500)
    message: RichText

    bride_parents: Optional[str] = Field(default=None, max_length=500)
    groom_parents: Optional[str] = Field(default=None, max_length=500)

    # Separate ceremonies; hidden ones keep their details
    show_akad: bool = True
    akad: Optional[Ceremony] = None
    show_resepsi: bool = True
    resepsi: Optional[Ceremony] = None

    opening_text: Optional[str] = Field(default=None, max_length=5000)
    invitation_text: Optional[str] = Field(default=None, max_length=5000)

    # Photo references (storage keys or URLs)
    bride_photo: Optional[str] = None
    groom_photo: Optional[str] = None
    cover_photo: Optional[str] = None
    gallery: Optional[list[str]] = None

    bank_accounts: Optional[list[BankAccount]] = None
    social_links: Optional[list[SocialLink]] = None

    google_maps_url: Optional[str] = None
    google_maps_embed: Optional[RichText] = None
    custom_slug: Optional[Slug] = None
    background_music: Optional[str] = None  # Audio URL or storage key

    # Guest interaction switches
    rsvp_enabled: bool = True
    comments_enabled: bool = True
    max_guests: Optional[int] = Field(default=None, ge=1)

    status: InvitationStatus = InvitationStatus.DRAFT
    template: Template = Template.JAVANESE
    timezone: TimeZone = TimeZone.WIB
    created_at: dt.datetime = Field(default_factory=dt.datetime.now)
    updated_at: dt.datetime = Field(default_factory=dt.datetime.now)

    @model_validator(mode="before")
    @classmethod
    def derive_slug(cls, data: Any) -> Any:
        """Fill ``slug`` from the custom slug or the couple's names."""
        if not isinstance(data, dict) or data.get("slug"):
            return data
        if data.get("custom_slug"):
            return {**data, "slug": data["custom_slug"]}
        bride, groom = data.get("bride_names"), data.get("groom_names")
        if isinstance(bride, str) and isinstance(groom, str):
            return {**data, "slug": Slug.from_names(bride, groom)}
        return data

    @field_validator("message", mode="before")
    @classmethod
    def coerce_message(cls, v: Any) -> Any:
        """The message is always formatted text from the editor."""
        return coerce_content(v, ContentKind.HTML)

    @field_validator("google_maps_embed", mode="before")
    @classmethod
    def coerce_maps_embed(cls, v: Any) -> Any:
        """A map embed is always third-party markup."""
        return coerce_content(v, ContentKind.EMBED)

    @field_validator("google_maps_url")
    @classmethod
    def validate_maps_url(cls, v: Optional[str]) -> Optional[str]:
        """Map links must be web URLs."""
        return _validate_http_url(v) if v is not None else v

    @property
    def is_published(self) -> bool:
        return self.status == InvitationStatus.PUBLISHED

    @property
    def share_path(self) -> str:
        """Path of the public page relative to the site root."""
        return f"/{self.slug}"

    def is_owned_by(self, user_id: UserId) -> bool:
        return self.owner_id == user_id

    def has_seats_for(self, confirmed_guests: int) -> bool:
        """Whether another "yes" answer fits under ``max_guests``."""
        return self.max_guests is None or confirmed_guests < self.max_guests

    def publish(self) -> "Invitation":
        """Return a published copy."""
        return self.model_copy(
            update={
                "status": InvitationStatus.PUBLISHED,
                "updated_at": dt.datetime.now(),
            }
        )

    def unpublish(self) -> "Invitation":
        """Return a copy moved back to draft."""
        return self.model_copy(
            update={
                "status": InvitationStatus.DRAFT,
                "updated_at": dt.datetime.now(),
            }
        )

    def apply_changes(self, **changes: Any) -> "Invitation":
        """Return a validated copy with the given fields replaced.

        Identity, ownership and timestamps cannot be changed this way.
        Setting a custom slug also moves the share slug to it.
        """
        protected = {"id", "owner_id", "created_at", "updated_at", "status"} & set(
            changes
        )
        if protected:
            raise ValueError(f"Cannot change {', '.join(sorted(protected))}")

        data = self.model_dump()
        data.update(changes)
        if changes.get("custom_slug"):
            data["slug"] = changes["custom_slug"]
        data["updated_at"] = dt.datetime.now()
        return Invitation.model_validate(data)
