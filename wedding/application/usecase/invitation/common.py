"""Shapes shared by the invitation use cases."""

import datetime as dt

from pydantic import BaseModel

from wedding.domain.model import BankAccount, Ceremony, Invitation, SocialLink
from wedding.domain.value import InvitationStatus, Slug, Template, TimeZone


class InvitationFields(BaseModel):
    """Editable invitation content as submitted by the owner.

    ``message`` and the embed fields carry raw markup; the domain model
    sanitizes them on construction.
    """

    bride_names: str
    groom_names: str
    date: dt.date
    time: dt.time
    venue: str
    message: str
    bride_parents: str | None = None
    groom_parents: str | None = None
    show_akad: bool = True
    akad: Ceremony | None = None
    show_resepsi: bool = True
    resepsi: Ceremony | None = None
    opening_text: str | None = None
    invitation_text: str | None = None
    bride_photo: str | None = None
    groom_photo: str | None = None
    cover_photo: str | None = None
    gallery: list[str] | None = None
    bank_accounts: list[BankAccount] | None = None
    social_links: list[SocialLink] | None = None
    google_maps_url: str | None = None
    google_maps_embed: str | None = None
    custom_slug: Slug | None = None
    background_music: str | None = None
    rsvp_enabled: bool = True
    comments_enabled: bool = True
    max_guests: int | None = None
    template: Template = Template.JAVANESE
    timezone: TimeZone = TimeZone.WIB


class SocialLinkItem(BaseModel):
    """Social link in responses."""

    platform: str
    title: str
    url: str
    embed_code: str | None


class InvitationItem(BaseModel):
    """Invitation in responses, with sanitized markup as plain strings."""

    invitation_id: str
    owner_id: str
    slug: str
    share_url: str
    bride_names: str
    groom_names: str
    date: dt.date
    time: dt.time
    venue: str
    message: str
    bride_parents: str | None
    groom_parents: str | None
    show_akad: bool
    akad: Ceremony | None
    show_resepsi: bool
    resepsi: Ceremony | None
    opening_text: str | None
    invitation_text: str | None
    bride_photo: str | None
    groom_photo: str | None
    cover_photo: str | None
    gallery: list[str] | None
    bank_accounts: list[BankAccount] | None
    social_links: list[SocialLinkItem] | None
    google_maps_url: str | None
    google_maps_embed: str | None
    custom_slug: str | None
    background_music: str | None
    rsvp_enabled: bool
    comments_enabled: bool
    max_guests: int | None
    status: InvitationStatus
    template: Template
    timezone: TimeZone
    created_at: dt.datetime
    updated_at: dt.datetime

    @classmethod
    def from_invitation(
        cls, invitation: Invitation, public_base_url: str
    ) -> "InvitationItem":
        """Build the response item, with the share URL under ``public_base_url``."""
        return cls(
            invitation_id=str(invitation.id),
            owner_id=str(invitation.owner_id),
            slug=str(invitation.slug),
            share_url=f"{public_base_url.rstrip('/')}{invitation.share_path}",
            bride_names=invitation.bride_names,
            groom_names=invitation.groom_names,
            date=invitation.date,
            time=invitation.time,
            venue=invitation.venue,
            message=str(invitation.message),
            bride_parents=invitation.bride_parents,
            groom_parents=invitation.groom_parents,
            show_akad=invitation.show_akad,
            akad=invitation.akad,
            show_resepsi=invitation.show_resepsi,
            resepsi=invitation.resepsi,
            opening_text=invitation.opening_text,
            invitation_text=invitation.invitation_text,
            bride_photo=invitation.bride_photo,
            groom_photo=invitation.groom_photo,
            cover_photo=invitation.cover_photo,
            gallery=invitation.gallery,
            bank_accounts=invitation.bank_accounts,
            social_links=(
                [
                    SocialLinkItem(
                        platform=link.platform,
                        title=link.title,
                        url=link.url,
                        embed_code=str(link.embed_code) if link.embed_code else None,
                    )
                    for link in invitation.social_links
                ]
                if invitation.social_links is not None
                else None
            ),
            google_maps_url=invitation.google_maps_url,
            google_maps_embed=(
                str(invitation.google_maps_embed)
                if invitation.google_maps_embed is not None
                else None
            ),
            custom_slug=(
                str(invitation.custom_slug) if invitation.custom_slug else None
            ),
            background_music=invitation.background_music,
            rsvp_enabled=invitation.rsvp_enabled,
            comments_enabled=invitation.comments_enabled,
            max_guests=invitation.max_guests,
            status=invitation.status,
            template=invitation.template,
            timezone=invitation.timezone,
            created_at=invitation.created_at,
            updated_at=invitation.updated_at,
        )
