"""SQLAlchemy table definitions for wedding invitations.

They match the schema provisioned by ``supabase/init.sql``.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Date,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
    Time,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# INVITATIONS TABLE
# ============================================================================
# Optional collections and tagged content live in JSONB columns. SQL NULL
# means absent; a JSON empty list or string is stored as such.
invitations_table = Table(
    "invitations",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("owner_id", UUID, nullable=False),  # Backend auth user
    Column("slug", String(100), nullable=False, unique=True),
    Column("bride_names", Text, nullable=False),
    Column("groom_names", Text, nullable=False),
    Column("date", Date, nullable=False),
    Column("time", Time, nullable=False),
    Column("venue", Text, nullable=False),
    Column("message", JSONB, nullable=False),  # {"kind": ..., "value": ...}
    Column("bride_parents", Text, nullable=True),
    Column("groom_parents", Text, nullable=True),
    # Ceremonies are flattened; a NULL date means the ceremony is absent
    Column("show_akad", Boolean, nullable=False, server_default="true"),
    Column("akad_date", Date, nullable=True),
    Column("akad_time", Time, nullable=True),
    Column("akad_venue", Text, nullable=True),
    Column("akad_maps_url", Text, nullable=True),
    Column("show_resepsi", Boolean, nullable=False, server_default="true"),
    Column("resepsi_date", Date, nullable=True),
    Column("resepsi_time", Time, nullable=True),
    Column("resepsi_venue", Text, nullable=True),
    Column("resepsi_maps_url", Text, nullable=True),
    Column("opening_text", Text, nullable=True),
    Column("invitation_text", Text, nullable=True),
    Column("bride_photo", Text, nullable=True),
    Column("groom_photo", Text, nullable=True),
    Column("cover_photo", Text, nullable=True),
    Column("gallery", JSONB(none_as_null=True), nullable=True),
    Column("bank_accounts", JSONB(none_as_null=True), nullable=True),
    Column("social_links", JSONB(none_as_null=True), nullable=True),
    Column("google_maps_url", Text, nullable=True),
    Column("google_maps_embed", JSONB(none_as_null=True), nullable=True),
    Column("custom_slug", String(100), nullable=True),
    Column("background_music", Text, nullable=True),
    Column("rsvp_enabled", Boolean, nullable=False, server_default="true"),
    Column("comments_enabled", Boolean, nullable=False, server_default="true"),
    Column("max_guests", Integer, nullable=True),
    Column("status", String(20), nullable=False, server_default="draft"),
    Column("template", String(20), nullable=False, server_default="javanese"),
    Column("timezone", String(10), nullable=False, server_default="WIB"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("status IN ('draft', 'published')", name="check_invitation_status"),
    CheckConstraint("timezone IN ('WIB', 'WITA', 'WIT')", name="check_invitation_timezone"),
    CheckConstraint("max_guests > 0", name="check_invitation_max_guests"),
)

Index("idx_invitations_owner_id", invitations_table.c.owner_id)

# ============================================================================
# COMMENTS TABLE (guest wishes and attendance)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "invitation_id",
        UUID,
        ForeignKey("invitations.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("name", String(100), nullable=False),
    Column("message", Text, nullable=False),
    Column("attendance", String(10), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "attendance IN ('yes', 'no', 'maybe')", name="check_comment_attendance"
    ),
)

Index(
    "idx_comments_invitation_created",
    comments_table.c.invitation_id,
    comments_table.c.created_at,
)

# ============================================================================
# GIFTS TABLE
# ============================================================================
gifts_table = Table(
    "gifts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "invitation_id",
        UUID,
        ForeignKey("invitations.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("sender_name", String(100), nullable=False),
    Column("amount", Numeric(14, 2), nullable=False),
    Column("message", Text, nullable=True),
    Column("bank_account", Text, nullable=False),
    Column("confirmed", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("amount >= 0", name="check_gift_amount_non_negative"),
)

Index(
    "idx_gifts_invitation_created",
    gifts_table.c.invitation_id,
    gifts_table.c.created_at,
)
