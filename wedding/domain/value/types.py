"""Domain value objects for wedding invitations.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules for the closed vocabularies used by
invitations and guest responses.
"""

import re
from enum import Enum

from pydantic import field_validator

from wedding.domain.value.common import RootValueObject

SLUG_MAX_LENGTH = 100


class Attendance(str, Enum):
    """Guest attendance answer attached to a comment."""

    YES = "yes"
    NO = "no"
    MAYBE = "maybe"


class InvitationStatus(str, Enum):
    """Publication state of an invitation.

    Only published invitations are visible to guests and accept
    comments or gifts.
    """

    DRAFT = "draft"
    PUBLISHED = "published"


class Template(str, Enum):
    """Visual template the frontend renders the invitation with."""

    JAVANESE = "javanese"
    SUNDANESE = "sundanese"
    MINANG = "minang"
    MODERN = "modern"
    ELEGANT = "elegant"


class TimeZone(str, Enum):
    """Indonesian time zone the event time is expressed in."""

    WIB = "WIB"
    WITA = "WITA"
    WIT = "WIT"


class Slug(RootValueObject[str]):
    """URL-safe share identifier for an invitation.

    Must be lowercase, alphanumeric with hyphens, 1-100 characters.
    Examples: 'wedding-siti-budi', 'rina-and-andi-2025'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if len(v) < 1 or len(v) > SLUG_MAX_LENGTH:
            raise ValueError("Slug must be 1-100 characters")
        if not re.match(r"^[a-z0-9]+(?:-[a-z0-9]+)*$", v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        return v

    @classmethod
    def from_names(cls, bride_names: str, groom_names: str) -> "Slug":
        """Build the default slug ``wedding-<bride>-<groom>``."""
        slug_str = re.sub(
            r"[^a-z0-9]+", "-", f"wedding-{bride_names}-{groom_names}".lower()
        )
        slug_str = slug_str.strip("-")[:SLUG_MAX_LENGTH].rstrip("-")
        return cls(slug_str or "wedding")

    def with_suffix(self, counter: int) -> "Slug":
        """Return a variant of this slug with ``-<counter>`` appended.

        The base is truncated so the result stays within the length limit.
        """
        suffix = f"-{counter}"
        base = self.root[: SLUG_MAX_LENGTH - len(suffix)].rstrip("-")
        return Slug(f"{base}{suffix}")
