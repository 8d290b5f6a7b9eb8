"""Tagged content for user-authored markup.

Invitation messages, social embeds and map embeds are authored in the
dashboard and rendered verbatim on the public page. Each one is stored as a
``RichText`` tagged with its kind, and constructing a ``RichText`` sanitizes
its value for that kind, so stored content is always safe to render.
"""

import html
from enum import Enum
from typing import Any
from urllib.parse import urlparse

import nh3
from pydantic import ValidationInfo, field_validator

from wedding.domain.value.common import ValueObject

HTML_TAGS = {
    "a",
    "b",
    "blockquote",
    "br",
    "em",
    "h1",
    "h2",
    "h3",
    "i",
    "li",
    "ol",
    "p",
    "strong",
    "u",
    "ul",
}
HTML_ATTRIBUTES = {"a": {"href", "title"}}

# Guest comments only get inline emphasis
GUEST_TAGS = {"b", "i", "em", "strong"}

EMBED_TAGS = {"a", "blockquote", "div", "iframe", "p", "span"}
EMBED_ATTRIBUTES = {
    "a": {"href", "title"},
    "blockquote": {"cite", "class", "data-instgrm-permalink", "data-instgrm-version"},
    "iframe": {
        "allow",
        "allowfullscreen",
        "frameborder",
        "height",
        "loading",
        "referrerpolicy",
        "src",
        "title",
        "width",
    },
}
EMBED_HOSTS = frozenset(
    {
        "maps.google.com",
        "www.google.com",
        "www.youtube.com",
        "www.youtube-nocookie.com",
        "youtube.com",
        "www.instagram.com",
        "instagram.com",
        "www.tiktok.com",
        "open.spotify.com",
        "platform.twitter.com",
        "twitter.com",
        "x.com",
    }
)


class ContentKind(str, Enum):
    """How a piece of authored content may be rendered."""

    PLAIN = "plain"
    HTML = "html"
    EMBED = "embed"


def strip_markup(value: str) -> str:
    """Remove every tag, keeping the text (script and style bodies are dropped).

    The text stays HTML-escaped, so the result renders as literal text and
    stripping it again returns it unchanged.
    """
    return nh3.clean(value, tags=set(), attributes={})


def sanitize_html(value: str) -> str:
    """Sanitize formatted text from the rich-text editor."""
    return nh3.clean(
        value,
        tags=HTML_TAGS,
        attributes=HTML_ATTRIBUTES,
        url_schemes={"http", "https", "mailto"},
    )


def sanitize_guest_text(value: str) -> str:
    """Sanitize text written by guests; only inline emphasis survives."""
    return nh3.clean(value, tags=GUEST_TAGS, attributes={})


def clean_guest_text(
    value: str, max_length: int, label: str = "Text", required: bool = True
) -> str:
    """Sanitize a guest-written field and check the length that gets stored.

    Escaping grows the text (``&`` becomes ``&amp;``), so the limit applies
    to the sanitized value.

    Raises:
        ValueError: If nothing is left or the sanitized text is too long
    """
    cleaned = sanitize_guest_text(value).strip()
    if required and not cleaned:
        raise ValueError(f"{label} must contain text")
    if len(cleaned) > max_length:
        raise ValueError(
            f"{label} should have at most {max_length} characters once escaped"
        )
    return cleaned


def _filter_embed_attribute(element: str, attribute: str, value: str) -> str | None:
    if element == "iframe" and attribute == "src":
        parsed = urlparse(value)
        if parsed.scheme != "https" or parsed.hostname not in EMBED_HOSTS:
            return None
    return value


def sanitize_embed(value: str) -> str:
    """Sanitize third-party embed markup.

    Iframes survive only when they point at an allowlisted https host.
    """
    return nh3.clean(
        value,
        tags=EMBED_TAGS,
        attributes=EMBED_ATTRIBUTES,
        url_schemes={"https"},
        attribute_filter=_filter_embed_attribute,
    )


_SANITIZERS = {
    ContentKind.PLAIN: strip_markup,
    ContentKind.HTML: sanitize_html,
    ContentKind.EMBED: sanitize_embed,
}


class RichText(ValueObject):
    """Authored content tagged with how it may be rendered.

    The value is sanitized for its kind on construction.
    """

    kind: ContentKind
    value: str

    @field_validator("value")
    @classmethod
    def sanitize_for_kind(cls, v: str, info: ValidationInfo) -> str:
        """Run the sanitizer matching the content kind."""
        kind = info.data.get("kind")
        if kind is None:
            # Kind failed validation; that error is reported instead
            return v
        return _SANITIZERS[kind](v)

    @classmethod
    def plain(cls, value: str) -> "RichText":
        return cls(kind=ContentKind.PLAIN, value=value)

    @classmethod
    def html(cls, value: str) -> "RichText":
        return cls(kind=ContentKind.HTML, value=value)

    @classmethod
    def embed(cls, value: str) -> "RichText":
        return cls(kind=ContentKind.EMBED, value=value)

    def __str__(self) -> str:
        return self.value

    @property
    def text(self) -> str:
        """The value with entities decoded, for display outside HTML."""
        return html.unescape(self.value)


def coerce_content(value: Any, kind: ContentKind) -> Any:
    """Pin authored content to the kind its field is rendered as.

    A raw string is sanitized as ``kind``. Tagged content of another kind is
    rejected rather than stored under a looser sanitizer.

    Raises:
        ValueError: If tagged content has a different kind
    """
    if value is None:
        return value
    if isinstance(value, str):
        return RichText(kind=kind, value=value)
    if isinstance(value, dict):
        declared = value.get("kind")
        if declared is not None and ContentKind(declared) != kind:
            raise ValueError(f"Content must be {kind.value}, not {declared}")
        return RichText(kind=kind, value=value.get("value"))
    if isinstance(value, RichText) and value.kind != kind:
        raise ValueError(f"Content must be {kind.value}, not {value.kind.value}")
    return value
