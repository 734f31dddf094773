"""Sanitization of user-submitted rich text and plain text."""

import nh3

from ..core.config import settings

ALLOWED_TAGS = {
    "p", "br", "strong", "em", "u", "s",
    "h1", "h2", "h3", "h4", "h5", "h6",
    "ul", "ol", "li", "blockquote", "code", "pre", "a", "img",
}

ALLOWED_ATTRIBUTES = {"*": {"href", "src", "alt", "title", "class"}}

# Relative URLs pass through untouched.
ALLOWED_URL_SCHEMES = {"http", "https", "mailto", "tel", "callto", "sms", "cid", "xmpp", "data"}


def sanitize_html(dirty: str) -> str:
    """Strip markup, attributes and URL schemes outside the allow-lists.

    ``script`` and ``style`` elements are removed along with their content.
    """
    if not dirty:
        return ""
    return nh3.clean(
        dirty,
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        url_schemes=ALLOWED_URL_SCHEMES,
        link_rel=None,
    )


def sanitize_text(text: str, max_length: int | None = None) -> str:
    """Remove angle brackets, trim and cap the length of plain text."""
    if max_length is None:
        max_length = settings.PLAIN_TEXT_MAX_LENGTH
    return text.replace("<", "").replace(">", "").strip()[:max_length]
