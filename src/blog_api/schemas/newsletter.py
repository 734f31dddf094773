"""Newsletter subscription schemas."""

from .base import CamelModel


class NewsletterRequest(CamelModel):
    email: str | None = None
