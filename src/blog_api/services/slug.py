"""Title to slug derivation."""

import re

SLUG_SEPARATOR = "-"

_NON_ALPHANUMERIC_RUN = re.compile(r"[^a-z0-9]+")


def derive_slug(title: str) -> str:
    """Derive a URL-safe slug from a post title.

    Lower-cases the title, collapses every run of characters outside
    ``[a-z0-9]`` into a single separator and drops a leading or trailing
    separator. Uniqueness is the caller's concern.

    >>> derive_slug("Hello, World! 2024")
    'hello-world-2024'
    """
    slug = _NON_ALPHANUMERIC_RUN.sub(SLUG_SEPARATOR, title.lower())
    if slug.startswith(SLUG_SEPARATOR):
        slug = slug[1:]
    if slug.endswith(SLUG_SEPARATOR):
        slug = slug[:-1]
    return slug
