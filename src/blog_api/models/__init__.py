"""Database models."""

from .comment import Comment
from .newsletter import NewsletterSubscription
from .post import Post
from .user import ROLE_ADMIN, ROLE_USER, User

__all__ = [
    "User",
    "Post",
    "Comment",
    "NewsletterSubscription",
    "ROLE_ADMIN",
    "ROLE_USER",
]
