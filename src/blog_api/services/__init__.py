"""Services for posts, reactions, comments, identity and the newsletter."""

from .comment_service import CommentService
from .identity import IdentityDirectory
from .newsletter_service import NewsletterService
from .post_service import PostService

__all__ = [
    "IdentityDirectory",
    "PostService",
    "CommentService",
    "NewsletterService",
]
