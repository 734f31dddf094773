"""Who may create, edit and delete posts."""

from ..core.exceptions import ForbiddenException
from ..models import Post, User


def can_create(actor: User) -> bool:
    return actor.is_admin


def can_mutate(actor: User, post: Post) -> bool:
    """Admins may change any post, everyone else only their own."""
    return actor.is_admin or (post.author_id is not None and actor.id == post.author_id)


def ensure_can_create(actor: User) -> None:
    if not can_create(actor):
        raise ForbiddenException("Only admins can create posts")


def ensure_can_mutate(actor: User, post: Post, verb: str = "edit") -> None:
    if not can_mutate(actor, post):
        raise ForbiddenException(f"You are not authorized to {verb} this post")
