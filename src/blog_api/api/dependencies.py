"""Shared FastAPI dependencies."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.db.database import async_get_db
from ..core.exceptions import ForbiddenException
from ..core.security import oauth2_scheme
from ..models import User
from ..services import CommentService, IdentityDirectory, NewsletterService, PostService


async def get_identity_directory(db: Annotated[AsyncSession, Depends(async_get_db)]) -> IdentityDirectory:
    return IdentityDirectory(db)


async def get_post_service(db: Annotated[AsyncSession, Depends(async_get_db)]) -> PostService:
    return PostService(db)


async def get_comment_service(db: Annotated[AsyncSession, Depends(async_get_db)]) -> CommentService:
    return CommentService(db)


async def get_newsletter_service(db: Annotated[AsyncSession, Depends(async_get_db)]) -> NewsletterService:
    return NewsletterService(db)


async def get_current_user(
    token: Annotated[str | None, Depends(oauth2_scheme)],
    identity: Annotated[IdentityDirectory, Depends(get_identity_directory)],
) -> User:
    """The acting user, taken from a verified bearer token."""
    return await identity.resolve_token(token)


def ensure_claimed_identity(user: User, claimed_id: int | None) -> None:
    """Reject a body-supplied user id that disagrees with the token."""
    if claimed_id is not None and claimed_id != user.id:
        raise ForbiddenException("Supplied user id does not match the authenticated user")
