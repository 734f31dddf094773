"""Comments attached to posts."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.config import settings
from ..core.exceptions import BadRequestException, NotFoundException
from ..models import Comment, Post, User
from ..schemas.comment import CommentRead
from .identity import IdentityDirectory, author_summary
from .sanitize import sanitize_text

LOGGER = logging.getLogger(__name__)


def to_comment_read(comment: Comment, author: User | None) -> CommentRead:
    return CommentRead(
        id=comment.id,
        content=comment.content,
        post_id=comment.post_id,
        author=author_summary(author),
        created_at=comment.created_at,
    )


class CommentService:
    def __init__(self, db: AsyncSession, identity: IdentityDirectory | None = None):
        self.db = db
        self.identity = identity or IdentityDirectory(db)

    async def _post_id(self, slug: str) -> int:
        result = await self.db.execute(select(Post.id).where(Post.slug == slug))
        post_id = result.scalar_one_or_none()
        if post_id is None:
            raise NotFoundException("Post not found")
        return post_id

    async def list_for_post(self, slug: str) -> list[CommentRead]:
        """Comments on a post, newest first."""
        post_id = await self._post_id(slug)
        result = await self.db.execute(
            select(Comment)
            .where(Comment.post_id == post_id)
            .order_by(Comment.created_at.desc(), Comment.id.desc())
        )
        comments = list(result.scalars().all())
        authors = await self.identity.get_users(comment.author_id for comment in comments)
        return [to_comment_read(comment, authors.get(comment.author_id)) for comment in comments]

    async def add(self, actor_id: int, slug: str, content: str | None) -> CommentRead:
        if not content:
            raise BadRequestException("Content is required")

        post_id = await self._post_id(slug)
        author = await self.identity.get_user(actor_id)

        clean = sanitize_text(content)
        if not clean:
            raise BadRequestException("Content is required")
        if len(clean) > settings.COMMENT_MAX_LENGTH:
            raise BadRequestException(
                f"Comment cannot be more than {settings.COMMENT_MAX_LENGTH} characters"
            )

        comment = Comment(content=clean, author_id=author.id, post_id=post_id)
        self.db.add(comment)
        await self.db.commit()
        await self.db.refresh(comment)

        LOGGER.info(f"Comment {comment.id} added to post {post_id} by user {author.id}")
        return to_comment_read(comment, author)
