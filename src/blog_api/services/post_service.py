"""Post service: create, read, update, delete, react and list posts."""

import logging
import math
from typing import Any

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from ..core.config import settings
from ..core.exceptions import (
    BadRequestException,
    ConcurrentUpdateException,
    DuplicateValueException,
    ForbiddenException,
    NotFoundException,
)
from ..models import Comment, Post, User
from ..schemas.post import Pagination, PostRead
from .authorization import ensure_can_create, ensure_can_mutate
from .identity import IdentityDirectory, author_summary
from .reactions import apply_reaction, parse_action
from .reading_time import calculate_reading_time
from .sanitize import sanitize_html, sanitize_text
from .slug import derive_slug

LOGGER = logging.getLogger(__name__)

DUPLICATE_TITLE_MESSAGE = "A post with this title already exists"


def to_post_read(post: Post, author: User | None, include_bio: bool = False) -> PostRead:
    """Build the public payload; likes and dislikes are plain id lists."""
    return PostRead(
        id=post.id,
        slug=post.slug,
        title=post.title,
        content=post.content,
        excerpt=post.excerpt,
        cover_image=post.cover_image or "",
        author=author_summary(author, include_bio=include_bio),
        published=bool(post.published),
        likes=[int(uid) for uid in post.likes or []],
        dislikes=[int(uid) for uid in post.dislikes or []],
        tags=list(post.tags or []),
        reading_time=calculate_reading_time(post.content),
        created_at=post.created_at,
        updated_at=post.updated_at,
    )


class PostService:
    """Orchestrates the identity directory, authorization rule, slug deriver
    and reaction toggle against the post store.

    Every operation finishes its checks before touching the store, so a
    rejected call leaves the post as it was.
    """

    def __init__(self, db: AsyncSession, identity: IdentityDirectory | None = None):
        self.db = db
        self.identity = identity or IdentityDirectory(db)

    async def _find_by_slug(self, slug: str) -> Post | None:
        result = await self.db.execute(select(Post).where(Post.slug == slug))
        return result.scalar_one_or_none()

    async def _get_by_slug(self, slug: str) -> Post:
        post = await self._find_by_slug(slug)
        if post is None:
            raise NotFoundException("Post not found")
        return post

    async def _slug_owner_id(self, slug: str) -> int | None:
        result = await self.db.execute(select(Post.id).where(Post.slug == slug))
        return result.scalar_one_or_none()

    async def _actor(self, actor_id: int) -> User:
        actor = await self.identity.find_user(actor_id)
        if actor is None:
            raise ForbiddenException("User not found")
        return actor

    def _clean_title(self, title: str) -> str:
        clean = sanitize_text(title)
        if not clean:
            raise BadRequestException("Please provide title and content")
        if len(clean) > settings.TITLE_MAX_LENGTH:
            raise BadRequestException(f"Title cannot be more than {settings.TITLE_MAX_LENGTH} characters")
        return clean

    @staticmethod
    def _slug_for(title: str) -> str:
        slug = derive_slug(title)
        if not slug:
            raise BadRequestException("Title must contain at least one letter or digit")
        return slug

    def _clean_excerpt(self, excerpt: str | None) -> str | None:
        if not excerpt:
            return None
        clean = sanitize_text(excerpt)
        if len(clean) > settings.EXCERPT_MAX_LENGTH:
            raise BadRequestException(f"Excerpt cannot be more than {settings.EXCERPT_MAX_LENGTH} characters")
        return clean

    @staticmethod
    def _clean_tags(tags: list[str] | None) -> list[str]:
        return [sanitize_text(tag) for tag in tags or []]

    async def _commit(self, conflict_message: str = DUPLICATE_TITLE_MESSAGE) -> None:
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise DuplicateValueException(conflict_message) from None
        except StaleDataError:
            await self.db.rollback()
            LOGGER.warning("Post changed concurrently; write rejected")
            raise ConcurrentUpdateException("Post was modified by another request, please retry") from None

    async def create(
        self,
        actor_id: int,
        title: str | None,
        content: str | None,
        excerpt: str | None = None,
        cover_image: str | None = None,
        tags: list[str] | None = None,
        published: bool | None = False,
    ) -> PostRead:
        if not title or not content:
            raise BadRequestException("Please provide title and content")

        actor = await self.identity.find_user(actor_id)
        if actor is None:
            raise ForbiddenException("Only admins can create posts")
        ensure_can_create(actor)

        # New posts take their slug from the title as submitted.
        clean_title = self._clean_title(title)
        slug = self._slug_for(title)
        if await self._slug_owner_id(slug) is not None:
            raise DuplicateValueException(DUPLICATE_TITLE_MESSAGE)

        post = Post(
            slug=slug,
            title=clean_title,
            content=sanitize_html(content),
            excerpt=self._clean_excerpt(excerpt),
            cover_image=cover_image or "",
            tags=self._clean_tags(tags),
            published=bool(published),
            author_id=actor.id,
            likes=[],
            dislikes=[],
        )
        self.db.add(post)
        await self._commit()
        await self.db.refresh(post)

        LOGGER.info(f"Post '{post.slug}' created by user {actor.id}")
        return to_post_read(post, actor)

    async def get(self, slug: str) -> PostRead:
        post = await self._get_by_slug(slug)
        author = await self.identity.find_user(post.author_id)
        return to_post_read(post, author, include_bio=True)

    async def update(self, actor_id: int, slug: str, patch: dict[str, Any]) -> PostRead:
        """Apply a partial update; keys absent from ``patch`` are left alone."""
        actor = await self._actor(actor_id)
        post = await self._get_by_slug(slug)
        ensure_can_mutate(actor, post, "edit")

        changes: dict[str, Any] = {}

        title = patch.get("title")
        if title:
            clean_title = self._clean_title(title)
            new_slug = self._slug_for(clean_title)
            if clean_title != post.title:
                owner_id = await self._slug_owner_id(new_slug)
                if owner_id is not None and owner_id != post.id:
                    raise DuplicateValueException(DUPLICATE_TITLE_MESSAGE)
                changes["title"] = clean_title
                changes["slug"] = new_slug

        if patch.get("content"):
            changes["content"] = sanitize_html(patch["content"])
        if "excerpt" in patch:
            changes["excerpt"] = self._clean_excerpt(patch["excerpt"])
        if "cover_image" in patch:
            changes["cover_image"] = patch["cover_image"] or ""
        if patch.get("tags") is not None:
            changes["tags"] = self._clean_tags(patch["tags"])
        if patch.get("published") is not None:
            changes["published"] = bool(patch["published"])

        for field, value in changes.items():
            setattr(post, field, value)

        if changes:
            await self._commit()
            await self.db.refresh(post)
            LOGGER.info(f"Post '{post.slug}' updated by user {actor.id}: {sorted(changes)}")

        author = await self.identity.find_user(post.author_id)
        return to_post_read(post, author)

    async def delete(self, actor_id: int, slug: str) -> None:
        """Delete a post together with its comments."""
        actor = await self._actor(actor_id)
        post = await self._get_by_slug(slug)
        ensure_can_mutate(actor, post, "delete")

        await self.db.execute(delete(Comment).where(Comment.post_id == post.id))
        await self.db.delete(post)
        await self._commit()

        LOGGER.info(f"Post '{slug}' deleted by user {actor.id}")

    async def react(self, actor_id: int, slug: str, action: str | None) -> PostRead:
        """Toggle a like or dislike by ``actor_id``.

        The write is conditional on the version read here; a concurrent
        change raises ConcurrentUpdateException instead of being lost.
        """
        reaction = parse_action(action)
        post = await self._get_by_slug(slug)
        actor = await self.identity.find_user(actor_id)
        if actor is None:
            raise NotFoundException("User not found")

        likes, dislikes = apply_reaction(actor.id, reaction, post.likes or [], post.dislikes or [])
        post.likes = likes
        post.dislikes = dislikes
        await self._commit()
        await self.db.refresh(post)

        LOGGER.info(f"User {actor.id} applied '{reaction.value}' to post '{post.slug}'")
        author = await self.identity.find_user(post.author_id)
        return to_post_read(post, author)

    async def list_posts(
        self,
        page: int = 1,
        limit: int | None = None,
        published_only: bool = True,
    ) -> tuple[list[PostRead], Pagination]:
        """Newest-first page of posts.

        Posts whose author no longer resolves are left out of the page;
        ``total`` still counts every matching row in the store.
        """
        limit = limit or settings.DEFAULT_PAGE_SIZE
        if page < 1 or limit < 1:
            raise BadRequestException("page and limit must be positive integers")

        query = select(Post)
        count_query = select(func.count(Post.id))
        if published_only:
            query = query.where(Post.published.is_(True))
            count_query = count_query.where(Post.published.is_(True))

        query = query.order_by(Post.created_at.desc(), Post.id.desc()).offset((page - 1) * limit).limit(limit)

        posts = list((await self.db.execute(query)).scalars().all())
        total = (await self.db.execute(count_query)).scalar_one()
        authors = await self.identity.get_users(post.author_id for post in posts)

        items = []
        for post in posts:
            author = authors.get(post.author_id)
            if author is None:
                continue
            items.append(to_post_read(post, author))

        pagination = Pagination(page=page, limit=limit, total=total, pages=math.ceil(total / limit))
        return items, pagination
