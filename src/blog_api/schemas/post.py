"""Post schemas for request/response validation."""

from datetime import datetime

from pydantic import Field

from .base import CamelModel
from .user import AuthorSummary


class PostCreate(CamelModel):
    """Schema for creating a post.

    ``author_id`` is optional; when sent it must match the authenticated user.
    """

    title: str | None = None
    content: str | None = None
    excerpt: str | None = None
    cover_image: str | None = None
    tags: list[str] | None = None
    published: bool | None = None
    author_id: int | None = None


class PostUpdate(CamelModel):
    """Partial update. Only fields present in the request body are applied."""

    title: str | None = None
    content: str | None = None
    excerpt: str | None = None
    cover_image: str | None = None
    tags: list[str] | None = None
    published: bool | None = None
    user_id: int | None = None


class PostDelete(CamelModel):
    user_id: int | None = None


class ReactionRequest(CamelModel):
    action: str | None = Field(None, description='"like" or "dislike"')
    user_id: int | None = None


class PostRead(CamelModel):
    id: int
    slug: str
    title: str
    content: str
    excerpt: str | None = None
    cover_image: str = ""
    author: AuthorSummary | None = None
    published: bool
    likes: list[int] = Field(default_factory=list)
    dislikes: list[int] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    reading_time: int = 0
    created_at: datetime
    updated_at: datetime


class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    pages: int


class PostResponse(CamelModel):
    success: bool = True
    post: PostRead


class PostListResponse(CamelModel):
    success: bool = True
    posts: list[PostRead]
    pagination: Pagination


class ReactionResponse(CamelModel):
    success: bool = True
    post: PostRead
    likes_count: int
    dislikes_count: int
