"""Comment schemas."""

from datetime import datetime

from .base import CamelModel
from .user import AuthorSummary


class CommentCreate(CamelModel):
    content: str | None = None
    user_id: int | None = None


class CommentRead(CamelModel):
    id: int
    content: str
    post_id: int
    author: AuthorSummary | None = None
    created_at: datetime


class CommentResponse(CamelModel):
    success: bool = True
    comment: CommentRead


class CommentListResponse(CamelModel):
    success: bool = True
    comments: list[CommentRead]
