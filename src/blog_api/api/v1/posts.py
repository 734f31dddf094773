"""API endpoints for blog posts and reactions."""

from fastapi import APIRouter, Body, Depends, Query, status

from ...core.config import settings
from ...models import User
from ...schemas.base import MessageResponse
from ...schemas.post import (
    PostCreate,
    PostDelete,
    PostListResponse,
    PostResponse,
    PostUpdate,
    ReactionRequest,
    ReactionResponse,
)
from ...services import PostService
from ..dependencies import ensure_claimed_identity, get_current_user, get_post_service

router = APIRouter(prefix="/posts", tags=["Posts"])


@router.get(
    "",
    response_model=PostListResponse,
    summary="List Posts",
    description="Newest-first page of posts, published only unless published=false",
)
async def list_posts(
    page: int = Query(1, ge=1, description="Page number"),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, description="Posts per page"),
    published: bool = Query(True, description="Only published posts"),
    service: PostService = Depends(get_post_service),
) -> PostListResponse:
    posts, pagination = await service.list_posts(page=page, limit=limit, published_only=published)
    return PostListResponse(posts=posts, pagination=pagination)


@router.post(
    "",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Post",
    description="Create a post as the authenticated admin",
)
async def create_post(
    data: PostCreate,
    current_user: User = Depends(get_current_user),
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    ensure_claimed_identity(current_user, data.author_id)
    post = await service.create(
        actor_id=current_user.id,
        title=data.title,
        content=data.content,
        excerpt=data.excerpt,
        cover_image=data.cover_image,
        tags=data.tags,
        published=data.published,
    )
    return PostResponse(post=post)


@router.get("/{slug}", response_model=PostResponse, summary="Get Post by Slug")
async def get_post(
    slug: str,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    return PostResponse(post=await service.get(slug))


@router.put(
    "/{slug}",
    response_model=PostResponse,
    summary="Update Post",
    description="Partially update a post; only supplied fields change",
)
async def update_post(
    slug: str,
    data: PostUpdate,
    current_user: User = Depends(get_current_user),
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    ensure_claimed_identity(current_user, data.user_id)
    patch = data.model_dump(exclude_unset=True, exclude={"user_id"})
    post = await service.update(current_user.id, slug, patch)
    return PostResponse(post=post)


@router.delete("/{slug}", response_model=MessageResponse, summary="Delete Post")
async def delete_post(
    slug: str,
    data: PostDelete | None = Body(None),
    current_user: User = Depends(get_current_user),
    service: PostService = Depends(get_post_service),
) -> MessageResponse:
    ensure_claimed_identity(current_user, data.user_id if data else None)
    await service.delete(current_user.id, slug)
    return MessageResponse(message="Post deleted successfully")


@router.post(
    "/{slug}/like",
    response_model=ReactionResponse,
    summary="React to Post",
    description='Toggle a "like" or "dislike" on a post',
)
async def react_to_post(
    slug: str,
    data: ReactionRequest,
    current_user: User = Depends(get_current_user),
    service: PostService = Depends(get_post_service),
) -> ReactionResponse:
    ensure_claimed_identity(current_user, data.user_id)
    post = await service.react(current_user.id, slug, data.action)
    return ReactionResponse(post=post, likes_count=len(post.likes), dislikes_count=len(post.dislikes))
