"""API endpoints for post comments."""

from fastapi import APIRouter, Depends, status

from ...models import User
from ...schemas.comment import CommentCreate, CommentListResponse, CommentResponse
from ...services import CommentService
from ..dependencies import ensure_claimed_identity, get_comment_service, get_current_user

router = APIRouter(prefix="/posts/{slug}/comments", tags=["Comments"])


@router.get("", response_model=CommentListResponse, summary="List Comments")
async def list_comments(
    slug: str,
    service: CommentService = Depends(get_comment_service),
) -> CommentListResponse:
    """Comments on a post, newest first."""
    return CommentListResponse(comments=await service.list_for_post(slug))


@router.post(
    "",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add Comment",
)
async def add_comment(
    slug: str,
    data: CommentCreate,
    current_user: User = Depends(get_current_user),
    service: CommentService = Depends(get_comment_service),
) -> CommentResponse:
    ensure_claimed_identity(current_user, data.user_id)
    comment = await service.add(current_user.id, slug, data.content)
    return CommentResponse(comment=comment)
