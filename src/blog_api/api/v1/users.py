"""Public user profiles."""

from fastapi import APIRouter, Depends, Path

from ...schemas.user import UserRead, UserResponse
from ...services import IdentityDirectory
from ..dependencies import get_identity_directory

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("/{user_id}", response_model=UserResponse, summary="Get User Profile")
async def get_user(
    user_id: int = Path(..., ge=1, le=2**31 - 1, description="User id"),
    identity: IdentityDirectory = Depends(get_identity_directory),
) -> UserResponse:
    user = await identity.get_user(user_id)
    return UserResponse(user=UserRead.model_validate(user))
