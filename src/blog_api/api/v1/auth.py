"""Registration and login."""

from fastapi import APIRouter, Depends, status

from ...schemas.user import Token, UserCreate, UserLogin, UserRead, UserResponse
from ...services import IdentityDirectory
from ..dependencies import get_identity_directory

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post(
    "/register",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register",
    description="Create an account. The first account ever created is an admin.",
)
async def register(
    data: UserCreate,
    identity: IdentityDirectory = Depends(get_identity_directory),
) -> UserResponse:
    user = await identity.register(name=data.name, email=data.email, password=data.password)
    return UserResponse(user=UserRead.model_validate(user))


@router.post(
    "/login",
    response_model=Token,
    summary="Login",
    description="Exchange email and password for a signed access token",
)
async def login(
    data: UserLogin,
    identity: IdentityDirectory = Depends(get_identity_directory),
) -> Token:
    access_token, user = await identity.authenticate(data.email, data.password)
    return Token(access_token=access_token, user=UserRead.model_validate(user))
