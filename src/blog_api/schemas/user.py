"""User and authentication schemas."""

from datetime import datetime

from pydantic import Field

from .base import CamelModel


class UserCreate(CamelModel):
    """Registration payload. Presence of each field is checked by the service."""

    name: str | None = Field(None, max_length=100)
    email: str | None = Field(None, max_length=254)
    password: str | None = Field(None, max_length=128)


class UserLogin(CamelModel):
    email: str
    password: str


class AuthorSummary(CamelModel):
    """Public profile fields embedded in posts and comments."""

    id: int
    name: str
    email: str
    image: str | None = None
    bio: str | None = None


class UserRead(CamelModel):
    id: int
    name: str
    email: str
    role: str | None = None
    image: str | None = None
    bio: str | None = None
    created_at: datetime


class UserResponse(CamelModel):
    success: bool = True
    user: UserRead


class Token(CamelModel):
    success: bool = True
    access_token: str
    token_type: str = "bearer"
    user: UserRead
