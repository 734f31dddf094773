"""Identity directory: registration, login and user lookups."""

import logging
from collections.abc import Iterable

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.exceptions import (
    BadRequestException,
    DuplicateValueException,
    ForbiddenException,
    NotFoundException,
    UnauthorizedException,
)
from ..core.security import TokenType, create_access_token, get_password_hash, verify_password, verify_token
from ..models import ROLE_ADMIN, ROLE_USER, User
from ..schemas.user import AuthorSummary

LOGGER = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def author_summary(user: User | None, include_bio: bool = False) -> AuthorSummary | None:
    if user is None:
        return None
    summary = AuthorSummary.model_validate(user)
    if not include_bio:
        summary.bio = None
    return summary


class IdentityDirectory:
    """Looks up and authenticates users."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def register(self, name: str | None, email: str | None, password: str | None) -> User:
        """Create an account. The very first account becomes an admin."""
        if not name or not email or not password:
            raise BadRequestException("Please provide all fields")

        email = normalize_email(email)
        existing = await self.db.execute(select(User.id).where(User.email == email))
        if existing.scalar_one_or_none() is not None:
            raise DuplicateValueException("User already exists")

        user_count = (await self.db.execute(select(func.count(User.id)))).scalar_one()
        role = ROLE_ADMIN if user_count == 0 else ROLE_USER

        user = User(
            name=name.strip(),
            email=email,
            password_hash=get_password_hash(password),
            role=role,
        )
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise DuplicateValueException("User already exists") from None
        await self.db.refresh(user)

        LOGGER.info(f"Registered user {user.id} with role {role}")
        return user

    async def authenticate(self, email: str, password: str) -> tuple[str, User]:
        """Check credentials and issue an access token."""
        result = await self.db.execute(select(User).where(User.email == normalize_email(email)))
        user = result.scalar_one_or_none()
        if user is None or not verify_password(password, user.password_hash):
            LOGGER.warning("Rejected login attempt")
            raise UnauthorizedException("Invalid credentials")
        return create_access_token(user.id), user

    async def find_user(self, user_id: int | None) -> User | None:
        if user_id is None:
            return None
        return await self.db.get(User, user_id)

    async def get_user(self, user_id: int) -> User:
        user = await self.find_user(user_id)
        if user is None:
            raise NotFoundException("User not found")
        return user

    async def get_users(self, user_ids: Iterable[int]) -> dict[int, User]:
        ids = {uid for uid in user_ids if uid is not None}
        if not ids:
            return {}
        result = await self.db.execute(select(User).where(User.id.in_(ids)))
        return {user.id: user for user in result.scalars().all()}

    async def resolve_token(self, token: str | None) -> User:
        """Return the user a bearer token was issued to.

        A missing or invalid token is Unauthorized; a valid token for a user
        that no longer exists is Forbidden.
        """
        if not token:
            raise UnauthorizedException("Not authenticated")
        payload = verify_token(token, TokenType.ACCESS)
        if payload is None:
            raise UnauthorizedException("Invalid or expired token")
        try:
            user_id = int(payload["sub"])
        except (TypeError, ValueError):
            raise UnauthorizedException("Invalid or expired token") from None

        user = await self.find_user(user_id)
        if user is None:
            raise ForbiddenException("User not found")
        return user
