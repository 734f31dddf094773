"""Security module for authentication."""

from datetime import UTC, datetime, timedelta
from enum import Enum
from typing import Any

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt

from .config import settings


class TokenType(str, Enum):
    """Token types."""

    ACCESS = "access"


oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/login", auto_error=False)

password_hasher = PasswordHasher()


def get_password_hash(password: str) -> str:
    return password_hasher.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return password_hasher.verify(hashed_password, plain_password)
    except (VerificationError, InvalidHashError):
        return False


def create_access_token(subject: str | int, expires_delta: timedelta | None = None) -> str:
    """Issue a signed access token whose subject is the user id."""
    now = datetime.now(UTC)
    expire = now + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    payload = {
        "iss": settings.TOKEN_ISSUER,
        "sub": str(subject),
        "iat": int(now.timestamp()),
        "exp": int(expire.timestamp()),
        "token_type": TokenType.ACCESS.value,
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def verify_token(token: str, token_type: TokenType = TokenType.ACCESS) -> dict[str, Any] | None:
    """Decode and validate a token.

    Returns the payload, or None when the signature, expiry, issuer or
    token type does not check out.
    """
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
            issuer=settings.TOKEN_ISSUER,
        )
    except JWTError:
        return None

    if payload.get("token_type") != token_type.value or not payload.get("sub"):
        return None
    return payload
