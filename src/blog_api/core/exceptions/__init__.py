from .http_exceptions import (
    BadRequestException,
    ConcurrentUpdateException,
    CustomException,
    DuplicateValueException,
    ForbiddenException,
    NotFoundException,
    UnauthorizedException,
)

__all__ = [
    "CustomException",
    "BadRequestException",
    "NotFoundException",
    "ForbiddenException",
    "UnauthorizedException",
    "DuplicateValueException",
    "ConcurrentUpdateException",
]
