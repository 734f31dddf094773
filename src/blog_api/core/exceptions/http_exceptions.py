"""HTTP-aware exceptions raised by services and rendered by the app's handlers."""

from http import HTTPStatus

from fastapi import HTTPException, status


class CustomException(HTTPException):
    """Base class carrying a status code and a human-readable message."""

    def __init__(self, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR, detail: str | None = None):
        if not detail:
            detail = HTTPStatus(status_code).description
        super().__init__(status_code=status_code, detail=detail)

    @property
    def message(self) -> str:
        return str(self.detail)


class BadRequestException(CustomException):
    """Missing or malformed input (validation class)."""

    def __init__(self, detail: str | None = None):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class NotFoundException(CustomException):
    def __init__(self, detail: str | None = None):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class ForbiddenException(CustomException):
    def __init__(self, detail: str | None = None):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class UnauthorizedException(CustomException):
    def __init__(self, detail: str | None = None):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


class DuplicateValueException(CustomException):
    """Unique value already taken (slug, email).

    Reported as 400 to match the public contract of the posts API.
    """

    def __init__(self, detail: str | None = None):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class ConcurrentUpdateException(CustomException):
    """The row changed between read and write; the caller may retry."""

    def __init__(self, detail: str | None = None):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)
