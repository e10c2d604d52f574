"""HTTP-aware error types raised by service operations.

They subclass ``HTTPException`` so FastAPI renders them as
``{"detail": "..."}`` without extra handlers.
"""

from typing import Optional

from fastapi import HTTPException, status


class ApiError(HTTPException):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str, headers: Optional[dict[str, str]] = None):
        super().__init__(status_code=self.status_code, detail=detail, headers=headers)


class BadRequestError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST


class UnauthorizedError(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, detail: str = "Could not validate credentials"):
        super().__init__(detail, headers={"WWW-Authenticate": "Bearer"})


class ForbiddenError(ApiError):
    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(ApiError):
    status_code = status.HTTP_409_CONFLICT
