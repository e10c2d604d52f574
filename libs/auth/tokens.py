"""Access token issuing and decoding (HS256 JWT)."""

from datetime import timedelta
from typing import Any

from jose import JWTError, jwt

from libs.auth.models import AuthUser, TokenResponse
from libs.common.config import get_settings
from libs.common.datetime_utils import utc_now
from libs.common.exceptions import UnauthorizedError


def create_access_token(user: AuthUser) -> TokenResponse:
    settings = get_settings()
    expires_in = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    now = utc_now()
    claims: dict[str, Any] = {
        "sub": str(user.user_id),
        "email": user.email,
        "role": user.role,
        "team_id": str(user.team_id) if user.team_id else None,
        "iat": int(now.timestamp()),
        "exp": int((now + expires_in).timestamp()),
    }
    token = jwt.encode(claims, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)
    return TokenResponse(
        access_token=token, expires_in=int(expires_in.total_seconds())
    )


def decode_access_token(token: str) -> dict[str, Any]:
    """Return the verified claims or raise ``UnauthorizedError``."""
    settings = get_settings()
    try:
        return jwt.decode(
            token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM]
        )
    except JWTError:
        raise UnauthorizedError()
