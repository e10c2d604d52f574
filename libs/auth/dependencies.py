from typing import Annotated, Callable

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from pydantic import ValidationError

from libs.auth.models import AuthUser
from libs.auth.tokens import decode_access_token
from libs.common.exceptions import ForbiddenError, UnauthorizedError

security = HTTPBearer(auto_error=False)

ADMIN_ROLE = "Admin"


async def get_current_user(
    token: Annotated[HTTPAuthorizationCredentials | None, Depends(security)]
) -> AuthUser:
    """
    Validate the bearer token and return the authenticated user.
    """
    if token is None:
        raise UnauthorizedError("Not authenticated")

    payload = decode_access_token(token.credentials)
    try:
        return AuthUser(**payload)
    except ValidationError:
        raise UnauthorizedError()


def require_roles(*roles: str) -> Callable:
    """
    Build a dependency that only lets through users holding one of ``roles``.
    """

    async def _check(
        current_user: Annotated[AuthUser, Depends(get_current_user)]
    ) -> AuthUser:
        if current_user.role not in roles:
            raise ForbiddenError(
                f"This action requires one of the roles: {', '.join(roles)}"
            )
        return current_user

    return _check


require_admin = require_roles(ADMIN_ROLE)
