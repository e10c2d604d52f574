"""Login and current-user routes."""

from fastapi import APIRouter, Depends
from libs.auth.dependencies import get_current_user
from libs.auth.manager import AuthenticationManager
from libs.auth.models import AuthUser, PasswordCredentials, TokenResponse
from libs.auth.tokens import create_access_token
from libs.common.exceptions import UnauthorizedError
from libs.db.session import get_async_db
from services.transport_service.repositories import UserRepository
from services.transport_service.routers._helpers import get_authentication_manager
from services.transport_service.schemas import UserResponse
from sqlalchemy.ext.asyncio import AsyncSession

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
async def login(
    credentials: PasswordCredentials,
    manager: AuthenticationManager = Depends(get_authentication_manager),
):
    """Exchange email/password for a bearer token."""
    principal = await manager.authenticate(credentials)
    return create_access_token(principal)


@router.get("/me", response_model=UserResponse)
async def read_current_user(
    current_user: AuthUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_db),
):
    user = await UserRepository(db).find_by_id(current_user.user_id)
    if user is None:
        raise UnauthorizedError("User no longer exists")
    return user
