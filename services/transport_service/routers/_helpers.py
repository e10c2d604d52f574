"""Shared dependencies for transport service routers."""

import uuid
from typing import Optional

from fastapi import Depends
from libs.auth.dependencies import require_roles
from libs.auth.manager import AuthenticationManager, build_authentication_manager
from libs.db.session import get_async_db
from services.transport_service.models import UserRole
from services.transport_service.repositories import TeamRepository
from services.transport_service.services.auth_provider import DatabasePasswordProvider
from sqlalchemy.ext.asyncio import AsyncSession

require_logistics = require_roles(UserRole.ADMIN.value, UserRole.LOGISTIC.value)


def get_authentication_manager(
    db: AsyncSession = Depends(get_async_db),
) -> AuthenticationManager:
    """Assemble the manager around the database password provider."""
    return build_authentication_manager(DatabasePasswordProvider(db))


async def current_team_id(db: AsyncSession, user_id: uuid.UUID) -> Optional[uuid.UUID]:
    """The caller's team as stored now, not as it was when the token was issued."""
    team = await TeamRepository(db).find_by_user_id(user_id)
    return team.id if team else None
