"""Password authentication against the users table."""

from libs.auth.models import AuthUser, PasswordCredentials
from libs.auth.passwords import verify_password
from libs.common.exceptions import UnauthorizedError
from libs.common.logging import get_logger
from services.transport_service.repositories import UserRepository
from sqlalchemy.ext.asyncio import AsyncSession

logger = get_logger(__name__)


class DatabasePasswordProvider:
    """Verifies email/password pairs against stored argon2 hashes."""

    def __init__(self, db: AsyncSession):
        self._users = UserRepository(db)

    async def authenticate(self, credentials: PasswordCredentials) -> AuthUser:
        user = await self._users.find_by_email(credentials.email)
        if (
            user is None
            or not user.is_active
            or not verify_password(credentials.password, user.password_hash)
        ):
            logger.warning("Failed login attempt for %s", credentials.email)
            raise UnauthorizedError("Invalid email or password")

        return AuthUser(
            user_id=user.id,
            email=user.email,
            role=user.role.value,
            team_id=user.team_id,
        )
