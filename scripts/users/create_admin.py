import asyncio
import os
import sys
from pathlib import Path

# Add project root to path to import libs
sys.path.append(str(Path(__file__).resolve().parents[2]))

from dotenv import load_dotenv

# Load env file selected for the run (defaults to .env when ENV_FILE not set)
# MUST be done before importing libs that use get_settings()
project_root = Path(__file__).resolve().parents[2]
env_file = os.environ.get("ENV_FILE", ".env")
load_dotenv(project_root / env_file, override=True)

from libs.auth.passwords import hash_password
from libs.common.config import get_settings
from libs.db.session import session_scope
from services.transport_service.models import User, UserRole
from services.transport_service.repositories import UserRepository

settings = get_settings()


async def create_admin_user():
    print("Starting Admin User Creation Script")

    email = os.environ.get("ADMIN_EMAIL", settings.ADMIN_EMAIL)
    password = os.environ.get("ADMIN_PASSWORD", "admin")  # change immediately

    async with session_scope() as session:
        users = UserRepository(session)
        existing = await users.find_by_email(email)

        if existing:
            print(f"User record already exists for {email}.")
            if existing.role != UserRole.ADMIN or not existing.is_active:
                existing.role = UserRole.ADMIN
                existing.is_active = True
                await session.commit()
                print("User promoted to Admin.")
            return

        await users.persist(
            User(
                email=email,
                password_hash=hash_password(password),
                first_name="Admin",
                last_name="User",
                role=UserRole.ADMIN,
                is_active=True,
            )
        )

    print("\nAdmin setup complete!")
    print(f"Email: {email}")
    print(f"Password: {password}")


if __name__ == "__main__":
    asyncio.run(create_admin_user())
