"""Authentication manager assembly.

The manager is the single entry point the login route talks to. It owns
exactly one provider and hands every verification to it.
"""

from typing import Protocol

from libs.auth.models import AuthUser, PasswordCredentials


class AuthenticationProvider(Protocol):
    async def authenticate(self, credentials: PasswordCredentials) -> AuthUser:
        """Return the verified principal or raise ``UnauthorizedError``."""
        ...


class AuthenticationManager:
    def __init__(self, provider: AuthenticationProvider):
        self._provider = provider

    @property
    def provider(self) -> AuthenticationProvider:
        return self._provider

    async def authenticate(self, credentials: PasswordCredentials) -> AuthUser:
        return await self._provider.authenticate(credentials)


def build_authentication_manager(
    provider: AuthenticationProvider,
) -> AuthenticationManager:
    return AuthenticationManager(provider)
