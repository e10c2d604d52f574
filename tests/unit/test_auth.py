"""Unit tests for authentication: manager assembly, passwords and tokens."""

import uuid

import pytest
from libs.auth.manager import AuthenticationManager, build_authentication_manager
from libs.auth.models import AuthUser, PasswordCredentials
from libs.auth.passwords import hash_password, verify_password
from libs.auth.tokens import create_access_token, decode_access_token
from libs.common.exceptions import UnauthorizedError
from services.transport_service.services.auth_provider import DatabasePasswordProvider
from tests.factories import DEFAULT_PASSWORD, UserFactory, persist


class StubProvider:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    async def authenticate(self, credentials):
        self.calls.append(credentials)
        if self.error:
            raise self.error
        return self.result


def _principal(**overrides):
    data = {"user_id": uuid.uuid4(), "email": "a@example.com", "role": "Admin"}
    data.update(overrides)
    return AuthUser(**data)


# ---------------------------------------------------------------------------
# Manager assembly
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.unit
async def test_manager_delegates_to_its_provider():
    principal = _principal()
    provider = StubProvider(result=principal)
    manager = build_authentication_manager(provider)
    credentials = PasswordCredentials(email="a@example.com", password="x")

    assert isinstance(manager, AuthenticationManager)
    assert manager.provider is provider
    assert await manager.authenticate(credentials) is principal
    assert provider.calls == [credentials]


@pytest.mark.asyncio
@pytest.mark.unit
async def test_manager_propagates_provider_errors():
    manager = build_authentication_manager(
        StubProvider(error=UnauthorizedError("Invalid email or password"))
    )

    with pytest.raises(UnauthorizedError) as exc_info:
        await manager.authenticate(
            PasswordCredentials(email="a@example.com", password="x")
        )

    assert exc_info.value.status_code == 401


# ---------------------------------------------------------------------------
# Database password provider
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.unit
async def test_database_provider_accepts_valid_password(db_session):
    user = await persist(db_session, UserFactory.create(email="mech@example.com"))

    principal = await DatabasePasswordProvider(db_session).authenticate(
        PasswordCredentials(email="MECH@example.com", password=DEFAULT_PASSWORD)
    )

    assert principal.user_id == user.id
    assert principal.role == "Mechanic"


@pytest.mark.asyncio
@pytest.mark.unit
@pytest.mark.parametrize("password", ["wrong-pass", ""])
async def test_database_provider_rejects_bad_password(db_session, password):
    await persist(db_session, UserFactory.create(email="mech@example.com"))

    with pytest.raises(UnauthorizedError):
        await DatabasePasswordProvider(db_session).authenticate(
            PasswordCredentials(email="mech@example.com", password=password)
        )


@pytest.mark.asyncio
@pytest.mark.unit
async def test_database_provider_rejects_inactive_user(db_session):
    await persist(
        db_session, UserFactory.create(email="gone@example.com", is_active=False)
    )

    with pytest.raises(UnauthorizedError):
        await DatabasePasswordProvider(db_session).authenticate(
            PasswordCredentials(email="gone@example.com", password=DEFAULT_PASSWORD)
        )


@pytest.mark.asyncio
@pytest.mark.unit
async def test_database_provider_rejects_unknown_email(db_session):
    with pytest.raises(UnauthorizedError):
        await DatabasePasswordProvider(db_session).authenticate(
            PasswordCredentials(email="nobody@example.com", password=DEFAULT_PASSWORD)
        )


# ---------------------------------------------------------------------------
# Passwords and tokens
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_password_hash_roundtrip():
    hashed = hash_password("pit-stop")

    assert hashed.startswith("$argon2")
    assert verify_password("pit-stop", hashed)
    assert not verify_password("pit-stop!", hashed)


@pytest.mark.unit
def test_verify_password_rejects_malformed_hash():
    assert not verify_password("anything", "not-a-hash")
    assert not verify_password("anything", "$argon2id$v=19$garbage")


@pytest.mark.unit
def test_hash_password_rejects_blank():
    with pytest.raises(ValueError):
        hash_password("   ")


@pytest.mark.unit
def test_access_token_carries_principal_claims():
    team_id = uuid.uuid4()
    principal = _principal(role="Logistic", team_id=team_id)

    token = create_access_token(principal)
    claims = decode_access_token(token.access_token)

    assert token.token_type == "bearer"
    assert claims["sub"] == str(principal.user_id)
    assert claims["role"] == "Logistic"
    assert AuthUser(**claims).team_id == team_id


@pytest.mark.unit
def test_decode_rejects_tampered_token():
    token = create_access_token(_principal()).access_token

    with pytest.raises(UnauthorizedError):
        decode_access_token(token[:-2] + ("aa" if token[-2:] != "aa" else "bb"))
