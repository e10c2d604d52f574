"""Integration tests for auth, carriers, teams, addresses, storages, packages and car parts."""

import uuid

import pytest
from services.transport_service.models import UserRole
from tests.factories import (
    DEFAULT_PASSWORD,
    AddressFactory,
    CarPartFactory,
    PackageFactory,
    StorageFactory,
    TeamFactory,
    TransportCompanyFactory,
    TransportFactory,
    UserFactory,
    persist,
)


@pytest.mark.asyncio
@pytest.mark.integration
async def test_health(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "transport"}


# ---------------------------------------------------------------------------
# Auth
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.integration
async def test_login_then_me(client, db_session):
    """POST /auth/login issues a token that /auth/me accepts."""
    team = await persist(db_session, TeamFactory.create())
    user = await persist(
        db_session,
        UserFactory.create(
            email="logistic@example.com", role=UserRole.LOGISTIC, team_id=team.id
        ),
    )

    login = await client.post(
        "/auth/login",
        json={"email": "logistic@example.com", "password": DEFAULT_PASSWORD},
    )
    assert login.status_code == 200, login.text
    token = login.json()["access_token"]

    me = await client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    data = me.json()
    assert data["id"] == str(user.id)
    assert data["role"] == "Logistic"
    assert data["team_id"] == str(team.id)


@pytest.mark.asyncio
@pytest.mark.integration
async def test_login_wrong_password(client, db_session):
    await persist(db_session, UserFactory.create(email="mech@example.com"))

    response = await client.post(
        "/auth/login", json={"email": "mech@example.com", "password": "nope"}
    )

    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid email or password"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_garbage_token_rejected(client):
    response = await client.get(
        "/auth/me", headers={"Authorization": "Bearer not.a.token"}
    )
    assert response.status_code == 401


# ---------------------------------------------------------------------------
# Transport companies
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.integration
async def test_list_companies_paginated(client, db_session, auth_headers_for):
    await persist(
        db_session,
        *[TransportCompanyFactory.create(name=f"Carrier {i}") for i in range(7)],
    )
    user = await persist(db_session, UserFactory.create())

    response = await client.get(
        "/transport-companies?page=1&size=5", headers=auth_headers_for(user)
    )

    assert response.status_code == 200
    data = response.json()
    assert data["page_number"] == 1
    assert data["page_size"] == 5
    assert data["total_elements"] == 7
    assert data["total_pages"] == 2
    assert [c["name"] for c in data["content"]] == ["Carrier 5", "Carrier 6"]


@pytest.mark.asyncio
@pytest.mark.integration
async def test_create_and_delete_company(client, db_session, auth_headers_for):
    admin = await persist(db_session, UserFactory.create(role=UserRole.ADMIN))
    headers = auth_headers_for(admin)

    created = await client.post(
        "/transport-companies",
        json={"name": "DHL", "description": "Express freight"},
        headers=headers,
    )
    assert created.status_code == 201, created.text
    assert created.json()["description"] == "Express freight"
    company_id = created.json()["id"]

    duplicate = await client.post(
        "/transport-companies", json={"name": "DHL"}, headers=headers
    )
    assert duplicate.status_code == 409

    deleted = await client.delete(f"/transport-companies/{company_id}", headers=headers)
    assert deleted.status_code == 204

    missing = await client.delete(f"/transport-companies/{company_id}", headers=headers)
    assert missing.status_code == 404


@pytest.mark.asyncio
@pytest.mark.integration
async def test_create_company_admin_only(client, db_session, auth_headers_for):
    logistic = await persist(db_session, UserFactory.create(role=UserRole.LOGISTIC))

    response = await client.post(
        "/transport-companies", json={"name": "DHL"}, headers=auth_headers_for(logistic)
    )

    assert response.status_code == 403


# ---------------------------------------------------------------------------
# Teams
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.integration
async def test_team_detail_lists_members(client, db_session, auth_headers_for):
    team = await persist(
        db_session, TeamFactory.create(name="Scuderia", description="Maranello works team")
    )
    member = await persist(db_session, UserFactory.create(team_id=team.id))
    outsider = await persist(db_session, UserFactory.create())

    response = await client.get(f"/teams/{team.id}", headers=auth_headers_for(outsider))

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Scuderia"
    assert data["description"] == "Maranello works team"
    assert [m["id"] for m in data["members"]] == [str(member.id)]


@pytest.mark.asyncio
@pytest.mark.integration
async def test_team_not_found(client, db_session, auth_headers_for):
    user = await persist(db_session, UserFactory.create())

    response = await client.get(f"/teams/{uuid.uuid4()}", headers=auth_headers_for(user))

    assert response.status_code == 404


@pytest.mark.asyncio
@pytest.mark.integration
async def test_create_team(client, db_session, auth_headers_for):
    admin = await persist(db_session, UserFactory.create(role=UserRole.ADMIN))
    headers = auth_headers_for(admin)

    response = await client.post(
        "/teams",
        json={"name": "Alpine", "country_iso": "fra", "description": "Enstone outfit"},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    assert response.json()["country_iso"] == "FRA"
    assert response.json()["description"] == "Enstone outfit"

    listed = await client.get("/teams", headers=headers)
    assert listed.json()["total_elements"] == 1


# ---------------------------------------------------------------------------
# Addresses and packages
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.integration
async def test_create_and_list_addresses(client, db_session, auth_headers_for):
    logistic = await persist(db_session, UserFactory.create(role=UserRole.LOGISTIC))
    headers = auth_headers_for(logistic)

    created = await client.post(
        "/addresses",
        json={
            "street_name": "Silverstone Circuit",
            "city_name": "Towcester",
            "country_iso": "gbr",
            "latitude": 52.0786,
            "longitude": -1.0169,
        },
        headers=headers,
    )
    assert created.status_code == 201, created.text
    assert created.json()["country_iso"] == "GBR"

    listed = await client.get("/addresses", headers=headers)
    assert [a["city_name"] for a in listed.json()] == ["Towcester"]


@pytest.mark.asyncio
@pytest.mark.integration
async def test_create_package_requires_existing_transport(
    client, db_session, auth_headers_for
):
    team = await persist(db_session, TeamFactory.create())
    logistic = await persist(db_session, UserFactory.create(role=UserRole.LOGISTIC))

    response = await client.post(
        "/packages",
        json={"name": "Crate", "transport_id": str(uuid.uuid4()), "team_id": str(team.id)},
        headers=auth_headers_for(logistic),
    )

    assert response.status_code == 404
    assert response.json()["detail"] == "Requested transport does not exist."


# ---------------------------------------------------------------------------
# Car parts
# ---------------------------------------------------------------------------


async def _parts_world(db):
    company = TransportCompanyFactory.create()
    origin, destination = AddressFactory.create(), AddressFactory.create()
    mine, theirs = TeamFactory.create(), TeamFactory.create()
    await persist(db, company, origin, destination, mine, theirs)
    transport = await persist(
        db, TransportFactory.create(company.id, origin.id, destination.id)
    )
    my_pkg = PackageFactory.create(transport.id, mine.id)
    their_pkg = PackageFactory.create(transport.id, theirs.id)
    await persist(db, my_pkg, their_pkg)
    await persist(
        db,
        CarPartFactory.create(my_pkg.id, name="Brake disc"),
        CarPartFactory.create(their_pkg.id, name="Halo"),
    )
    return mine, my_pkg


@pytest.mark.asyncio
@pytest.mark.integration
async def test_car_parts_scoped_to_team(client, db_session, auth_headers_for):
    mine, _ = await _parts_world(db_session)
    mechanic = await persist(db_session, UserFactory.create(team_id=mine.id))

    response = await client.get("/car-parts", headers=auth_headers_for(mechanic))

    assert response.status_code == 200
    data = response.json()
    assert [p["name"] for p in data["content"]] == ["Brake disc"]
    assert data["total_elements"] == 1


@pytest.mark.asyncio
@pytest.mark.integration
async def test_car_parts_admin_sees_all(client, db_session, auth_headers_for):
    await _parts_world(db_session)
    admin = await persist(db_session, UserFactory.create(role=UserRole.ADMIN))

    response = await client.get("/car-parts", headers=auth_headers_for(admin))

    assert [p["name"] for p in response.json()["content"]] == ["Brake disc", "Halo"]


@pytest.mark.asyncio
@pytest.mark.integration
async def test_car_parts_teamless_user_sees_none(client, db_session, auth_headers_for):
    await _parts_world(db_session)
    loner = await persist(db_session, UserFactory.create())

    response = await client.get("/car-parts", headers=auth_headers_for(loner))

    assert response.json()["content"] == []
    assert response.json()["total_elements"] == 0
    assert response.json()["total_pages"] == 0


@pytest.mark.asyncio
@pytest.mark.integration
async def test_create_car_part(client, db_session, auth_headers_for):
    mine, my_pkg = await _parts_world(db_session)
    logistic = await persist(
        db_session, UserFactory.create(role=UserRole.LOGISTIC, team_id=mine.id)
    )

    response = await client.post(
        "/car-parts",
        json={"name": "Diffuser", "weight": 4.2, "package_id": str(my_pkg.id)},
        headers=auth_headers_for(logistic),
    )

    assert response.status_code == 201, response.text
    assert response.json()["package_id"] == str(my_pkg.id)

    missing = await client.post(
        "/car-parts",
        json={"name": "Diffuser", "package_id": str(uuid.uuid4())},
        headers=auth_headers_for(logistic),
    )
    assert missing.status_code == 404


@pytest.mark.asyncio
@pytest.mark.integration
async def test_car_parts_follow_current_team_membership(
    client, db_session, auth_headers_for
):
    """Scoping uses the team stored now, not the one baked into the token."""
    mine, _ = await _parts_world(db_session)
    theirs = TeamFactory.create(name="Williams")
    await persist(db_session, theirs)
    mechanic = await persist(db_session, UserFactory.create(team_id=mine.id))
    headers = auth_headers_for(mechanic)

    mechanic.team_id = theirs.id
    await db_session.commit()

    response = await client.get("/car-parts", headers=headers)

    assert response.status_code == 200
    assert response.json()["content"] == []


# ---------------------------------------------------------------------------
# Deleting carriers in use
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.integration
async def test_delete_company_still_used_by_transport(
    client, db_session, auth_headers_for
):
    company = TransportCompanyFactory.create()
    origin, destination = AddressFactory.create(), AddressFactory.create()
    await persist(db_session, company, origin, destination)
    transport = await persist(
        db_session, TransportFactory.create(company.id, origin.id, destination.id)
    )
    admin = await persist(db_session, UserFactory.create(role=UserRole.ADMIN))

    response = await client.delete(
        f"/transport-companies/{company.id}", headers=auth_headers_for(admin)
    )

    assert response.status_code == 409
    await db_session.refresh(transport)
    assert transport.company_id == company.id
    listed = await client.get("/transport-companies", headers=auth_headers_for(admin))
    assert [c["id"] for c in listed.json()["content"]] == [str(company.id)]


# ---------------------------------------------------------------------------
# Storages
# ---------------------------------------------------------------------------


async def _storage_world(db):
    ferrari = TeamFactory.create(name="Ferrari", description="Maranello works team")
    mclaren = TeamFactory.create(name="McLaren", country_iso="GBR")
    maranello = AddressFactory.create()
    woking = AddressFactory.create(city_name="Woking", country_iso="GBR")
    await persist(db, ferrari, mclaren, maranello, woking)
    await persist(
        db,
        StorageFactory.create(maranello.id, ferrari.id, capacity=120),
        StorageFactory.create(woking.id, mclaren.id, capacity=80),
    )
    return ferrari, mclaren, maranello, woking


@pytest.mark.asyncio
@pytest.mark.integration
async def test_list_storages_scoped_to_team(client, db_session, auth_headers_for):
    ferrari, _, maranello, _ = await _storage_world(db_session)
    mechanic = await persist(db_session, UserFactory.create(team_id=ferrari.id))

    response = await client.get("/storages", headers=auth_headers_for(mechanic))

    assert response.status_code == 200, response.text
    [storage] = response.json()
    assert storage["capacity"] == 120
    assert storage["image_url"] is None
    assert storage["location"]["id"] == str(maranello.id)
    assert storage["location"]["latitude"] == maranello.latitude
    assert storage["team"]["name"] == "Ferrari"
    assert storage["team"]["description"] == "Maranello works team"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_list_storages_admin_and_teamless(client, db_session, auth_headers_for):
    await _storage_world(db_session)
    admin = await persist(db_session, UserFactory.create(role=UserRole.ADMIN))
    loner = await persist(db_session, UserFactory.create())

    everything = await client.get("/storages", headers=auth_headers_for(admin))
    nothing = await client.get("/storages", headers=auth_headers_for(loner))

    assert sorted(s["team"]["name"] for s in everything.json()) == ["Ferrari", "McLaren"]
    assert nothing.json() == []


@pytest.mark.asyncio
@pytest.mark.integration
async def test_logistic_creates_storage_for_own_team(
    client, db_session, auth_headers_for
):
    ferrari, mclaren, _, woking = await _storage_world(db_session)
    logistic = await persist(
        db_session, UserFactory.create(role=UserRole.LOGISTIC, team_id=ferrari.id)
    )
    headers = auth_headers_for(logistic)

    created = await client.post(
        "/storages",
        json={"address_id": str(woking.id), "capacity": 15},
        headers=headers,
    )
    assert created.status_code == 201, created.text
    assert created.json()["team"]["id"] == str(ferrari.id)
    assert created.json()["location"]["city_name"] == "Woking"

    foreign = await client.post(
        "/storages",
        json={"address_id": str(woking.id), "capacity": 15, "team_id": str(mclaren.id)},
        headers=headers,
    )
    assert foreign.status_code == 403


@pytest.mark.asyncio
@pytest.mark.integration
async def test_create_storage_validation(client, db_session, auth_headers_for):
    ferrari, _, maranello, _ = await _storage_world(db_session)
    admin = await persist(db_session, UserFactory.create(role=UserRole.ADMIN))
    mechanic = await persist(db_session, UserFactory.create(team_id=ferrari.id))
    headers = auth_headers_for(admin)

    no_team = await client.post(
        "/storages",
        json={"address_id": str(maranello.id), "capacity": 5},
        headers=headers,
    )
    assert no_team.status_code == 400

    missing_address = await client.post(
        "/storages",
        json={"address_id": str(uuid.uuid4()), "capacity": 5, "team_id": str(ferrari.id)},
        headers=headers,
    )
    assert missing_address.status_code == 404
    assert missing_address.json()["detail"] == "Requested address does not exist."

    negative = await client.post(
        "/storages",
        json={"address_id": str(maranello.id), "capacity": -1, "team_id": str(ferrari.id)},
        headers=headers,
    )
    assert negative.status_code == 422

    forbidden = await client.post(
        "/storages",
        json={"address_id": str(maranello.id), "capacity": 5},
        headers=auth_headers_for(mechanic),
    )
    assert forbidden.status_code == 403
