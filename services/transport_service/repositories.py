"""Query helpers for the transport service entities."""

import uuid
from collections import defaultdict
from typing import Generic, Iterable, Optional, Type, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from services.transport_service.models import (
    Address,
    CarPart,
    Package,
    Status,
    Storage,
    Team,
    Transport,
    TransportCompany,
    User,
)

ModelT = TypeVar("ModelT")


class SqlRepository(Generic[ModelT]):
    """Lookups shared by every entity keyed on a UUID ``id`` column."""

    model: Type[ModelT]

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def exists_by_id(self, entity_id: uuid.UUID) -> bool:
        stmt = select(select(self.model).where(self.model.id == entity_id).exists())
        result = await self._session.execute(stmt)
        return bool(result.scalar())

    async def find_by_id(self, entity_id: uuid.UUID) -> Optional[ModelT]:
        return await self._session.get(self.model, entity_id)

    async def find_all(self) -> list[ModelT]:
        result = await self._session.execute(select(self.model))
        return list(result.scalars().all())

    async def count(self) -> int:
        result = await self._session.execute(
            select(func.count()).select_from(self.model)
        )
        return int(result.scalar_one() or 0)

    async def persist(self, entity: ModelT) -> ModelT:
        """Insert ``entity``, commit, and return it refreshed."""
        self._session.add(entity)
        await self._session.commit()
        await self._session.refresh(entity)
        return entity


class TransportCompanyRepository(SqlRepository[TransportCompany]):
    model = TransportCompany

    async def find_page(self, *, offset: int, limit: int) -> list[TransportCompany]:
        stmt = (
            select(TransportCompany)
            .order_by(TransportCompany.name)
            .offset(offset)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def exists_by_name(self, name: str) -> bool:
        stmt = select(select(TransportCompany).where(TransportCompany.name == name).exists())
        return bool((await self._session.execute(stmt)).scalar())

    async def delete_by_id(self, company_id: uuid.UUID) -> None:
        await self._session.execute(
            delete(TransportCompany).where(TransportCompany.id == company_id)
        )
        await self._session.commit()


class AddressRepository(SqlRepository[Address]):
    model = Address


class StorageRepository(SqlRepository[Storage]):
    model = Storage

    async def find_with_details(
        self, team_id: Optional[uuid.UUID] = None
    ) -> list[tuple[Storage, Address, Team]]:
        """Storages joined with their address and team, optionally for one team."""
        stmt = (
            select(Storage, Address, Team)
            .join(Address, Address.id == Storage.address_id)
            .join(Team, Team.id == Storage.team_id)
            .order_by(Storage.created_at)
        )
        if team_id is not None:
            stmt = stmt.where(Storage.team_id == team_id)
        result = await self._session.execute(stmt)
        return [tuple(row) for row in result.all()]


class TeamRepository(SqlRepository[Team]):
    model = Team

    async def find_by_user_id(self, user_id: uuid.UUID) -> Optional[Team]:
        stmt = select(Team).join(User, User.team_id == Team.id).where(User.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_page(self, *, offset: int, limit: int) -> list[Team]:
        stmt = select(Team).order_by(Team.name).offset(offset).limit(limit)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def exists_by_name(self, name: str) -> bool:
        stmt = select(select(Team).where(Team.name == name).exists())
        return bool((await self._session.execute(stmt)).scalar())


class UserRepository(SqlRepository[User]):
    model = User

    async def find_by_email(self, email: str) -> Optional[User]:
        stmt = select(User).where(func.lower(User.email) == email.strip().lower())
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_by_team_id(self, team_id: uuid.UUID) -> list[User]:
        stmt = select(User).where(User.team_id == team_id).order_by(User.last_name)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())


def _group_by_transport(packages: Iterable[Package]) -> dict[uuid.UUID, list[Package]]:
    grouped: dict[uuid.UUID, list[Package]] = defaultdict(list)
    for pkg in packages:
        grouped[pkg.transport_id].append(pkg)
    return dict(grouped)


class PackageRepository(SqlRepository[Package]):
    model = Package

    async def find_grouped_by_transport(self) -> dict[uuid.UUID, list[Package]]:
        stmt = select(Package).order_by(Package.created_at)
        result = await self._session.execute(stmt)
        return _group_by_transport(result.scalars().all())

    async def find_by_team_id_grouped_by_transport(
        self, team_id: uuid.UUID
    ) -> dict[uuid.UUID, list[Package]]:
        stmt = (
            select(Package)
            .where(Package.team_id == team_id)
            .order_by(Package.created_at)
        )
        result = await self._session.execute(stmt)
        return _group_by_transport(result.scalars().all())


class CarPartRepository(SqlRepository[CarPart]):
    model = CarPart

    async def find_by_package_ids(
        self, package_ids: Iterable[uuid.UUID]
    ) -> dict[uuid.UUID, list[CarPart]]:
        """Fetch the parts of many packages in one query, keyed by package id."""
        ids = list(package_ids)
        if not ids:
            return {}
        stmt = (
            select(CarPart)
            .where(CarPart.package_id.in_(ids))
            .order_by(CarPart.created_at)
        )
        result = await self._session.execute(stmt)
        grouped: dict[uuid.UUID, list[CarPart]] = defaultdict(list)
        for part in result.scalars().all():
            grouped[part.package_id].append(part)
        return dict(grouped)

    async def find_page(
        self,
        *,
        offset: int,
        limit: int,
        team_id: Optional[uuid.UUID] = None,
    ) -> tuple[list[CarPart], int]:
        """Page of car parts, optionally limited to one team's packages."""
        stmt = select(CarPart)
        count_stmt = select(func.count(CarPart.id))
        if team_id is not None:
            stmt = stmt.join(Package, Package.id == CarPart.package_id).where(
                Package.team_id == team_id
            )
            count_stmt = count_stmt.join(
                Package, Package.id == CarPart.package_id
            ).where(Package.team_id == team_id)

        stmt = stmt.order_by(CarPart.name).offset(offset).limit(limit)
        items = (await self._session.execute(stmt)).scalars().all()
        total = (await self._session.execute(count_stmt)).scalar_one() or 0
        return list(items), int(total)


class TransportRepository(SqlRepository[Transport]):
    model = Transport

    async def count_by_status(self, status: Status) -> int:
        stmt = select(func.count(Transport.id)).where(Transport.status == status)
        result = await self._session.execute(stmt)
        return int(result.scalar_one() or 0)

    async def exists_by_company_id(self, company_id: uuid.UUID) -> bool:
        stmt = select(select(Transport).where(Transport.company_id == company_id).exists())
        return bool((await self._session.execute(stmt)).scalar())
