"""Core transport operations: creation, team-scoped listing and status counts."""

import uuid

from libs.common.datetime_utils import ensure_utc
from libs.common.exceptions import BadRequestError, NotFoundError
from libs.common.logging import get_logger
from services.transport_service.mappers import (
    package_to_response,
    transport_to_entity,
    transport_to_response,
    transports_to_responses,
)
from services.transport_service.models import Status
from services.transport_service.repositories import (
    AddressRepository,
    CarPartRepository,
    PackageRepository,
    TeamRepository,
    TransportCompanyRepository,
    TransportRepository,
)
from services.transport_service.schemas import (
    StatisticResponse,
    TransportCreate,
    TransportResponse,
)
from sqlalchemy.ext.asyncio import AsyncSession

logger = get_logger(__name__)

# Statuses reported by the statistics endpoint, in display order.
# IN_STORAGE is not reported.
REPORTED_STATUSES = (Status.PENDING, Status.IN_TRANSIT, Status.FINISHED)


# ---------------------------------------------------------------------------
# Creation
# ---------------------------------------------------------------------------


async def create_transport(
    db: AsyncSession, payload: TransportCreate
) -> TransportResponse:
    """Validate and persist a new transport.

    Checks run in order and the first failure wins:
    date ordering, carrier, departure address, destination address.
    The stored status is always ``Pending``.
    """
    if not ensure_utc(payload.departure_date) < ensure_utc(payload.arrival_date):
        logger.warning(
            "Rejected transport: departure %s not before arrival %s",
            payload.departure_date,
            payload.arrival_date,
        )
        raise BadRequestError("Departure date must be before arrival date.")

    if not await TransportCompanyRepository(db).exists_by_id(payload.company_id):
        raise NotFoundError("Requested transport company does not exist.")

    addresses = AddressRepository(db)
    if not await addresses.exists_by_id(payload.departure_address_id):
        raise NotFoundError("Requested departure address does not exist.")
    if not await addresses.exists_by_id(payload.destination_address_id):
        raise NotFoundError("Requested destination address does not exist.")

    transport = transport_to_entity(payload)
    transport.status = Status.PENDING

    transport = await TransportRepository(db).persist(transport)
    logger.info(
        "Created transport %s (company=%s, %s -> %s)",
        transport.id,
        transport.company_id,
        transport.departure_address_id,
        transport.destination_address_id,
    )
    return transport_to_response(transport)


# ---------------------------------------------------------------------------
# Listing
# ---------------------------------------------------------------------------


async def list_transports(
    db: AsyncSession, *, user_id: uuid.UUID
) -> list[TransportResponse]:
    """Return every transport with the packages visible to ``user_id``.

    Users without a team see every package; team members only see their
    team's packages. Transports with nothing visible get an empty list.
    """
    team = await TeamRepository(db).find_by_user_id(user_id)

    packages = PackageRepository(db)
    if team is None:
        packages_by_transport = await packages.find_grouped_by_transport()
    else:
        packages_by_transport = await packages.find_by_team_id_grouped_by_transport(
            team.id
        )

    package_ids = [
        pkg.id for group in packages_by_transport.values() for pkg in group
    ]
    parts_by_package = await CarPartRepository(db).find_by_package_ids(package_ids)

    package_views = {
        transport_id: [
            package_to_response(pkg, parts_by_package.get(pkg.id, []))
            for pkg in group
        ]
        for transport_id, group in packages_by_transport.items()
    }

    transports = await TransportRepository(db).find_all()
    return transports_to_responses(transports, package_views)


# ---------------------------------------------------------------------------
# Statistics
# ---------------------------------------------------------------------------


async def count_transports_by_status(db: AsyncSession) -> list[StatisticResponse]:
    repo = TransportRepository(db)
    return [
        StatisticResponse(label=status.label, count=await repo.count_by_status(status))
        for status in REPORTED_STATUSES
    ]
