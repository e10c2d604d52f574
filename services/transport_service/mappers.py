"""Conversions between request schemas, ORM entities and response schemas."""

from typing import Iterable, Mapping, Optional, Sequence

from services.transport_service.models import CarPart, Package, Transport
from services.transport_service.schemas import (
    CarPartResponse,
    PackageResponse,
    TransportCreate,
    TransportResponse,
)


def transport_to_entity(payload: TransportCreate) -> Transport:
    # status is deliberately not copied
    return Transport(
        company_id=payload.company_id,
        departure_address_id=payload.departure_address_id,
        destination_address_id=payload.destination_address_id,
        departure_date=payload.departure_date,
        arrival_date=payload.arrival_date,
    )


def package_to_response(
    package: Package, car_parts: Optional[Sequence[CarPart]] = None
) -> PackageResponse:
    return PackageResponse(
        id=package.id,
        name=package.name,
        transport_id=package.transport_id,
        team_id=package.team_id,
        car_parts=[CarPartResponse.model_validate(part) for part in car_parts or []],
    )


def transport_to_response(
    transport: Transport, packages: Optional[Sequence[PackageResponse]] = None
) -> TransportResponse:
    return TransportResponse(
        id=transport.id,
        company_id=transport.company_id,
        departure_address_id=transport.departure_address_id,
        destination_address_id=transport.destination_address_id,
        departure_date=transport.departure_date,
        arrival_date=transport.arrival_date,
        status=transport.status,
        packages=list(packages or []),
    )


def transports_to_responses(
    transports: Iterable[Transport],
    packages_by_transport: Optional[Mapping] = None,
) -> list[TransportResponse]:
    packages_by_transport = packages_by_transport or {}
    return [
        transport_to_response(t, packages_by_transport.get(t.id, []))
        for t in transports
    ]
