"""Transport Service schemas package."""

from services.transport_service.schemas.main import (
    AddressCreate,
    AddressResponse,
    CarPartCreate,
    CarPartResponse,
    PackageCreate,
    PackageResponse,
    StatisticResponse,
    StorageCreate,
    StorageResponse,
    TeamCreate,
    TeamDetailResponse,
    TeamResponse,
    TransportCompanyCreate,
    TransportCompanyResponse,
    TransportCreate,
    TransportResponse,
    UserResponse,
)

__all__ = [
    "AddressCreate",
    "AddressResponse",
    "CarPartCreate",
    "CarPartResponse",
    "PackageCreate",
    "PackageResponse",
    "StatisticResponse",
    "StorageCreate",
    "StorageResponse",
    "TeamCreate",
    "TeamDetailResponse",
    "TeamResponse",
    "TransportCompanyCreate",
    "TransportCompanyResponse",
    "TransportCreate",
    "TransportResponse",
    "UserResponse",
]
