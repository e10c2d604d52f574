"""Transport Service models package."""

from services.transport_service.models.core import (
    Address,
    CarPart,
    Package,
    Storage,
    Team,
    Transport,
    TransportCompany,
    User,
)
from services.transport_service.models.enums import Status, UserRole

__all__ = [
    "Address",
    "CarPart",
    "Package",
    "Status",
    "Storage",
    "Team",
    "Transport",
    "TransportCompany",
    "User",
    "UserRole",
]
