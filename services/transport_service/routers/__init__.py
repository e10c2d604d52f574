"""Transport service routers package."""

from services.transport_service.routers.addresses import router as addresses_router
from services.transport_service.routers.auth import router as auth_router
from services.transport_service.routers.car_parts import router as car_parts_router
from services.transport_service.routers.companies import router as companies_router
from services.transport_service.routers.packages import router as packages_router
from services.transport_service.routers.storages import router as storages_router
from services.transport_service.routers.teams import router as teams_router
from services.transport_service.routers.transports import router as transports_router

__all__ = [
    "addresses_router",
    "auth_router",
    "car_parts_router",
    "companies_router",
    "packages_router",
    "storages_router",
    "teams_router",
    "transports_router",
]
