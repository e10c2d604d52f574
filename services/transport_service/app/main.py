"""FastAPI application for the Transport Service."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from libs.common.config import get_settings
from libs.common.middleware import add_observability_middleware
from services.transport_service.routers import (
    addresses_router,
    auth_router,
    car_parts_router,
    companies_router,
    packages_router,
    storages_router,
    teams_router,
    transports_router,
)


def create_app() -> FastAPI:
    """Create and configure the Transport Service FastAPI app."""
    settings = get_settings()

    app = FastAPI(
        title="Parts Tracker Transport Service",
        version="0.1.0",
        description="Tracks transports of car part packages between teams.",
    )

    add_observability_middleware(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health", tags=["system"])
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "ok", "service": "transport"}

    app.include_router(auth_router)
    app.include_router(transports_router)
    app.include_router(companies_router)
    app.include_router(teams_router)
    app.include_router(addresses_router)
    app.include_router(packages_router)
    app.include_router(storages_router)
    app.include_router(car_parts_router)

    return app


app = create_app()
