"""Package routes."""

from fastapi import APIRouter, Depends, status
from libs.auth.models import AuthUser
from libs.common.exceptions import NotFoundError
from libs.db.session import get_async_db
from services.transport_service.mappers import package_to_response
from services.transport_service.models import Package
from services.transport_service.repositories import (
    PackageRepository,
    TeamRepository,
    TransportRepository,
)
from services.transport_service.routers._helpers import require_logistics
from services.transport_service.schemas import PackageCreate, PackageResponse
from sqlalchemy.ext.asyncio import AsyncSession

router = APIRouter(prefix="/packages", tags=["packages"])


@router.post("", response_model=PackageResponse, status_code=status.HTTP_201_CREATED)
async def create_package(
    payload: PackageCreate,
    current_user: AuthUser = Depends(require_logistics),
    db: AsyncSession = Depends(get_async_db),
):
    """Attach a new, empty package to a transport on behalf of a team."""
    if not await TransportRepository(db).exists_by_id(payload.transport_id):
        raise NotFoundError("Requested transport does not exist.")
    if not await TeamRepository(db).exists_by_id(payload.team_id):
        raise NotFoundError("Requested team does not exist.")

    package = await PackageRepository(db).persist(Package(**payload.model_dump()))
    return package_to_response(package)
