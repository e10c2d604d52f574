"""Car part routes."""

from fastapi import APIRouter, Depends, status
from libs.auth.dependencies import get_current_user
from libs.auth.models import AuthUser
from libs.common.exceptions import NotFoundError
from libs.common.pagination import Page, PageParams, page_params
from libs.db.session import get_async_db
from services.transport_service.models import CarPart, UserRole
from services.transport_service.repositories import (
    CarPartRepository,
    PackageRepository,
)
from services.transport_service.routers._helpers import (
    current_team_id,
    require_logistics,
)
from services.transport_service.schemas import CarPartCreate, CarPartResponse
from sqlalchemy.ext.asyncio import AsyncSession

router = APIRouter(prefix="/car-parts", tags=["car-parts"])


@router.get("", response_model=Page[CarPartResponse])
async def list_car_parts(
    params: PageParams = Depends(page_params),
    current_user: AuthUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_db),
):
    """
    Admins see every part. Everyone else sees the parts in their team's
    packages, and nothing when they have no team.
    """
    team_id = None
    if current_user.role != UserRole.ADMIN.value:
        team_id = await current_team_id(db, current_user.user_id)
        if team_id is None:
            return Page[CarPartResponse].build([], params, 0)

    parts, total = await CarPartRepository(db).find_page(
        offset=params.offset, limit=params.size, team_id=team_id
    )
    return Page[CarPartResponse].build(
        [CarPartResponse.model_validate(p) for p in parts], params, total
    )


@router.post("", response_model=CarPartResponse, status_code=status.HTTP_201_CREATED)
async def create_car_part(
    payload: CarPartCreate,
    current_user: AuthUser = Depends(require_logistics),
    db: AsyncSession = Depends(get_async_db),
):
    if not await PackageRepository(db).exists_by_id(payload.package_id):
        raise NotFoundError("Requested package does not exist.")

    return await CarPartRepository(db).persist(CarPart(**payload.model_dump()))
