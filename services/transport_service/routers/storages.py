"""Team storage routes."""

from typing import List

from fastapi import APIRouter, Depends, status
from libs.auth.dependencies import get_current_user
from libs.auth.models import AuthUser
from libs.common.exceptions import BadRequestError, ForbiddenError, NotFoundError
from libs.common.logging import get_logger
from libs.db.session import get_async_db
from services.transport_service.models import Storage, UserRole
from services.transport_service.repositories import (
    AddressRepository,
    StorageRepository,
    TeamRepository,
)
from services.transport_service.routers._helpers import (
    current_team_id,
    require_logistics,
)
from services.transport_service.schemas import (
    AddressResponse,
    StorageCreate,
    StorageResponse,
    TeamResponse,
)
from sqlalchemy.ext.asyncio import AsyncSession

logger = get_logger(__name__)

router = APIRouter(prefix="/storages", tags=["storages"])


def _to_response(storage, address, team) -> StorageResponse:
    return StorageResponse(
        id=storage.id,
        capacity=storage.capacity,
        image_url=storage.image_url,
        location=AddressResponse.model_validate(address),
        team=TeamResponse.model_validate(team),
    )


@router.get("", response_model=List[StorageResponse])
async def list_storages(
    current_user: AuthUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_db),
):
    """Admins see every storage; everyone else only their team's."""
    team_id = None
    if current_user.role != UserRole.ADMIN.value:
        team_id = await current_team_id(db, current_user.user_id)
        if team_id is None:
            return []

    rows = await StorageRepository(db).find_with_details(team_id=team_id)
    return [_to_response(*row) for row in rows]


@router.post("", response_model=StorageResponse, status_code=status.HTTP_201_CREATED)
async def create_storage(
    payload: StorageCreate,
    current_user: AuthUser = Depends(require_logistics),
    db: AsyncSession = Depends(get_async_db),
):
    if current_user.role == UserRole.ADMIN.value:
        if payload.team_id is None:
            raise BadRequestError("A team is required to create a storage.")
        team_id = payload.team_id
    else:
        team_id = await current_team_id(db, current_user.user_id)
        if team_id is None:
            raise ForbiddenError("You must belong to a team to create a storage.")
        if payload.team_id is not None and payload.team_id != team_id:
            raise ForbiddenError("Storages can only be created for your own team.")

    address = await AddressRepository(db).find_by_id(payload.address_id)
    if address is None:
        raise NotFoundError("Requested address does not exist.")
    team = await TeamRepository(db).find_by_id(team_id)
    if team is None:
        raise NotFoundError("Requested team does not exist.")

    storage = await StorageRepository(db).persist(
        Storage(
            address_id=address.id,
            team_id=team.id,
            capacity=payload.capacity,
            image_url=payload.image_url,
        )
    )
    logger.info("Created storage %s for team %s", storage.id, team.id)
    return _to_response(storage, address, team)
