"""Transport routes."""

from typing import List

from fastapi import APIRouter, Depends, status
from libs.auth.dependencies import get_current_user
from libs.auth.models import AuthUser
from libs.db.session import get_async_db
from services.transport_service.routers._helpers import require_logistics
from services.transport_service.schemas import (
    StatisticResponse,
    TransportCreate,
    TransportResponse,
)
from services.transport_service.services.transport_ops import (
    count_transports_by_status,
    create_transport,
    list_transports,
)
from sqlalchemy.ext.asyncio import AsyncSession

router = APIRouter(prefix="/transports", tags=["transports"])


@router.post("", response_model=TransportResponse, status_code=status.HTTP_201_CREATED)
async def create(
    payload: TransportCreate,
    current_user: AuthUser = Depends(require_logistics),
    db: AsyncSession = Depends(get_async_db),
):
    return await create_transport(db, payload)


@router.get("", response_model=List[TransportResponse])
async def get_all(
    current_user: AuthUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_db),
):
    """List transports with the packages visible to the caller's team."""
    return await list_transports(db, user_id=current_user.user_id)


@router.get("/statistics", response_model=List[StatisticResponse])
async def statistics(
    current_user: AuthUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_db),
):
    return await count_transports_by_status(db)
